# src/fastqpreprocessing/commands/fastq_common.py
"""
Flags and rules shared by ``fastqprocess`` and ``fastq_slideseq``.

Both commands evaluate every rule and report all violations (each message
goes to stdout and stderr) before deciding to exit.
"""
from __future__ import annotations
from typing import List, Optional

from ..config import FastqConfigBase
from ..schema import Arity, FlagSpec, append, enable, store, store_float

OUTPUT_FORMATS = ("FASTQ", "BAM")

NO, REQ = Arity.NO_ARGUMENT, Arity.REQUIRED_ARGUMENT

VERBOSE = FlagSpec("verbose", "v", NO, "verbose messages  ", enable("verbose_flag"))
BAM_SIZE = FlagSpec("bam-size", "B", REQ, "output BAM file in GB [optional: default 1 GB]",
                    store_float("bam_size"))
SAMPLE_ID = FlagSpec("sample-id", "s", REQ, "sample id [required]", store("sample_id"))
I1 = FlagSpec("I1", "I", REQ, "I1 [optional]", append("I1s"))
R1 = FlagSpec("R1", "R", REQ, "R1 [required]", append("R1s"))
R2 = FlagSpec("R2", "r", REQ, "R2 [required]", append("R2s"))
WHITE_LIST = FlagSpec("white-list", "w", REQ, "whitelist (from cellranger) of barcodes [required]",
                      store("white_list_file"))
OUTPUT_FORMAT = FlagSpec("output-format", "F", REQ, "output-format : either FASTQ or BAM [required]",
                         store("output_format"))


def check_r1_r2_pairing(c: FastqConfigBase) -> Optional[str]:
    if len(c.R1s) != len(c.R2s):
        return (f"ERROR: Unequal number of R1 and R2 fastq files in input: "
                f"R1 : {len(c.R1s)} R2 : {len(c.R2s)}")
    return None


def check_r1_present(c: FastqConfigBase) -> Optional[str]:
    if not c.R1s:
        return "ERROR: No R1 file provided"
    return None


def check_i1_count(c: FastqConfigBase) -> Optional[str]:
    if c.I1s and len(c.I1s) != len(c.R1s):
        return ("ERROR: Either the number of I1 input files are equal\n"
                "       to the number of R1 input files, or no I1 input files\n"
                "       should not be provided at all.")
    return None


def check_bam_size(c: FastqConfigBase) -> Optional[str]:
    if c.bam_size <= 0:
        return "ERROR: Size of a bam file (in GB) cannot be negative"
    return None


def check_sample_id(c: FastqConfigBase) -> Optional[str]:
    if not c.sample_id:
        return "ERROR: Must provide a sample id or name"
    return None


def check_output_format(c: FastqConfigBase) -> Optional[str]:
    if c.output_format not in OUTPUT_FORMATS:
        return "ERROR: Output-format must be either FASTQ or BAM"
    return None


def verbose_file_listing(c: FastqConfigBase) -> List[str]:
    """Labeled listing of every non-empty input list, when --verbose is set."""
    if not c.verbose_flag:
        return []
    lines: List[str] = []
    for label, files in c.input_files():
        if not files:
            continue
        lines.append(f"INFO {label} files:")
        lines.extend(f"\t file[{i}]: {path}" for i, path in enumerate(files))
    return lines
