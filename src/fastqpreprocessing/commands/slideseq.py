# src/fastqpreprocessing/commands/slideseq.py
"""``fastq_slideseq``: FASTQ conversion where barcode/UMI positions come from a read structure."""
from __future__ import annotations
from typing import Optional

from ..config import FastqReadStructureConfig
from ..schema import FlagSchema, FlagSpec, store
from ..validation import FailurePolicy
from .base import Command, HelpPolicy
from .fastq_common import (
    BAM_SIZE, I1, OUTPUT_FORMAT, R1, R2, REQ, SAMPLE_ID, VERBOSE, WHITE_LIST,
    check_bam_size, check_i1_count, check_output_format, check_r1_present,
    check_r1_r2_pairing, check_sample_id, verbose_file_listing,
)

SCHEMA = FlagSchema(
    prog="fastq_slideseq",
    flags=(
        VERBOSE,
        BAM_SIZE,
        FlagSpec("read-structure", "S", REQ, "read structure [required]", store("read_structure")),
        SAMPLE_ID,
        I1,
        R1,
        R2,
        WHITE_LIST,
        OUTPUT_FORMAT,
    ),
)


def check_read_structure(c: FastqReadStructureConfig) -> Optional[str]:
    if not c.read_structure:
        return "ERROR: Must provide read structures"
    return None


FASTQ_SLIDESEQ = Command(
    name="fastq_slideseq",
    schema=SCHEMA,
    config_model=FastqReadStructureConfig,
    rules=(
        check_r1_r2_pairing,
        check_r1_present,
        check_i1_count,
        check_bam_size,
        check_read_structure,
        check_sample_id,
        check_output_format,
    ),
    policy=FailurePolicy.ACCUMULATE,
    help_policy=HelpPolicy.RETURN,
    errors_to_stderr=True,
    diagnostics=verbose_file_listing,
)
