# src/fastqpreprocessing/commands/fastqprocess.py
"""``fastqprocess``: convert 10x-style FASTQ sets into tagged BAM or FASTQ shards."""
from __future__ import annotations
from typing import Optional

from ..config import FastqprocessConfig
from ..schema import FlagSchema, FlagSpec, store_int
from ..validation import FailurePolicy
from .base import Command, HelpPolicy
from .fastq_common import (
    BAM_SIZE, I1, OUTPUT_FORMAT, R1, R2, REQ, SAMPLE_ID, VERBOSE, WHITE_LIST,
    check_bam_size, check_i1_count, check_output_format, check_r1_present,
    check_r1_r2_pairing, check_sample_id, verbose_file_listing,
)

SCHEMA = FlagSchema(
    prog="fastqprocess",
    flags=(
        VERBOSE,
        FlagSpec("barcode-length", "b", REQ, "barcode length [required]", store_int("barcode_length")),
        FlagSpec("umi-length", "u", REQ, "UMI length [required]", store_int("umi_length")),
        BAM_SIZE,
        SAMPLE_ID,
        I1,
        R1,
        R2,
        WHITE_LIST,
        OUTPUT_FORMAT,
    ),
)


def check_barcode_length(c: FastqprocessConfig) -> Optional[str]:
    if c.barcode_length <= 0:
        return "ERROR: Barcode length must be a positive integer"
    return None


def check_umi_length(c: FastqprocessConfig) -> Optional[str]:
    if c.umi_length <= 0:
        return "ERROR: UMI length must be a positive integer"
    return None


FASTQPROCESS = Command(
    name="fastqprocess",
    schema=SCHEMA,
    config_model=FastqprocessConfig,
    rules=(
        check_r1_r2_pairing,
        check_r1_present,
        check_i1_count,
        check_bam_size,
        check_sample_id,
        check_output_format,
        check_barcode_length,
        check_umi_length,
    ),
    policy=FailurePolicy.ACCUMULATE,
    help_policy=HelpPolicy.RETURN,
    errors_to_stderr=True,
    diagnostics=verbose_file_listing,
)
