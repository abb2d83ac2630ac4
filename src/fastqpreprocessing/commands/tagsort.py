# src/fastqpreprocessing/commands/tagsort.py
"""
``tagsort``: sort alignments by (barcode, UMI, gene) tags and/or compute
cell or gene metrics from a BAM file.

Rules are fail-fast: the first violated rule is the only one reported.
"""
from __future__ import annotations
import re
from pathlib import Path
from typing import Optional

from ..config import TagsortConfig
from ..schema import Arity, FlagSchema, FlagSpec, enable, store, store_int, store_tag
from ..validation import FailurePolicy
from .base import Command, HelpPolicy

MAX_THREADS = 30
METRIC_TYPES = ("cell", "gene")
_GZIPPED = re.compile(r"\.gz$", re.IGNORECASE)

NO, REQ = Arity.NO_ARGUMENT, Arity.REQUIRED_ARGUMENT

SCHEMA = FlagSchema(
    prog="tagsort",
    flags=(
        FlagSpec("compute-metric", "m", NO,
                 "compute metric, metrics are computed if this option is provided [optional]",
                 enable("compute_metric")),
        FlagSpec("output-sorted-info", "n", NO,
                 "sorted output file is produced if this option is provided [optional]",
                 enable("output_sorted_info")),
        FlagSpec("bam-input", "b", REQ, "input bam file [required]", store("bam_input")),
        FlagSpec("gtf-file", "a", REQ,
                 "gtf file (unzipped) required then metric type is cell [required with metric cell]",
                 store("gtf_file")),
        FlagSpec("temp-folder", "t", REQ, "temp folder for disk sorting [options: default /tmp]",
                 store("temp_folder")),
        FlagSpec("sorted-output", "o", REQ, "sorted output file [optional]", store("sorted_output_file")),
        FlagSpec("metric-output", "M", REQ,
                 "metric file, the metrics are output in this file  [optional]",
                 store("metric_output_file")),
        FlagSpec("alignments-per-thread", "p", REQ,
                 "number of alignments per thread [optional: default 1000000], if this number is "
                 "increased then more RAM is required but reduces the number of file splits",
                 store_int("alignments_per_thread")),
        FlagSpec("nthreads", "T", REQ, "number of threads [optional: default 1]", store_int("nthreads")),
        FlagSpec("barcode-tag", "C", REQ, "barcode-tag the call barcode tag [required]",
                 store_tag("barcode_tag")),
        FlagSpec("umi-tag", "U", REQ,
                 "umi-tag the umi tag [required]: the tsv file output is sorted according the tags "
                 "in the options barcode-tag, umi-tag or gene-tag",
                 store_tag("umi_tag")),
        FlagSpec("gene-tag", "G", REQ, "gene-tag the gene tag [required]", store_tag("gene_tag")),
        FlagSpec("metric-type", "K", REQ, 'metric type, either "cell" or "gene" [required]',
                 store("metric_type")),
    ),
)


def _exists(path: str) -> bool:
    return bool(path) and Path(path).exists()


# ----------------------------
# Rules, in evaluation order
# ----------------------------

def check_output_mode(c: TagsortConfig) -> Optional[str]:
    if not (c.compute_metric or c.output_sorted_info):
        return ("ERROR: The choice of either the  sorted alignment info or metric computation "
                "must be specified")
    if (c.compute_metric and not c.metric_output_file) or (
        c.output_sorted_info and not c.sorted_output_file
    ):
        return "ERROR: --compute-metric and --metric-output should be both specified together"
    return None


def check_metric_type(c: TagsortConfig) -> Optional[str]:
    if c.metric_type not in METRIC_TYPES:
        return 'ERROR: Metric type must either be "cell" or "gene"'
    return None


def check_gtf_for_cell_metrics(c: TagsortConfig) -> Optional[str]:
    if c.metric_type == "cell" and not c.gtf_file:
        return 'ERROR: The gtf file name must be provided with metric_type "cell"'
    return None


def check_gtf_uncompressed(c: TagsortConfig) -> Optional[str]:
    if _GZIPPED.search(c.gtf_file):
        return "ERROR: The gtf file must not be gzipped"
    return None


def check_bam_input(c: TagsortConfig) -> Optional[str]:
    if not c.bam_input:
        return "ERROR: Must specify a input file name"
    if not _exists(c.bam_input):
        return f"ERROR bam_input {c.bam_input} is missing!"
    return None


def check_temp_folder(c: TagsortConfig) -> Optional[str]:
    if not _exists(c.temp_folder):
        return f"ERROR temp folder {c.temp_folder} is missing!"
    return None


def check_distinct_tags(c: TagsortConfig) -> Optional[str]:
    if len(c.tag_order) != 3:
        return "ERROR:  Must have three distinct tags"
    return None


def check_alignments_per_thread(c: TagsortConfig) -> Optional[str]:
    if c.alignments_per_thread < 1000:
        return "ERROR: The number of alignments per thread must be at least 1000"
    return None


def check_nthreads(c: TagsortConfig) -> Optional[str]:
    if not 1 <= c.nthreads <= MAX_THREADS:
        return f"ERROR: The number of threads must be between 1 and {MAX_THREADS}"
    return None


RULES = (
    check_output_mode,
    check_metric_type,
    check_gtf_for_cell_metrics,
    check_gtf_uncompressed,
    check_bam_input,
    check_temp_folder,
    check_distinct_tags,
    check_alignments_per_thread,
    check_nthreads,
)

TAGSORT = Command(
    name="tagsort",
    schema=SCHEMA,
    config_model=TagsortConfig,
    rules=RULES,
    policy=FailurePolicy.FAIL_FAST,
    help_policy=HelpPolicy.EXIT,
)
