# src/fastqpreprocessing/config.py
from __future__ import annotations
from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class OptionsModel(BaseModel):
    """
    Common base of the per-command configuration records.

    Records are frozen: the parser collects values on a namespace seeded by
    ``defaults()`` and the record is built once, after the last flag.
    Field types carry no range constraints; each command's rule list decides
    what is acceptable, in its own order.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Fresh default values, one per field (mutable defaults are new objects)."""
        return {
            name: field.get_default(call_default_factory=True)
            for name, field in cls.model_fields.items()
        }


class TagsortConfig(OptionsModel):
    bam_input: str = Field("", description="Input BAM file")
    gtf_file: str = Field("", description="Uncompressed GTF, required with metric type 'cell'")
    temp_folder: str = Field("/tmp", description="Scratch folder for the disk-based sort")
    sorted_output_file: str = Field("", description="Sorted alignment info (TSV) output")
    metric_output_file: str = Field("", description="Metric output file")
    alignments_per_thread: int = Field(1_000_000, description="Alignments sorted in memory per thread")
    nthreads: int = Field(1, description="Number of worker threads")
    barcode_tag: str = Field("", description="Cell barcode tag")
    umi_tag: str = Field("", description="UMI tag")
    gene_tag: str = Field("", description="Gene tag")
    metric_type: str = Field("", description="'cell' or 'gene'")
    compute_metric: bool = Field(False, description="Compute metrics")
    output_sorted_info: bool = Field(False, description="Write the sorted alignment info")
    tag_order: Dict[str, int] = Field(
        default_factory=dict,
        description="Tag value -> position, in the order the tag flags were given",
    )


class FastqConfigBase(OptionsModel):
    bam_size: float = Field(1.0, description="Size of each output BAM file in GB")
    sample_id: str = Field("", description="Sample id or name")
    I1s: List[str] = Field(default_factory=list, description="Index read FASTQ files")
    R1s: List[str] = Field(default_factory=list, description="Forward read FASTQ files")
    R2s: List[str] = Field(default_factory=list, description="Reverse read FASTQ files")
    white_list_file: str = Field("", description="Barcode whitelist")
    output_format: str = Field("", description="'FASTQ' or 'BAM'")
    verbose_flag: bool = Field(False, description="List the input files")

    def input_files(self) -> List[Tuple[str, List[str]]]:
        """(label, files) for each read role, in I1, R1, R2 order."""
        return [("I1", self.I1s), ("R1", self.R1s), ("R2", self.R2s)]


class FastqprocessConfig(FastqConfigBase):
    barcode_length: int = Field(0, description="Cell barcode length")
    umi_length: int = Field(0, description="UMI length")


class FastqReadStructureConfig(FastqConfigBase):
    read_structure: str = Field("", description="Read structure, e.g. 8C18X6C9M1X")
