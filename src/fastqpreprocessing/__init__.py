"""Command-line configuration front-end for the FASTQ/BAM preprocessing tools.

Three commands are covered: ``tagsort``, ``fastqprocess`` and
``fastq_slideseq``. Each turns raw process arguments into a validated,
frozen configuration record.
"""

__version__ = "0.1.0"
