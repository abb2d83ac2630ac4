from .base import Command, HelpPolicy
from .fastqprocess import FASTQPROCESS
from .slideseq import FASTQ_SLIDESEQ
from .tagsort import MAX_THREADS, TAGSORT

COMMANDS = {
    "tagsort": TAGSORT,
    "fastqprocess": FASTQPROCESS,
    "fastq-slideseq": FASTQ_SLIDESEQ,
}

__all__ = ["COMMANDS", "Command", "FASTQPROCESS", "FASTQ_SLIDESEQ", "HelpPolicy", "MAX_THREADS", "TAGSORT"]
