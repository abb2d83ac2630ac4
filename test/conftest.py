from pathlib import Path
from typing import List, Tuple

import pytest


class Echo:
    """Collects (to_stderr, text) pairs in place of typer.echo."""

    def __init__(self):
        self.calls: List[Tuple[bool, str]] = []

    def __call__(self, message: str = "", err: bool = False) -> None:
        self.calls.append((err, message))

    @property
    def stdout(self) -> List[str]:
        return [m for err, m in self.calls if not err]

    @property
    def stderr(self) -> List[str]:
        return [m for err, m in self.calls if err]


@pytest.fixture
def echo() -> Echo:
    return Echo()


@pytest.fixture
def bam(tmp_path: Path) -> Path:
    p = tmp_path / "in.bam"
    p.write_bytes(b"")
    return p


@pytest.fixture
def tagsort_argv(tmp_path: Path, bam: Path) -> List[str]:
    return [
        "--bam-input", str(bam),
        "--temp-folder", str(tmp_path),
        "--barcode-tag", "CB",
        "--umi-tag", "UB",
        "--gene-tag", "GX",
        "--metric-type", "gene",
        "--compute-metric",
        "--metric-output", "out.tsv",
    ]


@pytest.fixture
def fastqprocess_argv() -> List[str]:
    return [
        "--R1", "a.fastq",
        "--R2", "b.fastq",
        "--sample-id", "S1",
        "--barcode-length", "16",
        "--umi-length", "10",
        "--output-format", "FASTQ",
        "--white-list", "wl.txt",
    ]
