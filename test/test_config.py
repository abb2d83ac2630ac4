import pytest
from pydantic import ValidationError

from fastqpreprocessing.config import FastqprocessConfig, FastqReadStructureConfig, TagsortConfig


def test_tagsort_defaults():
    d = TagsortConfig.defaults()
    assert d["temp_folder"] == "/tmp"
    assert d["alignments_per_thread"] == 1_000_000
    assert d["nthreads"] == 1
    assert d["tag_order"] == {}


def test_defaults_are_fresh_objects():
    a, b = FastqprocessConfig.defaults(), FastqprocessConfig.defaults()
    a["R1s"].append("x.fastq")
    assert b["R1s"] == []


def test_records_are_frozen():
    cfg = FastqprocessConfig(sample_id="S1")
    with pytest.raises(ValidationError):
        cfg.sample_id = "S2"


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        FastqReadStructureConfig(barcode_length=16)


def test_input_files_order():
    cfg = FastqReadStructureConfig(R1s=["a"], R2s=["b"])
    assert cfg.input_files() == [("I1", []), ("R1", ["a"]), ("R2", ["b"])]
