from pathlib import Path

import pytest

from fastqpreprocessing.commands import MAX_THREADS, TAGSORT
from fastqpreprocessing.runner import Status, build_config, configure, run, validate


def errors_for(argv):
    return validate(TAGSORT, build_config(TAGSORT, argv)).errors


def replace(argv, flag, value):
    out = list(argv)
    out[out.index(flag) + 1] = value
    return out


def drop(argv, *flags):
    out = list(argv)
    for flag in flags:
        i = out.index(flag)
        takes_value = flag not in ("--compute-metric", "--output-sorted-info")
        del out[i: i + (2 if takes_value else 1)]
    return out


def test_end_to_end(tagsort_argv, echo):
    outcome = configure(TAGSORT, tagsort_argv, echo)
    assert outcome.status is Status.VALID
    assert outcome.exit_code is None
    assert outcome.config.tag_order == {"CB": 0, "UB": 1, "GX": 2}
    assert outcome.config.compute_metric is True
    assert outcome.config.output_sorted_info is False
    assert echo.calls == []


def test_run_returns_validated_record(tagsort_argv):
    config = run(TAGSORT, tagsort_argv)
    assert config.metric_type == "gene"


def test_requires_an_output_mode(tagsort_argv):
    argv = drop(tagsort_argv, "--compute-metric", "--metric-output")
    assert errors_for(argv) == [
        "ERROR: The choice of either the  sorted alignment info or metric computation must be specified"
    ]


def test_compute_metric_needs_metric_output(tagsort_argv):
    argv = drop(tagsort_argv, "--metric-output")
    assert errors_for(argv) == ["ERROR: --compute-metric and --metric-output should be both specified together"]


def test_sorted_info_needs_sorted_output(tagsort_argv):
    argv = tagsort_argv + ["--output-sorted-info"]
    assert errors_for(argv) == ["ERROR: --compute-metric and --metric-output should be both specified together"]
    assert errors_for(argv + ["--sorted-output", "sorted.tsv"]) == []


def test_sorted_info_alone(tagsort_argv):
    argv = drop(tagsort_argv, "--compute-metric", "--metric-output") + ["-n", "-o", "sorted.tsv"]
    assert errors_for(argv) == []


@pytest.mark.parametrize("metric_type", ["", "bulk", "Cell", "genes"])
def test_metric_type_must_be_cell_or_gene(tagsort_argv, metric_type):
    argv = replace(tagsort_argv, "--metric-type", metric_type)
    assert errors_for(argv) == ['ERROR: Metric type must either be "cell" or "gene"']


def test_metric_type_missing(tagsort_argv):
    argv = drop(tagsort_argv, "--metric-type")
    assert errors_for(argv) == ['ERROR: Metric type must either be "cell" or "gene"']


def test_cell_metrics_need_gtf(tagsort_argv):
    argv = replace(tagsort_argv, "--metric-type", "cell")
    assert errors_for(argv) == ['ERROR: The gtf file name must be provided with metric_type "cell"']
    assert errors_for(argv + ["--gtf-file", "genes.gtf"]) == []


@pytest.mark.parametrize("gtf", ["genes.gtf.gz", "GENES.GTF.GZ"])
def test_gtf_must_not_be_gzipped(tagsort_argv, gtf):
    assert errors_for(tagsort_argv + ["-a", gtf]) == ["ERROR: The gtf file must not be gzipped"]


def test_bam_input_required(tagsort_argv):
    argv = drop(tagsort_argv, "--bam-input")
    assert errors_for(argv) == ["ERROR: Must specify a input file name"]


def test_bam_input_must_exist(tagsort_argv, tmp_path: Path):
    missing = str(tmp_path / "nope.bam")
    argv = replace(tagsort_argv, "--bam-input", missing)
    assert errors_for(argv) == [f"ERROR bam_input {missing} is missing!"]


def test_temp_folder_must_exist(tagsort_argv, tmp_path: Path):
    missing = str(tmp_path / "scratch")
    argv = replace(tagsort_argv, "--temp-folder", missing)
    assert errors_for(argv) == [f"ERROR temp folder {missing} is missing!"]


def test_duplicate_tags(tagsort_argv):
    argv = replace(tagsort_argv, "--umi-tag", "CB")
    assert errors_for(argv) == ["ERROR:  Must have three distinct tags"]


def test_missing_tag(tagsort_argv):
    argv = drop(tagsort_argv, "--gene-tag")
    assert errors_for(argv) == ["ERROR:  Must have three distinct tags"]


@pytest.mark.parametrize("value, ok", [("999", False), ("1000", True), ("abc", False)])
def test_alignments_per_thread_boundary(tagsort_argv, value, ok):
    errors = errors_for(tagsort_argv + ["--alignments-per-thread", value])
    if ok:
        assert errors == []
    else:
        assert errors == ["ERROR: The number of alignments per thread must be at least 1000"]


@pytest.mark.parametrize("value, ok", [
    (0, False),
    (1, True),
    (MAX_THREADS, True),
    (MAX_THREADS + 1, False),
])
def test_nthreads_boundary(tagsort_argv, value, ok):
    errors = errors_for(tagsort_argv + ["-T", str(value)])
    if ok:
        assert errors == []
    else:
        assert errors == [f"ERROR: The number of threads must be between 1 and {MAX_THREADS}"]


def test_fail_fast_reports_first_violation_only(echo):
    outcome = configure(TAGSORT, ["--nthreads", "0", "--metric-type", "bulk"], echo)
    assert outcome.status is Status.INVALID
    assert outcome.exit_code == 1
    assert outcome.errors == [
        "ERROR: The choice of either the  sorted alignment info or metric computation must be specified"
    ]
    assert echo.stdout == outcome.errors
    assert echo.stderr == []


def test_help_lists_every_flag_and_exits_zero(echo):
    outcome = configure(TAGSORT, ["-h"], echo)
    assert outcome.status is Status.HELP
    assert outcome.exit_code == 0
    assert echo.stdout[0] == "Usage: tagsort [options]"
    names = [line.split()[0] for line in echo.stdout[1:]]
    assert names == ["--" + spec.name for spec in TAGSORT.schema]
    assert "no argument" in echo.stdout[1]
    assert "required argument" in echo.stdout[3]


def test_unknown_flag_shows_help(echo):
    outcome = configure(TAGSORT, ["--bogus"], echo)
    assert outcome.status is Status.HELP
    assert outcome.exit_code == 0


@pytest.mark.parametrize("argv, code", [(["-h"], 0), (["--compute-metric"], 1)])
def test_run_exits(argv, code):
    with pytest.raises(SystemExit) as exc:
        run(TAGSORT, argv)
    assert exc.value.code == code
