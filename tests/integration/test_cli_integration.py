"""End-to-end tests through the CLI."""

from pathlib import Path
import gzip
import sys

import pytest
from click.testing import CliRunner

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyscan.cli import cli, main

pytestmark = pytest.mark.integration


def _stdout_runner():
    # stdout carries BED only; stderr is kept apart in result.stderr
    return CliRunner()


def test_single_window_to_stdout(write_fasta):
    path = write_fasta([("chr1", "AAAAAAAAAA")])
    result = _stdout_runner().invoke(cli, ["-f", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "chr1\t0\t10\tA\t100\t+\n"


def test_two_windows_in_order(write_fasta):
    path = write_fasta([("chr1", "AAAAAAAAAAT")])
    result = _stdout_runner().invoke(cli, ["-f", str(path), "-w", "10", "-p", "80", "-n", "a"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "chr1\t0\t10\tA\t100\t+",
        "chr1\t1\t11\tA\t90\t+",
    ]


def test_n_selector_emits_both_strands(write_fasta):
    """Test -n N writes each passing window on both strands."""
    path = write_fasta([("gap", "NNNNNNNNNN")])
    result = _stdout_runner().invoke(cli, ["-f", str(path), "-n", "N"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["gap\t0\t10\tN\t100\t+", "gap\t0\t10\tN\t100\t-"]


def test_gzip_input_and_output_file(tmp_path):
    """Test gzip input with BED and summary files."""
    fasta = tmp_path / "seqs.fa.gz"
    with gzip.open(fasta, "wt") as handle:
        handle.write(">a desc\nTTTTTTTTTTTT\n>b\nACGT\n")
    out = tmp_path / "out.bed"
    summary = tmp_path / "summary.tsv"

    result = _stdout_runner().invoke(
        cli, ["-f", str(fasta), "-o", str(out), "--summary", str(summary)]
    )

    assert result.exit_code == 0
    assert result.stdout == ""
    assert out.read_text().splitlines() == [
        "a\t0\t10\tA\t100\t-",
        "a\t1\t11\tA\t100\t-",
        "a\t2\t12\tA\t100\t-",
    ]
    assert summary.read_text().splitlines()[2].startswith("b\t4\t0\t0\t0\t")


def test_config_file_and_cli_override(write_fasta, tmp_path):
    """Test a config file run, then a CLI override of it."""
    path = write_fasta([("s", "CCCCCGGGGG")])
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"input_file: {path}\nscan:\n  nucleotide: C\n  percentage: 100\n")

    result = _stdout_runner().invoke(cli, ["-c", str(cfg)])
    assert result.exit_code == 0
    assert result.stdout == ""

    result = _stdout_runner().invoke(cli, ["-c", str(cfg), "-p", "50"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["s\t0\t10\tC\t50\t+", "s\t0\t10\tC\t50\t-"]


@pytest.mark.parametrize("args,message", [
    (["-n", "X"], "nucleotide must be one of A, C, G, T, or N"),
    (["-n", "AT"], "nucleotide must be a single character"),
    (["-p", "49.9"], "percentage must be between 50.0 and 100.0"),
    (["-p", "100.5"], "percentage must be between 50.0 and 100.0"),
    (["-p", "nan"], "percentage must be between 50.0 and 100.0"),
    (["-w", "0"], "window_size must be >= 1"),
])
def test_configuration_errors_exit_1(write_fasta, args, message):
    """Test bad settings print Error: and exit 1 before scanning."""
    path = write_fasta([("s", "AAAAAAAAAA")])
    result = _stdout_runner().invoke(cli, ["-f", str(path)] + args)
    assert result.exit_code == 1
    assert f"Error: {message}" in result.stderr
    assert result.stdout == ""


def test_missing_input_file(tmp_path):
    result = _stdout_runner().invoke(cli, ["-f", str(tmp_path / "missing.fa")])
    assert result.exit_code == 1
    assert "Input file not found" in result.stderr


def test_bad_option_type_is_usage_error(write_fasta):
    path = write_fasta([("s", "A")])
    result = _stdout_runner().invoke(cli, ["-f", str(path), "-w", "ten"])
    assert result.exit_code == 2


def test_dry_run_writes_no_bed(write_fasta):
    path = write_fasta([("s", "AAAAAAAAAA")])
    result = _stdout_runner().invoke(cli, ["-f", str(path), "--dry-run"])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert "threshold=8" in result.stderr


def test_log_file_written(write_fasta, tmp_path):
    path = write_fasta([("s", "AAAAAAAAAA")])
    log_file = tmp_path / "run.log"
    result = _stdout_runner().invoke(cli, ["-f", str(path), "--log-file", str(log_file)])
    assert result.exit_code == 0
    assert "Scanned 1 records" in log_file.read_text()


def test_main_returns_exit_code(write_fasta, capsys):
    path = write_fasta([("chr1", "AAAAAAAAAA")])
    assert main(["-f", str(path)]) == 0
    assert capsys.readouterr().out == "chr1\t0\t10\tA\t100\t+\n"
    assert main(["-f", str(path), "-p", "10"]) == 1


def test_config_log_file_used_with_verbose(write_fasta, tmp_path):
    """Test runtime.log_file from the config still applies when -v is given."""
    path = write_fasta([("s", "AAAAAAAAAA")])
    log_file = tmp_path / "logs" / "run.log"
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(f"input_file: {path}\nruntime:\n  log_file: {log_file}\n")

    result = _stdout_runner().invoke(cli, ["-c", str(cfg), "-v"])

    assert result.exit_code == 0
    assert log_file.exists()
    assert "Scanned 1 records" in log_file.read_text()


def test_non_ascii_record_id_kept(tmp_path):
    """Test a UTF-8 FASTA header reaches the BED chrom column unchanged."""
    path = tmp_path / "utf8.fa"
    path.write_bytes(b">chr\xc3\xa9 description\nAAAAAAAAAA\n")
    out = tmp_path / "out.bed"

    result = _stdout_runner().invoke(cli, ["-f", str(path), "-o", str(out)])

    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == "chré\t0\t10\tA\t100\t+\n"
