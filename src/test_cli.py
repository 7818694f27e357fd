"""
test_cli.py
Purpose: End-to-end tests of the linerle command line.
"""

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from linerle.cli import app


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("LINERLE_PROGRAM_NAME", "linerle")
    monkeypatch.delenv("LINERLE_EVENT_LOG", raising=False)
    return CliRunner()


def test_stdin_to_stdout(runner):
    result = runner.invoke(app, [], input="aaabb\n\nx\n")

    assert result.exit_code == 0
    assert result.stdout == "a3\n\n\n"
    assert "READ: 9 characters" in result.stderr
    assert "Written: 2 characters" in result.stderr


def test_files_to_output_file(runner, tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    out = tmp_path / "out.txt"
    first.write_text("aa\n")
    second.write_text("bb\n")
    out.write_text("stale\n")

    result = runner.invoke(app, ["-o", str(out), str(first), str(second)])

    assert result.exit_code == 0
    assert out.read_bytes() == b"\n\n"
    assert result.stdout == ""
    assert result.stderr == "READ: 6 characters\nWritten: 0 characters\n"


def test_output_flag_after_inputs(runner, tmp_path):
    src = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    src.write_text("ppq\n")
    out.write_text("")

    result = runner.invoke(app, [str(src), "--output", str(out)])

    assert result.exit_code == 0
    assert out.read_text() == "p2\n"


def test_duplicate_output_flag_is_usage_error(runner, tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("keep\n")

    result = runner.invoke(app, ["-o", str(a), "-o", str(b)], input="zzz\n")

    assert result.exit_code == 2
    assert result.stderr == (
        "[linerle] ERROR: flag -o can only appear once\n"
        "USAGE: linerle [-o OUTPUT] [INPUT]...\n"
    )
    assert result.stdout == ""
    assert a.read_text() == "keep\n"
    assert not b.exists()


def test_unknown_flag_is_usage_error(runner):
    result = runner.invoke(app, ["--bogus"], input="aa\n")
    assert result.exit_code == 2
    assert result.stdout == ""


def test_missing_input_file(runner, tmp_path):
    missing = tmp_path / "missing.txt"

    result = runner.invoke(app, [str(missing)])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == f"[linerle] ERROR: Opening file: {missing}. No such file or directory\n"


def test_missing_output_file(runner, tmp_path):
    out = tmp_path / "nowhere.txt"

    result = runner.invoke(app, ["-o", str(out)], input="aab\n")

    assert result.exit_code == 1
    assert "Opening file:" in result.stderr
    assert "READ:" not in result.stderr
    assert not Path(out).exists()


def test_directory_input_is_access_error(runner, tmp_path):
    folder = tmp_path / "folder"
    folder.mkdir()

    result = runner.invoke(app, [str(folder)])

    assert result.exit_code == 1
    assert result.stderr == f"[linerle] ERROR: Opening file: {folder}. Is a directory\n"
    assert result.stdout == ""


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
def test_full_device_reports_failed_writes_and_finishes(runner):
    result = runner.invoke(app, ["-o", "/dev/full"], input="aab\n")

    assert result.exit_code == 0
    assert result.stderr == (
        "[linerle] ERROR: Error while writing to file\n"
        "[linerle] ERROR: Error while writing to file\n"
        "READ: 4 characters\n"
        "Written: 0 characters\n"
    )
