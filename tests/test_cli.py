# tests/test_cli.py
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest
from conftest import HIRAGANA_RELATIONS, HIRAGANA_TEXT

from jpcontext.cli import main


def test_cli_scores_file(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes(HIRAGANA_TEXT.encode("shift_jis"))
    result = subprocess.run(
        [sys.executable, "-m", "jpcontext.cli", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    lines = result.stdout.strip().split("\n")
    assert lines[0] == (
        f"{f}: shift_jis with confidence 1.000 ({HIRAGANA_RELATIONS} relations)"
    )
    assert lines[1] == f"{f}: euc-jp with confidence unknown (0 relations)"


def test_cli_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "jpcontext.cli"],
        input=HIRAGANA_TEXT.encode("euc-jp"),
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().startswith("stdin: euc-jp with confidence 1.000")


def test_cli_version():
    result = subprocess.run(
        [sys.executable, "-m", "jpcontext.cli", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "1.0.0" in result.stdout


def test_cli_minimal_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(HIRAGANA_TEXT.encode("euc-jp"))
    main(["--minimal", str(f)])
    captured = capsys.readouterr()
    assert captured.out.split("\n")[:2] == ["euc-jp 1.000", "shift_jis unknown"]


def test_cli_encoding_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(HIRAGANA_TEXT.encode("shift_jis"))
    main(["-e", "sjis", str(f)])
    captured = capsys.readouterr()
    assert captured.out.count("with confidence") == 1
    assert "shift_jis" in captured.out


def test_cli_min_relations_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(HIRAGANA_TEXT.encode("shift_jis"))
    main(["--minimal", "-e", "shift_jis", "--min-relations", "100", str(f)])
    assert capsys.readouterr().out.strip() == "shift_jis unknown"


def test_cli_multiple_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f1 = tmp_path / "a.txt"
    f2 = tmp_path / "b.txt"
    f1.write_bytes(HIRAGANA_TEXT.encode("shift_jis"))
    f2.write_bytes(HIRAGANA_TEXT.encode("euc-jp"))
    main([str(f1), str(f2)])
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 4


def test_cli_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="1"):
        main(["nonexistent_file_xyz.txt"])
    captured = capsys.readouterr()
    assert "jpcontext: nonexistent_file_xyz.txt" in captured.err


def test_cli_unsupported_encoding(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-e", "utf-8", "whatever.txt"])
    assert excinfo.value.code == 2
    assert "unsupported encoding" in capsys.readouterr().err


def test_cli_verbose_logs_to_stderr(tmp_path: Path):
    f = tmp_path / "test.txt"
    # A dangling lead byte makes the analysis log the truncated character.
    f.write_bytes(HIRAGANA_TEXT.encode("shift_jis") + b"\x82")
    result = subprocess.run(
        [sys.executable, "-m", "jpcontext.cli", "-v", "-e", "sjis", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "jpcontext.analysis.context: DEBUG:" in result.stderr
    assert "truncated" in result.stderr
