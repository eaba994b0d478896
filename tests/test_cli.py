import io

import pytest

from sbsh.cli import main, prompt, read_lines
from sbsh.colors import TextColor

SCRIPT = '#!/bin/sh\necho hi "$@"\n'


@pytest.fixture
def bindir(tmp_path):
    directory = tmp_path / "bin"
    directory.mkdir()
    script = directory / "hello"
    script.write_text(SCRIPT)
    script.chmod(0o755)
    return directory


def test_prompt_is_cyan():
    stream = io.StringIO()
    prompt(stream)
    assert stream.getvalue() == f"{TextColor.CYAN.value}sbsh::$ {TextColor.RESET.value}"


def test_read_lines_strips_endings():
    lines = list(read_lines(io.StringIO("a b\r\nc\n\nd"), False))
    assert lines == ["a b", "c", "", "d"]


def test_read_lines_batch_writes_no_prompt(capsys):
    list(read_lines(io.StringIO("x\n"), False))
    assert capsys.readouterr().out == ""


def test_read_lines_interactive_prompts(capsys):
    lines = list(read_lines(io.StringIO("x\ny\n"), True))
    assert lines == ["x", "y"]
    assert capsys.readouterr().out.count("sbsh::$ ") == len(lines) + 1


def test_too_many_arguments(capsys):
    assert main(["a", "b"]) == 1
    assert "only accepts 0 or 1 arguments" in capsys.readouterr().err


def test_missing_batch_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "fopen failed" in capsys.readouterr().err


def test_batch_mode_runs_commands(bindir, tmp_path):
    out = tmp_path / "out"
    batch = tmp_path / "batch"
    batch.write_text(f"path {bindir}\nhello there > {out}\n")
    assert main([str(batch)]) == 0
    assert out.read_text() == "hi there\n"


def test_batch_mode_exit_stops(bindir, tmp_path):
    out = tmp_path / "out"
    batch = tmp_path / "batch"
    batch.write_text(f"path {bindir}\nexit\nhello > {out}\n")
    assert main([str(batch)]) == 0
    assert not out.exists()


def test_batch_mode_reports_errors(tmp_path, capsys):
    batch = tmp_path / "batch"
    batch.write_text("exit now\ncd\n")
    assert main([str(batch)]) == 0
    err = capsys.readouterr().err
    assert "bad exit command" in err
    assert "specify a directory for cd" in err


def test_interactive_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\nexit\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.count("sbsh::$ ") == 2