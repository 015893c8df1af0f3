"""Tests for cli.main: the command-line driver."""

from __future__ import annotations

import pytest

from bfvm.cli.main import main
from bfvm.config.settings import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def write_program(tmp_path, source: bytes):
    path = tmp_path / "prog.bf"
    path.write_bytes(source)
    return path


class TestSuccess:
    def test_prints_output_then_completion_notice(self, tmp_path, capsys):
        path = write_program(tmp_path, b"+" * 72 + b"." + b"+" * 33 + b".")
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert out == "Hi\nSuccessfully completed program\n"

    def test_reads_input_file(self, tmp_path, capsys):
        path = write_program(tmp_path, b",.,.")
        data = tmp_path / "in.txt"
        data.write_bytes(b"yo")
        assert main([str(path), "--input", str(data)]) == 0
        assert capsys.readouterr().out.startswith("yo\n")

    def test_completion_message_from_config(self, tmp_path, capsys):
        path = write_program(tmp_path, b"")
        config = tmp_path / "bfvm.yaml"
        config.write_text('completion_message: "done"\n')
        assert main([str(path), "--config", str(config)]) == 0
        assert capsys.readouterr().out == "\ndone\n"


class TestProgramFaults:
    def test_unmatched_loop_end(self, tmp_path, capsys):
        path = write_program(tmp_path, b"+]")
        assert main([str(path)]) == 1
        assert "Unmatched ']' at character 1" in capsys.readouterr().err

    def test_no_input(self, tmp_path, capsys):
        path = write_program(tmp_path, b",")
        empty = tmp_path / "empty.txt"
        empty.write_bytes(b"")
        assert main([str(path), "--input", str(empty)]) == 1
        assert "No input given" in capsys.readouterr().err

    def test_tape_size_flag(self, tmp_path, capsys):
        path = write_program(tmp_path, b">>")
        assert main([str(path), "--tape-size", "2"]) == 1
        assert "out of bounds" in capsys.readouterr().err

    def test_check_flag_rejects_before_running(self, tmp_path, capsys):
        path = write_program(tmp_path, b"+.[")
        assert main([str(path), "--check"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[0]" not in captured.err
        assert "[2]" in captured.err


class TestBoundaryErrors:
    def test_missing_program(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.bf")]) == 2
        assert capsys.readouterr().err.startswith("Error:")

    def test_invalid_config(self, tmp_path, capsys):
        path = write_program(tmp_path, b"+")
        assert main([str(path), "--tape-size", "0"]) == 2
        assert "tape_size must be a positive integer" in capsys.readouterr().err
