#!/usr/bin/env python3
"""
Command line tests: diagnostics and exit codes.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from bf4d.cli import (
    EXIT_INPUT,
    EXIT_MEMORY,
    EXIT_MOVEMENT,
    EXIT_OK,
    EXIT_SOURCE,
    EXIT_STRUCTURE,
    main,
)


@pytest.fixture
def program(tmp_path):
    def _write(source):
        path = tmp_path / "program.b4d"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write


def test_successful_run(program, capsys):
    assert main(["-f", program("+++.")]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "\x03"
    assert captured.err == ""


def test_unmatched_end_reports_index(program, capsys):
    assert main(["--file", program("+]")]) == EXIT_STRUCTURE
    err = capsys.readouterr().err
    assert "The loop ending at instruction '1' has no beginning." in err
    assert "Hint:" in err


def test_unmatched_begin_runs_nothing(program, capsys):
    assert main(["-f", program("+.[")]) == EXIT_STRUCTURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "The loop starting at instruction '2' has no ending." in captured.err


def test_nesting_limit_flag(program, capsys):
    assert main(["-f", program("[[[]]]"), "--max-depth", "2"]) == EXIT_STRUCTURE
    assert "nested deeper than 2 levels" in capsys.readouterr().err


def test_movement_error_keeps_partial_output(program, capsys):
    assert main(["-f", program("+.>>"), "-c", "2"]) == EXIT_MOVEMENT
    captured = capsys.readouterr()
    assert captured.out == "\x01"
    assert "Fell off the hypercube, in the XPos direction" in captured.err


def test_input_exhausted(program, capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b"")))
    assert main(["-f", program(",")]) == EXIT_INPUT
    assert "Failed to read data" in capsys.readouterr().err


def test_reads_process_stdin(program, capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b"hi")))
    assert main(["-f", program(",>,<.>.")]) == EXIT_OK
    assert capsys.readouterr().out == "hi"


def test_reads_bytes_of_multibyte_input(program, capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b"\xc3\xa9X")))
    assert main(["-f", program(",>,>,.<.<.")]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "X\xa9\xc3"
    assert captured.err == ""


def test_oversized_cube_is_reported(program, capsys):
    # 100000 ** 4 bytes is beyond what numpy can address.
    assert main(["-f", program("+"), "--count", "100000"]) == EXIT_MEMORY
    err = capsys.readouterr().err
    assert "Couldn't allocate a hypercube of side 100000" in err
    assert "Traceback" not in err


def test_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.b4d")]) == EXIT_SOURCE
    assert "Couldn't read" in capsys.readouterr().err


def test_large_cube_warning(program, capsys):
    assert main(["-f", program(""), "--count", "17"]) == EXIT_OK
    assert "17 holds 83521 cells" in capsys.readouterr().err


def test_no_warning_for_default_cube(program, capsys):
    assert main(["-f", program(""), "--count", "16"]) == EXIT_OK
    assert capsys.readouterr().err == ""


def test_show_tokens_and_instructions(program, capsys):
    assert main(["-f", program("+[-] end"), "--show-tokens", "--show-instructions"]) == EXIT_OK
    err = capsys.readouterr().err.splitlines()
    assert err == ["Increment LoopBegin Decrement LoopEnd", "+[-]"]


@pytest.mark.parametrize("argv", [
    [],
    ["-f", "x.b4d", "--count", "0"],
    ["-f", "x.b4d", "--max-depth", "0"],
])
def test_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
