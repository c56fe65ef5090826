"""Tests for the bftape command line."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from bftape.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BF_STEP_LIMIT", raising=False)
    monkeypatch.delenv("BF_LOG_LEVEL", raising=False)


def write(tmp_path, code):
    path = tmp_path / "prog.bf"
    path.write_text(code)
    return str(path)


def test_runs_program(tmp_path, capsys):
    assert main([write(tmp_path, "+" * 66 + ".")]) == 0
    assert capsys.readouterr().out == "B"


def test_missing_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "usage" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, caplog):
    assert main([str(tmp_path / "nope.bf")]) == 1
    assert "Cannot open program file" in caplog.text


def test_unbalanced_program_fails(tmp_path, caplog):
    assert main([write(tmp_path, "[[]")]) == 1
    assert "Unmatched '['" in caplog.text


def test_step_limit_flag(tmp_path, caplog):
    assert main(["--step-limit", "10", write(tmp_path, "+[]")]) == 1
    assert "did not halt within 10 steps" in caplog.text


def test_step_limit_from_env(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("BF_STEP_LIMIT", "25")
    assert main([write(tmp_path, "+[]")]) == 1
    assert "25 steps" in caplog.text


def test_bad_env_config_fails(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("BF_STEP_LIMIT", "many")
    assert main([write(tmp_path, "+")]) == 1
    assert "BF_STEP_LIMIT" in caplog.text


def test_malformed_input_fails(tmp_path, monkeypatch, caplog):
    import io
    monkeypatch.setattr(sys, "stdin", io.StringIO("300\n"))
    assert main([write(tmp_path, ",.")]) == 1
    assert "byte value" in caplog.text
