"""Tests for environment configuration."""

import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from bftape import ConfigError
from bftape.config import Config, load_config


def test_defaults():
    config = Config.from_env({})
    assert config.step_limit is None
    assert config.log_level == logging.WARNING


def test_step_limit_from_env():
    assert Config.from_env({"BF_STEP_LIMIT": "5000"}).step_limit == 5000


@pytest.mark.parametrize("raw", ["", "0", "  "])
def test_empty_or_zero_step_limit_is_unlimited(raw):
    assert Config.from_env({"BF_STEP_LIMIT": raw}).step_limit is None


@pytest.mark.parametrize("raw", ["lots", "-5", "1.5"])
def test_bad_step_limit(raw):
    with pytest.raises(ConfigError):
        Config.from_env({"BF_STEP_LIMIT": raw})


def test_log_level_is_case_insensitive():
    assert Config.from_env({"BF_LOG_LEVEL": "debug"}).log_level == logging.DEBUG


def test_bad_log_level():
    with pytest.raises(ConfigError):
        Config.from_env({"BF_LOG_LEVEL": "chatty"})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("BF_STEP_LIMIT", "12")
    monkeypatch.delenv("BF_LOG_LEVEL", raising=False)
    assert Config.from_env().step_limit == 12


def test_load_config_reads_dotenv_in_working_directory(tmp_path, monkeypatch):
    """A .env next to where bftape is run supplies unset variables."""
    (tmp_path / ".env").write_text("BF_STEP_LIMIT=77\nBF_LOG_LEVEL=info\n")
    # setenv first so teardown removes what load_dotenv writes
    monkeypatch.setenv("BF_STEP_LIMIT", "")
    monkeypatch.setenv("BF_LOG_LEVEL", "")
    monkeypatch.delenv("BF_STEP_LIMIT")
    monkeypatch.delenv("BF_LOG_LEVEL")
    monkeypatch.chdir(tmp_path)

    config = load_config()
    assert config.step_limit == 77
    assert config.log_level == logging.INFO


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("BF_STEP_LIMIT=77\n")
    monkeypatch.setenv("BF_STEP_LIMIT", "5")
    monkeypatch.delenv("BF_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)

    assert load_config().step_limit == 5
