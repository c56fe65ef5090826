"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError


@dataclass
class Config:
    # None means run until the program halts
    step_limit: Optional[int] = None
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from BF_STEP_LIMIT and BF_LOG_LEVEL.
        Reads os.environ when no mapping is given.
        """
        if environ is None:
            environ = os.environ
        return cls(
            step_limit=_parse_step_limit(environ.get("BF_STEP_LIMIT", "")),
            log_level=_parse_log_level(environ.get("BF_LOG_LEVEL", "")),
        )


def load_config(dotenv_path: Optional[str] = None) -> Config:
    """Load .env from the working directory (or dotenv_path) without overriding
    variables already set, then read the environment.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return Config.from_env()


def _parse_step_limit(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"BF_STEP_LIMIT must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"BF_STEP_LIMIT must not be negative, got {value}")
    return value or None


def _parse_log_level(raw: str) -> int:
    raw = raw.strip().upper()
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ConfigError(f"BF_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level
