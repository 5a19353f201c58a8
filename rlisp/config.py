from __future__ import annotations
import logging
import os
from pathlib import Path


# Defaults
_DEFAULT_HISTORY_FILE = 'history.txt'
_DEFAULT_PROMPT = 'rl> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    return raw


def get_history_path() -> Path:
    return Path(value_from_env('RLISP_HISTORY_FILE', _DEFAULT_HISTORY_FILE)).expanduser()


def get_prompt() -> str:
    return value_from_env('RLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = value_from_env('RLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
