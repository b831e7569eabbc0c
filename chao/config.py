from __future__ import annotations
import os
from pathlib import Path

from chao.types.errors import ChaoConfigError


# Defaults
_DEFAULT_MAX_DEPTH = 128
_DEFAULT_HISTORY_FILE = Path('.chaohistory')
_DEFAULT_LOG_LEVEL = 'WARNING'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ChaoConfigError(f"{var} must be an integer, got {raw!r}")
    if value < 1:
        raise ChaoConfigError(f"{var} must be positive, got {value}")
    return value


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_max_depth() -> int:
    return int_from_env('CHAO_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_history_file() -> Path:
    return path_from_env('CHAO_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_log_level() -> str:
    level = os.environ.get('CHAO_LOG_LEVEL', '').strip().upper() or _DEFAULT_LOG_LEVEL
    if level not in _LOG_LEVELS:
        raise ChaoConfigError(f"CHAO_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return level
