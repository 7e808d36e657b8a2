from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def setting_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = setting_from_env("ASTLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def get_repl_address() -> tuple[str, int]:
    host = setting_from_env("ASTLISP_REPL_HOST", _DEFAULT_REPL_HOST)
    port = setting_from_env("ASTLISP_REPL_PORT", str(_DEFAULT_REPL_PORT))
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"ASTLISP_REPL_PORT must be an integer, got {port!r}") from None
