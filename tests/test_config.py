import logging

import pytest

from astlisp.config import get_log_level, get_repl_address


def test_defaults(monkeypatch):
    for var in ("ASTLISP_LOG_LEVEL", "ASTLISP_REPL_HOST", "ASTLISP_REPL_PORT"):
        monkeypatch.delenv(var, raising=False)
    assert get_log_level() == logging.WARNING
    assert get_repl_address() == ("127.0.0.1", 8765)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        ("", logging.WARNING),
        ("chatty", logging.WARNING),
    ],
)
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("ASTLISP_LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_bad_port(monkeypatch):
    monkeypatch.setenv("ASTLISP_REPL_PORT", "eighty")
    with pytest.raises(ValueError):
        get_repl_address()
