import logging

import pytest

from theta import config


def test_recursion_limit_default(monkeypatch):
    monkeypatch.delenv("THETA_RECURSION_LIMIT", raising=False)
    assert config.get_recursion_limit() == 10_000


def test_recursion_limit_from_env(monkeypatch):
    monkeypatch.setenv("THETA_RECURSION_LIMIT", " 2500 ")
    assert config.get_recursion_limit() == 2500


def test_recursion_limit_must_be_integer(monkeypatch):
    monkeypatch.setenv("THETA_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError):
        config.get_recursion_limit()


@pytest.mark.parametrize(
    "raw,expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("bogus", logging.WARNING)],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("THETA_LOG_LEVEL", raw)
    assert config.get_log_level() == expected
