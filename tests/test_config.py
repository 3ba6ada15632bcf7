"""
Tests for client settings.
"""

import logging

from imageoptim.core.config import Settings, configure_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("IMAGEOPTIM_BASE_URL", raising=False)
    monkeypatch.delenv("IMAGEOPTIM_USERNAME", raising=False)
    config = Settings(_env_file=None)

    assert config.IMAGEOPTIM_BASE_URL == "https://im2.io"
    assert config.IMAGEOPTIM_USERNAME == ""


def test_env_override(monkeypatch):
    monkeypatch.setenv("IMAGEOPTIM_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("IMAGEOPTIM_USERNAME", "env-user")
    config = Settings(_env_file=None)

    assert config.IMAGEOPTIM_BASE_URL == "http://localhost:8080"
    assert config.IMAGEOPTIM_USERNAME == "env-user"


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")

    assert calls[0]["level"] == "DEBUG"
