"""
Tests for environment-driven configuration helpers
"""

import pytest

from ollama_boolean.config import Config


@pytest.mark.parametrize("host,expected", [
    ("http://localhost:11434", "http://localhost:11434/v1"),
    ("http://localhost:11434/", "http://localhost:11434/v1"),
    ("127.0.0.1:11434", "http://127.0.0.1:11434/v1"),
    ("https://ollama.internal", "https://ollama.internal/v1"),
    ("", "http://localhost:11434/v1"),
])
def test_base_url(monkeypatch, host, expected):
    monkeypatch.setattr(Config, "OLLAMA_HOST", host)
    assert Config.base_url() == expected


def test_log_level_from_env_value(monkeypatch):
    monkeypatch.setattr(Config, "DEBUG", False)
    monkeypatch.setattr(Config, "LOG_LEVEL", "info")
    assert Config.log_level() == "INFO"


def test_debug_forces_debug_level(monkeypatch):
    monkeypatch.setattr(Config, "DEBUG", True)
    monkeypatch.setattr(Config, "LOG_LEVEL", "ERROR")
    assert Config.log_level() == "DEBUG"


@pytest.mark.parametrize("configured,expected", [
    ("llama3.2", "llama3.2"),
    ("", "qwen3"),
    ("  ", "qwen3"),
    (None, "qwen3"),
])
def test_model_default(monkeypatch, configured, expected):
    monkeypatch.setattr(Config, "OLLAMA_MODEL", configured)
    assert Config.model() == expected
