from pathlib import Path

from lispy import config


def test_defaults(monkeypatch):
    for var in ("LISPY_HISTORY_FILE", "LISPY_PROMPT", "LISPY_RECURSION_LIMIT", "LISPY_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_history_file() == Path("history.txt")
    assert config.get_prompt() == "lispy> "
    assert config.get_recursion_limit() == 20000
    assert config.get_log_level() == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "h"))
    monkeypatch.setenv("LISPY_PROMPT", "> ")
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "5000")
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert config.get_history_file() == tmp_path / "h"
    assert config.get_prompt() == "> "
    assert config.get_recursion_limit() == 5000
    assert config.get_log_level() == "DEBUG"


def test_invalid_recursion_limit_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "lots")
    assert config.get_recursion_limit() == 20000
    assert "LISPY_RECURSION_LIMIT" in caplog.text
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "-1")
    assert config.get_recursion_limit() == 20000
