"""Tests for debug logging."""

import json

from claude_notifier.utils import debug as debug_module
from claude_notifier.utils.debug import debug, debug_tui, log_error, reload_config


def enable_debug(notifier_dir):
    (notifier_dir / "config.json").write_text(json.dumps({"debug": True}))
    reload_config()


def test_debug_off_writes_nothing(mock_notifier_dir, capsys):
    debug("tui", "hello")

    assert not (mock_notifier_dir / "debug.log").exists()
    assert capsys.readouterr().err == ""


def test_debug_on_writes_file_and_stderr(mock_notifier_dir, capsys):
    enable_debug(mock_notifier_dir)

    debug("config", "saved", path="/tmp/x")

    line = (mock_notifier_dir / "debug.log").read_text().strip()
    assert line.startswith("[claude-notifier:config] ")
    assert line.endswith("saved | path=/tmp/x")
    assert "saved" in capsys.readouterr().err


def test_tui_logging_never_echoes(mock_notifier_dir, capsys):
    """Menu logs go to the file only; stderr output would corrupt the menu."""
    enable_debug(mock_notifier_dir)

    debug_tui("menu opened", items=3)

    assert "menu opened | items=3" in (mock_notifier_dir / "debug.log").read_text()
    assert capsys.readouterr().err == ""


def test_log_error_always_logs(mock_notifier_dir, capsys):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        log_error("tui", "preview failed", e)

    text = (mock_notifier_dir / "debug.log").read_text()
    assert "ERROR: preview failed" in text
    assert "RuntimeError: boom" in text
    assert "preview failed" in capsys.readouterr().err


def test_reload_config_drops_cache(mock_notifier_dir):
    debug_module._get_config()
    assert debug_module._config is not None

    reload_config()

    assert debug_module._config is None


def test_log_file_follows_config_dir(temp_dir, monkeypatch):
    """Log lines land in Config.log_file for the active directory."""
    other = temp_dir / "elsewhere"
    monkeypatch.setenv("CLAUDE_NOTIFIER_DIR", str(other))
    reload_config()

    log_error("config", "bad value")

    assert "ERROR: bad value" in (other / "debug.log").read_text()
