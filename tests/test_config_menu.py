"""Tests for the interactive configuration menus."""

import pytest

from claude_notifier.cli import config_menu
from claude_notifier.cli.config_menu import (
    MAIN_MENU_TITLE,
    headless_submenu,
    icon_submenu,
    preview_sound,
    run_config_menu,
    sound_submenu,
)
from claude_notifier.utils.config import Config
from claude_notifier.utils.constants import SOUND_MENU_HINT, SYSTEM_SOUNDS


class FakeSelect:
    """Stand-in for select_menu returning scripted answers."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, title, items, initial_index=0, **kwargs):
        self.calls.append(
            {"title": title, "items": items, "initial_index": initial_index, **kwargs}
        )
        if not self.answers:
            raise AssertionError(f"unexpected menu: {title}")
        return self.answers.pop(0)


@pytest.fixture
def config(mock_notifier_dir):
    return Config(mock_notifier_dir)


class TestMainMenu:
    """Main menu loop."""

    def test_escape_leaves_config_untouched(self, config):
        select = FakeSelect(None)

        run_config_menu(config, select)

        assert config.icon == "brown"
        assert len(select.calls) == 1
        assert select.calls[0]["title"] == MAIN_MENU_TITLE

    def test_done_returns(self, config):
        select = FakeSelect("done")

        run_config_menu(config, select)

        assert len(select.calls) == 1

    def test_main_menu_entries(self, config):
        select = FakeSelect(None)

        run_config_menu(config, select)

        values = [item.value for item in select.calls[0]["items"]]
        assert values == ["icon", "sound", "headless", "done"]
        assert not any(item.is_current for item in select.calls[0]["items"])

    def test_icon_then_done(self, config):
        select = FakeSelect("icon", "blue", "done")

        run_config_menu(config, select)

        assert config.icon == "blue"
        titles = [call["title"] for call in select.calls]
        assert titles == [MAIN_MENU_TITLE, "Icon Color", MAIN_MENU_TITLE]

    def test_returning_from_submenu_keeps_highlight(self, config):
        select = FakeSelect("headless", None, "sound", None, None)

        run_config_menu(config, select)

        main_calls = [c for c in select.calls if c["title"] == MAIN_MENU_TITLE]
        assert [c["initial_index"] for c in main_calls] == [0, 2, 1]

    def test_cancelled_submenu_changes_nothing(self, config):
        select = FakeSelect("sound", None, None)

        run_config_menu(config, select)

        assert config.sound == "default"

    def test_escape_timeout_passed_through(self, config):
        config.escape_timeout_ms = 250
        select = FakeSelect("icon", None, None)

        run_config_menu(config, select)

        assert all(c["escape_timeout"] == 0.25 for c in select.calls)


class TestSubmenus:
    """Icon, sound and headless submenus."""

    def test_icon_marks_current_and_starts_there(self, config):
        config.icon = "green"
        select = FakeSelect(None)

        icon_submenu(config, select)

        call = select.calls[0]
        assert [item.value for item in call["items"]] == ["brown", "blue", "green"]
        assert [item.is_current for item in call["items"]] == [False, False, True]
        assert call["initial_index"] == 2
        assert call["items"][0].label == "Brown (default)"

    def test_icon_unknown_current_starts_at_top(self, config):
        config.icon = "purple"
        select = FakeSelect(None)

        icon_submenu(config, select)

        assert select.calls[0]["initial_index"] == 0
        assert config.icon == "purple"

    def test_sound_menu_previews_and_selects(self, config):
        config.sound = "Glass"
        select = FakeSelect("Hero")

        sound_submenu(config, select)

        call = select.calls[0]
        assert [item.value for item in call["items"]] == SYSTEM_SOUNDS
        assert call["initial_index"] == SYSTEM_SOUNDS.index("Glass")
        assert call["on_preview"] is preview_sound
        assert call["hint"] == SOUND_MENU_HINT
        assert call["items"][0].label == "Default (system sound)"
        assert call["items"][1].label == "None (silent)"
        assert config.sound == "Hero"

    @pytest.mark.parametrize(
        "current,answer,expected,initial",
        [
            (False, "true", True, 1),
            (True, "false", False, 0),
            (True, None, True, 0),
        ],
    )
    def test_headless(self, config, current, answer, expected, initial):
        config.notify_in_headless_mode = current
        select = FakeSelect(answer)

        headless_submenu(config, select)

        assert select.calls[0]["initial_index"] == initial
        assert config.notify_in_headless_mode is expected


class TestPreviewSound:
    """Sound preview side effect."""

    @pytest.fixture
    def popen_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            config_menu.subprocess, "Popen", lambda args, **kw: calls.append(args)
        )
        return calls

    @pytest.mark.parametrize("sound", ["default", "none"])
    def test_nothing_to_preview(self, sound, popen_calls, monkeypatch):
        monkeypatch.setattr(config_menu.shutil, "which", lambda name: "/usr/bin/afplay")

        preview_sound(sound)

        assert popen_calls == []

    def test_no_player(self, popen_calls, monkeypatch):
        monkeypatch.setattr(config_menu.shutil, "which", lambda name: None)

        preview_sound("Glass")

        assert popen_calls == []

    def test_plays_system_sound(self, popen_calls, monkeypatch, temp_dir):
        (temp_dir / "Glass.aiff").write_bytes(b"")
        monkeypatch.setattr(config_menu, "SYSTEM_SOUNDS_DIR", str(temp_dir))
        monkeypatch.setattr(config_menu.shutil, "which", lambda name: "/usr/bin/afplay")

        preview_sound("Glass")

        assert popen_calls == [["/usr/bin/afplay", str(temp_dir / "Glass.aiff")]]
