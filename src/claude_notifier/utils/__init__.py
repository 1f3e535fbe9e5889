"""Utilities for claude-notifier."""

from claude_notifier.utils.config import Config, get_notifier_dir

__all__ = ["Config", "get_notifier_dir"]
