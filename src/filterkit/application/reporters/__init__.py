"""Reporters: filter → human-readable output."""

from filterkit.application.reporters.console import FilterTreeReporter, TreeConfig

__all__ = ["FilterTreeReporter", "TreeConfig"]
