"""Unit tests for CLI logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from volenv.log import configure_logging


def _rich_handlers() -> list[RichHandler]:
    return [h for h in logging.getLogger("volenv").handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging("debug")
        assert logging.getLogger("volenv").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("volenv").level == logging.WARNING

    def test_repeated_calls_replace_handler(self):
        configure_logging("INFO")
        first = _rich_handlers()
        configure_logging("INFO")
        second = _rich_handlers()

        assert len(first) == 1
        assert len(second) == 1
        assert second[0] is not first[0]
