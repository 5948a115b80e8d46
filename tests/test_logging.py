"""Tests for the root logging setup."""

import logging

import pytest

from sqlcraft.core.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


@pytest.mark.parametrize("debug,expected", [(True, logging.DEBUG), (False, logging.INFO)])
def test_root_level_follows_debug_flag(debug, expected):
    setup_logging(debug=debug)
    assert logging.getLogger().level == expected


def test_quiet_loggers_held_at_warning():
    setup_logging(debug=True)
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
