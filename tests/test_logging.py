"""Tests for logging configuration."""

import io
import logging

import pytest
from rich.logging import RichHandler

from diffgate.logging import LogLevel, configure_logging

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, LogLevel.NORMAL),
        ({"verbosity": 1}, LogLevel.VERBOSE),
        ({"verbosity": 2}, logging.DEBUG),
        ({"debug": True}, logging.DEBUG),
        ({"quiet": True, "debug": True, "verbosity": 2}, LogLevel.QUIET),
    ],
)
def test_level_precedence(kwargs, expected):
    """quiet wins over debug, which wins over verbosity."""
    configure_logging(**kwargs)
    assert logging.getLogger().level == expected


def test_installs_rich_handler():
    configure_logging()
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)


def test_git_commands_logged_at_debug():
    """With -v, gateway debug records reach the stream."""
    stream = io.StringIO()
    configure_logging(verbosity=1, stream=stream)
    logging.getLogger("diffgate.services.git").debug("Running: git diff --cached")
    assert "Running: git diff --cached" in stream.getvalue()


def test_debug_hidden_by_default():
    stream = io.StringIO()
    configure_logging(stream=stream)
    logging.getLogger("diffgate.services.git").debug("Running: git status")
    assert stream.getvalue() == ""


def test_no_color_console():
    console = configure_logging(no_color=True)
    assert console.no_color is True
