"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, plus fixtures to register that command and obtain a CliRunner
with the DASHKIT environment cleared.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from dashkit.config import (
    CACHE_ENV,
    CACHE_MAXSIZE_ENV,
    FETCH_TIMEOUT_ENV,
    TIMER_ENV,
)
from dashkit.entrypoints.cli.main import dashkit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI logging tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'dashkit.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering.
    """
    logger = logging.getLogger("dashkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    dashkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(dashkit, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose invocations see no DASHKIT_* settings."""
    return CliRunner(
        env={
            TIMER_ENV: None,
            CACHE_ENV: None,
            CACHE_MAXSIZE_ENV: None,
            FETCH_TIMEOUT_ENV: None,
        }
    )
