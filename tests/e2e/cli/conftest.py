"""Fixtures for end-to-end CLI tests.

Every invocation runs inside an isolated filesystem with the flight recorder
pointed at a local file and the store configured through the environment.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from storefront.entrypoints.cli.main import storefront

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner, monkeypatch):
    """Run the test in an isolated filesystem with a local flight recorder path."""
    with runner.isolated_filesystem():
        monkeypatch.setenv("STOREFRONT_LOG_PATH", "latest.log")
        yield


@pytest.fixture(autouse=True)
def store_env(monkeypatch):
    """Configure a predictable store through the environment."""
    monkeypatch.setenv("STOREFRONT_EXCHANGE_RATES", "PLN=1.5")
    monkeypatch.setenv("STOREFRONT_DECLINED_INSTRUMENTS", "0000")
    monkeypatch.setenv("STOREFRONT_OPENING_HOUR", "0")
    monkeypatch.setenv("STOREFRONT_CLOSING_HOUR", "24")


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root handlers and the per-logger levels the CLI installs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = {
        name: logger.level
        for name, logger in logging.root.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            logger.setLevel(levels.get(name, logging.NOTSET))


@click.command()
def log_demo():
    """Emit one message per level on a storefront and a third-party logger."""
    logger = logging.getLogger("storefront.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    logging.getLogger("some.thirdparty").warning("third-party warning message")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the test-only `log-demo` command for the duration of a test."""
    storefront.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(storefront, "log-demo")
