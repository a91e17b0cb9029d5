"""End-to-end tests for the options of the top-level `storefront` command.

A test-only `log-demo` command emits one record per level so verbosity,
logger-level overrides and the flight recorder can be observed.
"""

import logging
import re
from pathlib import Path

import pytest

from storefront import __version__
from storefront.entrypoints.cli.main import storefront

# pylint: disable=unused-argument


@pytest.mark.parametrize(
    ("args", "shown", "hidden"),
    [
        ([], "demo warning message", "demo info message"),
        (["-v"], "demo info message", "demo debug message"),
        (["-vv"], "demo debug message", None),
        (["-q"], "demo error message", "demo warning message"),
        (["-qq"], "demo critical message", "demo error message"),
    ],
)
def test_verbosity_flags(registered_log_demo, runner, fs, args, shown, hidden):
    """-v and -q move the console threshold one level per repetition."""
    result = runner.invoke(storefront, [*args, "log-demo"])
    assert result.exit_code == 0, result.output
    assert shown in result.stderr
    if hidden:
        assert hidden not in result.stderr


def test_third_party_records_are_prefixed(registered_log_demo, runner, fs):
    """Records from other libraries carry their package name."""
    result = runner.invoke(storefront, ["log-demo"])
    assert re.search(r"\[some\] third-party warning message", result.stderr)


def test_logger_level_override(registered_log_demo, runner, fs):
    """-L raises the threshold of a single logger."""
    result = runner.invoke(storefront, ["-L", "storefront.demo=ERROR", "log-demo"])
    assert result.exit_code == 0, result.output
    assert "demo warning message" not in result.stderr
    assert "demo error message" in result.stderr


def test_logger_level_override_does_not_outlive_its_test():
    """Levels set by -L in the previous test have been reset."""
    assert logging.getLogger("storefront.demo").level == logging.NOTSET


def test_invalid_logger_level_is_rejected(registered_log_demo, runner, fs):
    """Malformed -L values are a usage error."""
    result = runner.invoke(storefront, ["-L", "storefront=LOUD", "log-demo"])
    assert result.exit_code == 2
    assert "Invalid log level: LOUD" in result.stderr


def test_flight_recorder_writes_debug_history_on_warning(
    registered_log_demo, runner, fs
):
    """The flight recorder keeps DEBUG records and dumps them on WARNING."""
    result = runner.invoke(storefront, ["log-demo"])
    assert result.exit_code == 0, result.output
    contents = Path("latest.log").read_text(encoding="utf-8")
    assert "demo debug message" in contents
    assert "demo warning message" in contents


def test_no_flight_recorder_writes_nothing(registered_log_demo, runner, fs):
    """--no-flight-recorder leaves no log file behind."""
    result = runner.invoke(storefront, ["--no-flight-recorder", "log-demo"])
    assert result.exit_code == 0, result.output
    assert not Path("latest.log").exists()


def test_version(runner, fs):
    """--version reports the package version."""
    result = runner.invoke(storefront, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
