"""
Tests for collectkit.core.logging module.

Tests verify:
- The package imports and hands out working loggers
- JSON output carries service metadata, logger name and ECS field names
- DEBUG events are suppressed at INFO level
- Engines stay silent until logging is configured
- Bound context appears on events and is removed afterwards
- Engines emit a completion event naming their strategy
"""

import importlib
import json
import logging

import pytest

from collectkit.collections.removal import remove_where
from collectkit.collections.shuffle import shuffle
from collectkit.core.logging import LogContext, bind_context, configure_logging, get_logger


@pytest.fixture
def json_logging(caplog):
    configure_logging(level="DEBUG", json_format=True, service="collectkit-tests", add_timestamp=False)
    caplog.set_level(logging.DEBUG)
    yield


def _events(caplog) -> list[dict]:
    messages = [record.getMessage() for record in caplog.records]
    return [json.loads(message) for message in messages if message.startswith("{")]


class TestGetLogger:
    def test_package_imports(self):
        module = importlib.import_module("collectkit")
        assert module.__version__

    def test_logger_methods_callable(self):
        logger = get_logger("x")
        logger.debug("quiet")
        logger.info("noted", count=1)

    def test_logger_without_name(self):
        get_logger().info("root_event")


class TestUnconfigured:
    """Without configure_logging the library writes nothing."""

    def test_engines_silent(self, capsys, caplog):
        remove_where([1, 2, 3], lambda v: v % 2 == 0)
        shuffle([1, 2, 3])

        assert capsys.readouterr().out == ""
        assert [r for r in caplog.records if r.name.startswith("collectkit")] == []


class TestConfigureLogging:
    def test_json_event(self, json_logging, caplog):
        get_logger("tests.logging").info("something_happened", count=3)
        event = _events(caplog)[-1]

        assert event["event"] == "something_happened"
        assert event["count"] == 3
        assert event["service.name"] == "collectkit-tests"
        assert event["log.level"] == "info"
        assert event["logger"] == "tests.logging"

    def test_debug_suppressed_at_info(self, caplog):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        caplog.set_level(logging.DEBUG)
        get_logger("tests.logging").debug("hidden")
        assert all(e["event"] != "hidden" for e in _events(caplog))

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")


class TestContext:
    def test_bound_context_included(self, json_logging, caplog):
        bind_context(batch="nightly")
        get_logger("tests.logging").info("with_context")
        assert _events(caplog)[-1]["batch"] == "nightly"

    def test_log_context_scoped(self, json_logging, caplog):
        logger = get_logger("tests.logging")
        with LogContext(run="r1"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _events(caplog)[-2:]
        assert inside["run"] == "r1"
        assert "run" not in outside


class TestEngineEvents:
    def test_remove_where_reports_strategy(self, json_logging, caplog):
        remove_where([1, 2, 3, 4], lambda v: v % 2 == 0)
        event = next(e for e in _events(caplog) if e["event"] == "remove_where.completed")

        assert event["strategy"] == "compact"
        assert event["removed"] == 2
        assert event["remaining"] == 2
        assert event["logger"] == "collectkit.collections.removal"
