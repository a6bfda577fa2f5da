"""Unit tests for logging configuration."""

import json
import logging
from unittest.mock import Mock

import pytest

from lantern.utils.logger import LanternFormatter, LoggerConfig, PerformanceLogger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLanternFormatter:
    """Test JSON log records."""

    def test_adds_standard_fields(self):
        formatter = LanternFormatter(fmt="%(timestamp)s %(level)s %(logger)s %(message)s")
        record = logging.LogRecord(
            name="lantern.test", level=logging.WARNING, pathname=__file__, lineno=42,
            msg="Provider fell back", args=(), exc_info=None, func="augment",
        )
        record.career_id = "rn-001"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Provider fell back"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "lantern.test"
        assert payload["function"] == "augment"
        assert payload["line"] == 42
        assert payload["application"] == "lantern"
        assert payload["career_id"] == "rn-001"
        assert "timestamp" in payload


class TestLoggerConfig:
    """Test per-environment handler setup."""

    def test_test_environment_only_shows_warnings(self, restore_root_logger):
        LoggerConfig("test", "DEBUG")
        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_development_uses_plain_formatter(self, restore_root_logger):
        LoggerConfig("development", "info")
        assert restore_root_logger.level == logging.INFO
        assert not isinstance(restore_root_logger.handlers[0].formatter, LanternFormatter)

    def test_production_writes_json_and_error_file(self, restore_root_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        LoggerConfig("production", "INFO")

        handlers = restore_root_logger.handlers
        assert all(isinstance(h.formatter, LanternFormatter) for h in handlers)
        assert any(h.level == logging.ERROR for h in handlers)
        assert (tmp_path / "logs").is_dir()
        for handler in handlers:
            handler.close()


class TestPerformanceLogger:
    """Test operation timing."""

    def test_logs_duration_on_success(self):
        logger = Mock()
        with PerformanceLogger("score_careers", logger, extra={"path": "decided"}) as perf:
            pass

        assert perf.duration_ms is not None
        level, message = logger.log.call_args.args
        extra = logger.log.call_args.kwargs["extra"]
        assert level == logging.INFO
        assert message == "Completed score_careers"
        assert extra["success"] is True
        assert extra["path"] == "decided"

    def test_slow_operations_log_a_warning(self):
        logger = Mock()
        with PerformanceLogger("submit_assessment", logger, slow_threshold_ms=-1):
            pass

        assert logger.log.call_args.args[0] == logging.WARNING

    def test_exceptions_propagate_and_are_marked(self):
        logger = Mock()
        with pytest.raises(RuntimeError):
            with PerformanceLogger("submit_assessment", logger):
                raise RuntimeError("boom")

        assert logger.log.call_args.kwargs["extra"]["success"] is False
