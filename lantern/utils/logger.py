"""Structured logging configuration for Lantern.

This module configures JSON logging for production (one record per line,
suitable for log aggregation), a readable console format for development and
a quiet configuration for test runs.
"""

import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class LanternFormatter(jsonlogger.JsonFormatter):
    """JSON formatter for Lantern application logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add standard fields to every JSON log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['application'] = 'lantern'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class LoggerConfig:
    """Root logger configuration for one environment."""

    def __init__(self, environment: str = 'development', log_level: str = 'INFO'):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, test, staging, production)
            log_level: Default log level
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)
        self.log_dir = Path("logs")

        self._configure_root_logger()

    def _configure_root_logger(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()

        if self.environment in ('production', 'staging'):
            self._add_production_handlers(root_logger)
        elif self.environment == 'test':
            self._add_test_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        """Add JSON console output and a rotating error file.

        Args:
            logger: Logger to configure
        """
        json_formatter = LanternFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)

        self.log_dir.mkdir(exist_ok=True)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(json_formatter)
        logger.addHandler(error_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-32s | %(funcName)-20s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(console_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        # Only warnings and errors during tests
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        ))
        logger.addHandler(console_handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)


# Global logger configuration instance
_logger_config: Optional[LoggerConfig] = None


def setup_logging(environment: str = 'development', log_level: str = 'INFO') -> LoggerConfig:
    """Setup application logging.

    Args:
        environment: Environment name
        log_level: Log level

    Returns:
        LoggerConfig: Configured logger instance
    """
    global _logger_config
    _logger_config = LoggerConfig(environment, log_level)
    return _logger_config


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance, configuring defaults on first use.

    Args:
        name: Logger name, usually the caller's ``__name__``

    Returns:
        logging.Logger: Logger instance
    """
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_logger(name)


class PerformanceLogger:
    """Context manager that logs how long an operation took."""

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        extra: Optional[Dict[str, Any]] = None,
        slow_threshold_ms: float = 5000.0
    ):
        """Initialize performance logger.

        Args:
            operation: Operation name
            logger: Logger instance
            extra: Additional fields to log
            slow_threshold_ms: Durations above this are logged as warnings
        """
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.slow_threshold_ms = slow_threshold_ms
        self.start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self) -> 'PerformanceLogger':
        self.start_time = datetime.now(timezone.utc)
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        duration = datetime.now(timezone.utc) - self.start_time
        self.duration_ms = duration.total_seconds() * 1000
        level = logging.WARNING if self.duration_ms > self.slow_threshold_ms else logging.INFO

        self.logger.log(level, f"Completed {self.operation}", extra={
            'operation': self.operation,
            'duration_ms': self.duration_ms,
            'event_type': 'performance_end',
            'success': exc_type is None,
            **self.extra
        })


__all__ = [
    "LanternFormatter",
    "LoggerConfig",
    "PerformanceLogger",
    "get_logger",
    "setup_logging",
]
