"""
Centralized Logging Configuration for fieldquad

This module provides structured logging with JSON formatting
for easy aggregation and analysis of integration runs.
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path

from .config import LoggingConfig


# Extra fields copied into JSON records when present
_EXTRA_FIELDS = ('integrator', 'field', 'stage', 'estimate', 'evaluations')


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + 'Z'


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record

        Returns:
            JSON string
        """
        log_data = {
            'timestamp': _utc_timestamp(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add extra fields if present
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        # Add exception info if present
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


_TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _formatter(json_format: bool) -> logging.Formatter:
    return JSONFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)


def setup_logging(
    name: str = "fieldquad",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = True
) -> logging.Logger:
    """
    Attach stdout (and optionally file) handlers to a package logger

    Calling this twice for the same name replaces the handlers instead
    of stacking them.

    Args:
        name: Logger name (e.g., 'fieldquad', 'fieldquad.integration')
        log_level: Level name, case-insensitive (DEBUG ... CRITICAL)
        log_file: Optional log file path; parent directories are created
        json_format: One JSON object per line (True) or plain text (False)

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper())
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(_formatter(json_format))
        logger.addHandler(handler)

    return logger


def configure_logging(config: LoggingConfig, name: str = "fieldquad") -> logging.Logger:
    """Set up the package logger from the ``logging`` config section"""
    return setup_logging(
        name=name,
        log_level=config.level,
        log_file=config.log_file,
        json_format=config.json_format,
    )


class MetricsLogger:
    """
    Log integration metrics as JSON lines, one metric per record
    """

    def __init__(self, name: str = "fieldquad"):
        """
        Initialize metrics logger

        Args:
            name: Parent logger name; metrics go to '<name>.metrics'
        """
        self.logger = logging.getLogger(f"{name}.metrics")

    def log_metric(self, metric_name: str, value: float, labels: Dict[str, str] = None):
        """
        Log a metric value

        Args:
            metric_name: Name of the metric
            value: Metric value
            labels: Optional metric labels
        """
        metric_data: Dict[str, Any] = {
            'metric': metric_name,
            'value': value,
            'timestamp': _utc_timestamp()
        }

        if labels:
            metric_data['labels'] = labels

        self.logger.info(json.dumps(metric_data))

    def log_counter(self, name: str, increment: int = 1, labels: Dict[str, str] = None):
        """Log a counter increment"""
        self.log_metric(f"{name}_total", increment, labels)

    def log_gauge(self, name: str, value: float, labels: Dict[str, str] = None):
        """Log a gauge value"""
        self.log_metric(name, value, labels)
