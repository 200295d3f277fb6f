"""
Shared configuration and logging.
"""

from .config import AccuracyConfig, FieldConfig, LoggingConfig, QuadratureConfig, get_config
from .logging_config import JSONFormatter, MetricsLogger, configure_logging, setup_logging

__all__ = [
    'AccuracyConfig',
    'FieldConfig',
    'LoggingConfig',
    'QuadratureConfig',
    'get_config',
    'JSONFormatter',
    'MetricsLogger',
    'configure_logging',
    'setup_logging',
]
