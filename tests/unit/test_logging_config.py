"""
Unit Tests for Logging Configuration

Tests cover:
- JSON formatting of records and extra fields
- setup_logging() handlers
- MetricsLogger output
- Integrator log records and metrics
"""

import json
import sys
import logging

import pytest

from fieldquad.common.config import LoggingConfig
from fieldquad.common.logging_config import (
    JSONFormatter, MetricsLogger, configure_logging, setup_logging
)
from fieldquad.field import RealField
from fieldquad.integration import FieldTrapezoidIntegrator, TooManyEvaluations


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name='fieldquad.test', level=logging.INFO, pathname=__file__, lineno=10,
        msg='stage %d done', args=(2,), exc_info=None, func='run',
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test structured log formatting"""

    def test_basic_fields(self):
        """Test standard fields are present"""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data['level'] == 'INFO'
        assert data['logger'] == 'fieldquad.test'
        assert data['message'] == 'stage 2 done'
        assert data['function'] == 'run'
        assert data['line'] == 10
        assert data['timestamp'].endswith('Z')

    def test_extra_fields(self):
        """Test integration extras are copied"""
        record = make_record(integrator='Trapezoid', stage=4, estimate=0.25)
        data = json.loads(JSONFormatter().format(record))

        assert data['integrator'] == 'Trapezoid'
        assert data['stage'] == 4
        assert data['estimate'] == 0.25

    def test_exception_info(self):
        """Test exception text is included"""
        try:
            raise TooManyEvaluations(10)
        except TooManyEvaluations:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert 'TooManyEvaluations' in data['exception']


class TestSetupLogging:
    """Test logger setup"""

    def test_console_only(self):
        """Test a single stdout handler"""
        logger = setup_logging('fieldquad.test_console', log_level='debug')

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_replaces_handlers(self):
        """Test handlers do not accumulate"""
        setup_logging('fieldquad.test_repeat')
        logger = setup_logging('fieldquad.test_repeat', json_format=False)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_file_handler(self, tmp_path):
        """Test JSON lines are written to the log file"""
        log_file = tmp_path / 'logs' / 'fieldquad.log'
        logger = setup_logging('fieldquad.test_file', log_file=str(log_file))

        logger.info('hello')
        for handler in logger.handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        assert json.loads(lines[-1])['message'] == 'hello'

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_configure_from_config(self):
        """Test the logging config section drives setup"""
        config = LoggingConfig(level="WARNING", json_format=False)
        logger = configure_logging(config, name='fieldquad.test_configured')

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)


class TestMetricsLogger:
    """Test metric records"""

    def test_counter(self, caplog):
        """Test counters get a _total suffix"""
        metrics = MetricsLogger('fieldquad.test')
        with caplog.at_level(logging.INFO, logger='fieldquad.test.metrics'):
            metrics.log_counter('evals', 17, labels={'integrator': 'Trapezoid'})

        data = json.loads(caplog.records[-1].getMessage())
        assert data['metric'] == 'evals_total'
        assert data['value'] == 17
        assert data['labels'] == {'integrator': 'Trapezoid'}

    def test_gauge(self, caplog):
        """Test gauges keep their name"""
        metrics = MetricsLogger('fieldquad.test')
        with caplog.at_level(logging.INFO, logger='fieldquad.test.metrics'):
            metrics.log_gauge('iterations', 5)

        data = json.loads(caplog.records[-1].getMessage())
        assert data['metric'] == 'iterations'
        assert 'labels' not in data


class TestIntegratorLogging:
    """Test log output of an integration"""

    def test_stage_debug_records(self, caplog):
        """Test one debug record per stage"""
        integrator = FieldTrapezoidIntegrator(
            RealField(), relative_accuracy=1.0, minimal_iteration_count=2, maximal_iteration_count=3
        )
        with caplog.at_level(logging.DEBUG, logger='fieldquad.integration.base'):
            integrator.integrate(100, lambda x: x * x, 0.0, 1.0)

        stages = [r.stage for r in caplog.records if hasattr(r, 'stage')]
        assert stages == [0, 1, 2]

    def test_failure_warning(self, caplog):
        """Test budget failures are logged before propagating"""
        integrator = FieldTrapezoidIntegrator(RealField())
        with caplog.at_level(logging.WARNING, logger='fieldquad.integration.base'):
            with pytest.raises(TooManyEvaluations):
                integrator.integrate(4, lambda x: x, 0.0, 1.0)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].evaluations == 4

    def test_metrics_after_success(self, caplog):
        """Test evaluation and iteration metrics are emitted"""
        integrator = FieldTrapezoidIntegrator(
            RealField(), minimal_iteration_count=1, maximal_iteration_count=5,
            metrics=MetricsLogger('fieldquad'),
        )
        with caplog.at_level(logging.INFO, logger='fieldquad.metrics'):
            integrator.integrate(100, lambda x: RealField().one, 0.0, 1.0)

        metrics = [json.loads(r.getMessage()) for r in caplog.records
                   if r.name == 'fieldquad.metrics']
        by_name = {m['metric']: m for m in metrics}
        assert by_name['quadrature_evaluations_total']['value'] == 3
        assert by_name['quadrature_iterations']['value'] == 1
        assert by_name['quadrature_iterations']['labels']['field'] == 'real'
