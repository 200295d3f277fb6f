"""
Unit Tests for the one-call trapezoid_integrate() helper
"""

import math

import pytest
import mpmath

from fieldquad import trapezoid_integrate
from fieldquad.common.config import AccuracyConfig, FieldConfig, QuadratureConfig
from fieldquad.field import ComplexNumber, DualField, MpfNumber, RealField, RealNumber
from fieldquad.integration import TooManyEvaluations


@pytest.fixture
def config():
    return QuadratureConfig(accuracy=AccuracyConfig(relative_accuracy=1e-8))


class TestTrapezoidIntegrate:
    """Tests for field inference and configuration defaults"""

    def test_real_inferred(self, config):
        """Test float bounds integrate in the real field"""
        result = trapezoid_integrate(lambda x: x * x, 0.0, 1.0, config=config)

        assert isinstance(result, RealNumber)
        assert result.real == pytest.approx(1.0 / 3.0, rel=1e-7)

    def test_complex_inferred(self, config):
        """Test complex bounds integrate in the complex field"""
        result = trapezoid_integrate(lambda z: z, 0j, 2j, config=config)

        assert isinstance(result, ComplexNumber)
        assert result.value == pytest.approx(-2 + 0j)

    def test_mpf_inferred(self, config):
        """Test mpmath bounds integrate in an mpf field"""
        result = trapezoid_integrate(lambda x: x, mpmath.mpf(0), mpmath.mpf(1), config=config)

        assert isinstance(result, MpfNumber)
        assert result.real == 0.5

    def test_explicit_field(self, config):
        """Test an explicit field overrides inference"""
        field = DualField(1)
        a = field.variable(1.0, 0)
        result = trapezoid_integrate(lambda x: (a * x).sin(), 0.0, math.pi, field=field,
                                     config=config)

        # integral of sin(a x) on [0, pi] is (1 - cos(a pi)) / a
        assert result.value == pytest.approx(2.0, rel=1e-7)
        # derivative at a = 1: pi sin(pi) - (1 - cos(pi)) = -2
        assert result.derivative() == pytest.approx(-2.0, rel=1e-6)

    def test_numeric_section_for_real_bounds(self):
        """Test plain real bounds integrate in the configured field"""
        config = QuadratureConfig(numeric=FieldConfig(kind="mpf", dps=40))
        result = trapezoid_integrate(lambda x: x, 0, 1, config=config)

        assert isinstance(result, MpfNumber)
        assert result.field.dps == 40
        assert result.real == 0.5

    def test_numeric_section_complex(self):
        """Test a complex numeric section with real bounds"""
        config = QuadratureConfig(numeric=FieldConfig(kind="complex"))
        result = trapezoid_integrate(lambda z: z * 1j, 0.0, 2.0, config=config)

        assert isinstance(result, ComplexNumber)
        assert result.value == pytest.approx(2j)

    def test_element_bounds_override_numeric_section(self):
        """Test element bounds keep their own field"""
        config = QuadratureConfig(numeric=FieldConfig(kind="mpf"))
        result = trapezoid_integrate(lambda x: x, RealField().zero, RealField().one,
                                     config=config)

        assert isinstance(result, RealNumber)

    def test_explicit_field_overrides_numeric_section(self):
        """Test an explicit field wins over the numeric section"""
        config = QuadratureConfig(numeric=FieldConfig(kind="complex"))
        result = trapezoid_integrate(lambda x: x, 0.0, 1.0, field=RealField(), config=config)

        assert isinstance(result, RealNumber)

    def test_budget_from_config(self):
        """Test max_evaluations defaults to the configured budget"""
        config = QuadratureConfig(accuracy=AccuracyConfig(max_evaluations=8))
        with pytest.raises(TooManyEvaluations) as excinfo:
            trapezoid_integrate(lambda x: x, 0.0, 1.0, config=config)
        assert excinfo.value.max_evaluations == 8

    def test_budget_override(self, config):
        """Test an explicit budget overrides the configuration"""
        with pytest.raises(TooManyEvaluations):
            trapezoid_integrate(lambda x: x * x, 0.0, 1.0, config=config, max_evaluations=16)

    def test_default_config(self, tmp_path, monkeypatch):
        """Test get_config() is used when no config is passed"""
        monkeypatch.delenv('FIELDQUAD_CONFIG', raising=False)
        monkeypatch.chdir(tmp_path)

        result = trapezoid_integrate(lambda x: x.exp(), 0.0, 1.0)

        assert result.real == pytest.approx(math.e - 1.0, rel=1e-6)
