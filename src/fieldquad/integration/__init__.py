"""
Univariate Quadrature over Arbitrary Fields

This package provides the integration engine and its rules. Integrands
map field elements to field elements, so the same code integrates real,
complex, dual (automatic differentiation) and arbitrary-precision
functions.

Available Integrators:
- FieldTrapezoidIntegrator: trapezoid rule with interval halving
"""

from .base import (
    BaseFieldIntegrator,
    IntegrationStats,
)
from .counter import Incrementor
from .exceptions import (
    QuadratureError,
    InvalidIterationCount,
    IterationCeilingExceeded,
    TooManyEvaluations,
    MaxIterationsReached,
)
from .trapezoid import FieldTrapezoidIntegrator
from .quadrature import trapezoid_integrate

__all__ = [
    # Base classes
    'BaseFieldIntegrator',
    'IntegrationStats',
    'Incrementor',
    # Integrators
    'FieldTrapezoidIntegrator',
    'trapezoid_integrate',
    # Exceptions
    'QuadratureError',
    'InvalidIterationCount',
    'IterationCeilingExceeded',
    'TooManyEvaluations',
    'MaxIterationsReached',
]
