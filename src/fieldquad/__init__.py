"""
fieldquad: adaptive quadrature over arbitrary number fields.

Integrates univariate functions whose arguments and values are real,
complex, dual or arbitrary-precision numbers, with a trapezoid rule that
halves its step until two successive estimates agree.
"""

from .field import (
    Field,
    FieldElement,
    RealField,
    ComplexField,
    DualField,
    MpfField,
    field_of,
)
from .integration import (
    FieldTrapezoidIntegrator,
    trapezoid_integrate,
    QuadratureError,
    InvalidIterationCount,
    IterationCeilingExceeded,
    TooManyEvaluations,
    MaxIterationsReached,
)

__version__ = "0.1.0"

__all__ = [
    'Field',
    'FieldElement',
    'RealField',
    'ComplexField',
    'DualField',
    'MpfField',
    'field_of',
    'FieldTrapezoidIntegrator',
    'trapezoid_integrate',
    'QuadratureError',
    'InvalidIterationCount',
    'IterationCeilingExceeded',
    'TooManyEvaluations',
    'MaxIterationsReached',
]
