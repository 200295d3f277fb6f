"""
Field Element Capability

Numeric types the quadrature engine can integrate. The engine is written
against FieldElement only; each concrete field supplies the arithmetic.

Available Fields:
- RealField: double-precision reals
- ComplexField: double-precision complex numbers
- DualField: first-order dual numbers (automatic differentiation)
- MpfField: mpmath arbitrary-precision reals
"""

from numbers import Complex, Real
from typing import Any

import mpmath

from .base import Field, FieldElement
from .real import RealField, RealNumber, ComplexField, ComplexNumber
from .dual import DualField, DualNumber
from .mpf import MpfField, MpfNumber


def field_of(value: Any) -> Field:
    """
    Infer the field a value belongs to.

    Args:
        value: Field element or plain number. int and float map to the
               real field, complex to the complex field, and an mpmath mpf
               to an MpfField at the current global mpmath precision.

    Returns:
        Field instance

    Raises:
        TypeError: If no field can represent value
    """
    if isinstance(value, FieldElement):
        return value.field
    if isinstance(value, mpmath.mpf):
        return MpfField(mpmath.mp.dps)
    if isinstance(value, bool):
        raise TypeError("Booleans are not field elements")
    if isinstance(value, Real):
        return RealField()
    if isinstance(value, Complex):
        return ComplexField()
    raise TypeError(f"Cannot infer a field for {type(value).__name__}")


__all__ = [
    # Base classes
    'Field',
    'FieldElement',
    # Fields
    'RealField',
    'RealNumber',
    'ComplexField',
    'ComplexNumber',
    'DualField',
    'DualNumber',
    'MpfField',
    'MpfNumber',
    # Helpers
    'field_of',
]
