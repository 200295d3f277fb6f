"""
Real and Complex Fields

Double-precision real and complex numbers wrapped as field elements.
"""

import cmath
import math
from dataclasses import dataclass
from numbers import Complex, Real
from typing import Any

import numpy as np

from .base import Field, FieldElement


class RealField(Field):
    """Field of double-precision real numbers."""

    @property
    def zero(self) -> 'RealNumber':
        return RealNumber(0.0)

    @property
    def one(self) -> 'RealNumber':
        return RealNumber(1.0)

    def element(self, value: Any) -> 'RealNumber':
        if isinstance(value, RealNumber):
            return value
        if isinstance(value, (bool, FieldElement)) or not isinstance(value, Real):
            raise TypeError(f"Cannot represent {value!r} as a real number")
        return RealNumber(float(value))

    def name(self) -> str:
        return "real"


@dataclass(frozen=True)
class RealNumber(FieldElement):
    """
    Real field element.

    Attributes:
        value: Underlying double
    """
    value: float

    @property
    def field(self) -> RealField:
        return _REAL_FIELD

    @property
    def real(self) -> float:
        return self.value

    def add(self, other) -> 'RealNumber':
        return RealNumber(self.value + self._coerce(other).value)

    def subtract(self, other) -> 'RealNumber':
        return RealNumber(self.value - self._coerce(other).value)

    def negate(self) -> 'RealNumber':
        return RealNumber(-self.value)

    def multiply(self, other) -> 'RealNumber':
        return RealNumber(self.value * self._coerce(other).value)

    def divide(self, other) -> 'RealNumber':
        return RealNumber(self.value / self._coerce(other).value)

    def reciprocal(self) -> 'RealNumber':
        return RealNumber(1.0 / self.value)

    def abs(self) -> 'RealNumber':
        return RealNumber(abs(self.value))

    def sqrt(self) -> 'RealNumber':
        return RealNumber(math.sqrt(self.value))

    def exp(self) -> 'RealNumber':
        return RealNumber(math.exp(self.value))

    def log(self) -> 'RealNumber':
        return RealNumber(math.log(self.value))

    def sin(self) -> 'RealNumber':
        return RealNumber(math.sin(self.value))

    def cos(self) -> 'RealNumber':
        return RealNumber(math.cos(self.value))

    def pow(self, exponent) -> 'RealNumber':
        if isinstance(exponent, FieldElement):
            exponent = self._coerce(exponent).value
        return RealNumber(float(np.power(self.value, exponent)))

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"RealNumber({self.value!r})"


class ComplexField(Field):
    """Field of double-precision complex numbers."""

    @property
    def zero(self) -> 'ComplexNumber':
        return ComplexNumber(0j)

    @property
    def one(self) -> 'ComplexNumber':
        return ComplexNumber(1 + 0j)

    def element(self, value: Any) -> 'ComplexNumber':
        if isinstance(value, ComplexNumber):
            return value
        if isinstance(value, RealNumber):
            return ComplexNumber(complex(value.value))
        if isinstance(value, (bool, FieldElement)) or not isinstance(value, Complex):
            raise TypeError(f"Cannot represent {value!r} as a complex number")
        return ComplexNumber(complex(value))

    def name(self) -> str:
        return "complex"


@dataclass(frozen=True)
class ComplexNumber(FieldElement):
    """
    Complex field element.

    The absolute value is the modulus, returned as a complex number with a
    zero imaginary part so that it stays in the field.

    Attributes:
        value: Underlying complex double
    """
    value: complex

    @property
    def field(self) -> ComplexField:
        return _COMPLEX_FIELD

    @property
    def real(self) -> float:
        return self.value.real

    @property
    def imag(self) -> float:
        return self.value.imag

    def add(self, other) -> 'ComplexNumber':
        return ComplexNumber(self.value + self._coerce(other).value)

    def subtract(self, other) -> 'ComplexNumber':
        return ComplexNumber(self.value - self._coerce(other).value)

    def negate(self) -> 'ComplexNumber':
        return ComplexNumber(-self.value)

    def multiply(self, other) -> 'ComplexNumber':
        return ComplexNumber(self.value * self._coerce(other).value)

    def divide(self, other) -> 'ComplexNumber':
        return ComplexNumber(self.value / self._coerce(other).value)

    def reciprocal(self) -> 'ComplexNumber':
        return ComplexNumber(1.0 / self.value)

    def abs(self) -> 'ComplexNumber':
        return ComplexNumber(complex(abs(self.value)))

    def conjugate(self) -> 'ComplexNumber':
        return ComplexNumber(self.value.conjugate())

    def sqrt(self) -> 'ComplexNumber':
        return ComplexNumber(cmath.sqrt(self.value))

    def exp(self) -> 'ComplexNumber':
        return ComplexNumber(cmath.exp(self.value))

    def log(self) -> 'ComplexNumber':
        return ComplexNumber(cmath.log(self.value))

    def sin(self) -> 'ComplexNumber':
        return ComplexNumber(cmath.sin(self.value))

    def cos(self) -> 'ComplexNumber':
        return ComplexNumber(cmath.cos(self.value))

    def __repr__(self) -> str:
        return f"ComplexNumber({self.value!r})"


_REAL_FIELD = RealField()
_COMPLEX_FIELD = ComplexField()
