"""
Dual Number Field for Automatic Differentiation

A dual number carries a value together with its gradient with respect to
a fixed number of free parameters. Arithmetic applies the chain rule, so
integrating a function of dual numbers yields both the integral and its
first-order derivatives with respect to the parameters:

    x = DualField(1).variable(2.0, 0)     # value 2, d/dp = 1
    y = x * x                             # value 4, d/dp = 4
"""

import math
from functools import lru_cache
from numbers import Real
from typing import Any, Sequence

import numpy as np

from .base import Field, FieldElement


class DualField(Field):
    """
    Field of first-order dual numbers over `parameters` free parameters.

    Attributes:
        parameters: Length of the gradient vector
    """

    def __init__(self, parameters: int = 1):
        """
        Initialize dual field.

        Args:
            parameters: Number of free parameters (gradient length)

        Raises:
            ValueError: If parameters is not positive
        """
        if parameters < 1:
            raise ValueError(f"Dual field needs at least one parameter, got {parameters}")
        self.parameters = int(parameters)

    @property
    def zero(self) -> 'DualNumber':
        return self.constant(0.0)

    @property
    def one(self) -> 'DualNumber':
        return self.constant(1.0)

    def constant(self, value: float) -> 'DualNumber':
        """Build an element with a zero gradient."""
        return DualNumber(float(value), np.zeros(self.parameters))

    def variable(self, value: float, index: int) -> 'DualNumber':
        """
        Build an independent variable.

        Args:
            value: Value of the parameter
            index: Which parameter this is (0-based)

        Returns:
            Element whose gradient is the unit vector along index
        """
        if not 0 <= index < self.parameters:
            raise IndexError(f"Parameter index {index} out of range [0, {self.parameters})")
        gradient = np.zeros(self.parameters)
        gradient[index] = 1.0
        return DualNumber(float(value), gradient)

    def element(self, value: Any) -> 'DualNumber':
        if isinstance(value, DualNumber):
            if value.gradient.size != self.parameters:
                raise TypeError(
                    f"Dual number with {value.gradient.size} parameters does not "
                    f"belong to {self.name()}"
                )
            return value
        if isinstance(value, (bool, FieldElement)) or not isinstance(value, Real):
            raise TypeError(f"Cannot represent {value!r} as a dual number")
        return self.constant(float(value))

    def name(self) -> str:
        return f"dual({self.parameters})"

    def _key(self) -> tuple:
        return (self.__class__, self.parameters)

    def __repr__(self) -> str:
        return f"DualField(parameters={self.parameters})"


class DualNumber(FieldElement):
    """
    Dual number: value plus gradient.

    The gradient array is copied and made read-only on construction so
    the element is immutable.

    Attributes:
        value: Function value
        gradient: First derivatives with respect to each parameter
    """

    __slots__ = ('value', 'gradient')

    def __init__(self, value: float, gradient: Sequence[float]):
        grad = np.array(gradient, dtype=float)
        grad.setflags(write=False)
        object.__setattr__(self, 'value', float(value))
        object.__setattr__(self, 'gradient', grad)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def field(self) -> DualField:
        return _dual_field(self.gradient.size)

    @property
    def real(self) -> float:
        return self.value

    def derivative(self, index: int = 0) -> float:
        """Return the derivative with respect to parameter index."""
        return float(self.gradient[index])

    def _chain(self, value: float, slope: float) -> 'DualNumber':
        # f(x) with f'(x) = slope
        return DualNumber(value, slope * self.gradient)

    def add(self, other) -> 'DualNumber':
        o = self._coerce(other)
        return DualNumber(self.value + o.value, self.gradient + o.gradient)

    def subtract(self, other) -> 'DualNumber':
        o = self._coerce(other)
        return DualNumber(self.value - o.value, self.gradient - o.gradient)

    def negate(self) -> 'DualNumber':
        return DualNumber(-self.value, -self.gradient)

    def multiply(self, other) -> 'DualNumber':
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return DualNumber(self.value * other, self.gradient * other)
        o = self._coerce(other)
        return DualNumber(
            self.value * o.value,
            self.value * o.gradient + o.value * self.gradient,
        )

    def divide(self, other) -> 'DualNumber':
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return DualNumber(self.value / other, self.gradient / other)
        o = self._coerce(other)
        return DualNumber(
            self.value / o.value,
            (self.gradient * o.value - self.value * o.gradient) / (o.value * o.value),
        )

    def reciprocal(self) -> 'DualNumber':
        inv = 1.0 / self.value
        return self._chain(inv, -inv * inv)

    def abs(self) -> 'DualNumber':
        # sign bit test so that -0.0 flips too
        if math.copysign(1.0, self.value) < 0:
            return self.negate()
        return self

    def sqrt(self) -> 'DualNumber':
        root = math.sqrt(self.value)
        return self._chain(root, 0.5 / root)

    def exp(self) -> 'DualNumber':
        e = math.exp(self.value)
        return self._chain(e, e)

    def log(self) -> 'DualNumber':
        return self._chain(math.log(self.value), 1.0 / self.value)

    def sin(self) -> 'DualNumber':
        return self._chain(math.sin(self.value), math.cos(self.value))

    def cos(self) -> 'DualNumber':
        return self._chain(math.cos(self.value), -math.sin(self.value))

    def pow(self, exponent) -> 'DualNumber':
        if isinstance(exponent, (int, float)) and not isinstance(exponent, bool):
            if exponent == 0:
                return self.field.one
            p = float(exponent)
            return self._chain(self.value ** p, p * self.value ** (p - 1.0))
        return super().pow(exponent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DualNumber):
            return NotImplemented
        return self.value == other.value and np.array_equal(self.gradient, other.gradient)

    def __hash__(self) -> int:
        return hash((self.value, self.gradient.tobytes()))

    def __repr__(self) -> str:
        return f"DualNumber(value={self.value!r}, gradient={self.gradient.tolist()!r})"


@lru_cache(maxsize=None)
def _dual_field(parameters: int) -> DualField:
    # one shared field per gradient size
    return DualField(parameters)
