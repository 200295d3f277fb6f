"""
Arbitrary-Precision Real Field

Wraps mpmath multiprecision floats. Each MpfField owns a private mpmath
context, so the working precision of one field never leaks into another
or into the global mpmath.mp context.
"""

from typing import Any

import mpmath

from .base import Field, FieldElement


class MpfField(Field):
    """
    Field of mpmath real numbers at a fixed decimal precision.

    Attributes:
        dps: Decimal digits of working precision
        ctx: Private mpmath context
    """

    def __init__(self, dps: int = 50):
        """
        Initialize arbitrary-precision field.

        Args:
            dps: Decimal digits of precision

        Raises:
            ValueError: If dps is not positive
        """
        if dps < 1:
            raise ValueError(f"Precision must be at least one digit, got {dps}")
        self.dps = int(dps)
        self.ctx = mpmath.MPContext()
        self.ctx.dps = self.dps

    @property
    def zero(self) -> 'MpfNumber':
        return MpfNumber(self, self.ctx.mpf(0))

    @property
    def one(self) -> 'MpfNumber':
        return MpfNumber(self, self.ctx.mpf(1))

    def element(self, value: Any) -> 'MpfNumber':
        if isinstance(value, MpfNumber):
            if value.field != self:
                raise TypeError(
                    f"mpf number at {value.field.dps} digits does not belong to {self.name()}"
                )
            return value
        if isinstance(value, (bool, complex, FieldElement)):
            raise TypeError(f"Cannot represent {value!r} as an mpf number")
        try:
            return MpfNumber(self, self.ctx.mpf(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot represent {value!r} as an mpf number") from e

    def name(self) -> str:
        return f"mpf({self.dps})"

    def _key(self) -> tuple:
        return (self.__class__, self.dps)

    def __repr__(self) -> str:
        return f"MpfField(dps={self.dps})"


class MpfNumber(FieldElement):
    """
    Arbitrary-precision real element.

    Attributes:
        value: mpmath mpf bound to the owning field's context
    """

    __slots__ = ('_field', 'value')

    def __init__(self, field: MpfField, value):
        object.__setattr__(self, '_field', field)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def field(self) -> MpfField:
        return self._field

    @property
    def real(self) -> float:
        return float(self.value)

    def _new(self, value) -> 'MpfNumber':
        return MpfNumber(self._field, value)

    def _operand(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._field.ctx.mpf(other)
        return self._coerce(other).value

    def add(self, other) -> 'MpfNumber':
        return self._new(self.value + self._operand(other))

    def subtract(self, other) -> 'MpfNumber':
        return self._new(self.value - self._operand(other))

    def negate(self) -> 'MpfNumber':
        return self._new(-self.value)

    def multiply(self, other) -> 'MpfNumber':
        return self._new(self.value * self._operand(other))

    def divide(self, other) -> 'MpfNumber':
        return self._new(self.value / self._operand(other))

    def reciprocal(self) -> 'MpfNumber':
        return self._new(1 / self.value)

    def abs(self) -> 'MpfNumber':
        return self._new(self._field.ctx.fabs(self.value))

    def sqrt(self) -> 'MpfNumber':
        return self._new(self._field.ctx.sqrt(self.value))

    def exp(self) -> 'MpfNumber':
        return self._new(self._field.ctx.exp(self.value))

    def log(self) -> 'MpfNumber':
        return self._new(self._field.ctx.log(self.value))

    def sin(self) -> 'MpfNumber':
        return self._new(self._field.ctx.sin(self.value))

    def cos(self) -> 'MpfNumber':
        return self._new(self._field.ctx.cos(self.value))

    def pow(self, exponent) -> 'MpfNumber':
        return self._new(self._field.ctx.power(self.value, self._operand(exponent)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MpfNumber):
            return NotImplemented
        return self._field == other._field and self.value == other.value

    def __hash__(self) -> int:
        return hash((self._field, self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"MpfNumber({self._field.ctx.nstr(self.value, 20)!s}, dps={self._field.dps})"
