"""
Base Classes for Field Elements

Provides the abstract capability every numeric type must offer before it
can be integrated: closed field arithmetic, an absolute value in the same
field, and a real projection used only for accuracy comparisons.

Concrete fields (real, complex, dual, arbitrary precision) implement the
primitive methods; the operator overloads and derived operations are
written once here against those primitives.
"""

from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Union


Scalar = Union[int, float]


class Field(ABC):
    """
    Abstract algebraic field.

    A field knows its identity elements and how to promote plain Python
    values into its own elements. Two field instances compare equal when
    they describe the same kind of number with the same parameters, so
    elements built from equal fields may be mixed freely.

    Subclasses must implement:
        - zero / one: identity elements
        - element(): promote a Python value
        - name(): human-readable field name
    """

    @property
    @abstractmethod
    def zero(self) -> 'FieldElement':
        """Additive identity."""
        pass

    @property
    @abstractmethod
    def one(self) -> 'FieldElement':
        """Multiplicative identity."""
        pass

    @abstractmethod
    def element(self, value: Any) -> 'FieldElement':
        """
        Promote a value into this field.

        Args:
            value: Python number or an element of this field

        Returns:
            Element of this field

        Raises:
            TypeError: If value cannot be represented in this field
        """
        pass

    @abstractmethod
    def name(self) -> str:
        """Return field name for logging."""
        pass

    def _key(self) -> tuple:
        return (self.__class__,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class FieldElement(ABC):
    """
    Abstract immutable element of a field.

    Every operation returns a new element; nothing is modified in place.
    Arguments to the arithmetic methods may be elements of the same field
    or plain Python numbers, which are promoted through the field.

    Subclasses must implement:
        - field: the owning Field
        - real: real projection (float)
        - add, subtract, negate, multiply, divide, reciprocal, abs
        - sqrt, exp, log, sin, cos

    float() is only defined by fields whose elements are plain reals.
    Complex and dual elements have no __float__, so math.* functions
    raise TypeError on them; use the element's own sqrt/exp/... methods.

    Example:
        x = RealField().element(2.0)
        y = (x * x - 1) / x        # operators map onto add/multiply/...
        assert y.real == 1.5
    """

    __slots__ = ()

    @property
    @abstractmethod
    def field(self) -> Field:
        """Field this element belongs to."""
        pass

    @property
    @abstractmethod
    def real(self) -> float:
        """
        Real projection.

        Identity for real numbers, real part for complex numbers, value
        part for dual numbers. Only used for accuracy comparisons.
        """
        pass

    @abstractmethod
    def add(self, other: Union['FieldElement', Scalar]) -> 'FieldElement':
        pass

    @abstractmethod
    def subtract(self, other: Union['FieldElement', Scalar]) -> 'FieldElement':
        pass

    @abstractmethod
    def negate(self) -> 'FieldElement':
        pass

    @abstractmethod
    def multiply(self, other: Union['FieldElement', Scalar]) -> 'FieldElement':
        """Multiply by a scalar or by another element of the same field."""
        pass

    @abstractmethod
    def divide(self, other: Union['FieldElement', Scalar]) -> 'FieldElement':
        pass

    @abstractmethod
    def reciprocal(self) -> 'FieldElement':
        pass

    @abstractmethod
    def abs(self) -> 'FieldElement':
        """Absolute value, as an element of the same field."""
        pass

    @abstractmethod
    def sqrt(self) -> 'FieldElement':
        pass

    @abstractmethod
    def exp(self) -> 'FieldElement':
        pass

    @abstractmethod
    def log(self) -> 'FieldElement':
        pass

    @abstractmethod
    def sin(self) -> 'FieldElement':
        pass

    @abstractmethod
    def cos(self) -> 'FieldElement':
        pass

    def pow(self, exponent: Union['FieldElement', Scalar]) -> 'FieldElement':
        """
        Raise to a power.

        Non-negative integer exponents use repeated squaring so they stay
        exact for every field; anything else goes through exp(p * log(x)).

        Args:
            exponent: Integer, float or element of the same field

        Returns:
            self ** exponent
        """
        if isinstance(exponent, int) and not isinstance(exponent, bool):
            if exponent < 0:
                return self.pow(-exponent).reciprocal()
            result = self.field.one
            base = self
            while exponent:
                if exponent & 1:
                    result = result.multiply(base)
                base = base.multiply(base)
                exponent >>= 1
            return result
        return self.log().multiply(exponent).exp()

    def _coerce(self, other: Any) -> 'FieldElement':
        """
        Promote other into this element's field.

        Uses the same rule as promoting integrand results: whatever
        self.field.element() accepts (plain numbers, and real elements
        for the complex field) is promoted, anything else is rejected.

        Raises:
            TypeError: If other cannot be represented in this field
        """
        if isinstance(other, FieldElement) and other.field == self.field:
            return other
        return self.field.element(other)

    # Operator overloads

    def __add__(self, other):
        if not isinstance(other, (FieldElement, Number)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (FieldElement, Number)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.field.element(other).subtract(self)

    def __mul__(self, other):
        if not isinstance(other, (FieldElement, Number)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (FieldElement, Number)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.field.element(other).divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, (FieldElement, Number)):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()
