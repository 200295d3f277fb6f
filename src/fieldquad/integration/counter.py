"""
Bounded Counters

A monotonic counter with a ceiling. The integrator keeps one for
objective-function evaluations and one for refinement iterations; the
only difference between them is the exception raised on overflow.
"""

from typing import Callable

from .exceptions import QuadratureError


class Incrementor:
    """
    Counter that refuses to pass its maximal count.

    increment() checks the ceiling before changing anything, so a caller
    that increments before doing work never does work past the budget.

    Attributes:
        maximal_count: Largest count allowed
        count: Current count

    Example:
        evaluations = Incrementor(100, TooManyEvaluations)
        evaluations.increment()     # raises once 100 is reached
        value = f(x)
    """

    def __init__(
        self,
        maximal_count: int,
        overflow: Callable[[int], QuadratureError],
    ):
        """
        Initialize counter.

        Args:
            maximal_count: Ceiling (inclusive)
            overflow: Exception factory called with maximal_count when the
                      ceiling would be exceeded

        Raises:
            ValueError: If maximal_count is negative
        """
        if maximal_count < 0:
            raise ValueError(f"Maximal count must be non-negative, got {maximal_count}")
        self._maximal_count = maximal_count
        self._overflow = overflow
        self._count = 0

    @property
    def maximal_count(self) -> int:
        return self._maximal_count

    @property
    def count(self) -> int:
        return self._count

    def can_increment(self, n: int = 1) -> bool:
        """Check whether n more increments fit under the ceiling."""
        return self._count <= self._maximal_count - n

    def increment(self, n: int = 1) -> None:
        """
        Add n to the count.

        Raises:
            QuadratureError: Overflow exception when the ceiling would be exceeded
        """
        if not self.can_increment(n):
            raise self._overflow(self._maximal_count)
        self._count += n

    def reset(self) -> None:
        """Zero the count, keeping the ceiling."""
        self._count = 0

    def with_maximal_count(self, maximal_count: int) -> 'Incrementor':
        """Return a fresh counter with another ceiling and the same overflow."""
        return Incrementor(maximal_count, self._overflow)

    def __repr__(self) -> str:
        return f"Incrementor(count={self._count}, max={self._maximal_count})"
