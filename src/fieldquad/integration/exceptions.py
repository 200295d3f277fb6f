"""
Quadrature Exceptions

Construction-time misconfiguration raises ValueError subclasses; budget
exhaustion during an integration raises RuntimeError subclasses. Every
exception carries the offending count and the limit it broke.
"""


class QuadratureError(Exception):
    """Base class for all quadrature errors."""


class InvalidIterationCount(QuadratureError, ValueError):
    """
    Minimal iteration count not positive, or maximal count not above it.

    Attributes:
        count: Offending iteration count
        bound: Bound the count had to exceed
    """

    def __init__(self, count: int, bound: int):
        self.count = count
        self.bound = bound
        super().__init__(f"iteration count {count} must be greater than {bound}")


class IterationCeilingExceeded(QuadratureError, ValueError):
    """
    Maximal iteration count above the rule's structural ceiling.

    Attributes:
        count: Requested maximal iteration count
        ceiling: Rule ceiling
    """

    def __init__(self, count: int, ceiling: int):
        self.count = count
        self.ceiling = ceiling
        super().__init__(f"maximal iteration count {count} exceeds ceiling {ceiling}")


class TooManyEvaluations(QuadratureError, RuntimeError):
    """
    Evaluation budget exhausted before convergence.

    Attributes:
        max_evaluations: Budget that was exhausted
    """

    def __init__(self, max_evaluations: int):
        self.max_evaluations = max_evaluations
        super().__init__(f"maximal count ({max_evaluations}) of function evaluations exceeded")


class MaxIterationsReached(QuadratureError, RuntimeError):
    """
    Iteration ceiling reached without meeting the accuracy target.

    Attributes:
        max_iterations: Maximal iteration count that was reached
    """

    def __init__(self, max_iterations: int):
        self.max_iterations = max_iterations
        super().__init__(f"maximal count ({max_iterations}) of iterations exceeded")
