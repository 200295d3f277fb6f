"""
Base Classes for Univariate Field Integrators

Provides the abstract integration engine shared by every quadrature rule.
The engine owns the interval bounds, the accuracy policy, the evaluation
and iteration counters, and the statistics of the last call. Concrete
rules only implement do_integrate(), calling compute_objective_value()
whenever they need the integrand.

Life cycle of one integrate() call:
    bounds recorded, counters reset
        -> do_integrate() refines stage by stage
        -> converged result returned, or
           TooManyEvaluations / MaxIterationsReached raised
"""

import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from ..common.config import AccuracyConfig
from ..common.logging_config import MetricsLogger
from ..field import Field, FieldElement
from .counter import Incrementor
from .exceptions import (
    InvalidIterationCount,
    IterationCeilingExceeded,
    MaxIterationsReached,
    TooManyEvaluations,
)

logger = logging.getLogger(__name__)


@dataclass
class IntegrationStats:
    """
    Statistics for the last integrate() call.

    Attributes:
        evaluations: Objective-function calls made
        iterations: Refinement iterations completed
        stage_estimates: Real projection of each stage estimate, in order
        converged: Whether the accuracy target was met
    """
    evaluations: int = 0
    iterations: int = 0
    stage_estimates: List[float] = field(default_factory=list)
    converged: bool = False

    def record_stage(self, estimate: float) -> None:
        """Append a stage estimate."""
        self.stage_estimates.append(estimate)

    @property
    def stages(self) -> int:
        """Number of stages computed."""
        return len(self.stage_estimates)

    def __repr__(self) -> str:
        last = self.stage_estimates[-1] if self.stage_estimates else float('nan')
        return (f"IntegrationStats(evals={self.evaluations}, "
                f"iterations={self.iterations}, "
                f"stages={self.stages}, "
                f"last={last:.6e}, "
                f"converged={self.converged})")


class BaseFieldIntegrator(ABC):
    """
    Abstract base class for univariate integrators over any field.

    Subclasses must implement:
        - do_integrate(): Refine until converged and return the result
        - name(): Return integrator name for logging

    Subclasses with a structural limit on refinement set
    MAX_ITERATIONS_CEILING; constructing with a larger maximal iteration
    count then raises IterationCeilingExceeded.

    Instances keep per-call state and must not be shared between
    concurrent integrations; use one instance per thread.

    Attributes:
        field: Field of the bounds and function values
        relative_accuracy: Relative accuracy target
        absolute_accuracy: Absolute accuracy target
        minimal_iteration_count: Iterations before convergence is tested
        maximal_iteration_count: Iterations allowed before giving up
        metrics: Optional metrics sink, fed after each successful call
        stats: Statistics of the last call
    """

    DEFAULT_RELATIVE_ACCURACY = 1.0e-6
    DEFAULT_ABSOLUTE_ACCURACY = 1.0e-15
    DEFAULT_MIN_ITERATIONS_COUNT = 3
    DEFAULT_MAX_ITERATIONS_COUNT = sys.maxsize
    DEFAULT_MAX_EVALUATIONS_COUNT = sys.maxsize

    MAX_ITERATIONS_CEILING: Optional[int] = None

    def __init__(
        self,
        field: Field,
        *,
        relative_accuracy: float = DEFAULT_RELATIVE_ACCURACY,
        absolute_accuracy: float = DEFAULT_ABSOLUTE_ACCURACY,
        minimal_iteration_count: int = DEFAULT_MIN_ITERATIONS_COUNT,
        maximal_iteration_count: Optional[int] = None,
        metrics: Optional[MetricsLogger] = None,
    ):
        """
        Initialize integrator.

        Everything after field is keyword-only, so an iteration-count
        form such as (field, minimal_iteration_count=2,
        maximal_iteration_count=10) cannot bind counts to accuracies.

        Args:
            field: Field to which bounds and function values belong
            relative_accuracy: Relative accuracy of the result
            absolute_accuracy: Absolute accuracy of the result
            minimal_iteration_count: Minimum number of iterations
            maximal_iteration_count: Maximum number of iterations
                                    (defaults to the rule ceiling)
            metrics: Optional metrics logger

        Raises:
            InvalidIterationCount: If minimal count is not positive, or
                                   maximal count is not above minimal
            IterationCeilingExceeded: If maximal count is above the rule ceiling
        """
        if maximal_iteration_count is None:
            maximal_iteration_count = (self.MAX_ITERATIONS_CEILING
                                       or self.DEFAULT_MAX_ITERATIONS_COUNT)

        if minimal_iteration_count <= 0:
            raise InvalidIterationCount(minimal_iteration_count, 0)
        if maximal_iteration_count <= minimal_iteration_count:
            raise InvalidIterationCount(maximal_iteration_count, minimal_iteration_count)
        ceiling = self.MAX_ITERATIONS_CEILING
        if ceiling is not None and maximal_iteration_count > ceiling:
            raise IterationCeilingExceeded(maximal_iteration_count, ceiling)

        self._field = field
        self._relative_accuracy = float(relative_accuracy)
        self._absolute_accuracy = float(absolute_accuracy)
        self._minimal_iteration_count = int(minimal_iteration_count)
        self._maximal_iteration_count = int(maximal_iteration_count)
        self.metrics = metrics

        self._iterations = Incrementor(self._maximal_iteration_count, MaxIterationsReached)
        self._evaluations = Incrementor(self.DEFAULT_MAX_EVALUATIONS_COUNT, TooManyEvaluations)

        self._function: Optional[Callable[[FieldElement], Any]] = None
        self._lower: Optional[FieldElement] = None
        self._upper: Optional[FieldElement] = None
        self.stats = IntegrationStats()

    @classmethod
    def from_config(
        cls,
        field: Field,
        accuracy: AccuracyConfig,
        metrics: Optional[MetricsLogger] = None,
    ) -> 'BaseFieldIntegrator':
        """
        Build an integrator from an AccuracyConfig.

        The config's max_evaluations is a per-call budget and is not
        consumed here; pass it to integrate().
        """
        return cls(
            field,
            relative_accuracy=accuracy.relative_accuracy,
            absolute_accuracy=accuracy.absolute_accuracy,
            minimal_iteration_count=accuracy.minimal_iteration_count,
            maximal_iteration_count=accuracy.maximal_iteration_count,
            metrics=metrics,
        )

    @property
    def field(self) -> Field:
        return self._field

    @property
    def relative_accuracy(self) -> float:
        return self._relative_accuracy

    @property
    def absolute_accuracy(self) -> float:
        return self._absolute_accuracy

    @property
    def minimal_iteration_count(self) -> int:
        return self._minimal_iteration_count

    @property
    def maximal_iteration_count(self) -> int:
        return self._maximal_iteration_count

    @property
    def evaluations(self) -> int:
        """Objective-function calls made by the last integrate()."""
        return self._evaluations.count

    @property
    def iterations(self) -> int:
        """Iterations performed by the last integrate()."""
        return self._iterations.count

    @property
    def lower(self) -> FieldElement:
        """Lower bound of the current interval."""
        return self._lower

    @property
    def upper(self) -> FieldElement:
        """Upper bound of the current interval."""
        return self._upper

    def compute_objective_value(self, x: FieldElement) -> FieldElement:
        """
        Evaluate the integrand at x.

        This is the only path from a rule to the user function, so the
        evaluation budget holds whatever the rule does. Plain Python
        numbers returned by the integrand are promoted into the field.

        Raises:
            TooManyEvaluations: If the evaluation budget is exhausted;
                                the integrand is not called in that case
        """
        self._evaluations.increment()
        return self._field.element(self._function(x))

    def _setup(
        self,
        max_evaluations: int,
        function: Callable[[FieldElement], Any],
        lower: Any,
        upper: Any,
    ) -> None:
        """Record bounds and function, reset counters and statistics."""
        if max_evaluations <= 0:
            raise ValueError(f"max_evaluations must be positive, got {max_evaluations}")
        if not callable(function):
            raise TypeError(f"Integrand must be callable, got {type(function).__name__}")

        self._lower = self._field.element(lower)
        self._upper = self._field.element(upper)
        self._function = function
        self._evaluations = self._evaluations.with_maximal_count(max_evaluations)
        self._iterations.reset()
        self.stats = IntegrationStats()

    def _record_stage(self, n: int, estimate: FieldElement) -> None:
        """Store a stage estimate in the statistics and log it."""
        value = estimate.real
        self.stats.record_stage(value)
        logger.debug(
            f"{self.name()} stage {n}: {value:.15g} ({self.evaluations} evals)",
            extra={'integrator': self.name(), 'stage': n, 'estimate': value},
        )

    def integrate(
        self,
        max_evaluations: int,
        function: Callable[[FieldElement], Any],
        lower: Any,
        upper: Any,
    ) -> FieldElement:
        """
        Integrate function over [lower, upper].

        Bounds are used as given; lower > upper yields the negated
        integral. Python numbers are accepted for the bounds and promoted
        into the field.

        Args:
            max_evaluations: Maximum number of integrand calls
            function: Integrand mapping a field element to a field element
            lower: Lower bound
            upper: Upper bound

        Returns:
            Integral estimate meeting the accuracy policy

        Raises:
            ValueError: If max_evaluations is not positive
            TypeError: If function is not callable or a bound is not in the field
            TooManyEvaluations: If the evaluation budget runs out
            MaxIterationsReached: If the iteration ceiling is reached first
        """
        self._setup(max_evaluations, function, lower, upper)

        try:
            result = self.do_integrate()
        except (TooManyEvaluations, MaxIterationsReached) as e:
            logger.warning(
                f"{self.name()} failed on [{self._lower.real:g}, {self._upper.real:g}]: {e}",
                extra={'integrator': self.name(), 'evaluations': self.evaluations},
            )
            raise
        finally:
            self.stats.evaluations = self.evaluations
            self.stats.iterations = self.iterations

        self.stats.converged = True
        logger.debug(
            f"{self.name()} converged after {self.iterations} iterations, "
            f"{self.evaluations} evaluations",
            extra={'integrator': self.name(), 'field': self._field.name(),
                   'evaluations': self.evaluations},
        )

        if self.metrics is not None:
            labels = {'integrator': self.name(), 'field': self._field.name()}
            self.metrics.log_counter('quadrature_evaluations', self.evaluations, labels)
            self.metrics.log_gauge('quadrature_iterations', self.iterations, labels)

        return result

    @abstractmethod
    def do_integrate(self) -> FieldElement:
        """
        Run the rule's refinement loop.

        Called by integrate() after bounds and counters are set up.

        Returns:
            Converged integral estimate
        """
        pass

    @abstractmethod
    def name(self) -> str:
        """
        Return integrator name for logging.

        Returns:
            Human-readable integrator name
        """
        pass

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(field={self._field!r}, "
                f"rel={self._relative_accuracy}, abs={self._absolute_accuracy}, "
                f"min_iter={self._minimal_iteration_count}, "
                f"max_iter={self._maximal_iteration_count})")
