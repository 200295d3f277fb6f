"""
One-call trapezoid integration with configuration defaults.
"""

from typing import Any, Callable, Optional

from ..common.config import QuadratureConfig, get_config
from ..field import Field, FieldElement, RealField, field_of
from .trapezoid import FieldTrapezoidIntegrator


def trapezoid_integrate(
    function: Callable[[FieldElement], Any],
    lower: Any,
    upper: Any,
    field: Optional[Field] = None,
    config: Optional[QuadratureConfig] = None,
    max_evaluations: Optional[int] = None,
) -> FieldElement:
    """
    Integrate function over [lower, upper] with the trapezoid rule.

    This is a shorthand for building a FieldTrapezoidIntegrator from the
    accuracy section of the configuration and calling integrate().

    Args:
        function: Integrand mapping a field element to a field element
        lower: Lower bound (element or Python number)
        upper: Upper bound (element or Python number)
        field: Field to integrate in (default: the numeric config section
               for plain real bounds, otherwise inferred from lower)
        config: Configuration (default: get_config())
        max_evaluations: Evaluation budget (default: from config)

    Returns:
        Integral estimate

    Example:
        trapezoid_integrate(lambda x: x * x, 0.0, 1.0).real   # ~1/3
    """
    if config is None:
        config = get_config()
    if field is None:
        inferred = field_of(lower)
        if not isinstance(lower, FieldElement) and inferred == RealField():
            # plain real bounds take the field from the numeric section
            field = config.numeric.build()
        else:
            field = inferred
    if max_evaluations is None:
        max_evaluations = config.accuracy.max_evaluations

    integrator = FieldTrapezoidIntegrator.from_config(field, config.accuracy)
    return integrator.integrate(max_evaluations, function, lower, upper)
