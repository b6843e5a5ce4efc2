"""
Factory for creating interpolators by name.
"""
from typing import Dict, Sequence, Type

from .base import Interpolator
from .linear import (
    LinearInterpolator,
    LogLinearInterpolator,
    PiecewiseConstantInterpolator,
    RateTimeInterpolator,
)

INTERPOLATORS: Dict[str, Type[Interpolator]] = {
    "LINEAR": LinearInterpolator,
    "LOG_LINEAR": LogLinearInterpolator,
    "LOGLINEAR": LogLinearInterpolator,
    "RATE_TIME": RateTimeInterpolator,
    "LINEAR_RATE_TIME": RateTimeInterpolator,
    "PIECEWISE_CONSTANT": PiecewiseConstantInterpolator,
    "STEP": PiecewiseConstantInterpolator,
}


def create_interpolator(method: str,
                        x_values: Sequence[float],
                        y_values: Sequence[float]) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation method name (case-insensitive)
        x_values: Node x coordinates
        y_values: Node values

    Returns:
        Configured interpolator
    """
    method_upper = method.upper()
    if method_upper not in INTERPOLATORS:
        raise ValueError(f"Unknown interpolation method: {method}. "
                         f"Available: {list(INTERPOLATORS.keys())}")
    return INTERPOLATORS[method_upper](x_values, y_values)
