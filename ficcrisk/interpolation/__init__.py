"""
Interpolation of curve node values.
"""

from .base import Interpolator
from .factory import INTERPOLATORS, create_interpolator
from .linear import (
    LinearInterpolator,
    LogLinearInterpolator,
    PiecewiseConstantInterpolator,
    RateTimeInterpolator,
)

__all__ = [
    'Interpolator',
    'LinearInterpolator',
    'LogLinearInterpolator',
    'RateTimeInterpolator',
    'PiecewiseConstantInterpolator',
    'INTERPOLATORS',
    'create_interpolator',
]
