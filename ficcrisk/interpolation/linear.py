"""
Linear-family interpolators. All extrapolate flat outside the node range.
"""
import math
from typing import Sequence

import numpy as np

from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Linear interpolation on the node values."""

    def interpolate(self, x: float) -> float:
        if x <= self.x_values[0]:
            return float(self.y_values[0])
        if x >= self.x_values[-1]:
            return float(self.y_values[-1])

        i = self._bracket(x)
        x1, x2 = self.x_values[i], self.x_values[i + 1]
        y1, y2 = self.y_values[i], self.y_values[i + 1]
        weight = (x - x1) / (x2 - x1)
        return float(y1 + weight * (y2 - y1))


class LogLinearInterpolator(Interpolator):
    """Linear interpolation on log values.

    Suited to discount factors; every node value must be positive.
    """

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        super().__init__(x_values, y_values)
        if np.any(self.y_values <= 0):
            raise ValueError("Log-linear interpolation requires positive values")
        self._log_values = np.log(self.y_values)

    def interpolate(self, x: float) -> float:
        if x <= self.x_values[0]:
            return float(self.y_values[0])
        if x >= self.x_values[-1]:
            return float(self.y_values[-1])

        i = self._bracket(x)
        x1, x2 = self.x_values[i], self.x_values[i + 1]
        weight = (x - x1) / (x2 - x1)
        log_value = self._log_values[i] + weight * (self._log_values[i + 1] - self._log_values[i])
        return math.exp(log_value)


class RateTimeInterpolator(Interpolator):
    """Linear interpolation on ``r * t`` for zero rates.

    Equivalent to log-linear discount factors under continuous compounding,
    which gives piecewise flat forwards between nodes.
    """

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        super().__init__(x_values, y_values)
        self._rate_times = self.x_values * self.y_values

    def interpolate(self, x: float) -> float:
        if x <= self.x_values[0] or x <= 0:
            return float(self.y_values[0])
        if x >= self.x_values[-1]:
            return float(self.y_values[-1])

        i = self._bracket(x)
        x1, x2 = self.x_values[i], self.x_values[i + 1]
        weight = (x - x1) / (x2 - x1)
        rate_time = self._rate_times[i] + weight * (self._rate_times[i + 1] - self._rate_times[i])
        return float(rate_time / x)


class PiecewiseConstantInterpolator(Interpolator):
    """Step function returning the left node value."""

    def interpolate(self, x: float) -> float:
        if x <= self.x_values[0]:
            return float(self.y_values[0])
        if x >= self.x_values[-1]:
            return float(self.y_values[-1])

        i = int(np.searchsorted(self.x_values, x, side="right")) - 1
        return float(self.y_values[i])
