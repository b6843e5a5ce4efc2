"""
Base class for interpolating curve node values.
"""
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Interpolator(ABC):
    """Interpolates y values over a set of x nodes."""

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            x_values: Node x coordinates (typically year fractions)
            y_values: Node values (rates, discount factors, prices)
        """
        if len(x_values) != len(y_values):
            raise ValueError("x values and y values must have same length")
        if len(x_values) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        order = np.argsort(np.asarray(x_values, dtype=float), kind="stable")
        self.x_values = np.asarray(x_values, dtype=float)[order]
        self.y_values = np.asarray(y_values, dtype=float)[order]

        if len(np.unique(self.x_values)) != len(self.x_values):
            raise ValueError("Duplicate x values not allowed")

    @abstractmethod
    def interpolate(self, x: float) -> float:
        """Interpolate value at x."""

    def interpolate_many(self, xs: Sequence[float]) -> list:
        return [self.interpolate(x) for x in xs]

    def _bracket(self, x: float) -> int:
        """Index of the left node of the interval containing x."""
        return int(np.searchsorted(self.x_values, x)) - 1
