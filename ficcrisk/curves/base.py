"""
Base curve classes and protocols.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Protocol, Sequence, Union

import numpy as np

from ficcrisk.config import DEFAULTS
from ficcrisk.conventions.daycount import DayCountConvention, get_day_count_convention

from .metadata import CurveMetadata, ValueType

TimeLike = Union[datetime, date, float]


class Curve(Protocol):
    """Protocol defining the interface for all curves."""

    @property
    def name(self) -> str:
        ...

    @property
    def metadata(self) -> CurveMetadata:
        ...

    def y_value(self, x: TimeLike) -> float:
        """Get the curve value at x."""
        ...


class BaseCurve(ABC):
    """Base implementation shared by nodal and parametric curves."""

    def __init__(
        self,
        metadata: CurveMetadata,
        reference_date: Optional[date] = None,
    ):
        """
        Initialize base curve.

        Args:
            metadata: Curve name, value types and optional node metadata
            reference_date: Valuation date; needed only to query by date
        """
        self._metadata = metadata
        self.reference_date = reference_date
        self._time_day_count: DayCountConvention = get_day_count_convention(
            metadata.day_count or DEFAULTS.day_count
        )

    @property
    def metadata(self) -> CurveMetadata:
        return self._metadata

    @property
    def name(self) -> str:
        return self._metadata.name

    def _to_year_fraction(self, t: TimeLike) -> float:
        """Convert a date or datetime to the curve's time basis."""
        if isinstance(t, (int, float, np.integer, np.floating)):
            return float(t)
        if self.reference_date is None:
            raise ValueError(
                f"Curve '{self.name}' has no reference date; query it by year fraction"
            )
        if isinstance(t, datetime):
            t = t.date()
        return self._time_day_count.year_fraction(self.reference_date, t)

    @abstractmethod
    def y_value(self, x: TimeLike) -> float:
        """Get the curve value at x."""

    def zero(self, t: TimeLike) -> float:
        """Continuously compounded zero rate at time t."""
        y_type = self._metadata.y_value_type
        if y_type == ValueType.ZERO_RATE:
            return self.y_value(t)
        if y_type == ValueType.DISCOUNT_FACTOR:
            time_frac = self._to_year_fraction(t)
            if time_frac <= 0:
                return 0.0
            df_val = self.y_value(time_frac)
            if df_val <= 0:
                raise ValueError(f"Non-positive discount factor: {df_val}")
            return -math.log(df_val) / time_frac
        raise ValueError(f"Curve '{self.name}' with y values of type {y_type.value} has no zero rate")

    def df(self, t: TimeLike) -> float:
        """Discount factor at time t."""
        y_type = self._metadata.y_value_type
        if y_type == ValueType.DISCOUNT_FACTOR:
            if self._to_year_fraction(t) <= 0:
                return 1.0
            return self.y_value(t)
        time_frac = self._to_year_fraction(t)
        return math.exp(-self.zero(time_frac) * time_frac)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class NodalCurve(BaseCurve):
    """A curve defined by discrete node values that can be rebuilt from them.

    Only nodal curves support point shifts: ``shifted_by`` takes one
    adjustment per node, in node order.
    """

    @property
    @abstractmethod
    def x_values(self) -> np.ndarray:
        """Node x values (read-only)."""

    @property
    @abstractmethod
    def y_values(self) -> np.ndarray:
        """Node y values (read-only)."""

    @property
    def parameter_count(self) -> int:
        return len(self.y_values)

    @abstractmethod
    def with_y_values(self, y_values: Sequence[float]) -> "NodalCurve":
        """Return a copy of the curve with the node values replaced."""

    def shifted_by(self, adjustments: Sequence) -> "NodalCurve":
        """Return a new curve with each node value passed through its adjustment.

        Args:
            adjustments: Callables ``float -> float``, one per node

        Returns:
            New curve of the same type; this curve is unchanged
        """
        if len(adjustments) != self.parameter_count:
            raise ValueError(
                f"Curve '{self.name}' has {self.parameter_count} nodes "
                f"but {len(adjustments)} adjustments were supplied"
            )
        shifted = [
            adjustment(float(value))
            for adjustment, value in zip(adjustments, self.y_values, strict=True)
        ]
        return self.with_y_values(shifted)
