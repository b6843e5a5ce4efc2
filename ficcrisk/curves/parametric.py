"""Curves defined by a formula rather than by nodes.

These curves are not node-addressable, so point shifts do not apply to them.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from .base import BaseCurve, TimeLike
from .metadata import CurveMetadata, CurveNodeMetadata, ValueType


class ConstantCurve(BaseCurve):
    """Curve with the same value at every x."""

    def __init__(
        self,
        metadata: CurveMetadata,
        value: float,
        reference_date: Optional[date] = None,
    ):
        super().__init__(metadata, reference_date)
        self.value = float(value)

    @classmethod
    def of(cls, name: str, value: float, y_value_type: ValueType = ValueType.ZERO_RATE) -> "ConstantCurve":
        return cls(CurveMetadata(name=name, y_value_type=y_value_type), value)

    def y_value(self, x: TimeLike) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantCurve(metadata={self.metadata!r}, value={self.value})"


NELSON_SIEGEL_PARAMETERS = ("beta0", "beta1", "beta2", "tau")


class NelsonSiegelCurve(BaseCurve):
    """Nelson-Siegel zero curve.

    ``r(t) = b0 + b1 * g(t) + b2 * (g(t) - exp(-t / tau))`` with
    ``g(t) = (1 - exp(-t / tau)) / (t / tau)``. The metadata lists the four
    model parameters, but the curve has no nodes to shift.
    """

    def __init__(
        self,
        name: str,
        beta0: float,
        beta1: float,
        beta2: float,
        tau: float,
        reference_date: Optional[date] = None,
        day_count: Optional[str] = None,
    ):
        if tau <= 0:
            raise ValueError(f"tau must be positive: {tau}")
        metadata = CurveMetadata(
            name=name,
            y_value_type=ValueType.ZERO_RATE,
            day_count=day_count,
            parameters=tuple(CurveNodeMetadata.of(p) for p in NELSON_SIEGEL_PARAMETERS),
        )
        super().__init__(metadata, reference_date)
        self.beta0 = float(beta0)
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.tau = float(tau)

    def y_value(self, x: TimeLike) -> float:
        t = self._to_year_fraction(x)
        if t <= 0:
            return self.beta0 + self.beta1
        decay = math.exp(-t / self.tau)
        loading = (1.0 - decay) / (t / self.tau)
        return self.beta0 + self.beta1 * loading + self.beta2 * (loading - decay)

    def __repr__(self) -> str:
        return (
            f"NelsonSiegelCurve(name={self.name!r}, beta0={self.beta0}, "
            f"beta1={self.beta1}, beta2={self.beta2}, tau={self.tau})"
        )
