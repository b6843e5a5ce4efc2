"""
Interpolated nodal curve: node values joined by an interpolator.
"""
import logging
import math
from datetime import date
from typing import List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ficcrisk.config import DEFAULTS
from ficcrisk.conventions.daycount import get_day_count_convention
from ficcrisk.conventions.tenor import Tenor
from ficcrisk.interpolation import Interpolator, create_interpolator

from .base import NodalCurve, TimeLike
from .metadata import CurveMetadata, CurveNodeMetadata, ValueType

logger = logging.getLogger(__name__)


class InterpolatedNodalCurve(NodalCurve):
    """
    Curve defined by (x, y) nodes and an interpolation method.

    The node values are held in read-only numpy arrays; every operation
    that changes them returns a new curve.
    """

    def __init__(self,
                 metadata: CurveMetadata,
                 x_values: Sequence[float],
                 y_values: Sequence[float],
                 interpolation_method: Optional[str] = None,
                 reference_date: Optional[date] = None):
        """
        Initialize interpolated nodal curve.

        Args:
            metadata: Curve metadata; if it has parameters there must be one per node
            x_values: Strictly increasing node x values
            y_values: Node values
            interpolation_method: Interpolator name, defaults to the library default
            reference_date: Valuation date used to query by date
        """
        super().__init__(metadata, reference_date)

        x = np.array(x_values, dtype=float)
        y = np.array(y_values, dtype=float)
        if x.ndim != 1 or x.shape != y.shape:
            raise ValueError("x values and y values must have same length")
        if len(x) < 2:
            raise ValueError("Need at least 2 nodes")
        if not np.all(np.isfinite(x)):
            raise ValueError(f"Curve '{metadata.name}' has non-finite x values")
        if np.any(np.diff(x) <= 0):
            raise ValueError(f"Curve '{metadata.name}' x values must be strictly increasing")
        if metadata.parameters is not None and len(metadata.parameters) != len(x):
            raise ValueError(
                f"Curve '{metadata.name}' has {len(x)} nodes "
                f"but {len(metadata.parameters)} parameter metadata entries"
            )

        if metadata.y_value_type == ValueType.DISCOUNT_FACTOR:
            for i in range(1, len(y)):
                increase = y[i] - y[i - 1]
                if increase > 1e-6:
                    logger.warning(
                        "Discount factors increasing at node %s of curve %s (increase = %.8f)",
                        i,
                        metadata.name,
                        increase,
                    )

        x.setflags(write=False)
        y.setflags(write=False)
        self._x_values = x
        self._y_values = y
        self.interpolation_method = (interpolation_method or DEFAULTS.interpolation_method).upper()
        self.interpolator: Interpolator = create_interpolator(self.interpolation_method, x, y)

    @property
    def x_values(self) -> np.ndarray:
        return self._x_values

    @property
    def y_values(self) -> np.ndarray:
        return self._y_values

    def y_value(self, x: TimeLike) -> float:
        return self.interpolator.interpolate(self._to_year_fraction(x))

    def with_y_values(self, y_values: Sequence[float]) -> "InterpolatedNodalCurve":
        return InterpolatedNodalCurve(
            metadata=self.metadata,
            x_values=self._x_values,
            y_values=y_values,
            interpolation_method=self.interpolation_method,
            reference_date=self.reference_date,
        )

    def with_metadata(self, metadata: CurveMetadata) -> "InterpolatedNodalCurve":
        return InterpolatedNodalCurve(
            metadata=metadata,
            x_values=self._x_values,
            y_values=self._y_values,
            interpolation_method=self.interpolation_method,
            reference_date=self.reference_date,
        )

    def shift_parallel(self, shift_bp: float) -> "InterpolatedNodalCurve":
        """
        Create a parallel shifted version of the curve.

        Zero-rate curves move every node by the shift; discount factor
        curves move the implied continuous zero rate of every node.

        Args:
            shift_bp: Parallel shift in basis points

        Returns:
            New shifted curve
        """
        shift_decimal = shift_bp / 10000.0
        logger.debug("Parallel shift of %sbp on curve %s", shift_bp, self.name)

        if self.metadata.y_value_type == ValueType.DISCOUNT_FACTOR:
            shifted = []
            for t, df in zip(self._x_values, self._y_values, strict=True):
                if t > 0:
                    zero_rate = -math.log(df) / t
                    shifted.append(math.exp(-(zero_rate + shift_decimal) * t))
                else:
                    shifted.append(float(df))
        else:
            shifted = list(self._y_values + shift_decimal)
        return self.with_y_values(shifted)

    def node_info(self) -> List[tuple]:
        """Node information as (metadata, x, y) tuples; metadata may be None."""
        parameters = self.metadata.parameters or (None,) * len(self._x_values)
        return [
            (meta, float(x), float(y))
            for meta, x, y in zip(parameters, self._x_values, self._y_values, strict=True)
        ]

    def to_frame(self) -> pd.DataFrame:
        """Nodes as a DataFrame with identifier, label, x and y columns."""
        rows = []
        for meta, x, y in self.node_info():
            rows.append({
                "identifier": meta.identifier if meta is not None else None,
                "label": meta.label if meta is not None else None,
                "x": x,
                "y": y,
            })
        return pd.DataFrame(rows, columns=["identifier", "label", "x", "y"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterpolatedNodalCurve):
            return NotImplemented
        return (
            self.metadata == other.metadata
            and self.interpolation_method == other.interpolation_method
            and self.reference_date == other.reference_date
            and np.array_equal(self._x_values, other._x_values)
            and np.array_equal(self._y_values, other._y_values)
        )

    __hash__ = None

    def __str__(self) -> str:
        return f"InterpolatedNodalCurve({self.name}, {len(self._x_values)} nodes, {self.interpolation_method})"

    def __repr__(self) -> str:
        return (f"InterpolatedNodalCurve(metadata={self.metadata!r}, "
                f"x_values={self._x_values.tolist()}, "
                f"y_values={self._y_values.tolist()}, "
                f"interpolation_method='{self.interpolation_method}', "
                f"reference_date={self.reference_date!r})")

    @classmethod
    def from_tenors(cls,
                    name: str,
                    tenors: Sequence[Union[str, Tenor]],
                    values: Sequence[float],
                    reference_date: Optional[date] = None,
                    y_value_type: ValueType = ValueType.ZERO_RATE,
                    day_count: Optional[str] = None,
                    interpolation_method: Optional[str] = None) -> "InterpolatedNodalCurve":
        """
        Build a curve whose nodes are keyed by tenor.

        Node x values are year fractions from ``reference_date`` to the
        unadjusted tenor date under the curve day count; without a reference
        date the approximate tenor length is used.

        Args:
            name: Curve name
            tenors: Tenor labels such as "3M", "1Y"
            values: Node values in tenor order
            reference_date: Optional valuation date
            y_value_type: What the node values represent
            day_count: Day count name, defaults to the library default
            interpolation_method: Interpolator name

        Returns:
            Curve with tenor node metadata
        """
        parsed = [Tenor.parse(t) for t in tenors]
        metadata = CurveMetadata(
            name=name,
            x_value_type=ValueType.YEAR_FRACTION,
            y_value_type=y_value_type,
            day_count=day_count or DEFAULTS.day_count,
            parameters=tuple(CurveNodeMetadata.of_tenor(t) for t in parsed),
        )
        if reference_date is None:
            times = [t.year_fraction() for t in parsed]
        else:
            dcc = get_day_count_convention(metadata.day_count)
            times = [dcc.year_fraction(reference_date, t.add_to(reference_date)) for t in parsed]
        return cls(
            metadata=metadata,
            x_values=times,
            y_values=values,
            interpolation_method=interpolation_method,
            reference_date=reference_date,
        )


def create_flat_curve(name: str,
                      flat_rate: float,
                      max_time: float = 30.0,
                      num_nodes: int = 10,
                      reference_date: Optional[date] = None) -> InterpolatedNodalCurve:
    """
    Create a flat zero-rate curve with year-fraction node identifiers.

    Args:
        name: Curve name
        flat_rate: Flat zero rate (decimal)
        max_time: Maximum time in years
        num_nodes: Number of nodes
        reference_date: Optional valuation date

    Returns:
        Flat nodal curve
    """
    if num_nodes < 2:
        raise ValueError(f"Need at least 2 nodes: {num_nodes}")
    times = [i * max_time / (num_nodes - 1) for i in range(num_nodes)]
    times[0] = times[1] / 2  # Avoid zero time

    metadata = CurveMetadata(
        name=name,
        parameters=tuple(CurveNodeMetadata.of(t, f"{t:g}Y") for t in times),
    )
    return InterpolatedNodalCurve(
        metadata=metadata,
        x_values=times,
        y_values=[flat_rate] * num_nodes,
        reference_date=reference_date,
    )
