"""ficcrisk public API."""

from .curves import (
    ConstantCurve,
    CurveMetadata,
    CurveNodeMetadata,
    InterpolatedNodalCurve,
    NelsonSiegelCurve,
    NodalCurve,
    ValueType,
)
from .scenarios import (
    ConfigurationError,
    CurvePointShift,
    CurvePointShiftBuilder,
    ShiftType,
    UnsupportedCurveError,
    ValueAdjustment,
    point_shift_from_profile,
)

__version__ = "0.1.0"

__all__ = [
    "CurveMetadata",
    "CurveNodeMetadata",
    "ValueType",
    "NodalCurve",
    "InterpolatedNodalCurve",
    "ConstantCurve",
    "NelsonSiegelCurve",
    "CurvePointShift",
    "CurvePointShiftBuilder",
    "ShiftType",
    "ValueAdjustment",
    "ConfigurationError",
    "UnsupportedCurveError",
    "point_shift_from_profile",
]
