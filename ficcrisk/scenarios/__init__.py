"""
Scenario perturbations of market curves.

Main APIs:
---------
    - CurvePointShift / CurvePointShiftBuilder: shift specific curve nodes
    - ShiftType / ValueAdjustment: shift semantics
    - point_shift_from_profile: point shifts from bp/pct bump profiles
    - apply_scenarios / shift_report: bulk application and diagnostics
"""

from .adjustment import AdjustmentType, ValueAdjustment
from .batch import apply_scenarios, shift_report
from .errors import ConfigurationError, ScenarioError, UnsupportedCurveError
from .perturbation import Perturbation
from .point_shift import CurvePointShift, CurvePointShiftBuilder
from .profile import point_shift_from_profile
from .shift_type import ShiftType

__all__ = [
    # Point shifts
    "CurvePointShift",
    "CurvePointShiftBuilder",
    "Perturbation",
    # Semantics
    "ShiftType",
    "ValueAdjustment",
    "AdjustmentType",
    # Errors
    "ScenarioError",
    "ConfigurationError",
    "UnsupportedCurveError",
    # Helpers
    "point_shift_from_profile",
    "apply_scenarios",
    "shift_report",
]
