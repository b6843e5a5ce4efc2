"""
Curves package - market curves that scenarios perturb.

Main APIs:
---------
    - InterpolatedNodalCurve: node values joined by an interpolator
    - NodalCurve: capability required by point shifts
    - ConstantCurve / NelsonSiegelCurve: non-nodal curves
    - CurveMetadata / CurveNodeMetadata: curve and node identity
"""

from .base import BaseCurve, Curve, NodalCurve
from .metadata import CurveMetadata, CurveNodeMetadata, ValueType
from .nodal import InterpolatedNodalCurve, create_flat_curve
from .parametric import ConstantCurve, NelsonSiegelCurve

__all__ = [
    # Base
    "Curve",
    "BaseCurve",
    "NodalCurve",
    # Metadata
    "CurveMetadata",
    "CurveNodeMetadata",
    "ValueType",
    # Implementations
    "InterpolatedNodalCurve",
    "create_flat_curve",
    "ConstantCurve",
    "NelsonSiegelCurve",
]
