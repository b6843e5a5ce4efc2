"""Apply perturbations in bulk and report the resulting node moves."""

from __future__ import annotations

import logging
from typing import Dict, Mapping

import pandas as pd

from ficcrisk.curves.base import Curve, NodalCurve

from .perturbation import Perturbation
from .shift_type import ShiftType

logger = logging.getLogger(__name__)


def apply_scenarios(
    curve: Curve, perturbations: Mapping[str, Perturbation]
) -> Dict[str, Curve]:
    """Apply each named perturbation to the same base curve.

    The base curve is shared read-only between scenarios. The first failure
    propagates to the caller.
    """
    results: Dict[str, Curve] = {}
    for scenario_name, perturbation in perturbations.items():
        logger.debug("Applying scenario %s to curve %s", scenario_name, curve.name)
        results[scenario_name] = perturbation.apply(curve)
    return results


def shift_report(
    base: NodalCurve,
    shifted: NodalCurve,
    shift_type: ShiftType = ShiftType.ABSOLUTE,
) -> pd.DataFrame:
    """Per-node comparison of a base curve and a shifted curve.

    Returns a DataFrame with ``label``, ``base``, ``shifted`` and ``shift``
    columns, where ``shift`` is the amount of ``shift_type`` that moves the
    base node value to the shifted one. Relative and scaled shifts are
    undefined on a zero base value; those rows report ``nan``.
    """
    if not isinstance(base, NodalCurve) or not isinstance(shifted, NodalCurve):
        raise ValueError("Shift reports need two nodal curves")
    if base.parameter_count != shifted.parameter_count:
        raise ValueError(
            f"Curves '{base.name}' and '{shifted.name}' have different node counts: "
            f"{base.parameter_count} vs {shifted.parameter_count}"
        )

    parameters = base.metadata.parameters
    labels = (
        [node.label for node in parameters]
        if parameters is not None
        else [str(x) for x in base.x_values]
    )
    rows = []
    for label, base_value, shifted_value in zip(
        labels, base.y_values, shifted.y_values, strict=True
    ):
        try:
            shift = shift_type.compute_shift(float(base_value), float(shifted_value))
        except ZeroDivisionError:
            logger.debug(
                "No %s shift for node %s of curve %s: base value is zero",
                shift_type.value,
                label,
                base.name,
            )
            shift = float("nan")
        rows.append({
            "label": label,
            "base": float(base_value),
            "shifted": float(shifted_value),
            "shift": shift,
        })
    return pd.DataFrame(rows, columns=["label", "base", "shifted", "shift"])
