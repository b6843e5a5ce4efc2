"""Library-wide defaults and unit registries."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CurveDefaults:
    """Default knobs used when a curve is built without explicit settings."""

    interpolation_method: str = "LINEAR"
    # Day count used to turn dates into curve times when a curve has a
    # reference date.
    day_count: str = "ACT/365F"


DEFAULTS = CurveDefaults()


# Multipliers turning a quoted shift amount into a decimal amount
SHIFT_UNITS: Dict[str, float] = {
    "BP": 1e-4,
    "BPS": 1e-4,
    "PCT": 1e-2,
    "PERCENT": 1e-2,
    "DECIMAL": 1.0,
}


def get_shift_unit(name: str) -> float:
    """Get the decimal multiplier for a shift unit name."""
    name_upper = name.upper()
    if name_upper not in SHIFT_UNITS:
        raise ValueError(
            f"Unknown shift unit: {name}. "
            f"Available: {list(SHIFT_UNITS.keys())}"
        )
    return SHIFT_UNITS[name_upper]
