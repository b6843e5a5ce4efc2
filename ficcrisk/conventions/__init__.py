"""
Market conventions: day counts and tenors.
"""

from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .tenor import Tenor, tenor_to_months

__all__ = [
    # Day counts
    "DayCountConvention",
    "get_day_count_convention",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
    # Tenors
    "Tenor",
    "tenor_to_months",
]
