"""Tenor labels such as ``3M`` or ``10Y`` and their date arithmetic."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta

_TENOR_PATTERN = re.compile(r"^(\d+)([DWMY])$")

_UNIT_YEARS = {
    "D": 1.0 / 365.0,
    "W": 7.0 / 365.0,
    "M": 1.0 / 12.0,
    "Y": 1.0,
}


@dataclass(frozen=True)
class Tenor:
    """A period expressed as an amount of days, weeks, months or years.

    ``Tenor.parse("12M")`` and ``Tenor.parse("1Y")`` are distinct tenors;
    no normalization between units is attempted.
    """

    amount: int
    unit: str

    def __post_init__(self):
        if self.unit not in _UNIT_YEARS:
            raise ValueError(f"Unsupported tenor unit: {self.unit!r}")
        if self.amount < 0:
            raise ValueError(f"Tenor amount must not be negative: {self.amount}")

    @classmethod
    def parse(cls, tenor: Union[str, "Tenor"]) -> "Tenor":
        if isinstance(tenor, Tenor):
            return tenor
        text = str(tenor).upper().strip()
        match = _TENOR_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Unsupported tenor: {tenor}")
        return cls(int(match.group(1)), match.group(2))

    def year_fraction(self) -> float:
        """Approximate length in years (365-day years for D and W)."""
        return self.amount * _UNIT_YEARS[self.unit]

    def add_to(self, start: Union[date, datetime]) -> date:
        """Add the tenor to a date without business day adjustment."""
        if isinstance(start, datetime):
            start = start.date()
        if self.unit == "D":
            return start + relativedelta(days=self.amount)
        if self.unit == "W":
            return start + relativedelta(weeks=self.amount)
        return start + relativedelta(months=tenor_to_months(self))

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


def tenor_to_months(tenor: Union[str, Tenor]) -> int:
    """Convert tenor (e.g., '3M', '2Y') to number of months."""
    parsed = Tenor.parse(tenor)
    if parsed.unit == "M":
        return parsed.amount
    if parsed.unit == "Y":
        return parsed.amount * 12
    raise ValueError(f"Tenor is not a whole number of months: {tenor}")
