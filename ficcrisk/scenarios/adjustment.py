"""Pure numeric adjustments applied to a single node value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class AdjustmentType(Enum):
    """How the modifying value combines with the base value."""

    DELTA_AMOUNT = "DELTA_AMOUNT"  # base + m
    DELTA_MULTIPLIER = "DELTA_MULTIPLIER"  # base * (1 + m)
    MULTIPLIER = "MULTIPLIER"  # base * m
    REPLACE = "REPLACE"  # m


@dataclass(frozen=True)
class ValueAdjustment:
    """A callable ``float -> float`` transform.

    Instances are immutable and compare by value. ``ValueAdjustment.NONE``
    leaves every value unchanged.
    """

    adjustment_type: AdjustmentType
    modifying_value: float

    NONE: ClassVar["ValueAdjustment"]

    @classmethod
    def of_delta_amount(cls, amount: float) -> "ValueAdjustment":
        return cls(AdjustmentType.DELTA_AMOUNT, float(amount))

    @classmethod
    def of_delta_multiplier(cls, multiplier: float) -> "ValueAdjustment":
        return cls(AdjustmentType.DELTA_MULTIPLIER, float(multiplier))

    @classmethod
    def of_multiplier(cls, multiplier: float) -> "ValueAdjustment":
        return cls(AdjustmentType.MULTIPLIER, float(multiplier))

    @classmethod
    def of_replace(cls, value: float) -> "ValueAdjustment":
        return cls(AdjustmentType.REPLACE, float(value))

    def adjust(self, base: float) -> float:
        if self is ValueAdjustment.NONE:
            return base
        kind = self.adjustment_type
        if kind == AdjustmentType.DELTA_AMOUNT:
            return base + self.modifying_value
        if kind == AdjustmentType.DELTA_MULTIPLIER:
            return base * (1.0 + self.modifying_value)
        if kind == AdjustmentType.MULTIPLIER:
            return base * self.modifying_value
        return self.modifying_value

    def __call__(self, base: float) -> float:
        return self.adjust(base)


ValueAdjustment.NONE = ValueAdjustment.of_delta_amount(0.0)
