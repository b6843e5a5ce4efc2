"""
Shift types: how a shift amount moves a value.
"""

from enum import Enum

from .adjustment import ValueAdjustment


class ShiftType(Enum):
    """Adjustment semantics shared by every shift in a perturbation."""

    ABSOLUTE = "ABSOLUTE"  # value + shift
    RELATIVE = "RELATIVE"  # value * (1 + shift)
    SCALED = "SCALED"  # value * shift

    @classmethod
    def of(cls, name: str) -> "ShiftType":
        """Look up a shift type by case-insensitive name."""
        try:
            return cls[name.upper().strip()]
        except KeyError:
            raise ValueError(
                f"Unknown shift type: {name}. "
                f"Available: {[member.value for member in cls]}"
            ) from None

    def to_value_adjustment(self, shift_amount: float) -> ValueAdjustment:
        """Convert a shift amount into an adjustment of this type."""
        if self is ShiftType.ABSOLUTE:
            return ValueAdjustment.of_delta_amount(shift_amount)
        if self is ShiftType.RELATIVE:
            return ValueAdjustment.of_delta_multiplier(shift_amount)
        return ValueAdjustment.of_multiplier(shift_amount)

    def apply_shift(self, value: float, shift_amount: float) -> float:
        """Apply a shift amount to a value."""
        return self.to_value_adjustment(shift_amount).adjust(value)

    def compute_shift(self, base_value: float, shifted_value: float) -> float:
        """Shift amount that moves ``base_value`` to ``shifted_value``.

        Relative and scaled shifts are undefined for a zero base value and
        raise ``ZeroDivisionError``.
        """
        if self is ShiftType.ABSOLUTE:
            return shifted_value - base_value
        if self is ShiftType.RELATIVE:
            return shifted_value / base_value - 1.0
        return shifted_value / base_value
