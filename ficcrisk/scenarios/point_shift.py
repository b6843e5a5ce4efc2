"""Point shifts: different shifts applied to specific nodes of a curve."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Hashable, List, Mapping, Optional

from ficcrisk.curves.base import Curve, NodalCurve
from ficcrisk.curves.metadata import CurveNodeMetadata

from .adjustment import ValueAdjustment
from .errors import ConfigurationError, UnsupportedCurveError
from .shift_type import ShiftType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurvePointShift:
    """A perturbation that applies different shifts to specific curve nodes.

    Each shift is keyed by the identifier of a node's metadata, or failing
    that by its label. Nodes with no matching key are left unchanged, and a
    key that matches no node is ignored.

    The shift can only be applied to a :class:`NodalCurve` that carries
    parameter metadata; :meth:`apply` raises for any other curve.

    Attributes:
        shift_type: How every shift amount moves its node value.
        shifts: Read-only mapping of node key to shift amount.
    """

    shift_type: ShiftType
    shifts: Mapping[Hashable, float]

    def __post_init__(self):
        if self.shift_type is None:
            raise ValueError("shift_type must not be None")
        if not isinstance(self.shift_type, ShiftType):
            raise TypeError(f"shift_type must be a ShiftType: {self.shift_type!r}")
        if self.shifts is None:
            raise ValueError("shifts must not be None")
        copied = {key: float(amount) for key, amount in self.shifts.items()}
        for key, amount in copied.items():
            if not math.isfinite(amount):
                logger.warning("Non-finite shift amount %s for node key %r", amount, key)
        object.__setattr__(self, "shifts", MappingProxyType(copied))

    @staticmethod
    def builder(shift_type: ShiftType) -> "CurvePointShiftBuilder":
        """Return a new mutable builder for point shifts of the given type."""
        return CurvePointShiftBuilder(shift_type)

    def apply(self, curve: Curve) -> Curve:
        """Return a new curve with the matching nodes shifted.

        Args:
            curve: Curve to perturb; it is not modified

        Returns:
            The curve built by ``curve.shifted_by`` from one adjustment per node

        Raises:
            ConfigurationError: The curve has no parameter metadata
            UnsupportedCurveError: The curve is not a nodal curve
        """
        node_metadata = curve.metadata.parameters
        if node_metadata is None:
            raise ConfigurationError(
                f"Unable to apply point shifts to curve '{curve.name}' "
                "because it has no parameter metadata"
            )
        if not isinstance(curve, NodalCurve):
            raise UnsupportedCurveError(
                f"Point shifts can only be applied to nodal curves, the class of curve "
                f"'{curve.name}' is {type(curve).__module__}.{type(curve).__qualname__}"
            )

        adjustments: List[ValueAdjustment] = []
        matched = 0
        for node in node_metadata:
            shift_amount = self._shift_amount_for_node(node)
            if shift_amount is None:
                adjustments.append(ValueAdjustment.NONE)
            else:
                matched += 1
                adjustments.append(self.shift_type.to_value_adjustment(shift_amount))

        logger.debug(
            "Point shift %s on curve %s: %s of %s nodes matched",
            self.shift_type.value,
            curve.name,
            matched,
            len(adjustments),
        )
        return curve.shifted_by(adjustments)

    def _shift_amount_for_node(self, node: CurveNodeMetadata) -> Optional[float]:
        # Identifier first, then label.
        shift_amount = self.shifts.get(node.identifier)
        if shift_amount is not None:
            return shift_amount
        return self.shifts.get(node.label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurvePointShift):
            return NotImplemented
        return self.shift_type == other.shift_type and dict(self.shifts) == dict(other.shifts)

    def __hash__(self) -> int:
        return hash((self.shift_type, frozenset(self.shifts.items())))

    def __repr__(self) -> str:
        return f"CurvePointShift(shift_type={self.shift_type}, shifts={dict(self.shifts)!r})"


class CurvePointShiftBuilder:
    """Mutable builder for :class:`CurvePointShift`.

    Later shifts for the same key overwrite earlier ones, in call order.
    Not safe for concurrent use.
    """

    def __init__(self, shift_type: ShiftType):
        if shift_type is None:
            raise ValueError("shift_type must not be None")
        if not isinstance(shift_type, ShiftType):
            raise TypeError(f"shift_type must be a ShiftType: {shift_type!r}")
        self._shift_type = shift_type
        self._shifts: Dict[Hashable, float] = {}

    @property
    def shift_type(self) -> ShiftType:
        return self._shift_type

    def add_shift(self, key: Hashable, shift_amount: float) -> "CurvePointShiftBuilder":
        """Add a shift for a node identifier or label."""
        if key is None:
            raise ValueError("key must not be None")
        self._shifts[key] = float(shift_amount)
        return self

    def add_shifts(self, shifts: Mapping[Hashable, float]) -> "CurvePointShiftBuilder":
        """Add every shift in ``shifts``."""
        for key, shift_amount in shifts.items():
            self.add_shift(key, shift_amount)
        return self

    def build(self) -> CurvePointShift:
        """Freeze the current shifts; later builder changes do not affect the result."""
        return CurvePointShift(self._shift_type, dict(self._shifts))
