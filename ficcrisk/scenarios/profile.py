"""Build point shifts from bump profiles quoted in market units."""

from __future__ import annotations

import logging
from typing import Hashable, Mapping, Union

from ficcrisk.config import get_shift_unit
from ficcrisk.conventions.tenor import Tenor

from .point_shift import CurvePointShift
from .shift_type import ShiftType

logger = logging.getLogger(__name__)


def point_shift_from_profile(
    profile: Mapping[Hashable, float],
    shift_type: Union[ShiftType, str] = ShiftType.ABSOLUTE,
    unit: str = "bp",
    parse_tenors: bool = False,
) -> CurvePointShift:
    """Create a point shift from a ``{node key: amount}`` bump profile.

    Amounts are converted to decimals with the unit multiplier, e.g. a
    profile ``{"2Y": 10, "10Y": -5}`` in ``bp`` becomes shifts of 0.001 and
    -0.0005.

    Args:
        profile: Shift amount per node identifier or label
        shift_type: Shift type or its name
        unit: Unit of the amounts: ``bp``, ``pct`` or ``decimal``
        parse_tenors: Key the shifts by :class:`Tenor` instead of the raw key,
            so they match tenor identifiers rather than labels

    Returns:
        The point shift
    """
    if isinstance(shift_type, str):
        shift_type = ShiftType.of(shift_type)
    scale = get_shift_unit(unit)

    builder = CurvePointShift.builder(shift_type)
    for key, amount in profile.items():
        node_key = Tenor.parse(key) if parse_tenors else key
        builder.add_shift(node_key, float(amount) * scale)

    logger.debug(
        "Built %s point shift with %s keys from profile in %s",
        shift_type.value,
        len(profile),
        unit,
    )
    return builder.build()
