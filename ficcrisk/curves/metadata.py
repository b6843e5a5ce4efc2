"""Curve and curve-node metadata."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Hashable, Iterable, Optional, Tuple, Union

from ficcrisk.conventions.tenor import Tenor


class ValueType(Enum):
    """What the x or y values of a curve represent."""

    YEAR_FRACTION = "YEAR_FRACTION"
    ZERO_RATE = "ZERO_RATE"
    DISCOUNT_FACTOR = "DISCOUNT_FACTOR"
    PRICE = "PRICE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class CurveNodeMetadata:
    """Identity of a single curve node.

    ``identifier`` is the stable key (a tenor, a date, an instrument id);
    ``label`` is the display form and need not be unique.
    """

    identifier: Hashable
    label: str

    @classmethod
    def of(cls, identifier: Hashable, label: Optional[str] = None) -> "CurveNodeMetadata":
        return cls(identifier, str(identifier) if label is None else label)

    @classmethod
    def of_tenor(cls, tenor: Union[str, Tenor], label: Optional[str] = None) -> "CurveNodeMetadata":
        """Node keyed by a :class:`Tenor`, labelled with its string form."""
        parsed = Tenor.parse(tenor)
        return cls(parsed, str(parsed) if label is None else label)


@dataclass(frozen=True)
class CurveMetadata:
    """Descriptive data attached to a curve.

    ``parameters`` is ``None`` when the curve carries no per-node metadata.
    """

    name: str
    x_value_type: ValueType = ValueType.YEAR_FRACTION
    y_value_type: ValueType = ValueType.ZERO_RATE
    day_count: Optional[str] = None
    parameters: Optional[Tuple[CurveNodeMetadata, ...]] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Curve name must not be empty")
        if self.parameters is not None:
            object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def parameter_count(self) -> Optional[int]:
        return None if self.parameters is None else len(self.parameters)

    def with_parameters(self, parameters: Iterable[CurveNodeMetadata]) -> "CurveMetadata":
        return replace(self, parameters=tuple(parameters))

    def without_parameters(self) -> "CurveMetadata":
        return replace(self, parameters=None)
