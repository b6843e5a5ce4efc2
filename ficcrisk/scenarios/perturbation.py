"""Perturbation protocol."""

from typing import Protocol, TypeVar

T = TypeVar("T")


class Perturbation(Protocol[T]):
    """Derives a modified piece of market data from a base value.

    Implementations must be pure: the input is never mutated and a new value
    is returned.
    """

    def apply(self, market_data: T) -> T:
        ...
