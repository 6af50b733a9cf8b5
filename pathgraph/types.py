"""Shared type aliases and enums."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Union

#: Numeric path cost (sum of edge weights).
Cost = Union[int, float]

#: Opaque node identifier.
NodeID = str

#: Opaque edge identifier.
EdgeID = str

#: 2D display coordinates; ignored by the algorithm.
Position = Tuple[float, float]


class MinSelect(IntEnum):
    """Strategy for picking the next unvisited node during analysis.

    Both strategies produce identical distances. They may settle nodes with
    equal distance in a different order, which can change the predecessor
    chosen between equal-cost alternatives.
    """

    #: Linear scan over all unvisited nodes, O(V^2) overall.
    SCAN = 1
    #: Binary heap with lazy deletion, O((V + E) log V).
    HEAP = 2

    @classmethod
    def from_string(cls, value: str) -> "MinSelect":
        """Parse a case-insensitive name such as ``"scan"`` or ``"HEAP"``.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid min_select '{value}'. Valid values are: {valid}"
            ) from None
