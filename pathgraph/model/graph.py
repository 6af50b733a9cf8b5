"""Immutable graph records supplied to the engine.

``Node`` and ``Edge`` are frozen dataclasses. The engine never validates them:
callers are expected to provide edges whose endpoints exist and whose weights
are non-negative.
"""

from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict

from pathgraph.types import Cost, EdgeID, NodeID, Position


def new_id() -> str:
    """Return a 22-character URL-safe Base64 UUID4 without padding."""
    return base64.urlsafe_b64encode(uuid.uuid4().bytes)[:-2].decode("ascii")


@dataclass(frozen=True)
class Node:
    """A graph vertex.

    Attributes:
        id: Unique opaque identifier.
        label: Human-readable name.
        position: 2D coordinates used only for display.
    """

    id: NodeID
    label: str = ""
    position: Position = (0.0, 0.0)

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", str(self.id))
        object.__setattr__(self, "position", tuple(self.position))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "position": list(self.position)}


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge traversable only from ``source`` to ``target``.

    Attributes:
        source: Id of the tail node.
        target: Id of the head node.
        weight: Non-negative traversal cost.
        id: Unique opaque identifier; generated when omitted.
    """

    source: NodeID
    target: NodeID
    weight: Cost
    id: EdgeID = field(default_factory=new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }
