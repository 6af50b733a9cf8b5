"""Result of a shortest-path query.

Node and edge sequences are stored in the order reconstruction produces them:
from the target back toward the source. Use :meth:`Path.ordered_nodes` and
:meth:`Path.ordered_edges` for traversal order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pathgraph.types import Cost, EdgeID, NodeID


@dataclass(frozen=True)
class Path:
    """A shortest path from ``source`` to ``target``.

    Attributes:
        source: Id of the analysis source.
        target: Id of the queried target.
        nodes: Node ids, target first.
        edges: Traversed edge ids, target-side edge first.
        cost: Distance from source to target; ``inf`` when unreachable.
    """

    source: NodeID
    target: NodeID
    nodes: Tuple[NodeID, ...]
    edges: Tuple[EdgeID, ...]
    cost: Cost = math.inf

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.edges)

    @property
    def is_trivial(self) -> bool:
        """True when the path has no edges.

        This covers both a query for the source itself and an unreachable
        target; check ``reachable`` to tell them apart.
        """
        return not self.edges

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.cost)

    def ordered_nodes(self) -> Tuple[NodeID, ...]:
        """Node ids from source to target."""
        return tuple(reversed(self.nodes))

    def ordered_edges(self) -> Tuple[EdgeID, ...]:
        """Edge ids in traversal order."""
        return tuple(reversed(self.edges))

    def reversed(self) -> Path:
        """Return a copy with node and edge sequences in traversal order."""
        return Path(
            source=self.source,
            target=self.target,
            nodes=self.ordered_nodes(),
            edges=self.ordered_edges(),
            cost=self.cost,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict; ``cost`` is None when unreachable."""
        return {
            "source": self.source,
            "target": self.target,
            "nodes": list(self.nodes),
            "edges": list(self.edges),
            "cost": self.cost if self.reachable else None,
        }
