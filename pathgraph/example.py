"""Bundled example graph.

Eight labelled nodes laid out on an 800x800 canvas and sixteen directed edges.
Edge weights are derived from node positions with :func:`example_weight`, so
they are always non-negative.

Example:
    >>> from pathgraph import ShortestPathEngine
    >>> from pathgraph.example import build_example_graph
    >>> nodes, edges = build_example_graph()
    >>> engine = ShortestPathEngine(nodes, edges)
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from pathgraph.config import EXAMPLE_CONFIG, ExampleGraphConfig
from pathgraph.model.graph import Edge, Node, new_id
from pathgraph.types import Position

EXAMPLE_NODES: Tuple[Tuple[str, Position], ...] = (
    ("A", (100, 100)),
    ("B", (500, 100)),
    ("C", (200, 600)),
    ("D", (700, 600)),
    ("E", (350, 450)),
    ("F", (350, 200)),
    ("G", (590, 450)),
    ("H", (50, 280)),
)

EXAMPLE_EDGES: Tuple[Tuple[str, str], ...] = (
    ("A", "B"),
    ("A", "C"),
    ("A", "F"),
    ("A", "H"),
    ("B", "D"),
    ("C", "D"),
    ("C", "E"),
    ("D", "E"),
    ("E", "F"),
    ("F", "G"),
    ("F", "B"),
    ("F", "A"),
    ("G", "D"),
    ("G", "B"),
    ("H", "A"),
    ("H", "C"),
)


def example_weight(source: Node, target: Node, precision: int = 2) -> float:
    """Weight of the example edge ``source -> target``.

    Computed as ``sqrt((xs + xt)^2 + (ys + yt)^2)`` and rounded to
    ``precision`` significant digits. This is the norm of the summed
    positions, not the Euclidean distance between the nodes.
    """
    (xs, ys), (xt, yt) = source.position, target.position
    config = ExampleGraphConfig(weight_precision=precision)
    return config.round_weight(math.sqrt((xs + xt) ** 2 + (ys + yt) ** 2))


def make_nodes(*nodes_data: Tuple[str, Position]) -> List[Node]:
    """Create nodes with fresh ids from ``(label, position)`` pairs."""
    return [
        Node(id=new_id(), label=label, position=position)
        for label, position in nodes_data
    ]


def make_edges(
    *pairs: Tuple[Node, Node], config: Optional[ExampleGraphConfig] = None
) -> List[Edge]:
    """Create weighted edges with fresh ids from ``(source, target)`` node pairs."""
    cfg = config if config is not None else EXAMPLE_CONFIG
    return [
        Edge(
            source=src.id,
            target=dst.id,
            weight=example_weight(src, dst, cfg.weight_precision),
            id=new_id(),
        )
        for src, dst in pairs
    ]


def build_example_graph(
    config: Optional[ExampleGraphConfig] = None,
) -> Tuple[List[Node], List[Edge]]:
    """Build the example graph.

    Returns:
        Tuple ``(nodes, edges)`` in definition order. Ids are regenerated on
        every call; look nodes up by ``label``.
    """
    nodes = make_nodes(*EXAMPLE_NODES)
    by_label = {node.label: node for node in nodes}
    edges = make_edges(
        *((by_label[src], by_label[dst]) for src, dst in EXAMPLE_EDGES),
        config=config,
    )
    return nodes, edges
