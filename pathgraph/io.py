"""Graph definition loading and path serialization.

Graph files are YAML (or JSON, which YAML accepts) mappings::

    nodes:
      - id: A
        label: Alpha          # optional, defaults to id
        position: [100, 100]  # optional
      - id: B
    edges:
      - id: ab                # optional, generated when missing
        source: A
        target: B
        weight: 1.5

Only the shape is checked. Dangling edge endpoints and negative weights are
accepted as-is; the engine does not validate them either.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

import yaml

from pathgraph.logging import get_logger
from pathgraph.model.graph import Edge, Node, new_id
from pathgraph.model.path import Path

logger = get_logger(__name__)

_NODE_KEYS = {"id", "label", "position"}
_EDGE_KEYS = {"id", "source", "target", "weight"}


def load_graph_yaml(yaml_str: str) -> Tuple[List[Node], List[Edge]]:
    """Parse a graph definition from a YAML string.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return graph_from_dict(data)


def graph_from_dict(data: Mapping[str, Any]) -> Tuple[List[Node], List[Edge]]:
    """Build node and edge records from a parsed graph mapping.

    Raises:
        ValueError: If sections or entries are malformed.
    """
    unknown = set(data) - {"nodes", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized top-level keys: {sorted(unknown)}")

    raw_nodes = data.get("nodes")
    raw_edges = data.get("edges")
    if raw_nodes is None:
        raw_nodes = []
    if raw_edges is None:
        raw_edges = []
    if not isinstance(raw_nodes, list):
        raise ValueError("'nodes' must be a list")
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")

    nodes = [_parse_node(i, entry) for i, entry in enumerate(raw_nodes)]
    edges = [_parse_edge(i, entry) for i, entry in enumerate(raw_edges)]
    logger.debug("Loaded graph definition: %d nodes, %d edges", len(nodes), len(edges))
    return nodes, edges


def _parse_node(index: int, entry: Any) -> Node:
    if not isinstance(entry, dict):
        raise ValueError(f"Node #{index} must be a mapping with an 'id'")
    extra = set(entry) - _NODE_KEYS
    if extra:
        raise ValueError(f"Unrecognized key '{sorted(extra)[0]}' in node #{index}")
    if "id" not in entry:
        raise ValueError(f"Node #{index} is missing 'id'")

    position = entry.get("position", (0.0, 0.0))
    if (
        not isinstance(position, (list, tuple))
        or len(position) != 2
        or not all(_is_number(v) for v in position)
    ):
        raise ValueError(f"Node '{entry['id']}' position must be a pair of numbers")

    return Node(
        id=str(entry["id"]),
        label=str(entry.get("label") or entry["id"]),
        position=(float(position[0]), float(position[1])),
    )


def _parse_edge(index: int, entry: Any) -> Edge:
    if not isinstance(entry, dict):
        raise ValueError(
            f"Edge #{index} must be a mapping with 'source', 'target' and 'weight'"
        )
    extra = set(entry) - _EDGE_KEYS
    if extra:
        raise ValueError(f"Unrecognized key '{sorted(extra)[0]}' in edge #{index}")
    for key in ("source", "target", "weight"):
        if key not in entry:
            raise ValueError(f"Edge #{index} is missing '{key}'")
    if not _is_number(entry["weight"]):
        raise ValueError(f"Edge #{index} weight must be numeric")

    edge_id = str(entry["id"]) if entry.get("id") is not None else new_id()
    return Edge(
        source=str(entry["source"]),
        target=str(entry["target"]),
        weight=entry["weight"],
        id=edge_id,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def graph_to_dict(nodes: List[Node], edges: List[Edge]) -> Dict[str, Any]:
    """Inverse of :func:`graph_from_dict`."""
    return {
        "nodes": [node.to_dict() for node in nodes],
        "edges": [edge.to_dict() for edge in edges],
    }


def path_to_dict(path: Path) -> Dict[str, Any]:
    """Return a JSON-ready dict of ``path`` in stored (target-first) order."""
    return path.to_dict()
