"""NetworkX graph conversion.

Example:
    >>> import networkx as nx
    >>> from pathgraph.lib.nx import to_networkx
    >>> G = to_networkx(nodes, edges)
    >>> nx.dijkstra_path_length(G, "A", "C")
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

import networkx as nx

from pathgraph.model.graph import Edge, Node


def to_networkx(nodes: Iterable[Node], edges: Iterable[Edge]) -> nx.MultiDiGraph:
    """Convert node and edge records to a ``networkx.MultiDiGraph``.

    Nodes carry ``label`` and ``position`` attributes. Edges are keyed by edge
    id and carry ``weight``. Parallel edges are preserved.
    """
    graph = nx.MultiDiGraph()
    for node in nodes:
        graph.add_node(node.id, label=node.label, position=node.position)
    for edge in edges:
        graph.add_edge(edge.source, edge.target, key=edge.id, weight=edge.weight)
    return graph


def from_networkx(graph: nx.Graph, weight: str = "weight") -> Tuple[List[Node], List[Edge]]:
    """Convert a NetworkX graph to node and edge records.

    Undirected graphs contribute one edge per direction. Edge ids are the
    multigraph key when the graph is directed and the key is a string used
    by no other edge; otherwise ``"<u>-><v>#<n>"`` with ``n`` the edge index.
    Missing weights default to 1.

    Args:
        graph: Any NetworkX graph type.
        weight: Edge attribute holding the weight.
    """
    nodes = [
        Node(
            id=str(node_id),
            label=str(attrs.get("label", node_id)),
            position=tuple(attrs.get("position", (0.0, 0.0))),
        )
        for node_id, attrs in graph.nodes(data=True)
    ]

    directed = graph.to_directed() if not graph.is_directed() else graph
    if directed.is_multigraph():
        quads = list(directed.edges(keys=True, data=True))
    else:
        quads = [(u, v, None, d) for u, v, d in directed.edges(data=True)]

    # Multigraph keys are only unique per node pair
    key_counts = Counter(key for _, _, key, _ in quads if isinstance(key, str))

    edges: List[Edge] = []
    for index, (u, v, key, attrs) in enumerate(quads):
        if graph.is_directed() and isinstance(key, str) and key_counts[key] == 1:
            edge_id = key
        else:
            edge_id = f"{u}->{v}#{index}"
        edges.append(
            Edge(source=str(u), target=str(v), weight=attrs.get(weight, 1), id=edge_id)
        )
    return nodes, edges
