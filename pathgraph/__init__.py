"""pathgraph: single-source shortest paths over small weighted digraphs.

Primary API:
    ShortestPathEngine - Owns the graph, runs Dijkstra from a source, answers
        path queries
    Node, Edge - Immutable graph records
    Path - Query result (node and edge ids, target first)
    PreconditionError, NoSourceSelected, AnalysisNotReady - Lifecycle errors

Example:
    from pathgraph import Edge, Node, ShortestPathEngine

    nodes = [Node("A"), Node("B"), Node("C")]
    edges = [
        Edge("A", "B", 1, id="ab"),
        Edge("B", "C", 2, id="bc"),
        Edge("A", "C", 5, id="ac"),
    ]
    engine = ShortestPathEngine(nodes, edges)
    engine.set_source("A")
    engine.analyze()
    engine.get_shortest_path("C").nodes  # ("C", "B", "A")
"""

from __future__ import annotations

from pathgraph import cli, logging
from pathgraph._version import __version__
from pathgraph.config import (
    ENGINE_CONFIG,
    EXAMPLE_CONFIG,
    EngineConfig,
    ExampleGraphConfig,
)
from pathgraph.engine import ShortestPathEngine
from pathgraph.errors import AnalysisNotReady, NoSourceSelected, PreconditionError
from pathgraph.example import build_example_graph
from pathgraph.io import graph_from_dict, load_graph_yaml, path_to_dict
from pathgraph.model.graph import Edge, Node
from pathgraph.model.path import Path
from pathgraph.types import MinSelect

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "Path",
    # Engine
    "ShortestPathEngine",
    "MinSelect",
    # Errors
    "PreconditionError",
    "NoSourceSelected",
    "AnalysisNotReady",
    # Configuration
    "EngineConfig",
    "ExampleGraphConfig",
    "ENGINE_CONFIG",
    "EXAMPLE_CONFIG",
    # Data
    "build_example_graph",
    "load_graph_yaml",
    "graph_from_dict",
    "path_to_dict",
    # Utilities
    "cli",
    "logging",
]
