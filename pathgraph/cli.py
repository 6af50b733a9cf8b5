"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional, Sequence, Tuple

from pathgraph.config import EngineConfig
from pathgraph.engine import ShortestPathEngine
from pathgraph.example import build_example_graph
from pathgraph.io import load_graph_yaml, path_to_dict
from pathgraph.logging import get_logger, set_global_log_level
from pathgraph.model.graph import Edge, Node
from pathgraph.types import MinSelect, NodeID

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format rows as a simple ASCII table."""
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost with up to three decimals, or ``unreachable`` for infinity.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    v = float(value)
    if math.isinf(v):
        return "unreachable"
    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _load_graph(path: Optional[Path]) -> Tuple[List[Node], List[Edge]]:
    if path is None:
        logger.info("No graph file given, using the example graph")
        return build_example_graph()
    logger.info(f"Loading graph from {path}")
    return load_graph_yaml(path.read_text(encoding="utf-8"))


def _resolve_node(nodes: Sequence[Node], ref: str) -> NodeID:
    """Resolve ``ref`` as a node id, falling back to a unique label match."""
    for node in nodes:
        if node.id == ref:
            return node.id
    matches = [node.id for node in nodes if node.label == ref]
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise KeyError(f"Label '{ref}' matches {len(matches)} nodes; use an id")
    raise KeyError(f"Node '{ref}' is not in the graph.")


def _build_engine(
    graph: Optional[Path], source: str, min_select: str
) -> Tuple[ShortestPathEngine, List[Node]]:
    nodes, edges = _load_graph(graph)
    config = EngineConfig(min_select=MinSelect.from_string(min_select))
    engine = ShortestPathEngine(nodes, edges, config=config)
    engine.set_source(_resolve_node(nodes, source))
    engine.analyze()
    return engine, nodes


def _show_path(
    graph: Optional[Path], source: str, target: str, min_select: str, as_json: bool
) -> None:
    """Print the shortest path from ``source`` to ``target``."""
    _start_time = perf_counter()
    try:
        engine, nodes = _build_engine(graph, source, min_select)
        path = engine.get_shortest_path(_resolve_node(nodes, target))

        if as_json:
            print(json.dumps(path_to_dict(path), indent=2))
        else:
            labels = {node.id: node.label for node in nodes}
            route = " -> ".join(labels[n] for n in path.ordered_nodes())
            print(f"Path: {route}")
            print(f"Cost: {_format_cost(path.cost)}")
            print(f"Hops: {path.hops}")

        logger.info(f"Path query completed in {(perf_counter() - _start_time):.3f} s")

    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph}")
        print(f"❌ ERROR: Graph file not found: {graph}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to compute path: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to compute path: {type(e).__name__}: {e}")
        sys.exit(1)


def _show_distances(graph: Optional[Path], source: str, min_select: str) -> None:
    """Print the distance from ``source`` to every node."""
    try:
        engine, nodes = _build_engine(graph, source, min_select)
        rows = []
        for node in nodes:
            prev = engine.predecessor_of(node.id)
            rows.append(
                [
                    node.label,
                    _format_cost(engine.distance_to(node.id)),
                    engine.nodes[prev].label if prev is not None else "-",
                ]
            )
        print(f"Distances from {engine.nodes[engine.source].label}:")
        print(_format_table(["Node", "Distance", "Via"], rows))

    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph}")
        print(f"❌ ERROR: Graph file not found: {graph}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to compute distances: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to compute distances: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Compute shortest paths on small weighted directed graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,distances}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Show the shortest path between two nodes"
    )
    path_parser.add_argument(
        "--target", "-t", required=True, help="Target node id or label"
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the path as JSON (target first)"
    )

    dist_parser = subparsers.add_parser(
        "distances", help="Show distances from a source to every node"
    )

    for p in (path_parser, dist_parser):
        p.add_argument(
            "graph",
            type=Path,
            nargs="?",
            default=None,
            help="Path to graph YAML (default: bundled example graph)",
        )
        p.add_argument("--source", "-s", required=True, help="Source node id or label")
        p.add_argument(
            "--min-select",
            choices=[m.name.lower() for m in MinSelect],
            default="scan",
            help="Next-node selection strategy (default: scan)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "path":
        _show_path(args.graph, args.source, args.target, args.min_select, args.json)
    elif args.command == "distances":
        _show_distances(args.graph, args.source, args.min_select)


if __name__ == "__main__":
    main()
