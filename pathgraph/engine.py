"""Single-source shortest paths over a small, static, weighted digraph.

The engine owns the node and edge tables, an outgoing adjacency index built at
construction, and per-node analysis state (best-known distance and predecessor
id). Usage follows a fixed lifecycle::

    engine = ShortestPathEngine(nodes, edges)
    engine.set_source("A")
    engine.analyze()
    path = engine.get_shortest_path("C")

Notes:
    - ``analyze`` is a label-setting Dijkstra run. Every call resets all
      distances and predecessors and recomputes them from the current source.
    - Changing the source invalidates the analysis; path queries raise
      :class:`~pathgraph.errors.AnalysisNotReady` until ``analyze`` runs again.
    - Edge weights are not validated. Negative weights yield wrong distances,
      not errors. Edges whose target is not a known node raise ``KeyError``
      from ``analyze`` when relaxed.
    - Predecessors are stored as node ids in a table keyed by node id, so the
      shortest-path tree is implicit and resettable in place.
"""

from __future__ import annotations

import math
from heapq import heappop, heappush
from time import perf_counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from pathgraph.config import ENGINE_CONFIG, EngineConfig
from pathgraph.errors import AnalysisNotReady, NoSourceSelected
from pathgraph.logging import get_logger
from pathgraph.model.graph import Edge, Node
from pathgraph.model.path import Path
from pathgraph.types import Cost, EdgeID, MinSelect, NodeID

logger = get_logger(__name__)


class ShortestPathEngine:
    """Dijkstra shortest-path engine with explicit source/analyze/query steps.

    Args:
        nodes: Node records. Ids must be unique; later duplicates replace
            earlier ones.
        edges: Directed edge records referencing node ids.
        config: Engine configuration. Defaults to the global ``ENGINE_CONFIG``.
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        edges: Iterable[Edge],
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config if config is not None else ENGINE_CONFIG

        self._nodes: Dict[NodeID, Node] = {}
        self._edges: Dict[EdgeID, Edge] = {}
        self._outgoing: Dict[NodeID, List[EdgeID]] = {}

        for node in nodes:
            self._nodes[node.id] = node
            self._outgoing[node.id] = []

        for edge in edges:
            self._edges[edge.id] = edge
            self._outgoing.setdefault(edge.source, []).append(edge.id)

        self._dist: Dict[NodeID, Cost] = {}
        self._pred: Dict[NodeID, Optional[NodeID]] = {}
        self._reset_state()

        self._source: Optional[NodeID] = None
        self._analyzed_for: Optional[NodeID] = None

        logger.debug(
            "Engine built with %d nodes and %d edges", len(self._nodes), len(self._edges)
        )

    def __repr__(self) -> str:
        return (
            f"ShortestPathEngine(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"source={self._source!r}, analyzed={self.is_analyzed})"
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def nodes(self) -> Mapping[NodeID, Node]:
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> Mapping[EdgeID, Edge]:
        return MappingProxyType(self._edges)

    @property
    def source(self) -> Optional[NodeID]:
        """Currently selected source id, or None."""
        return self._source

    @property
    def is_analyzed(self) -> bool:
        """True when the analysis state is valid for the current source."""
        return self._source is not None and self._analyzed_for == self._source

    def outgoing(self, node_id: NodeID) -> Tuple[EdgeID, ...]:
        """Return ids of edges leaving ``node_id``, in input order.

        Raises:
            KeyError: If ``node_id`` is not a known node.
        """
        self._require_node(node_id)
        return tuple(self._outgoing[node_id])

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def set_source(self, node_id: NodeID) -> None:
        """Select the analysis origin.

        Distances are left untouched; call :meth:`analyze` before querying.
        Selecting a different node invalidates the current analysis.
        """
        if node_id != self._source:
            logger.debug("Source changed from %r to %r", self._source, node_id)
            self._analyzed_for = None
        self._source = node_id

    def analyze(self) -> None:
        """Compute shortest distances and predecessors from the current source.

        Each call is a full recomputation: all distances are reset to infinity
        and all predecessors to None before the run.

        Raises:
            NoSourceSelected: If :meth:`set_source` was never called.
            KeyError: If the source id is not a known node.
        """
        if self._source is None:
            logger.debug("analyze() called without a source")
            raise NoSourceSelected("analyze graph")
        source = self._source
        self._require_node(source)

        started = perf_counter()
        self._analyzed_for = None
        self._reset_state()
        self._dist[source] = 0

        if self.config.min_select == MinSelect.HEAP:
            visited = self._run_heap(source)
        else:
            visited = self._run_scan()

        self._analyzed_for = source

        if self.config.log_timing:
            logger.debug(
                "Analysis from %r settled %d/%d nodes in %.3f ms",
                source,
                visited,
                len(self._nodes),
                (perf_counter() - started) * 1000.0,
            )

    def _run_scan(self) -> int:
        visited: Set[NodeID] = set()
        while len(visited) < len(self._nodes):
            node_id = self._closest_unvisited(visited)
            if node_id is None:
                # Remaining nodes are unreachable
                break
            visited.add(node_id)
            self._relax(node_id)
        return len(visited)

    def _run_heap(self, source: NodeID) -> int:
        visited: Set[NodeID] = set()
        min_pq: List[Tuple[Cost, int, NodeID]] = [(0, 0, source)]
        counter = 1
        while min_pq:
            dist, _, node_id = heappop(min_pq)
            if node_id in visited or dist > self._dist[node_id]:
                continue
            visited.add(node_id)
            for neighbor_id in self._relax(node_id):
                heappush(min_pq, (self._dist[neighbor_id], counter, neighbor_id))
                counter += 1
        return len(visited)

    def _closest_unvisited(self, visited: Set[NodeID]) -> Optional[NodeID]:
        """Return the unvisited node with the smallest finite distance.

        Ties go to the node that appears first in the input order.
        """
        best_id: Optional[NodeID] = None
        best_dist: Cost = math.inf
        for node_id, dist in self._dist.items():
            if node_id not in visited and dist < best_dist:
                best_id = node_id
                best_dist = dist
        return best_id

    def _relax(self, node_id: NodeID) -> List[NodeID]:
        """Relax all outgoing edges of ``node_id``; return improved neighbors."""
        improved: List[NodeID] = []
        base = self._dist[node_id]
        for edge_id in self._outgoing[node_id]:
            edge = self._edges[edge_id]
            candidate = base + edge.weight
            if candidate < self._dist[edge.target]:
                self._dist[edge.target] = candidate
                self._pred[edge.target] = node_id
                improved.append(edge.target)
        return improved

    def _reset_state(self) -> None:
        for node_id in self._nodes:
            self._dist[node_id] = math.inf
            self._pred[node_id] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_shortest_path(self, target_id: NodeID) -> Path:
        """Reconstruct the shortest path from the source to ``target_id``.

        The returned sequences run from the target back to the source. An
        unreachable target yields a path holding only the target, no edges
        and an infinite cost. Querying the source itself yields ``[source]``
        with no edges and zero cost.

        Raises:
            NoSourceSelected: If no source has been set.
            AnalysisNotReady: If the current source has not been analyzed.
            KeyError: If ``target_id`` is not a known node.
        """
        source = self._require_analysis("get shortest path")
        self._require_node(target_id)

        nodes: List[NodeID] = []
        edges: List[EdgeID] = []
        seen: Set[NodeID] = set()
        current: NodeID = target_id

        while True:
            nodes.append(current)
            seen.add(current)
            prev = self._pred[current]
            if prev is None:
                break
            if prev in seen:
                # Only reachable with negative weights
                logger.warning(
                    "Predecessor cycle at %r while tracing path to %r", prev, target_id
                )
                break
            edge_id = self._edge_between(prev, current)
            if edge_id is None:
                break
            edges.append(edge_id)
            current = prev

        path = Path(
            source=source,
            target=target_id,
            nodes=tuple(nodes),
            edges=tuple(edges),
            cost=self._dist[target_id],
        )
        logger.debug(
            "Path %r -> %r: %d hops, cost %s", source, target_id, path.hops, path.cost
        )
        return path

    def distance_to(self, node_id: NodeID) -> Cost:
        """Return the shortest distance to ``node_id`` (``inf`` if unreachable)."""
        self._require_analysis("read distances")
        self._require_node(node_id)
        return self._dist[node_id]

    def predecessor_of(self, node_id: NodeID) -> Optional[NodeID]:
        """Return the predecessor of ``node_id`` on its shortest path, or None."""
        self._require_analysis("read predecessors")
        self._require_node(node_id)
        return self._pred[node_id]

    def distances(self) -> Dict[NodeID, Cost]:
        """Return a copy of the full distance table."""
        self._require_analysis("read distances")
        return dict(self._dist)

    def _edge_between(self, src: NodeID, dst: NodeID) -> Optional[EdgeID]:
        """Return the lightest edge ``src -> dst``; first in input order on ties."""
        best: Optional[Edge] = None
        for edge_id in self._outgoing.get(src, ()):
            edge = self._edges[edge_id]
            if edge.target == dst and (best is None or edge.weight < best.weight):
                best = edge
        return best.id if best is not None else None

    def _require_node(self, node_id: NodeID) -> None:
        if node_id not in self._nodes:
            raise KeyError(f"Node '{node_id}' is not in the graph.")

    def _require_analysis(self, operation: str) -> NodeID:
        if self._source is None:
            logger.debug("Cannot %s: no source selected", operation)
            raise NoSourceSelected(operation)
        if self._analyzed_for != self._source:
            logger.debug("Cannot %s: source %r not analyzed", operation, self._source)
            raise AnalysisNotReady(self._source)
        return self._source
