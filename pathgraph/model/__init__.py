"""Graph records and query results."""

from __future__ import annotations

from pathgraph.model.graph import Edge, Node, new_id
from pathgraph.model.path import Path

__all__ = ["Edge", "Node", "Path", "new_id"]
