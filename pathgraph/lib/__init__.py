"""Integrations with third-party graph libraries."""

from __future__ import annotations

from pathgraph.lib.nx import from_networkx, to_networkx

__all__ = ["from_networkx", "to_networkx"]
