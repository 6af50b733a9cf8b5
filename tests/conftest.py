"""Shared fixtures: small hand-drawn graphs."""

from __future__ import annotations

import pytest

from pathgraph.model.graph import Edge, Node


@pytest.fixture
def abc_graph():
    # Metric:
    #      [1]      [2]
    #  A───────►B───────►C
    #  │                 ▲
    #  └─────────────────┘
    #          [5]
    nodes = [Node("A"), Node("B"), Node("C")]
    edges = [
        Edge("A", "B", 1, id="A->B"),
        Edge("B", "C", 2, id="B->C"),
        Edge("A", "C", 5, id="A->C"),
    ]
    return nodes, edges


@pytest.fixture
def parallel_graph():
    # Metric:
    #      [3,1,1]     [2]
    #  A═══════►B───────►C
    nodes = [Node("A"), Node("B"), Node("C")]
    edges = [
        Edge("A", "B", 3, id="ab-heavy"),
        Edge("A", "B", 1, id="ab-light-1"),
        Edge("A", "B", 1, id="ab-light-2"),
        Edge("B", "C", 2, id="bc"),
    ]
    return nodes, edges


@pytest.fixture
def disconnected_graph():
    # A ──[1]──► B      C ──[1]──► D      (D has no way back)
    nodes = [Node("A"), Node("B"), Node("C"), Node("D")]
    edges = [
        Edge("A", "B", 1, id="ab"),
        Edge("C", "D", 1, id="cd"),
        Edge("B", "A", 4, id="ba"),
    ]
    return nodes, edges


@pytest.fixture
def square_graph():
    # Two equal-cost routes A->B->D and A->C->D, plus a reverse edge D->A.
    #
    #      [1]
    #   A──────►B
    #   │       │
    # [1]      [1]
    #   ▼       ▼
    #   C──────►D
    #      [1]
    nodes = [Node("A"), Node("B"), Node("C"), Node("D")]
    edges = [
        Edge("A", "B", 1, id="ab"),
        Edge("A", "C", 1, id="ac"),
        Edge("B", "D", 1, id="bd"),
        Edge("C", "D", 1, id="cd"),
        Edge("D", "A", 1, id="da"),
    ]
    return nodes, edges
