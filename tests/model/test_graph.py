import dataclasses

import pytest

from pathgraph.model.graph import Edge, Node, new_id


def test_node_defaults():
    node = Node("A")
    assert node.label == "A"
    assert node.position == (0.0, 0.0)


def test_node_position_is_tuple():
    node = Node("A", "Alpha", [1, 2])  # type: ignore[arg-type]
    assert node.position == (1, 2)
    assert node.to_dict() == {"id": "A", "label": "Alpha", "position": [1, 2]}


def test_records_are_frozen():
    node = Node("A")
    edge = Edge("A", "B", 1, id="ab")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.label = "B"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 2  # type: ignore[misc]


def test_edge_id_generated():
    first = Edge("A", "B", 1)
    second = Edge("A", "B", 1)
    assert len(first.id) == 22
    assert first.id != second.id
    assert first.to_dict() == {
        "id": first.id,
        "source": "A",
        "target": "B",
        "weight": 1,
    }


def test_new_id_is_url_safe():
    value = new_id()
    assert len(value) == 22
    assert "=" not in value and "+" not in value and "/" not in value
