import math

import pytest

from floorpaths.errors import InvalidInputError, MalformedEdgeError
from floorpaths.model.edge import Edge


def test_edge_defaults_and_fields():
    edge = Edge(1, 0, 5)
    assert (edge.id, edge.entry, edge.exit, edge.weight) == (1, 0, 5, 1)


def test_edge_is_immutable():
    edge = Edge(1, 0, 5)
    with pytest.raises(AttributeError):
        edge.weight = 3  # type: ignore[misc]


def test_edges_hash_and_compare_by_value():
    assert Edge(1, 0, 5, 2) == Edge(1, 0, 5, 2)
    assert len({Edge(1, 0, 5), Edge(1, 0, 5)}) == 1


@pytest.mark.parametrize("weight", [0, 3, 0.5, 2.0])
def test_valid_weights(weight):
    assert Edge(1, 0, 5, weight).weight == weight


@pytest.mark.parametrize("weight", [-1, -0.5, math.nan, math.inf, "1", None, True])
def test_invalid_weights_rejected(weight):
    with pytest.raises(MalformedEdgeError):
        Edge(1, 0, 5, weight)


@pytest.mark.parametrize("edge_id", ["1", 1.0, None, True])
def test_invalid_ids_rejected(edge_id):
    with pytest.raises(MalformedEdgeError, match="id must be an integer"):
        Edge(edge_id, 0, 5)


def test_unhashable_location_rejected():
    with pytest.raises(MalformedEdgeError, match="entry location"):
        Edge(1, [0], 5)
    with pytest.raises(MalformedEdgeError, match="exit location"):
        Edge(1, 0, {"floor": 5})


def test_malformed_is_invalid_input_and_value_error():
    with pytest.raises(InvalidInputError):
        Edge(1, 0, 5, -1)
    with pytest.raises(ValueError):
        Edge(1, 0, 5, -1)


def test_string_locations_allowed():
    edge = Edge(1, "lobby", "roof")
    assert edge.entry == "lobby"


class TestFromDict:
    def test_full_mapping(self):
        edge = Edge.from_dict({"id": 3, "entry": 5, "exit": 7, "weight": 2.5})
        assert edge == Edge(3, 5, 7, 2.5)

    def test_default_weight(self):
        assert Edge.from_dict({"id": 3, "entry": 5, "exit": 7}).weight == 1
        assert Edge.from_dict({"id": 3, "entry": 5, "exit": 7}, 4).weight == 4

    def test_explicit_weight_beats_default(self):
        edge = Edge.from_dict({"id": 3, "entry": 5, "exit": 7, "weight": 0}, 4)
        assert edge.weight == 0

    def test_missing_keys(self):
        with pytest.raises(MalformedEdgeError, match="missing: entry, exit"):
            Edge.from_dict({"id": 3})

    def test_unknown_keys(self):
        with pytest.raises(MalformedEdgeError, match="Unrecognized key"):
            Edge.from_dict({"id": 3, "entry": 5, "exit": 7, "cost": 1})


def test_to_dict_round_trip():
    edge = Edge(3, 5, 7, 2)
    assert Edge.from_dict(edge.to_dict()) == edge


def test_str():
    assert str(Edge(3, 5, 7, 2)) == "edge 3: (5 -> 7) w=2"
