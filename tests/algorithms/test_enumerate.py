import pytest

from floorpaths.algorithms.enumerate import (
    build_successor_index,
    enumerate_paths,
    select_min_weight,
    weights_tie,
)
from floorpaths.algorithms.prune import prune
from floorpaths.errors import NoPathError
from floorpaths.model.edge import Edge
from floorpaths.model.path import Path
from floorpaths.types.base import PathState


def _ids(paths):
    return [path.id_sequence for path in paths]


def _chain(*edges):
    path = Path.start(edges[0])
    for edge in edges[1:]:
        path = path.extend(edge)
    return path


def test_successor_index_keeps_input_order():
    edges = [Edge(1, 0, 5), Edge(2, 5, 10), Edge(3, 5, 7), Edge(4, 0, 7)]
    index = build_successor_index(edges)
    assert [e.id for e in index[0]] == [1, 4]
    assert [e.id for e in index[5]] == [2, 3]
    assert 10 not in index


def test_linear_chain():
    frontier = enumerate_paths([Edge(1, 0, 5, 2), Edge(2, 5, 10, 3)], 0, 10)
    assert _ids(frontier.reached) == [(1, 2)]
    assert frontier.reached[0].weight == 5
    assert frontier.generations == 1


def test_seed_already_at_end():
    frontier = enumerate_paths([Edge(1, 0, 10), Edge(2, 0, 5), Edge(3, 5, 10)], 0, 10)
    assert _ids(frontier.reached) == [(1,), (2, 3)]


def test_tower_discovery_order(tower):
    edges, start, end = tower
    pruned = prune(edges, start, end).edges
    frontier = enumerate_paths(pruned, start, end)

    assert _ids(frontier.paths) == [
        (1, 2),
        (1, 3, 4),
        (1, 3, 19, 2),
        (1, 3, 19, 16, 17, 18),
        (1, 16, 17, 18),
        (14, 15),
    ]
    assert all(state is PathState.REACHED for state in frontier.states)
    assert frontier.incomplete == []
    assert frontier.generations == 5


def test_fork_via_8_keeps_both_routes(fork_via_8):
    edges, start, end = fork_via_8
    assert prune(edges, start, end).removed == []
    frontier = enumerate_paths(edges, start, end)
    assert _ids(frontier.reached) == [(1, 2), (1, 3, 4)]
    assert frontier.generations == 2


def test_reached_paths_are_not_extended(pass_through):
    # 10 has an outgoing edge; with end=10 paths must stop there
    edges, start, _ = pass_through
    frontier = enumerate_paths(edges, start, 10)
    assert _ids(frontier.reached) == [(1, 3, 2), (1, 4)]


def test_paths_pass_through_intermediate_locations(pass_through):
    edges, start, end = pass_through
    frontier = enumerate_paths(edges, start, end)
    assert _ids(frontier.reached) == [(1, 3, 2, 5), (1, 4, 5)]


def test_cycle_terminates_and_never_repeats_edges(loop_back):
    edges, start, end = loop_back
    frontier = enumerate_paths(edges, start, end)

    assert _ids(frontier.reached) == [(1, 2, 4)]
    assert _ids(frontier.incomplete) == [(1, 2, 3)]
    assert frontier.states == [PathState.EXHAUSTED, PathState.REACHED]
    for path in frontier.paths:
        assert len(path.edge_ids) == len(path)


def test_two_location_cycle():
    edges = [Edge(1, 0, 1), Edge(2, 1, 0), Edge(3, 1, 10)]
    frontier = enumerate_paths(edges, 0, 10)
    assert _ids(frontier.reached) == [(1, 3)]
    assert _ids(frontier.incomplete) == [(1, 2)]


def test_cycle_through_start_can_still_reach_end():
    # 0 -> 1 -> 0 -> 2 -> 10 reuses location 0 but no edge
    edges = [Edge(1, 0, 1), Edge(2, 1, 0), Edge(3, 0, 2), Edge(4, 2, 10)]
    frontier = enumerate_paths(edges, 0, 10)
    assert _ids(frontier.reached) == [(1, 2, 3, 4), (3, 4)]


def test_dead_end_paths_are_dropped_inline():
    edges = [Edge(1, 0, 5), Edge(2, 5, 10), Edge(3, 5, 7)]
    frontier = enumerate_paths(edges, 0, 10)
    assert _ids(frontier.reached) == [(1, 2)]
    assert _ids(frontier.dropped) == [(1, 3)]
    assert frontier.incomplete == []


def test_dead_end_seed_is_dropped():
    edges = [Edge(1, 0, 3), Edge(2, 0, 5), Edge(3, 5, 10)]
    frontier = enumerate_paths(edges, 0, 10)
    assert _ids(frontier.dropped) == [(1,)]
    assert _ids(frontier.reached) == [(2, 3)]


def test_observer_hooks():
    seeds, generations, dropped = [], [], []

    class Recorder:
        def on_seed(self, edge):
            seeds.append(edge.id)

        def on_generation(self, n, paths):
            generations.append((n, len(paths)))

        def on_path_dropped(self, path):
            dropped.append(path.id_sequence)

    edges = [Edge(1, 0, 5), Edge(2, 5, 10), Edge(3, 5, 7), Edge(4, 0, 10)]
    enumerate_paths(edges, 0, 10, observer=Recorder())
    assert seeds == [1, 4]
    assert generations == [(0, 2), (1, 2)]
    assert dropped == [(1, 3)]


def test_empty_edge_set_is_no_path():
    with pytest.raises(NoPathError, match="No edges left"):
        enumerate_paths([], 0, 10)


def test_no_seed_is_no_path():
    with pytest.raises(NoPathError, match="No edge starts"):
        enumerate_paths([Edge(1, 3, 10), Edge(2, 10, 3)], 0, 10)


def test_unreachable_end_leaves_nothing_reached():
    edges = [Edge(1, 0, 5), Edge(2, 5, 0), Edge(3, 7, 10), Edge(4, 10, 7)]
    frontier = enumerate_paths(edges, 0, 10)
    assert frontier.reached == []
    assert frontier.states == [PathState.EXHAUSTED]


class TestSelectMinWeight:
    def test_tie_inclusion(self, diamond):
        edges, start, end = diamond
        frontier = enumerate_paths(edges, start, end)
        winners = select_min_weight(frontier.paths, end)
        assert _ids(winners) == [(1, 2), (3, 4)]
        assert {p.weight for p in winners} == {2}

    def test_parallel_edges_tie(self, parallel_edges):
        edges, start, end = parallel_edges
        frontier = enumerate_paths(prune(edges, start, end).edges, start, end)
        assert _ids(select_min_weight(frontier.paths, end)) == [(1, 3, 4), (1, 3, 5)]

    def test_weight_beats_edge_count(self):
        edges = [
            Edge(1, 0, 10, 5),
            Edge(2, 0, 5, 1),
            Edge(3, 5, 10, 1.5),
        ]
        frontier = enumerate_paths(edges, 0, 10)
        winners = select_min_weight(frontier.paths, 10)
        assert _ids(winners) == [(2, 3)]
        assert winners[0].weight == 2.5

    def test_ignores_paths_not_at_end(self):
        a, b, c = Edge(1, 0, 5, 1), Edge(2, 5, 10, 4), Edge(3, 0, 7, 0)
        paths = [Path.start(c), _chain(a, b)]
        assert _ids(select_min_weight(paths, 10)) == [(1, 2)]

    def test_first_minimum_not_duplicated(self):
        a, b = Edge(1, 0, 5), Edge(2, 5, 10)
        first = _chain(a, b)
        same = _chain(a, b)
        assert _ids(select_min_weight([first, same], 10)) == [(1, 2)]
        assert select_min_weight([first, same], 10)[0] is first

    def test_float_rounding_counts_as_tie(self):
        edges = [Edge(1, 0, 5, 0.1), Edge(2, 5, 10, 0.2), Edge(3, 0, 10, 0.3)]
        frontier = enumerate_paths(edges, 0, 10)
        assert _chain(edges[0], edges[1]).weight != 0.3
        assert _ids(select_min_weight(frontier.paths, 10)) == [(1, 2), (3,)]

    def test_close_but_heavier_float_loses(self):
        edges = [Edge(1, 0, 5, 0.1), Edge(2, 5, 10, 0.2001), Edge(3, 0, 10, 0.3)]
        frontier = enumerate_paths(edges, 0, 10)
        assert _ids(select_min_weight(frontier.paths, 10)) == [(3,)]

    def test_nothing_reached(self):
        assert select_min_weight([Path.start(Edge(1, 0, 5))], 10) == []
        assert select_min_weight([], 10) == []


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (2, 2, True),
        (2, 3, False),
        (0.1 + 0.2, 0.3, True),
        (0.3, 0.3 + 1e-9, False),
        (3, 3.0, True),
    ],
)
def test_weights_tie(a, b, expected):
    assert weights_tie(a, b) is expected
