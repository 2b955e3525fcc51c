import pytest

from treepatrol.route.patrol import PatrolResult, min_patrol_length, patrol, route_length
from treepatrol.tree.adjlist import build_adjacency


def test_route_length_straight_line():
    # e edges, marked ends: 2e - e = e
    for e in range(1, 6):
        adj = build_adjacency(e + 1, [(i, i + 1) for i in range(e)])
        assert route_length(adj, e) == e


def test_route_length_no_edges():
    assert route_length([[], [], []], 0) == 0


def test_scenario_two_marked_neighbours():
    assert min_patrol_length(2, [0, 1], [(0, 1)]) == 1


def test_scenario_single_marked_center():
    edges = [(0, 1), (1, 2), (2, 3), (3, 4)]
    assert min_patrol_length(5, [2], edges) == 0


def test_scenario_marked_path_ends():
    assert min_patrol_length(4, [0, 3], [(0, 1), (1, 2), (2, 3)]) == 3


def test_single_node_tree():
    assert min_patrol_length(1, [0], []) == 0
    assert min_patrol_length(1, [], []) == 0


def test_no_marked_nodes():
    assert min_patrol_length(3, [], [(0, 1), (1, 2)]) == 0


def test_star_with_three_marked_leaves():
    # centre 0, leaves 1..4; marked 1,2,3 -> subtree has 3 edges, diameter 2
    edges = [(0, 1), (0, 2), (0, 3), (0, 4)]
    result = patrol(5, [1, 2, 3], edges)
    assert result == PatrolResult(length=4, pruned_edges=3, diameter=2, endpoints=result.endpoints)
    assert set(result.endpoints) <= {1, 2, 3}


def test_patrol_does_not_mutate_inputs():
    edges = [(0, 1), (1, 2)]
    marked = [2]
    patrol(3, marked, edges)
    assert edges == [(0, 1), (1, 2)]
    assert marked == [2]


def test_patrol_validate_rejects_bad_edge_count():
    with pytest.raises(ValueError):
        patrol(3, [0], [(0, 1)], validate=True)


def test_patrol_validate_accepts_tree():
    result = patrol(4, [0, 3], [(0, 1), (1, 2), (2, 3)], validate=True)
    assert result.length == 3
    assert result.endpoints is not None


def test_walk_ends_at_far_end_of_longest_path():
    # 0-1-2-3 with a spur 1-4; all leaves marked.
    # Out and back over every edge is 8; stopping at the far end of 0..3
    # saves the 3 edges of that path.
    edges = [(0, 1), (1, 2), (2, 3), (1, 4)]
    result = patrol(5, [0, 3, 4], edges)
    assert result.pruned_edges == 4
    assert result.diameter == 3
    assert result.length == 2 * 4 - 3
    assert set(result.endpoints) in ({0, 3}, {4, 3})
