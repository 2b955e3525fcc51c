from treepatrol.tree.adjlist import build_adjacency
from treepatrol.tree.diameter import (
    bfs_distances,
    diameter_endpoints,
    farthest_node,
    tree_diameter,
)


def _path(k):
    return build_adjacency(k, [(i, i + 1) for i in range(k - 1)])


def test_bfs_distances_path():
    assert bfs_distances(_path(4), 1) == [1, 0, 1, 2]


def test_bfs_distances_unreached_is_minus_one():
    adj = [[1], [0], []]
    assert bfs_distances(adj, 0) == [0, 1, -1]


def test_farthest_node_tie_lowest_index():
    assert farthest_node([1, 0, 2, 2, 1]) == (2, 2)


def test_diameter_path_graphs():
    for k in range(2, 8):
        assert tree_diameter(_path(k)) == k - 1


def test_diameter_single_node():
    assert tree_diameter([[]]) == 0
    assert diameter_endpoints([[]]) is None


def test_diameter_all_isolated():
    assert tree_diameter([[], [], []]) == 0


def test_diameter_start_not_on_longest_path():
    # long arm 0-1-2-3-4-5 hanging off node 6 through 7
    edges = [(6, 7), (7, 2), (0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]
    adj = build_adjacency(8, edges)
    assert tree_diameter(adj) == 5


def test_diameter_endpoints_path():
    a, b, d = diameter_endpoints(_path(5))
    assert {a, b} == {0, 4}
    assert d == 4


def test_diameter_ignores_pruned_nodes():
    # node 0 was pruned; the rest is the path 1-2-3
    adj = [[], [2], [1, 3], [2]]
    assert tree_diameter(adj) == 2
