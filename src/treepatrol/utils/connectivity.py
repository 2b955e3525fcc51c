from __future__ import annotations

from typing import AbstractSet, Sequence

from treepatrol.tree.adjlist import build_adjacency
from treepatrol.tree.diameter import bfs_distances


def spans_all_nodes(n: int, edges: Sequence[tuple[int, int]]) -> bool:
    """True iff every node in 0..n-1 is reachable from node 0."""
    if n <= 1:
        return True
    return -1 not in bfs_distances(build_adjacency(n, edges), 0)


def validate_tree(
    n: int,
    edges: Sequence[tuple[int, int]],
    marked: AbstractSet[int] = frozenset(),
) -> None:
    """
    Raise ValueError unless edges form a tree on 0..n-1 and every marked
    index is in range.
    """
    if n < 1:
        raise ValueError(f"tree needs at least one node, got n={n}")
    if len(edges) != n - 1:
        raise ValueError(f"tree on {n} nodes needs {n - 1} edges, got {len(edges)}")
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) has an endpoint outside [0, {n})")
        if a == b:
            raise ValueError(f"self-loop at node {a}")
    bad = sorted(u for u in marked if not 0 <= u < n)
    if bad:
        raise ValueError(f"marked nodes outside [0, {n}): {bad}")
    # n-1 edges + connected <=> tree
    if not spans_all_nodes(n, edges):
        raise ValueError("edges do not form a connected tree")
