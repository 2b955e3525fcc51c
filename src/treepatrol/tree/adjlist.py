from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


def build_adjacency(n: int, edges: Iterable[Tuple[int, int]]) -> List[List[int]]:
    """
    Build a 0..n-1 adjacency list from undirected edges.

    adj[u] lists neighbours of u in edge insertion order.
    Indices are not bounds-checked; see treepatrol.utils.connectivity.validate_tree.
    """
    adj: List[List[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def edges_from_adj(adj: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    """
    Return undirected edges as (u,v) with u < v.
    """
    eds: List[Tuple[int, int]] = []
    for u, neigh in enumerate(adj):
        for v in neigh:
            if v > u:
                eds.append((u, v))
    return eds


def degrees(adj: Sequence[Sequence[int]]) -> List[int]:
    return [len(neigh) for neigh in adj]


def active_nodes(adj: Sequence[Sequence[int]]) -> List[int]:
    """Indices of nodes with at least one remaining edge."""
    return [u for u, neigh in enumerate(adj) if neigh]
