from __future__ import annotations

import logging
from collections import deque
from typing import List, Optional, Sequence, Tuple

from .adjlist import active_nodes

logger = logging.getLogger(__name__)


def bfs_distances(adj: Sequence[Sequence[int]], source: int) -> List[int]:
    """
    Edge-count distances from source; -1 marks nodes that were not reached.
    """
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] != -1:
                continue
            dist[v] = dist[u] + 1
            queue.append(v)
    return dist


def farthest_node(dist: Sequence[int]) -> Tuple[int, int]:
    """
    Returns (node, distance) for the maximal entry of dist.
    Ties go to the lowest index.
    """
    best, best_d = -1, -1
    for u, d in enumerate(dist):
        if d > best_d:
            best, best_d = u, d
    return best, best_d


def diameter_endpoints(adj: Sequence[Sequence[int]]) -> Optional[Tuple[int, int, int]]:
    """
    Two-sweep BFS on a tree (or forest of one non-trivial component).

    Returns (a, b, d) where a and b are the ends of a longest path and d its
    edge length, or None if no node has an edge.
    """
    starts = active_nodes(adj)
    if not starts:
        return None

    a, _ = farthest_node(bfs_distances(adj, starts[0]))
    b, d = farthest_node(bfs_distances(adj, a))
    logger.debug("diameter %d between %d and %d", d, a, b)
    return a, b, d


def tree_diameter(adj: Sequence[Sequence[int]]) -> int:
    ends = diameter_endpoints(adj)
    if ends is None:
        return 0
    return ends[2]
