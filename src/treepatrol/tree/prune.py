from __future__ import annotations

import logging
from collections import deque
from typing import AbstractSet, List, Sequence

logger = logging.getLogger(__name__)


def is_prunable(adj: Sequence[Sequence[int]], marked: AbstractSet[int], u: int) -> bool:
    """A node can be cut iff it is an unmarked leaf."""
    return len(adj[u]) == 1 and u not in marked


def prune(adj: List[List[int]], marked: AbstractSet[int]) -> List[int]:
    """
    Strip unmarked leaves from adj in place until none are left.

    What survives is the minimal subtree spanning the marked nodes; pruned
    nodes are left with an empty neighbour list. Queue entries can go stale
    (a neighbour may have been cut from the other side), so the predicate is
    re-checked on every dequeue.

    Returns the removed nodes in removal order.
    """
    queue = deque(u for u in range(len(adj)) if is_prunable(adj, marked, u))
    removed: List[int] = []

    while queue:
        u = queue.popleft()
        if not is_prunable(adj, marked, u):
            continue

        v = adj[u].pop()
        adj[v] = [w for w in adj[v] if w != u]
        removed.append(u)
        queue.append(v)

    logger.debug("pruned %d of %d nodes", len(removed), len(adj))
    return removed
