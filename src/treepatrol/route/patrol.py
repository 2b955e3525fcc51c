from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from treepatrol.tree.adjlist import active_nodes, build_adjacency
from treepatrol.tree.diameter import diameter_endpoints
from treepatrol.tree.prune import prune
from treepatrol.utils.connectivity import validate_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatrolResult:
    """
    Outcome of one patrol computation.

    length:       minimum walk length visiting every marked node, starting at
                  one end of the longest path and finishing at the other
    pruned_edges: edges left in the spanning subtree of the marked nodes
    diameter:     longest path (edge count) in that subtree
    endpoints:    ends of that path, or None if the subtree has no edges
    """

    length: int
    pruned_edges: int
    diameter: int
    endpoints: Optional[Tuple[int, int]]


def route_length(adj: Sequence[Sequence[int]], diameter: int) -> int:
    """
    2 * |E| - diameter over a pruned tree.

    Every edge is walked out and back except those on the longest path,
    which are walked once because the walk stops at its far end instead of
    returning. A tree with no edges needs no walk at all.
    """
    active = len(active_nodes(adj))
    if active == 0:
        return 0
    edges = active - 1
    return 2 * edges - diameter


def patrol(
    n: int,
    marked: Iterable[int],
    edges: Sequence[Tuple[int, int]],
    *,
    validate: bool = False,
) -> PatrolResult:
    """
    Build, prune, measure and price a patrol route.

    Inputs are not mutated. With validate=True, malformed trees raise
    ValueError instead of producing undefined output.
    """
    marked_set = frozenset(marked)
    if validate:
        validate_tree(n, edges, marked_set)

    adj = build_adjacency(n, edges)
    prune(adj, marked_set)

    ends = diameter_endpoints(adj)
    diameter = 0 if ends is None else ends[2]
    length = route_length(adj, diameter)
    remaining = max(len(active_nodes(adj)) - 1, 0)

    logger.debug("n=%d marked=%d edges_left=%d length=%d", n, len(marked_set), remaining, length)
    return PatrolResult(
        length=length,
        pruned_edges=remaining,
        diameter=diameter,
        endpoints=None if ends is None else (ends[0], ends[1]),
    )


def min_patrol_length(
    n: int,
    marked: Iterable[int],
    edges: Sequence[Tuple[int, int]],
) -> int:
    return patrol(n, marked, edges).length
