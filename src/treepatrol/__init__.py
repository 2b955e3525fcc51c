"""
treepatrol: shortest walk through the marked nodes of a tree,
via leaf pruning and the two-sweep diameter.
"""

from .io.tree_input import (
    TreeInput,
    adj_to_nx,
    nx_diameter,
    parse_tree_input,
    read_tree_input,
    tree_input_to_nx,
)
from .tree.adjlist import active_nodes, build_adjacency, degrees, edges_from_adj
from .tree.prune import is_prunable, prune
from .tree.diameter import bfs_distances, diameter_endpoints, farthest_node, tree_diameter
from .route.patrol import PatrolResult, min_patrol_length, patrol, route_length
from .utils.connectivity import spans_all_nodes, validate_tree

__all__ = [
    # IO
    "TreeInput",
    "adj_to_nx",
    "nx_diameter",
    "parse_tree_input",
    "read_tree_input",
    "tree_input_to_nx",
    # Tree
    "active_nodes",
    "build_adjacency",
    "degrees",
    "edges_from_adj",
    "is_prunable",
    "prune",
    "bfs_distances",
    "diameter_endpoints",
    "farthest_node",
    "tree_diameter",
    # Route
    "PatrolResult",
    "min_patrol_length",
    "patrol",
    "route_length",
    # Utils
    "spans_all_nodes",
    "validate_tree",
]
