from .adjlist import active_nodes, build_adjacency, degrees, edges_from_adj
from .prune import is_prunable, prune
from .diameter import bfs_distances, diameter_endpoints, farthest_node, tree_diameter

__all__ = [
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
]
