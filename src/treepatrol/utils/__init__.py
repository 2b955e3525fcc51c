from .connectivity import spans_all_nodes, validate_tree

__all__ = [
    "spans_all_nodes",
    "validate_tree",
]
