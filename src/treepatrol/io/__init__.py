from .tree_input import (
    TreeInput,
    adj_to_nx,
    nx_diameter,
    parse_tree_input,
    read_tree_input,
    tree_input_to_nx,
)

__all__ = [
    "TreeInput",
    "adj_to_nx",
    "nx_diameter",
    "parse_tree_input",
    "read_tree_input",
    "tree_input_to_nx",
]
