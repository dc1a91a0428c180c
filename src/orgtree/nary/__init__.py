from .levels import (
    level_size,
    level_start,
    level_end,
    level_bounds,
    level_of,
    child_index,
    parent_index,
)
from .level_order import level_order_edges, level_order_edges_with_level, Edge
from .graph import nary_tree_edges, nary_tree_adj, nary_tree_nx

__all__ = [
    "level_size",
    "level_start",
    "level_end",
    "level_bounds",
    "level_of",
    "child_index",
    "parent_index",
    "level_order_edges",
    "level_order_edges_with_level",
    "Edge",
    "nary_tree_edges",
    "nary_tree_adj",
    "nary_tree_nx",
]
