from .layouts import level_layout
from .draw import draw_nary_tree

__all__ = ["level_layout", "draw_nary_tree"]
