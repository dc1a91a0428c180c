"""Level-order (parent, child) enumeration of the implicit n-ary tree.

Only the current level's index range and the emitted-edge count are kept
as state, so enumeration runs in O(1) extra space.
"""
from __future__ import annotations

import logging
from typing import Iterator, Tuple

from orgtree.errors import require_int

Edge = Tuple[int, int]
LevelEdge = Tuple[int, int, int]

log = logging.getLogger(__name__)


def _walk(n: int, n_nodes: int) -> Iterator[LevelEdge]:
    emitted = 0
    if n_nodes == 0:
        return

    level = 0
    cur_start = cur_end = 1
    while True:
        next_start = cur_end + 1
        next_end = next_start + n ** (level + 1) - 1
        log.debug("level %d: parents %d..%d, children %d..%d",
                  level, cur_start, cur_end, next_start, next_end)

        offset = 0
        for parent in range(cur_start, cur_end + 1):
            for _rank in range(n):
                yield level, parent, next_start + offset
                offset += 1
                emitted += 1
                if emitted >= n_nodes:
                    return

        level += 1
        cur_start, cur_end = next_start, next_end


def level_order_edges_with_level(n: int, n_nodes: int) -> Iterator[LevelEdge]:
    """Like level_order_edges, but yields (level, parent, child).

    *level* is the parent's level; the child sits on level + 1.
    """
    require_int("n", n, 1)
    require_int("n_nodes", n_nodes, 0)
    return _walk(n, n_nodes)


def level_order_edges(n: int, n_nodes: int) -> Iterator[Edge]:
    """Yield (parent, child) index pairs of the complete n-ary tree in level order.

    Parameters
    ----------
    n : int
        Branching factor (>= 1). n == 1 gives a chain.
    n_nodes : int
        Edge budget (>= 0). Exactly this many pairs are produced; the tree
        itself is unbounded, so the budget is the only stopping condition.

    Arguments are checked when this function is called, not on first
    iteration, so a bad call raises InvalidArgument before any output.
    """
    walk = level_order_edges_with_level(n, n_nodes)
    return ((parent, child) for _level, parent, child in walk)
