"""Closed-form level arithmetic for the implicit complete n-ary tree.

Nodes are numbered 1, 2, 3, ... in level order. Level 0 holds only the
root (index 1); level L holds n**L contiguous indices that immediately
follow those of level L-1. Nothing here materializes the tree.
"""
from __future__ import annotations

from typing import Tuple

from orgtree.errors import InvalidArgument, require_int

Bounds = Tuple[int, int]


def level_size(level: int, n: int) -> int:
    """Number of nodes on *level*: n**level."""
    require_int("level", level, 0)
    require_int("n", n, 1)
    return n ** level


def level_start(level: int, n: int) -> int:
    """First index on *level*: 1 + sum_{k<level} n**k."""
    require_int("level", level, 0)
    require_int("n", n, 1)
    if n == 1:
        return 1 + level
    # geometric series 1 + n + ... + n**(level-1)
    return 1 + (n ** level - 1) // (n - 1)


def level_end(level: int, n: int) -> int:
    """Last index on *level*."""
    return level_start(level + 1, n) - 1


def level_bounds(level: int, n: int) -> Bounds:
    """Inclusive (start, end) index range of *level*."""
    return level_start(level, n), level_end(level, n)


def level_of(index: int, n: int) -> int:
    """Level holding node *index*."""
    require_int("index", index, 1)
    require_int("n", n, 1)
    if n == 1:
        return index - 1

    level = 0
    end = 1
    while index > end:
        level += 1
        end += n ** level
    return level


def child_index(parent: int, rank: int, n: int) -> int:
    """Index of the rank-th child (1-based) of *parent*."""
    require_int("n", n, 1)
    require_int("rank", rank, 1)
    if rank > n:
        raise InvalidArgument(f"rank must be in [1, {n}], got {rank}.")
    level = level_of(parent, n)
    offset = (parent - level_start(level, n)) * n + (rank - 1)
    return level_start(level + 1, n) + offset


def parent_index(child: int, n: int) -> int:
    """Index of the parent of *child*; the root has no parent."""
    require_int("child", child, 2)
    level = level_of(child, n)
    offset = child - level_start(level, n)
    return level_start(level - 1, n) + offset // n
