from __future__ import annotations

from typing import Iterator

from orgtree.nary.level_order import level_order_edges_with_level


def format_edge(parent: int, child: int) -> str:
    return f"{parent}, {child}"


def edge_lines(n: int, n_nodes: int, *, header: bool = True, levels: bool = False) -> Iterator[str]:
    """
    Lines of the debug tree printer.

    header: first line echoes the arguments as 'n: N, n_nodes: M'.
    levels: prefix each edge with the parent's level, 'L: parent, child'.
    """
    walk = level_order_edges_with_level(n, n_nodes)
    if header:
        yield f"n: {n}, n_nodes: {n_nodes}"
    for level, parent, child in walk:
        if levels:
            yield f"{level}: {format_edge(parent, child)}"
        else:
            yield format_edge(parent, child)
