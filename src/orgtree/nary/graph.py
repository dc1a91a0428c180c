from __future__ import annotations

from typing import List

import networkx as nx

from .level_order import level_order_edges, level_order_edges_with_level, Edge


def nary_tree_edges(n: int, n_nodes: int) -> List[Edge]:
    """Materialize the first *n_nodes* level-order edges as a list."""
    return list(level_order_edges(n, n_nodes))


def nary_tree_adj(n: int, n_nodes: int) -> List[List[int]]:
    """
    Undirected 0-based adjacency list of the truncated tree.

    Node index i (1-based) is stored at position i - 1, so the result has
    n_nodes + 1 entries; adj[u] is sorted.
    """
    edges = level_order_edges(n, n_nodes)
    adj: List[List[int]] = [[] for _ in range(n_nodes + 1)]
    for parent, child in edges:
        adj[parent - 1].append(child - 1)
        adj[child - 1].append(parent - 1)
    return [sorted(neigh) for neigh in adj]


def nary_tree_nx(n: int, n_nodes: int) -> nx.DiGraph:
    """
    Directed parent -> child NetworkX graph of the truncated tree.

    Nodes keep their 1-based level-order indices and carry a 'level' attribute.
    """
    G = nx.DiGraph()
    G.add_node(1, level=0)
    for level, parent, child in level_order_edges_with_level(n, n_nodes):
        G.add_node(child, level=level + 1)
        G.add_edge(parent, child)
    return G
