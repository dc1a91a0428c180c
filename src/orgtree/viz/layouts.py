from __future__ import annotations

import networkx as nx


def level_layout(G: nx.Graph, scale: float = 1.0):
    """
    Layered layout keyed on the 'level' node attribute:
      - nodes of one level share a y coordinate
      - the root level is at the top
    """
    pos = nx.multipartite_layout(G, subset_key="level", align="horizontal", scale=scale)
    return {v: (float(x), -float(y)) for v, (x, y) in pos.items()}
