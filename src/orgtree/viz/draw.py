from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import networkx as nx

from orgtree.nary.graph import nary_tree_nx
from .layouts import level_layout

log = logging.getLogger(__name__)


def draw_nary_tree(
    n: int,
    n_nodes: int,
    *,
    with_labels: bool = True,
    node_size: int = 300,
    edge_width: float = 1.0,
    max_nodes_to_draw: int = 400,
    save_path: str | None = None,
):
    """
    Draw the first n_nodes level-order edges of the n-ary tree, root on top.

    If save_path is set, saves a PNG there and closes the figure;
    otherwise shows it. Returns the drawn graph.
    """
    G = nary_tree_nx(n, n_nodes)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.set_title(f"n={n}  |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}")
    ax.set_axis_off()

    if G.number_of_nodes() <= max_nodes_to_draw:
        nx.draw_networkx(
            G,
            pos=level_layout(G),
            ax=ax,
            arrows=False,
            with_labels=with_labels,
            node_size=node_size,
            width=edge_width,
        )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={G.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
        log.debug("saved tree drawing to %s", save_path)
    else:
        plt.show()

    return G
