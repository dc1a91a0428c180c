"""
orgtree: synthetic org-chart and n-ary tree data, plus throwaway SQL scripts
for local MySQL join experiments.
"""

from .errors import InvalidArgument

# Implicit n-ary tree
from .nary.levels import (
    level_size,
    level_start,
    level_end,
    level_bounds,
    level_of,
    child_index,
    parent_index,
)
from .nary.level_order import level_order_edges, level_order_edges_with_level
from .nary.graph import nary_tree_edges, nary_tree_adj, nary_tree_nx

# Text output
from .io.orgchart import (
    NameProvider,
    FakerNameProvider,
    SequenceNameProvider,
    OrgChartRow,
    org_chart_rows,
    org_chart_lines,
    write_org_chart,
)
from .io.edgelist import edge_lines

# SQL
from .sql.studyjoin import studyjoin_statements, write_studyjoin_script, join_query

__all__ = [
    "InvalidArgument",
    # Levels
    "level_size",
    "level_start",
    "level_end",
    "level_bounds",
    "level_of",
    "child_index",
    "parent_index",
    # Enumeration
    "level_order_edges",
    "level_order_edges_with_level",
    "nary_tree_edges",
    "nary_tree_adj",
    "nary_tree_nx",
    # Org chart
    "NameProvider",
    "FakerNameProvider",
    "SequenceNameProvider",
    "OrgChartRow",
    "org_chart_rows",
    "org_chart_lines",
    "write_org_chart",
    "edge_lines",
    # SQL
    "studyjoin_statements",
    "write_studyjoin_script",
    "join_query",
]
