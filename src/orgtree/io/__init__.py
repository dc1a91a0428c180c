from .orgchart import (
    TITLE,
    COLUMNS,
    NameProvider,
    FakerNameProvider,
    SequenceNameProvider,
    OrgChartRow,
    org_chart_rows,
    format_org_chart_row,
    org_chart_lines,
    write_org_chart,
)
from .edgelist import format_edge, edge_lines

__all__ = [
    "TITLE",
    "COLUMNS",
    "NameProvider",
    "FakerNameProvider",
    "SequenceNameProvider",
    "OrgChartRow",
    "org_chart_rows",
    "format_org_chart_row",
    "org_chart_lines",
    "write_org_chart",
    "format_edge",
    "edge_lines",
]
