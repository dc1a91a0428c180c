"""Org-chart employee table built on the level-order tree enumeration.

The root employee (id 1) has no manager; every enumerated edge
(parent, child) becomes an employee row with emp_id = child and
mgr_id = parent.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, TextIO

from faker import Faker

from orgtree.errors import require_int
from orgtree.nary.level_order import level_order_edges

TITLE = "An Employee Database"
COLUMNS = ("id", "emp_id", "emp_name", "mgr_id")


class NameProvider(Protocol):
    def next_name(self) -> str:
        ...


class FakerNameProvider:
    """Random person names from Faker; pass *seed* for reproducible output."""

    def __init__(self, seed: Optional[int] = None, locale: Optional[str] = None):
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    def next_name(self) -> str:
        return self.fake.name()


class SequenceNameProvider:
    """Deterministic names 'Employee 1', 'Employee 2', ..."""

    def __init__(self, prefix: str = "Employee"):
        self.prefix = prefix
        self.count = 0

    def next_name(self) -> str:
        self.count += 1
        return f"{self.prefix} {self.count}"


@dataclass(frozen=True)
class OrgChartRow:
    id: int
    emp_id: int
    emp_name: str
    mgr_id: Optional[int]


def org_chart_rows(n_children: int, n_total: int, names: NameProvider) -> Iterator[OrgChartRow]:
    """Yield the root row followed by one row per enumerated edge (1 + n_total rows)."""
    require_int("n_children", n_children, 1)
    require_int("n_total", n_total, 0)
    edges = level_order_edges(n_children, n_total)
    return _rows(edges, names)


def _rows(edges, names: NameProvider) -> Iterator[OrgChartRow]:
    yield OrgChartRow(id=1, emp_id=1, emp_name=names.next_name(), mgr_id=None)
    for mgr, emp in edges:
        yield OrgChartRow(id=emp, emp_id=emp, emp_name=names.next_name(), mgr_id=mgr)


def format_org_chart_row(row: OrgChartRow) -> str:
    mgr = "NULL" if row.mgr_id is None else str(row.mgr_id)
    return f"{row.id}, {row.emp_id}, {row.emp_name}, {mgr}"


def org_chart_lines(n_children: int, n_total: int, names: NameProvider) -> Iterator[str]:
    """Title line, column header, then one formatted line per employee."""
    rows = org_chart_rows(n_children, n_total, names)
    yield TITLE
    yield ", ".join(COLUMNS)
    for row in rows:
        yield format_org_chart_row(row)


def write_org_chart(fp: TextIO, n_children: int, n_total: int, names: NameProvider) -> int:
    """Write the org chart to *fp*; returns the number of employee rows written."""
    written = 0
    for line in org_chart_lines(n_children, n_total, names):
        fp.write(line + "\n")
        written += 1
    return written - 2
