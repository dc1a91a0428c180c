"""SQL script for studying multi-table join performance in MySQL.

Creates a fresh database with tables t1..tN, each holding a single int
column i1..iN populated with the values 1..n_rows.
"""
from __future__ import annotations

import logging
import re
from typing import Iterator

from orgtree.errors import InvalidArgument, require_int

log = logging.getLogger(__name__)

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def check_identifier(name: str) -> str:
    """Return *name* if it is a plain unquoted SQL identifier."""
    if not isinstance(name, str) or not _IDENT_RE.match(name):
        raise InvalidArgument(f"not a valid SQL identifier: {name!r}.")
    return name


def table_statements(ti: int, n_rows: int) -> Iterator[str]:
    """create + insert statements for table t{ti}."""
    yield f"create table t{ti} (i{ti} int);"
    for ri in range(1, n_rows + 1):
        yield f"insert into t{ti}(i{ti}) values({ri});"


def join_query(n_tables: int) -> str:
    """Count rows of the equi-join t1 join t2 on i1 = i2 join t3 on i2 = i3 ..."""
    require_int("n_tables", n_tables, 1)
    parts = ["select count(*) from t1"]
    for ti in range(2, n_tables + 1):
        parts.append(f"join t{ti} on i{ti - 1} = i{ti}")
    return " ".join(parts) + ";"


def studyjoin_statements(
    n_rows: int = 1000,
    n_tables: int = 3,
    db_name: str = "studyjoins",
    *,
    with_query: bool = False,
) -> Iterator[str]:
    """Yield the statements of the join-study script, one per item."""
    require_int("n_rows", n_rows, 0)
    require_int("n_tables", n_tables, 1)
    check_identifier(db_name)
    return _statements(n_rows, n_tables, db_name, with_query)


def _statements(n_rows: int, n_tables: int, db_name: str, with_query: bool) -> Iterator[str]:
    yield f"drop database if exists {db_name};"
    yield f"create database {db_name};"
    yield f"use {db_name};"
    for ti in range(1, n_tables + 1):
        yield from table_statements(ti, n_rows)
    if with_query:
        yield join_query(n_tables)


def write_studyjoin_script(
    path: str,
    n_rows: int = 1000,
    n_tables: int = 3,
    db_name: str = "studyjoins",
    *,
    with_query: bool = False,
) -> int:
    """Write the script to *path*; returns the number of statements written."""
    statements = studyjoin_statements(n_rows, n_tables, db_name, with_query=with_query)
    count = 0
    with open(path, "w", encoding="utf-8") as fp:
        for stmt in statements:
            fp.write(stmt + "\n")
            count += 1
    log.debug("wrote %d statements to %s", count, path)
    return count
