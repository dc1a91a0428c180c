from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Sequence

from orgtree.io.orgchart import COLUMNS
from orgtree.sql.studyjoin import check_identifier

log = logging.getLogger(__name__)

MYSQL = os.environ.get("ORGTREE_MYSQL", "mysql")
MYSQLIMPORT = os.environ.get("ORGTREE_MYSQLIMPORT", "mysqlimport")
MYSQL_USER = os.environ.get("ORGTREE_MYSQL_USER", "root")

# Title line and column header written by the org-chart generator.
ORG_CHART_HEADER_LINES = 2


def mysql_available() -> bool:
    """Returns True iff the mysql client appears runnable."""
    return shutil.which(MYSQL) is not None


def mysqlimport_available() -> bool:
    """Returns True iff mysqlimport appears runnable."""
    return shutil.which(MYSQLIMPORT) is not None


# ---------------------------------------------------------------------------
# SQL text
# ---------------------------------------------------------------------------

def emp_table_sql(db_name: str = "studyjoin", table: str = "emp") -> List[str]:
    """Statements that (re)create the employee table for the org-chart import."""
    check_identifier(db_name)
    check_identifier(table)
    return [
        f"create database if not exists {db_name}",
        f"use {db_name}; drop table if exists {table}; "
        f"create table {table}(id int, emp_id int, emp_name varchar(30), mgr_id int);",
    ]


# ---------------------------------------------------------------------------
# Command lines
# ---------------------------------------------------------------------------

def mysql_command(sql: str, *, user: str | None = None) -> List[str]:
    """argv for running *sql* through the mysql client."""
    return [MYSQL, f"-u{user or MYSQL_USER}", "-e", sql]


def mysqlimport_command(
    csv_path: str,
    db_name: str = "studyjoin",
    *,
    user: str | None = None,
    ignore_lines: int = ORG_CHART_HEADER_LINES,
    columns: Sequence[str] = COLUMNS,
    prompt_password: bool = False,
) -> List[str]:
    """
    argv for bulk-loading an org-chart file with mysqlimport.

    mysqlimport derives the table name from the file name, so an emp.csv
    file loads into the emp table.
    """
    check_identifier(db_name)
    check_identifier(Path(csv_path).stem)
    cmd = [MYSQLIMPORT, f"-u{user or MYSQL_USER}"]
    if prompt_password:
        cmd.append("-p")
    cmd += [
        f"--ignore-lines={ignore_lines}",
        "--fields-terminated-by=, ",
        f"--columns={','.join(columns)}",
        "--local",
        db_name,
        csv_path,
    ]
    return cmd


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

def _run(cmd: List[str]) -> None:
    log.debug("running %s", " ".join(cmd))
    subprocess.run(cmd, check=True)


def create_emp_table(db_name: str = "studyjoin", table: str = "emp", *, user: str | None = None) -> None:
    """Create the database if needed and recreate the employee table."""
    if not mysql_available():
        raise RuntimeError(
            "mysql client not available (need 'mysql' in PATH, "
            "or set ORGTREE_MYSQL)."
        )
    for sql in emp_table_sql(db_name, table):
        _run(mysql_command(sql, user=user))


def import_emp_csv(
    csv_path: str,
    db_name: str = "studyjoin",
    *,
    user: str | None = None,
    prompt_password: bool = False,
) -> None:
    """Load an org-chart file into the table named after the file."""
    if not mysqlimport_available():
        raise RuntimeError(
            "mysqlimport not available (need 'mysqlimport' in PATH, "
            "or set ORGTREE_MYSQLIMPORT)."
        )
    _run(mysqlimport_command(csv_path, db_name, user=user, prompt_password=prompt_password))
