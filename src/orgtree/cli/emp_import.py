"""Create the emp table in MySQL and bulk-load an org-chart file into it."""
from __future__ import annotations

import shlex
import sys
from pathlib import Path

from orgtree.errors import InvalidArgument
from orgtree.external import mysql
from ._common import UsageParser, add_verbose, fail, setup_logging


def build_parser() -> UsageParser:
    ap = UsageParser(prog="orgtree-emp-import", description=__doc__)
    ap.add_argument("csv_path", help="org-chart file; its stem names the table (emp.csv -> emp)")
    ap.add_argument("--db", default="studyjoin", help="database name (default studyjoin)")
    ap.add_argument("--user", default=None, help=f"MySQL user (default {mysql.MYSQL_USER})")
    ap.add_argument("-p", "--password", action="store_true", help="prompt for a password on import")
    ap.add_argument("--dry-run", action="store_true", help="print the commands instead of running them")
    add_verbose(ap)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    table = Path(args.csv_path).stem
    try:
        commands = [mysql.mysql_command(sql, user=args.user) for sql in mysql.emp_table_sql(args.db, table)]
        commands.append(
            mysql.mysqlimport_command(
                args.csv_path, args.db, user=args.user, prompt_password=args.password
            )
        )
    except InvalidArgument as e:
        return fail(ap.prog, e)

    if args.dry_run:
        for cmd in commands:
            print(shlex.join(cmd))
        return 0

    mysql.create_emp_table(args.db, table, user=args.user)
    mysql.import_emp_csv(args.csv_path, args.db, user=args.user, prompt_password=args.password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
