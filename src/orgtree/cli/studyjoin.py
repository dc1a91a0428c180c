"""Write a MySQL script that builds tables t1..tN for studying joins."""
from __future__ import annotations

import sys

from orgtree.errors import InvalidArgument
from orgtree.sql.studyjoin import write_studyjoin_script
from ._common import UsageParser, add_verbose, fail, setup_logging


def build_parser() -> UsageParser:
    ap = UsageParser(prog="orgtree-studyjoin", description=__doc__)
    ap.add_argument("--rows", type=int, default=1000, help="rows per table (default 1000)")
    ap.add_argument("--tables", type=int, default=3, help="number of tables (default 3)")
    ap.add_argument("--db", default="studyjoins", help="database name (default studyjoins)")
    ap.add_argument("-o", "--output", default="tmp.sql", help="script path (default tmp.sql)")
    ap.add_argument("--with-query", action="store_true", help="append the join query")
    add_verbose(ap)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        count = write_studyjoin_script(
            args.output, args.rows, args.tables, args.db, with_query=args.with_query
        )
    except InvalidArgument as e:
        return fail(ap.prog, e)

    print(f"Wrote {count:,} statements to {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
