"""
Generate an org-chart employee table.

Every manager has n_children reports, filled in level order, until
n_total employees below the root exist. Output (stdout by default):

  An Employee Database
  id, emp_id, emp_name, mgr_id
  1, 1, <name>, NULL
  2, 2, <name>, 1
  ...

e.g.  orgtree-org-chart 10 1000 > emp.csv
"""
from __future__ import annotations

import logging
import sys

from orgtree.errors import InvalidArgument, require_int
from orgtree.io.orgchart import FakerNameProvider, write_org_chart
from ._common import UsageParser, add_verbose, fail, setup_logging

log = logging.getLogger(__name__)


def build_parser() -> UsageParser:
    ap = UsageParser(
        prog="orgtree-org-chart",
        description="Generate a synthetic employee table shaped as a complete n-ary org chart.",
        epilog="e.g. orgtree-org-chart 10 1000 > emp.csv",
    )
    ap.add_argument("n_children", type=int, help="direct reports per manager")
    ap.add_argument("n_total", type=int, help="employees below the root")
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible names")
    ap.add_argument("--locale", default=None, help="Faker locale, e.g. en_US")
    ap.add_argument("-o", "--output", default=None, help="write to this file instead of stdout")
    add_verbose(ap)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        require_int("n_children", args.n_children, 1)
        require_int("n_total", args.n_total, 1)
    except InvalidArgument as e:
        return fail(ap.prog, e)

    names = FakerNameProvider(seed=args.seed, locale=args.locale)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fp:
            rows = write_org_chart(fp, args.n_children, args.n_total, names)
        print(f"Wrote {rows:,} employees to {args.output}", file=sys.stderr)
    else:
        rows = write_org_chart(sys.stdout, args.n_children, args.n_total, names)
    log.debug("generated %d rows (n_children=%d)", rows, args.n_children)
    return 0


if __name__ == "__main__":
    sys.exit(main())
