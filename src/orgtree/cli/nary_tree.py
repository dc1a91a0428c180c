"""Print the level-order (parent, child) edges of a complete n-ary tree."""
from __future__ import annotations

import sys

from orgtree.errors import InvalidArgument, require_int
from orgtree.io.edgelist import edge_lines
from ._common import UsageParser, add_verbose, fail, setup_logging


def build_parser() -> UsageParser:
    ap = UsageParser(prog="orgtree-nary-tree", description=__doc__)
    ap.add_argument("n", type=int, help="branching factor")
    ap.add_argument("n_nodes", type=int, help="number of edges to print")
    ap.add_argument("--levels", action="store_true", help="prefix each edge with the parent's level")
    ap.add_argument("--draw", metavar="PATH", default=None, help="also save a PNG drawing of the tree")
    add_verbose(ap)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        require_int("n", args.n, 1)
        require_int("n_nodes", args.n_nodes, 0)
    except InvalidArgument as e:
        return fail(ap.prog, e)

    for line in edge_lines(args.n, args.n_nodes, levels=args.levels):
        print(line)

    if args.draw:
        from orgtree.viz.draw import draw_nary_tree

        draw_nary_tree(args.n, args.n_nodes, save_path=args.draw)
        print(f"Saved drawing to {args.draw}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
