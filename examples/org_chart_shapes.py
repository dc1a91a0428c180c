"""
Shape of generated org charts for a few branching factors.

For each n_children in [2, 5, 10] and n_total = 1000, print:
  - depth of the chart (level of the last employee)
  - employees per level
  - how many managers have a partially filled team
"""
from __future__ import annotations

import time
from collections import Counter

from orgtree.io.orgchart import SequenceNameProvider, org_chart_rows
from orgtree.nary.levels import level_of


def main():
    n_total = 1000

    for n_children in [2, 5, 10]:
        t0 = time.perf_counter()
        rows = list(org_chart_rows(n_children, n_total, SequenceNameProvider()))
        dt = time.perf_counter() - t0

        per_level = Counter(level_of(r.emp_id, n_children) for r in rows)
        team = Counter(r.mgr_id for r in rows if r.mgr_id is not None)
        partial = sum(1 for size in team.values() if size < n_children)

        print(f"{'=' * 60}")
        print(f"n_children={n_children}  employees={len(rows):,}  ({dt * 1000:.1f} ms)")
        print(f"  depth: {max(per_level)}")
        print("  per level: " + ", ".join(f"L{lvl}:{cnt}" for lvl, cnt in sorted(per_level.items())))
        print(f"  managers: {len(team)}  partially filled teams: {partial}")
    print()


if __name__ == "__main__":
    main()
