#!/usr/bin/env python3
"""
Print minimal root counts and depths for finite, affine and hyperbolic types.

In a finite group every positive root is minimal, so the count equals the
number of reflections. For infinite groups the count is still finite, and
the table tells how often a reflection leaves the minimal roots.

Usage: python3 minimal_root_counts.py [--draw out_prefix]
"""

import argparse
from collections import Counter

from coxgroups import coxeter_matrix_from_type, coxeter_system, reflection_table_coxeter

EXAMPLES = {
    "A4": coxeter_matrix_from_type("A4"),
    "D5": coxeter_matrix_from_type("D5"),
    "H3": coxeter_matrix_from_type("H3"),
    "H4": coxeter_matrix_from_type("H4"),
    "A~3": coxeter_matrix_from_type("A~3"),
    "E~6": coxeter_matrix_from_type("E~6"),
    "353": [[1, 3, 2, 2], [3, 1, 5, 2], [2, 5, 1, 3], [2, 2, 3, 1]],
}


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--draw", default=None,
                        help="If set, save each Coxeter diagram to {prefix}_{name}.png")
    args = parser.parse_args()

    for name, M in EXAMPLES.items():
        S = coxeter_system(M)
        table = reflection_table_coxeter(M)
        depths = Counter(table.depths)
        locked = table.zero_count() - table.rank
        print(f"{name:>4}: {S.name:<6} roots={table.num_roots:<4} locked={locked:<4} "
              f"finite={table.is_finite()!s:<5} depths={dict(sorted(depths.items()))}")

        if args.draw:
            from coxgroups.viz import draw_coxeter_diagram

            draw_coxeter_diagram(M, title=S.name, save_path=f"{args.draw}_{name.replace('~', 'aff')}.png")


if __name__ == "__main__":
    main()
