#!/usr/bin/env python3
"""
Enumerate finite Coxeter groups by breadth-first right multiplication and time it.

For each type the element count is checked against the known group order,
and both the minimal root and the recursive representation can be timed.

Usage: python3 enumerate_weyl_groups.py [--types A4 B4 D4 F4 H3] [--recursive] [-v]
"""

import argparse
import logging
import time

from coxgroups import (
    build_group,
    coxeter_group_recursive,
    coxeter_matrix_from_type,
    coxeter_system,
    enumerate_group,
)


def time_enumeration(W):
    t0 = time.perf_counter()
    elements = enumerate_group(W)
    return len(elements), time.perf_counter() - t0


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--types", nargs="+", default=["A4", "B4", "D4", "F4", "H3", "E6"])
    parser.add_argument("--recursive", action="store_true",
                        help="Also time the recursive exchange representation (slow)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print(f"{'type':>6} {'order':>10} {'minroots':>10} {'count':>10} {'time (s)':>10}")
    for name in args.types:
        M = coxeter_matrix_from_type(name)
        order = coxeter_system(M).order()

        W, _ = build_group(M)
        count, dt = time_enumeration(W)
        status = "" if count == order else "  MISMATCH"
        print(f"{name:>6} {order:>10} {W.table.num_roots:>10} {count:>10} {dt:>10.3f}{status}")

        if args.recursive:
            R, _ = coxeter_group_recursive(M)
            count, dt = time_enumeration(R)
            print(f"{'(rec)':>6} {'':>10} {'':>10} {count:>10} {dt:>10.3f}")


if __name__ == "__main__":
    main()
