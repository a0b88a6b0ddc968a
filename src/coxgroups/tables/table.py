"""The minimal root reflection table."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from coxgroups.errors import RootLimitExceededError

# Upper bound on the number of minimal roots a builder may create; 0 means unlimited.
MAX_ROOTS = int(os.environ.get("COXGROUPS_MAX_ROOTS", "0"))


def check_root_limit(count: int, max_roots: Optional[int]) -> None:
    """Raise RootLimitExceededError once count passes the configured limit."""
    limit = MAX_ROOTS if max_roots is None else max_roots
    if limit and count > limit:
        raise RootLimitExceededError(
            f"More than {limit} minimal roots; raise max_roots or COXGROUPS_MAX_ROOTS."
        )


@dataclass(frozen=True)
class ReflectionTable:
    """
    Reflection table of a Coxeter system on its minimal roots.

    Simple roots are numbered 1..rank (root s belongs to generator s), the
    remaining minimal roots rank+1..num_roots in breadth-first discovery order.

    rows:   rows[s-1][i-1] is the index of s(root i) when that is again a
            minimal root, and None when it is negative (i == s) or not minimal.
    depths: depths[i-1] is the depth of root i; simple roots have depth 1.
    """

    rank: int
    rows: Tuple[Tuple[Optional[int], ...], ...]
    depths: Tuple[int, ...]

    @property
    def num_roots(self) -> int:
        return len(self.depths)

    def reflect(self, s: int, root: int) -> Optional[int]:
        """Index of s(root), or None if it is negative or not minimal."""
        return self.rows[s - 1][root - 1]

    def __getitem__(self, key: Tuple[int, int]) -> Optional[int]:
        s, root = key
        return self.reflect(s, root)

    def zero_count(self) -> int:
        """Number of (s, root) pairs leaving the minimal roots."""
        return sum(1 for row in self.rows for x in row if x is None)

    def is_finite(self) -> bool:
        """Whether the Coxeter group is finite.

        The rank entries (s, s) are always None. Any further None means some
        positive root is not minimal, which only happens for infinite groups.
        """
        return self.zero_count() == self.rank

    def to_matrix(self) -> List[List[int]]:
        """Dense rank x num_roots integer matrix, with 0 standing for None."""
        return [[0 if x is None else x for x in row] for row in self.rows]

    @classmethod
    def from_mapping(
        cls,
        rank: int,
        num_roots: int,
        refl: Dict[Tuple[int, int], Optional[int]],
        depths: Sequence[int],
    ) -> "ReflectionTable":
        """Assemble a table from a {(s, root): image} mapping, missing pairs as None."""
        rows = tuple(
            tuple(refl.get((s, i)) for i in range(1, num_roots + 1))
            for s in range(1, rank + 1)
        )
        return cls(rank=rank, rows=rows, depths=tuple(depths))
