"""Quantum integers at roots of unity, just enough for minimal-root construction.

Let q >= 1 and z = exp(2 pi i / q). The quantum integer [n]_q is
(z^n - z^-n) / (z - z^-1), so

    [0]_q = 0,   [1]_q = 1,   [2]_q = 2 cos(2 pi / q),   [3]_q = z^2 + 1 + z^-2.

A Coxeter bond of multiplicity m becomes -[2]_2m in the symmetric Cartan
matrix; note [2]_4 = 0 and [2]_6 = 1.

A QuantumInteger is an integer combination of [n]_q for a single q, with
every index reduced by periodicity and the two reflection symmetries.
Equality of QuantumIntegers agrees with equality of the numbers they denote
when q = 1 (plain integers) or q = 2m with m in {2, ..., 6}. Beyond that the
representation knows no cyclotomic relations, which is fine because minimal
root coefficients only ever take the forms

- an integer,
- an integer multiple of [2]_2m,
- exactly [n]_2m (dihedral roots [n] a_s + [n+1] a_t),
- a + b [2]_10 for integers a, b.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from coxgroups.errors import MixedCyclotomyError, UnsupportedFormError

Coeffs = Tuple[Tuple[int, int], ...]


def quantum_reduce(q: int, n: int, c: int) -> Tuple[int, int]:
    """Rewrite c [n]_q as an equivalent c' [n']_q with n' as small as possible.

    Returns n' = 0 when the term vanishes.
    """
    if q < 1:
        raise ValueError(f"q = {q} should be >= 1")

    # [-n] = -[n] for all q.
    if n < 0:
        n, c = -n, -c

    # [n]_1 = n.
    if q == 1:
        return 1, n * c

    # [n]_2 = (-1)^(n-1) n.
    if q == 2:
        return 1, n * c if n % 2 == 1 else -n * c

    # Periodicity: [n + q] = [n].
    n %= q

    # Oddness: [q - n] = -[n]. Brings n into [0, q/2).
    if 2 * n >= q:
        n, c = q - n, -c

    # For even q, symmetry about q/4: [q/2 - n] = [n].
    if q % 2 == 0 and 4 * n > q:
        n = q // 2 - n

    # [3]_12 = 2.
    if q == 12 and n == 3:
        n, c = 1, 2 * c

    return n, c


def quantum_product_indices(n: int, m: int) -> List[int]:
    """Indices k with [n][m] = sum of [k], e.g. [n][2] = [n-1] + [n+1]."""
    if n < 0 or m < 0:
        raise ValueError("n, m must be >= 0.")
    if n > m:
        n, m = m, n
    return [j + m for j in range(1 - n, n, 2)]


def _canonical(q: int, pairs: Iterable[Tuple[int, int]]) -> Tuple[int, Coeffs]:
    """Reduce every index, merge equal ones and drop zeros; integers collapse to q = 1."""
    if q < 1:
        raise ValueError(f"q = {q} should be positive")
    acc: dict[int, int] = {}
    for n, c in pairs:
        n, c = quantum_reduce(q, n, c)
        # [0] = 0, so its coefficient is irrelevant.
        if n != 0:
            acc[n] = acc.get(n, 0) + c

    support = sorted(n for n, c in acc.items() if c != 0)
    if not support:
        return 1, ((1, 0),)
    if support == [1]:
        return 1, ((1, acc[1]),)
    return q, tuple((n, acc[n]) for n in support)


@dataclass(frozen=True)
class QuantumInteger:
    """
    An integer linear combination of quantum integers [n]_q.

    q:      the root of unity order; q = 1 means a plain integer
    coeffs: sorted (n, c) pairs with nonzero c, meaning sum of c [n]_q.
            Plain integers are stored as ((1, value),), including zero.

    Every constructor canonicalises, so equal values compare equal.
    """

    q: int
    coeffs: Coeffs

    def __post_init__(self) -> None:
        q, coeffs = _canonical(self.q, self.coeffs)
        object.__setattr__(self, "q", q)
        object.__setattr__(self, "coeffs", coeffs)

    @classmethod
    def from_pairs(cls, q: int, pairs: Iterable[Tuple[int, int]]) -> "QuantumInteger":
        return cls(q, tuple(pairs))

    @classmethod
    def integer(cls, value: int) -> "QuantumInteger":
        return cls(1, ((1, int(value)),))

    @classmethod
    def bracket(cls, q: int, n: int) -> "QuantumInteger":
        """The quantum integer [n]_q."""
        return cls.from_pairs(q, [(n, 1)])

    @property
    def is_integer(self) -> bool:
        return self.q == 1

    @property
    def is_zero(self) -> bool:
        return self.q == 1 and self.coeffs[0][1] == 0

    def _common_q(self, other: "QuantumInteger") -> int:
        if self.q != 1 and other.q != 1 and self.q != other.q:
            raise MixedCyclotomyError(
                f"Cannot combine quantum integers with q = {self.q} and q = {other.q}."
            )
        return max(self.q, other.q)

    def __neg__(self) -> "QuantumInteger":
        return QuantumInteger(self.q, tuple((n, -c) for n, c in self.coeffs))

    def __add__(self, other: Union["QuantumInteger", int]) -> "QuantumInteger":
        other = _coerce(other)
        return QuantumInteger.from_pairs(self._common_q(other), self.coeffs + other.coeffs)

    def __sub__(self, other: Union["QuantumInteger", int]) -> "QuantumInteger":
        other = _coerce(other)
        return QuantumInteger.from_pairs(
            self._common_q(other), self.coeffs + tuple((n, -c) for n, c in other.coeffs)
        )

    def __mul__(self, other: Union["QuantumInteger", int]) -> "QuantumInteger":
        other = _coerce(other)
        q = self._common_q(other)
        pairs = [
            (k, c * d)
            for n, c in self.coeffs
            for m, d in other.coeffs
            for k in quantum_product_indices(n, m)
        ]
        return QuantumInteger.from_pairs(q, pairs)

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other: Union["QuantumInteger", int]) -> "QuantumInteger":
        return _coerce(other) - self

    def __str__(self) -> str:
        if self.q == 1:
            return str(self.coeffs[0][1])
        terms = []
        for n, c in self.coeffs:
            term = "1" if n == 1 else f"[{n}]"
            if abs(c) != 1:
                term = f"{abs(c)}*{term}"
            terms.append(("-" if c < 0 else "+", term))
        sign, first = terms[0]
        out = ("-" if sign == "-" else "") + first
        for sign, term in terms[1:]:
            out += f" {sign} {term}"
        return f"({out})_{self.q}"


def _coerce(x: Union[QuantumInteger, int]) -> QuantumInteger:
    if isinstance(x, QuantumInteger):
        return x
    return QuantumInteger.integer(x)


def in_open_interval_two(x: QuantumInteger) -> bool:
    """Decide whether x lies strictly between -2 and 2.

    Exact for:
      - plain integers,
      - integer multiples of a single [n]_2m (only [2], and [3] for q <= 10, are small),
      - combinations of two or more terms with all coefficients of one sign,
      - +-(1 - [3]_2m) = -+2 cos(2 pi / m),
      - +-(1 - [2]_10), minus the golden ratio conjugate.

    Anything else raises UnsupportedFormError.
    """
    if x.q == 1:
        return -2 < x.coeffs[0][1] < 2

    if x.q % 2 != 0 or x.q < 8:
        raise UnsupportedFormError(f"Cannot check if {x} is in (-2, 2) with q = {x.q}")

    # Flip signs so that the first coefficient is positive.
    coeffs = x.coeffs if x.coeffs[0][1] > 0 else tuple((n, -c) for n, c in x.coeffs)

    # [2] < 2 always, [3] < 2 for q <= 10. Larger indices and multiples are >= 2.
    if len(coeffs) == 1:
        n, c = coeffs[0]
        return (n, c) == (2, 1) or ((n, c) == (3, 1) and x.q <= 10)

    # Two or more positive terms give at least 2[2] >= 2.
    if all(c > 0 for _, c in coeffs):
        return False

    if coeffs == ((1, 1), (3, -1)):
        return True

    if x.q == 10 and coeffs == ((1, 1), (2, -1)):
        return True

    raise UnsupportedFormError(f"Cannot check if {x} is in the range (-2, 2)")
