"""Abstract interface shared by every Coxeter group representation.

A representation implements the primitives marked abstract below; the
remaining operations default to the generic algorithms in
coxgroups.groups.generic.
"""
from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Iterable, List

from coxgroups.errors import OutOfRangeGeneratorError
from coxgroups.groups import generic


def check_generator(s: int, rank: int) -> int:
    """Return s as an int, or raise OutOfRangeGeneratorError unless s is an integer in [1, rank]."""
    if not isinstance(s, numbers.Integral) or isinstance(s, bool):
        raise OutOfRangeGeneratorError(s, rank)
    s = int(s)
    if not 1 <= s <= rank:
        raise OutOfRangeGeneratorError(s, rank)
    return s


class CoxeterGroup(ABC):
    """A Coxeter group with simple generators numbered 1..rank."""

    @property
    @abstractmethod
    def rank(self) -> int:
        """Number of simple generators."""

    @abstractmethod
    def identity(self) -> "CoxeterElement":
        """The identity element."""

    @abstractmethod
    def is_finite(self) -> bool:
        """Whether the group is finite."""

    @abstractmethod
    def coxeter_matrix(self) -> List[List[int]]:
        """A fresh copy of the Coxeter matrix."""

    def generators(self) -> List["CoxeterElement"]:
        """The simple generators, in order."""
        e = self.identity()
        return [e.right_multiply(s) for s in range(1, self.rank + 1)]

    def element(self, word: Iterable[int]) -> "CoxeterElement":
        """The product of the simple generators in word (not necessarily reduced)."""
        w = self.identity()
        for s in word:
            w = w.right_multiply(s)
        return w

    def longest_element(self) -> "CoxeterElement":
        return generic.longest_element(self)


class CoxeterElement(ABC):
    """An immutable element of a CoxeterGroup."""

    @property
    @abstractmethod
    def parent(self) -> CoxeterGroup:
        """The group this element belongs to."""

    @abstractmethod
    def is_identity(self) -> bool: ...

    @abstractmethod
    def is_left_descent(self, s: int) -> bool:
        """True iff l(sw) < l(w)."""

    @abstractmethod
    def is_right_descent(self, s: int) -> bool:
        """True iff l(ws) < l(w)."""

    @abstractmethod
    def left_multiply(self, s: int) -> "CoxeterElement":
        """The product sw."""

    @abstractmethod
    def right_multiply(self, s: int) -> "CoxeterElement":
        """The product ws."""

    def length(self) -> int:
        return generic.length(self)

    def short_lex(self) -> List[int]:
        return generic.short_lex(self)

    def inverse_short_lex(self) -> List[int]:
        return generic.inverse_short_lex(self)

    def inverse(self) -> "CoxeterElement":
        return generic.inverse(self)

    def sign(self) -> int:
        return generic.sign(self)

    def __mul__(self, other: "CoxeterElement") -> "CoxeterElement":
        if not isinstance(other, CoxeterElement):
            return NotImplemented
        return generic.multiply(self, other)

    def __pow__(self, e: int) -> "CoxeterElement":
        return generic.power(self, e)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.short_lex()})"
