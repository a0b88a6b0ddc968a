"""Descent-based algorithms shared by every Coxeter group representation.

Everything here is written against the primitive operations of
CoxeterElement: left/right descent tests, left/right multiplication by a
simple generator, the identity test and the parent group. A representation
only has to supply those to get length, normal forms and group arithmetic.
Representations with faster native versions override the element methods
that call into this module.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from coxgroups.errors import InternalConsistencyError, MismatchedParentError, NonFiniteGroupError

if TYPE_CHECKING:
    from coxgroups.groups.base import CoxeterElement, CoxeterGroup


def first_left_descent(w: "CoxeterElement") -> Optional[int]:
    """Smallest s with l(sw) < l(w), or None for the identity."""
    for s in range(1, w.parent.rank + 1):
        if w.is_left_descent(s):
            return s
    return None


def first_right_descent(w: "CoxeterElement") -> Optional[int]:
    """Smallest s with l(ws) < l(w), or None for the identity."""
    for s in range(1, w.parent.rank + 1):
        if w.is_right_descent(s):
            return s
    return None


def _require_left_descent(w: "CoxeterElement") -> int:
    s = first_left_descent(w)
    if s is None:
        raise InternalConsistencyError(f"Non-identity element {w!r} has no left descent")
    return s


def _require_right_descent(w: "CoxeterElement") -> int:
    s = first_right_descent(w)
    if s is None:
        raise InternalConsistencyError(f"Non-identity element {w!r} has no right descent")
    return s


def short_lex(w: "CoxeterElement") -> List[int]:
    """The lexicographically least reduced word for w.

    Repeatedly strip the smallest left descent.
    """
    word: List[int] = []
    while not w.is_identity():
        s = _require_left_descent(w)
        word.append(s)
        w = w.left_multiply(s)
    return word


def inverse_short_lex(w: "CoxeterElement") -> List[int]:
    """The reduced word for w whose reversal is lexicographically least.

    Repeatedly strip the smallest right descent, then reverse.
    """
    word: List[int] = []
    while not w.is_identity():
        s = _require_right_descent(w)
        word.append(s)
        w = w.right_multiply(s)
    word.reverse()
    return word


def length(w: "CoxeterElement") -> int:
    """Number of letters in any reduced expression for w."""
    count = 0
    while not w.is_identity():
        w = w.left_multiply(_require_left_descent(w))
        count += 1
    return count


def multiply(x: "CoxeterElement", y: "CoxeterElement") -> "CoxeterElement":
    """The product xy.

    Move the smallest left descent of y over to the right of x until y is
    the identity; the length of y drops by one each step.
    """
    if x.parent is not y.parent:
        raise MismatchedParentError("The elements come from different Coxeter groups")
    while not y.is_identity():
        s = _require_left_descent(y)
        x = x.right_multiply(s)
        y = y.left_multiply(s)
    return x


def inverse(x: "CoxeterElement") -> "CoxeterElement":
    """The inverse of x, built by stacking its left descents onto the identity."""
    acc = x.parent.identity()
    while not x.is_identity():
        s = _require_left_descent(x)
        acc = acc.left_multiply(s)
        x = x.left_multiply(s)
    return acc


def power(x: "CoxeterElement", e: int) -> "CoxeterElement":
    """x ** e for any integer e, by binary exponentiation."""
    if e == 0:
        return x.parent.identity()
    if e < 0:
        x, e = x.inverse(), -e

    result: Optional["CoxeterElement"] = None
    base = x
    while e:
        if e & 1:
            result = base if result is None else result * base
        e >>= 1
        if e:
            base = base * base
    assert result is not None
    return result


def longest_element(W: "CoxeterGroup") -> "CoxeterElement":
    """The unique element of maximal length in a finite Coxeter group.

    Right-multiply by any non-descent until every generator is a right descent.
    """
    if not W.is_finite():
        raise NonFiniteGroupError("The longest element only exists in a finite Coxeter group")
    w = W.identity()
    while True:
        for s in range(1, W.rank + 1):
            if not w.is_right_descent(s):
                w = w.right_multiply(s)
                break
        else:
            return w


def sign(w: "CoxeterElement") -> int:
    """(-1) ** length(w)."""
    return -1 if w.length() % 2 else 1
