"""Exception hierarchy for coxgroups."""
from __future__ import annotations


class CoxeterError(Exception):
    """Base class for every error raised by coxgroups."""


class InvalidMatrixError(CoxeterError, ValueError):
    """Input is neither a Coxeter matrix nor a generalised Cartan matrix."""


class OutOfRangeGeneratorError(CoxeterError, IndexError):
    """A generator index lies outside [1, rank]."""

    def __init__(self, s: int, rank: int):
        super().__init__(f"{s} is not a generator in the range [1, {rank}]")
        self.s = s
        self.rank = rank


class MismatchedParentError(CoxeterError, ValueError):
    """Elements from different groups were combined."""


class NonFiniteGroupError(CoxeterError, RuntimeError):
    """The operation is only defined for finite Coxeter groups."""


class RootLimitExceededError(CoxeterError, RuntimeError):
    """A reflection table builder discovered more minimal roots than allowed."""


class InternalConsistencyError(CoxeterError, AssertionError):
    """An internal invariant of the table construction was violated.

    These are never raised for valid input; seeing one means the case
    analysis in the general table builder is wrong.
    """


class MixedCyclotomyError(InternalConsistencyError):
    """Arithmetic between quantum integers at different roots of unity."""


class UnsupportedFormError(InternalConsistencyError):
    """A quantum integer, or a root, has a shape the algorithm cannot decide."""
