from .generic import first_left_descent, first_right_descent
from .base import CoxeterElement, CoxeterGroup, check_generator
from .minroots import MinRootElement, MinRootGroup, build_group, coxeter_group_min
from .symmetric import Permutation, SymmetricGroup, symmetric_group
from .recursive import RecursiveElement, RecursiveGroup, coxeter_group_recursive

__all__ = [
    "first_left_descent",
    "first_right_descent",
    "CoxeterElement",
    "CoxeterGroup",
    "check_generator",
    "MinRootElement",
    "MinRootGroup",
    "build_group",
    "coxeter_group_min",
    "Permutation",
    "SymmetricGroup",
    "symmetric_group",
    "RecursiveElement",
    "RecursiveGroup",
    "coxeter_group_recursive",
]
