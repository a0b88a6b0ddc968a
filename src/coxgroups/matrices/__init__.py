from .predicates import (
    Matrix,
    is_coxeter_matrix,
    is_gcm,
    gcm_to_coxeter_matrix,
    as_coxeter_matrix,
)
from .types import (
    CoxeterType,
    cartan_A,
    cartan_B,
    cartan_C,
    cartan_D,
    cartan_E,
    cartan_F4,
    cartan_G2,
    cartan_matrix,
    coxeter_matrix_from_type,
    coxeter_type,
    parse_coxeter_type,
)
from .diagram import coxeter_diagram, diagram_components

__all__ = [
    "Matrix",
    "is_coxeter_matrix",
    "is_gcm",
    "gcm_to_coxeter_matrix",
    "as_coxeter_matrix",
    "CoxeterType",
    "cartan_A",
    "cartan_B",
    "cartan_C",
    "cartan_D",
    "cartan_E",
    "cartan_F4",
    "cartan_G2",
    "cartan_matrix",
    "coxeter_matrix_from_type",
    "coxeter_type",
    "parse_coxeter_type",
    "coxeter_diagram",
    "diagram_components",
]
