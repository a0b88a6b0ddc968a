"""
coxgroups: exact computation in Coxeter groups via minimal root reflection tables,
with generic descent-based algorithms, standard types, enumeration and diagrams.
"""

from .errors import (
    CoxeterError,
    InvalidMatrixError,
    OutOfRangeGeneratorError,
    MismatchedParentError,
    NonFiniteGroupError,
    RootLimitExceededError,
    InternalConsistencyError,
    MixedCyclotomyError,
    UnsupportedFormError,
)
from .matrices import (
    is_coxeter_matrix,
    is_gcm,
    gcm_to_coxeter_matrix,
    cartan_matrix,
    coxeter_matrix_from_type,
    coxeter_type,
    CoxeterType,
    coxeter_diagram,
    diagram_components,
)
from .quantum import QuantumInteger, in_open_interval_two
from .tables import ReflectionTable, reflection_table_gcm, reflection_table_coxeter

# Groups and elements
from .groups import (
    CoxeterGroup,
    CoxeterElement,
    MinRootGroup,
    MinRootElement,
    build_group,
    coxeter_group_min,
    SymmetricGroup,
    Permutation,
    symmetric_group,
    RecursiveGroup,
    RecursiveElement,
    coxeter_group_recursive,
)
from .groups.generic import (
    length,
    short_lex,
    inverse_short_lex,
    multiply,
    inverse,
    power,
    longest_element,
    sign,
)
from .enumeration import enumerate_group, growth_series, growth_polynomial, cayley_graph
from .systems import ComponentType, CoxeterSystem, classify_coxeter_matrix, classify_gcm, coxeter_system

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CoxeterError",
    "InvalidMatrixError",
    "OutOfRangeGeneratorError",
    "MismatchedParentError",
    "NonFiniteGroupError",
    "RootLimitExceededError",
    "InternalConsistencyError",
    "MixedCyclotomyError",
    "UnsupportedFormError",
    # Matrices
    "is_coxeter_matrix",
    "is_gcm",
    "gcm_to_coxeter_matrix",
    "cartan_matrix",
    "coxeter_matrix_from_type",
    "coxeter_type",
    "CoxeterType",
    "coxeter_diagram",
    "diagram_components",
    # Quantum integers
    "QuantumInteger",
    "in_open_interval_two",
    # Reflection tables
    "ReflectionTable",
    "reflection_table_gcm",
    "reflection_table_coxeter",
    # Groups
    "CoxeterGroup",
    "CoxeterElement",
    "MinRootGroup",
    "MinRootElement",
    "build_group",
    "coxeter_group_min",
    "SymmetricGroup",
    "Permutation",
    "symmetric_group",
    "RecursiveGroup",
    "RecursiveElement",
    "coxeter_group_recursive",
    # Generic algorithms
    "length",
    "short_lex",
    "inverse_short_lex",
    "multiply",
    "inverse",
    "power",
    "longest_element",
    "sign",
    # Enumeration
    "enumerate_group",
    "growth_series",
    "growth_polynomial",
    "cayley_graph",
    # Classification
    "ComponentType",
    "CoxeterSystem",
    "classify_coxeter_matrix",
    "classify_gcm",
    "coxeter_system",
]
