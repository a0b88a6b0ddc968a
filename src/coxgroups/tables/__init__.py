from .table import MAX_ROOTS, ReflectionTable, check_root_limit
from .gcm import reflection_table_gcm
from .coxeter import Action, cartan_entry, reflection_table_coxeter

__all__ = [
    "MAX_ROOTS",
    "ReflectionTable",
    "check_root_limit",
    "reflection_table_gcm",
    "Action",
    "cartan_entry",
    "reflection_table_coxeter",
]
