from .draw import bond_label, diagram_layout, draw_coxeter_diagram

__all__ = [
    "bond_label",
    "diagram_layout",
    "draw_coxeter_diagram",
]
