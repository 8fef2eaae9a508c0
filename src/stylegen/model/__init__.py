from stylegen.model.style import ROOT_SELECTOR, Declaration, StyleNode, Stylesheet
from stylegen.model.value import Concat, Numeric, Raw, Unit, Value, join, to_value

__all__ = [
    "ROOT_SELECTOR",
    "Concat",
    "Declaration",
    "Numeric",
    "Raw",
    "StyleNode",
    "Stylesheet",
    "Unit",
    "Value",
    "join",
    "to_value",
]
