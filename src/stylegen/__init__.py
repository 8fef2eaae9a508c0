"""stylegen - typed style trees rendered to compact or pretty CSS."""

__version__ = "0.1.0"

from stylegen.builder import css, from_mapping, rule, style
from stylegen.config import RenderMode, RenderOptions
from stylegen.errors import (
    ConfigError,
    InvalidNamespaceError,
    InvalidPropertyError,
    InvalidValueError,
    ParseError,
    StyleError,
)
from stylegen.model import (
    ROOT_SELECTOR,
    Concat,
    Declaration,
    Numeric,
    Raw,
    StyleNode,
    Stylesheet,
    Unit,
    Value,
    join,
    to_value,
)
from stylegen.parser import parse_style
from stylegen.pipeline import generate
from stylegen.render import render, render_declarations
from stylegen.transforms import (
    NamespaceTransform,
    apply_namespace,
    class_namespaced,
    selector_namespaced,
)
from stylegen.validation import is_valid_property, validate

__all__ = [
    "__version__",
    # builder
    "css",
    "from_mapping",
    "rule",
    "style",
    # config
    "RenderMode",
    "RenderOptions",
    # errors
    "ConfigError",
    "InvalidNamespaceError",
    "InvalidPropertyError",
    "InvalidValueError",
    "ParseError",
    "StyleError",
    # model
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
    # pipeline
    "generate",
    "parse_style",
    "render",
    "render_declarations",
    # transforms
    "NamespaceTransform",
    "apply_namespace",
    "class_namespaced",
    "selector_namespaced",
    # validation
    "is_valid_property",
    "validate",
]
