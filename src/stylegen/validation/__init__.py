from stylegen.validation.properties import ALL_PROPERTIES, CSS_PROPERTIES, SVG_PROPERTIES
from stylegen.validation.validator import is_valid_property, validate

__all__ = [
    "ALL_PROPERTIES",
    "CSS_PROPERTIES",
    "SVG_PROPERTIES",
    "is_valid_property",
    "validate",
]
