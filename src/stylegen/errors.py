"""Error hierarchy for stylegen."""
from __future__ import annotations


class StyleError(Exception):
    """Base error for all stylegen errors."""


class InvalidPropertyError(StyleError):
    """A declaration names a property outside the recognised set.

    This is a programmer error: the style tree is rejected before any CSS
    is produced.
    """

    def __init__(self, name: str, *, selector: str | None = None) -> None:
        self.name = name
        self.selector = selector
        message = f"invalid style name: `{name}`"
        if selector is not None:
            message += f" in selector: `{selector}`"
        super().__init__(message)


class InvalidValueError(StyleError):
    """A value cannot be represented (unknown unit, unsupported type)."""


class InvalidNamespaceError(StyleError):
    """A namespace would collide with the rewrite scheme's separators."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"invalid namespace: {namespace!r}")


class ParseError(StyleError):
    """Raised when style source text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigError(StyleError):
    """Render options are malformed."""
