"""Style tree model: Declaration, StyleNode, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from stylegen.model.value import Value, to_value
from stylegen.validation import validate

# Sentinel selector standing for the namespace's own root class.
ROOT_SELECTOR = "."


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair.

    The property name is validated and canonicalised on construction, so an
    instance can only ever hold a recognised name.
    """

    property: str
    value: Value

    def __post_init__(self) -> None:
        object.__setattr__(self, "property", validate(self.property))
        object.__setattr__(self, "value", to_value(self.value))

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"


DeclarationLike = Declaration | tuple[str, object]


def _as_declaration(item: DeclarationLike) -> Declaration:
    if isinstance(item, Declaration):
        return item
    name, value = item
    return Declaration(name, value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class StyleNode:
    """A selector owning ordered declarations and ordered nested nodes.

    The selector may be a plain CSS selector (``.hide .layer``), an at-rule
    header (``@media screen and (max-width: 800px)``) or the root sentinel
    ``.``. Declarations and children may both be present.
    """

    selector: str
    declarations: tuple[Declaration, ...] = ()
    children: tuple[StyleNode, ...] = ()

    def __post_init__(self) -> None:
        if not self.selector or not self.selector.strip():
            raise ValueError("StyleNode selector must be a non-empty string")
        object.__setattr__(
            self,
            "declarations",
            tuple(_as_declaration(d) for d in self.declarations),
        )
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, StyleNode):
                raise TypeError(f"StyleNode children must be StyleNode, got {child!r}")
        object.__setattr__(self, "children", children)

    @property
    def is_at_rule(self) -> bool:
        return self.selector.lstrip().startswith("@")

    @property
    def is_root(self) -> bool:
        return self.selector.strip() == ROOT_SELECTOR

    def walk(self) -> Iterable[StyleNode]:
        """Yield this node and all descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class Stylesheet:
    """An ordered collection of top-level style nodes."""

    rules: tuple[StyleNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
