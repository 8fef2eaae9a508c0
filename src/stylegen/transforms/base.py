"""Base protocol for style tree transforms."""

from __future__ import annotations

from typing import Protocol, TypeVar

from stylegen.model.style import StyleNode, Stylesheet

Tree = TypeVar("Tree", StyleNode, Stylesheet)


class Transform(Protocol):
    """A tree-to-tree transformation step. Implementations never mutate input."""

    def apply(self, tree: Tree) -> Tree: ...
