"""Namespace transform: prefixes class selectors to avoid collisions.

Rewrite rules, applied to every selector in a tree:
    - ``.`` (the root sentinel) becomes ``.<ns>``.
    - at-rule headers (``@media ...``) pass through verbatim; only their
      children are rewritten.
    - every class run ``.name`` becomes ``.<ns>__name``. Elements, ids,
      pseudo-classes, combinators, commas and whitespace are preserved
      exactly, and nothing inside ``[...]`` or quotes is touched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from stylegen.errors import InvalidNamespaceError
from stylegen.model.style import ROOT_SELECTOR, StyleNode, Stylesheet

logger = logging.getLogger(__name__)

SEPARATOR = "__"

_NAMESPACE_RE = re.compile(r"-?[_a-zA-Z][_a-zA-Z0-9-]*")
# A class name may start with "--" or a non-ASCII character, and may hold escapes.
_CLASS_NAME_RE = re.compile(
    r"(?:--|-?(?:[_a-zA-Z\u0080-\U0010ffff]|\\.))(?:[_a-zA-Z0-9\u0080-\U0010ffff-]|\\.)*"
)


def _check_namespace(namespace: str) -> str:
    if not isinstance(namespace, str) or not _NAMESPACE_RE.fullmatch(namespace):
        raise InvalidNamespaceError(namespace)
    if SEPARATOR in namespace:
        raise InvalidNamespaceError(namespace)
    return namespace


def _rewrite_classes(namespace: str, selector: str) -> str:
    """Scan *selector* once, prefixing each class run outside brackets and quotes."""
    out: list[str] = []
    quote: str | None = None
    bracket_depth = 0
    i = 0
    while i < len(selector):
        c = selector[i]
        if quote is not None:
            if c == "\\" and i + 1 < len(selector):
                out.append(selector[i : i + 2])
                i += 2
                continue
            if c == quote:
                quote = None
        elif c == "\\" and i + 1 < len(selector):
            out.append(selector[i : i + 2])
            i += 2
            continue
        elif c in "\"'":
            quote = c
        elif c == "[":
            bracket_depth += 1
        elif c == "]" and bracket_depth:
            bracket_depth -= 1
        elif c == "." and not bracket_depth:
            match = _CLASS_NAME_RE.match(selector, i + 1)
            if match:
                out.append(f".{namespace}{SEPARATOR}{match.group()}")
                i = match.end()
                continue
        out.append(c)
        i += 1
    return "".join(out)


def _namespaced(namespace: str, selector: str) -> str:
    if selector.strip() == ROOT_SELECTOR:
        return f".{namespace}"
    if selector.lstrip().startswith("@"):
        return selector
    return _rewrite_classes(namespace, selector)


def selector_namespaced(namespace: str, selector: str) -> str:
    """Prepend *namespace* to the class selectors in *selector*.

    >>> selector_namespaced("frame", ".hide .corner")
    '.frame__hide .frame__corner'
    >>> selector_namespaced("frame", ".hide button")
    '.frame__hide button'
    """
    return _namespaced(_check_namespace(namespace), selector)


def class_namespaced(namespace: str, class_names: str) -> str:
    """Prepend *namespace* to space-separated class names, for use on elements.

    >>> class_namespaced("frame", "text-anim")
    'frame__text-anim'
    """
    _check_namespace(namespace)
    names = class_names.split()
    if not names:
        return namespace
    return " ".join(f"{namespace}{SEPARATOR}{name}" for name in names)


class NamespaceTransform:
    """Rewrite every selector in a tree under one namespace.

    Declarations and tree shape are left as they are; a new tree is returned.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = _check_namespace(namespace)

    def apply(self, tree):
        if isinstance(tree, Stylesheet):
            logger.debug(
                "namespacing %d rule(s) under %r", len(tree.rules), self.namespace
            )
            return Stylesheet(rules=tuple(self._rewrite(n) for n in tree.rules))
        return self._rewrite(tree)

    def _rewrite(self, node: StyleNode) -> StyleNode:
        return replace(
            node,
            selector=_namespaced(self.namespace, node.selector),
            children=tuple(self._rewrite(c) for c in node.children),
        )


def apply_namespace(tree, namespace: str):
    """Function form of :class:`NamespaceTransform`."""
    return NamespaceTransform(namespace).apply(tree)
