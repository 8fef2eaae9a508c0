"""Python front-end for building style trees.

Nested mappings mirror the shape of the CSS they produce::

    css({
        ".layer": {"background_color": "red", "border": "1px solid green"},
        "@media screen and (max-width: 800px)": {".layer": {"width": percent(100)}},
    })

A mapping value opens a nested rule; any other value is a declaration.
"""

from __future__ import annotations

from typing import Any, Mapping

from stylegen.config import RenderMode, RenderOptions
from stylegen.errors import InvalidPropertyError
from stylegen.model.style import Declaration, StyleNode, Stylesheet
from stylegen.pipeline import generate
from stylegen.render import render_declarations


def _declare(selector: str | None, name: str, value: object) -> Declaration:
    try:
        return Declaration(name, value)  # type: ignore[arg-type]
    except InvalidPropertyError as exc:
        if selector is None or exc.selector is not None:
            raise
        raise InvalidPropertyError(exc.name, selector=selector) from None


def _split_mapping(
    selector: str | None, body: Mapping[str, Any]
) -> tuple[list[Declaration], list[StyleNode]]:
    declarations: list[Declaration] = []
    children: list[StyleNode] = []
    for key, value in body.items():
        if isinstance(value, Mapping):
            children.append(rule(key, value))
        else:
            declarations.append(_declare(selector, key, value))
    return declarations, children


def rule(selector: str, *items: Any, **properties: Any) -> StyleNode:
    """Build a StyleNode.

    *items* may be nested StyleNodes, Declarations, or mappings in the
    :func:`from_mapping` shape. Keyword *properties* use the underscore
    spelling (``background_color="red"``) and follow *items* in order.
    """
    declarations: list[Declaration] = []
    children: list[StyleNode] = []
    for item in items:
        if isinstance(item, StyleNode):
            children.append(item)
        elif isinstance(item, Declaration):
            declarations.append(item)
        elif isinstance(item, Mapping):
            decls, kids = _split_mapping(selector, item)
            declarations.extend(decls)
            children.extend(kids)
        else:
            raise TypeError(f"cannot add {item!r} to rule {selector!r}")
    for name, value in properties.items():
        declarations.append(_declare(selector, name, value))
    return StyleNode(selector, tuple(declarations), tuple(children))


def from_mapping(mapping: Mapping[str, Mapping[str, Any]]) -> Stylesheet:
    """Build a Stylesheet from a selector -> body mapping, keeping key order."""
    rules = []
    for selector, body in mapping.items():
        if not isinstance(body, Mapping):
            raise TypeError(
                f"top-level selector {selector!r} must map to a mapping, got {body!r}"
            )
        rules.append(rule(selector, body))
    return Stylesheet(rules=tuple(rules))


def css(
    mapping: Mapping[str, Mapping[str, Any]],
    *,
    namespace: str | None = None,
    pretty: bool = False,
) -> str:
    """Build and render *mapping* in one call."""
    options = RenderOptions(
        mode=RenderMode.PRETTY if pretty else RenderMode.COMPACT,
        namespace=namespace,
    )
    return generate(from_mapping(mapping), options)


def style(mapping: Mapping[str, Any] | None = None, **properties: Any) -> str:
    """Render declarations for an inline ``style`` attribute.

    >>> style(background_color="red", border="1px solid green")
    'background-color:red;border:1px solid green;'
    """
    items = dict(mapping or {})
    items.update(properties)
    return render_declarations(_declare(None, k, v) for k, v in items.items())
