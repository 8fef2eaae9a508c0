"""Serialize style trees to CSS text.

Compact and pretty output share one depth-first traversal; a
:class:`FormatPolicy` supplies the whitespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from stylegen.config import RenderMode
from stylegen.model.style import Declaration, StyleNode, Stylesheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatPolicy:
    """Whitespace inserted by the renderer around otherwise fixed tokens."""

    indent: str  # one nesting level
    newline: str
    open_brace: str  # text between a selector and its block
    colon: str  # text between a property name and its value
    rule_separator: str  # between top-level rules


COMPACT = FormatPolicy(indent="", newline="", open_brace="{", colon=":", rule_separator="")
PRETTY = FormatPolicy(
    indent="    ", newline="\n", open_brace=" {", colon=": ", rule_separator="\n"
)

_POLICIES = {RenderMode.COMPACT: COMPACT, RenderMode.PRETTY: PRETTY}


def policy_for(mode: RenderMode | str) -> FormatPolicy:
    return _POLICIES[RenderMode.coerce(mode)]


def _render_declaration(decl: Declaration, depth: int, policy: FormatPolicy) -> str:
    return f"{policy.indent * depth}{decl.property}{policy.colon}{decl.value};{policy.newline}"


def _render_node(node: StyleNode, depth: int, policy: FormatPolicy, out: list[str]) -> None:
    indent = policy.indent * depth
    out.append(f"{indent}{node.selector}{policy.open_brace}{policy.newline}")
    for decl in node.declarations:
        out.append(_render_declaration(decl, depth + 1, policy))
    for child in node.children:
        _render_node(child, depth + 1, policy, out)
        out.append(policy.newline)
    out.append(f"{indent}}}")


def _top_level(tree: StyleNode | Stylesheet | Iterable[StyleNode]) -> tuple[StyleNode, ...]:
    if isinstance(tree, StyleNode):
        return (tree,)
    if isinstance(tree, Stylesheet):
        return tree.rules
    return tuple(tree)


def render(
    tree: StyleNode | Stylesheet | Iterable[StyleNode],
    mode: RenderMode | str = RenderMode.COMPACT,
) -> str:
    """Render *tree* to CSS text.

    *tree* may be a single node, a Stylesheet, or any iterable of nodes.
    Output depends only on the tree and the mode.

    >>> from stylegen.model import Numeric, StyleNode, Unit
    >>> render(StyleNode(".layer", [("width", Numeric(10, Unit.PX))]))
    '.layer{width:10px;}'
    """
    policy = policy_for(mode)
    rules = _top_level(tree)
    logger.debug("rendering %d top-level rule(s)", len(rules))
    blocks = []
    for node in rules:
        out: list[str] = []
        _render_node(node, 0, policy, out)
        blocks.append("".join(out))
    return policy.rule_separator.join(blocks)


def render_declarations(
    declarations: Iterable[Declaration],
    mode: RenderMode | str = RenderMode.COMPACT,
) -> str:
    """Render bare declarations, as used in an inline ``style`` attribute."""
    policy = policy_for(mode)
    text = "".join(_render_declaration(d, 0, policy) for d in declarations)
    return text.rstrip("\n")
