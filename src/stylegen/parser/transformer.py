"""Lark Transformer that converts a style parse tree into a Stylesheet."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from stylegen.errors import ParseError
from stylegen.model.style import Declaration, StyleNode, Stylesheet
from stylegen.model.value import parse_value

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class StyleTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into StyleNodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        text = str(items[0])[:-1]  # drop the terminating ';'
        name, _, raw_value = text.partition(":")
        return Declaration(name.strip(), parse_value(raw_value))

    def body(self, items: list[object]) -> list[object]:
        return list(items)

    def rule(self, items: list[object]) -> StyleNode:
        selector = str(items[0]).strip()
        body = items[1] if len(items) > 1 else []
        declarations = [i for i in body if isinstance(i, Declaration)]  # type: ignore[union-attr]
        children = [i for i in body if isinstance(i, StyleNode)]  # type: ignore[union-attr]
        return StyleNode(selector, tuple(declarations), tuple(children))

    def start(self, items: list[StyleNode]) -> Stylesheet:
        return Stylesheet(rules=tuple(items))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_style(source: str) -> Stylesheet:
    """Parse nested style source text into a Stylesheet.

    Raises :class:`ParseError` for syntax errors. Property-name and value
    errors from the model are raised as-is.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    try:
        sheet = StyleTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from e
    logger.debug("parsed %d top-level rule(s)", len(sheet.rules))
    return sheet
