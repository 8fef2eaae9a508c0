"""Style tree -> optional namespace pass -> CSS text."""

from __future__ import annotations

import logging
from typing import Iterable

from stylegen.config import RenderOptions
from stylegen.model.style import StyleNode, Stylesheet
from stylegen.render import render
from stylegen.transforms import NamespaceTransform, Transform, apply_transforms

logger = logging.getLogger(__name__)


def generate(
    tree: StyleNode | Stylesheet | Iterable[StyleNode],
    options: RenderOptions | None = None,
) -> str:
    """Run the full pipeline on *tree* and return the CSS text."""
    options = options or RenderOptions()
    if not isinstance(tree, (StyleNode, Stylesheet)):
        tree = Stylesheet(rules=tuple(tree))
    transforms: list[Transform] = []
    if options.namespace is not None:
        transforms.append(NamespaceTransform(options.namespace))
    tree = apply_transforms(tree, transforms)
    logger.debug("generating %s css (namespace=%r)", options.mode.value, options.namespace)
    return render(tree, options.mode)
