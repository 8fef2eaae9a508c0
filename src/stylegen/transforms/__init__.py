from stylegen.transforms.base import Transform
from stylegen.transforms.namespace import (
    NamespaceTransform,
    apply_namespace,
    class_namespaced,
    selector_namespaced,
)


def apply_transforms(tree, transforms):
    """Apply each transform in *transforms* to *tree*, in order."""
    for t in transforms:
        tree = t.apply(tree)
    return tree


__all__ = [
    "NamespaceTransform",
    "Transform",
    "apply_namespace",
    "apply_transforms",
    "class_namespaced",
    "selector_namespaced",
]
