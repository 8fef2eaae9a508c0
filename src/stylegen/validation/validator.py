"""Property-name validator: canonicalises names and rejects typos."""

from __future__ import annotations

import re

from stylegen.errors import InvalidPropertyError
from stylegen.validation.properties import ALL_PROPERTIES, VENDOR_PREFIXES

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Hyphenated spelling -> canonical camel-cased SVG name (gradient-units -> gradientUnits).
_CAMEL_ALIASES: dict[str, str] = {
    _CAMEL_RE.sub("-", name).lower(): name
    for name in ALL_PROPERTIES
    if name != name.lower()
}


def _lookup(key: str) -> str | None:
    if key in ALL_PROPERTIES:
        return key
    return _CAMEL_ALIASES.get(key)


def validate(name: str) -> str:
    """Return the canonical hyphenated form of *name*.

    ``background_color`` and ``background-color`` are equivalent. Custom
    properties (``--main-color``) pass through verbatim and vendor-prefixed
    names are accepted when the unprefixed property is known.

    Raises :class:`InvalidPropertyError` when the name is not recognised.
    """
    stripped = name.strip()
    if stripped.startswith("--") and len(stripped) > 2:
        return stripped

    key = stripped.replace("_", "-")
    canonical = _lookup(key)
    if canonical is not None:
        return canonical

    for prefix in VENDOR_PREFIXES:
        if key.startswith(prefix):
            base = _lookup(key[len(prefix):])
            if base is not None:
                return prefix + base

    raise InvalidPropertyError(name)


def is_valid_property(name: str) -> bool:
    """Non-raising probe around :func:`validate`."""
    try:
        validate(name)
    except InvalidPropertyError:
        return False
    return True
