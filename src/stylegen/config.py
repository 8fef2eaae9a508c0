from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from stylegen.errors import ConfigError


class RenderMode(Enum):
    """Output formatting policy."""

    COMPACT = "compact"
    PRETTY = "pretty"

    @classmethod
    def coerce(cls, mode: RenderMode | str) -> RenderMode:
        if isinstance(mode, cls):
            return mode
        try:
            return cls(str(mode).lower())
        except ValueError:
            raise ConfigError(
                f"unknown render mode {mode!r}; expected 'compact' or 'pretty'"
            ) from None


@dataclass(frozen=True)
class RenderOptions:
    mode: RenderMode = RenderMode.COMPACT
    namespace: str | None = None  # applied as a rewrite pass before rendering

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderOptions:
        unknown = set(data) - {"mode", "namespace"}
        if unknown:
            raise ConfigError(f"unknown render option(s): {', '.join(sorted(unknown))}")
        namespace = data.get("namespace")
        if namespace is not None and not isinstance(namespace, str):
            raise ConfigError(f"namespace must be a string, got {namespace!r}")
        return cls(
            mode=RenderMode.coerce(data.get("mode", RenderMode.COMPACT)),
            namespace=namespace,
        )
