from stylegen.render.renderer import (
    COMPACT,
    PRETTY,
    FormatPolicy,
    policy_for,
    render,
    render_declarations,
)

__all__ = [
    "COMPACT",
    "PRETTY",
    "FormatPolicy",
    "policy_for",
    "render",
    "render_declarations",
]
