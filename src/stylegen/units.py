"""Unit helpers, importable as a group: ``from stylegen.units import *``."""

from stylegen.model.value import (
    ch,
    cm,
    deg,
    em,
    ex,
    grad,
    inch,
    mm,
    ms,
    pc,
    percent,
    pt,
    px,
    q,
    rad,
    rem,
    rgb,
    s,
    turn,
    vh,
    vmax,
    vmin,
    vw,
)

__all__ = [
    "ch",
    "cm",
    "deg",
    "em",
    "ex",
    "grad",
    "inch",
    "mm",
    "ms",
    "pc",
    "percent",
    "pt",
    "px",
    "q",
    "rad",
    "rem",
    "rgb",
    "s",
    "turn",
    "vh",
    "vmax",
    "vmin",
    "vw",
]
