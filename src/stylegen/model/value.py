"""CSS value model: Raw, Numeric and Concat, plus unit helpers.

Every value renders through ``str()``:

    >>> str(Concat(Numeric(1, Unit.PX), " ", Raw("solid")))
    '1px solid'
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from stylegen.errors import InvalidValueError


class Unit(Enum):
    """The closed set of units a Numeric value may carry."""

    NONE = ""
    # absolute lengths
    PX = "px"
    Q = "q"
    MM = "mm"
    CM = "cm"
    IN = "in"
    PT = "pt"
    PC = "pc"
    # relative lengths
    EM = "em"
    EX = "ex"
    CH = "ch"
    REM = "rem"
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"
    PERCENT = "%"
    # angles
    DEG = "deg"
    RAD = "rad"
    GRAD = "grad"
    TURN = "turn"
    # time
    S = "s"
    MS = "ms"


def _format_number(number: int | float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return repr(number) if isinstance(number, float) else str(number)


@dataclass(frozen=True)
class Raw:
    """A value emitted verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Numeric:
    """A number paired with a unit, rendered without a space: ``10px``."""

    number: int | float
    unit: Unit = Unit.NONE

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, (int, float)):
            raise InvalidValueError(f"not a number: {self.number!r}")
        if not math.isfinite(self.number):
            raise InvalidValueError(f"not a finite number: {self.number!r}")
        if not isinstance(self.unit, Unit):
            try:
                object.__setattr__(self, "unit", Unit(self.unit))
            except ValueError:
                raise InvalidValueError(f"unknown unit: {self.unit!r}") from None

    def __str__(self) -> str:
        return f"{_format_number(self.number)}{self.unit.value}"


@dataclass(frozen=True)
class Concat:
    """Two values joined by a literal separator."""

    left: Value
    separator: str
    right: Value

    def __str__(self) -> str:
        return f"{self.left}{self.separator}{self.right}"


Value = Raw | Numeric | Concat
VALUE_TYPES = (Raw, Numeric, Concat)


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------


def join(*values: object, separator: str = " ") -> Value:
    """Fold *values* left to right into a Concat chain."""
    if not values:
        raise InvalidValueError("join() needs at least one value")
    result = to_value(values[0])
    for value in values[1:]:
        result = Concat(result, separator, to_value(value))
    return result


def to_value(obj: object) -> Value:
    """Coerce a plain Python object from the authoring layer into a Value."""
    if isinstance(obj, VALUE_TYPES):
        return obj
    if isinstance(obj, str):
        return Raw(obj)
    # bool is checked before int since it is an int subclass.
    if isinstance(obj, bool):
        return Raw("true" if obj else "false")
    if isinstance(obj, (int, float)):
        return Numeric(obj)
    if isinstance(obj, (list, tuple)):
        return join(*obj)
    raise InvalidValueError(
        f"supported values are str, int, float, bool or a sequence of them, found: {obj!r}"
    )


def _with_unit(unit: Unit, values: tuple[object, ...]) -> Value:
    if not values:
        raise InvalidValueError(f"{unit.name.lower()}() needs at least one number")
    return join(*(Numeric(v, unit) for v in values))  # type: ignore[arg-type]


def px(*values: int | float) -> Value:
    """Pixels (1px = 1/96th of 1in). ``px(10, 12)`` renders ``10px 12px``."""
    return _with_unit(Unit.PX, values)


def q(*values: int | float) -> Value:
    return _with_unit(Unit.Q, values)


def mm(*values: int | float) -> Value:
    return _with_unit(Unit.MM, values)


def cm(*values: int | float) -> Value:
    return _with_unit(Unit.CM, values)


def inch(*values: int | float) -> Value:
    """Inches; ``in`` is a Python keyword."""
    return _with_unit(Unit.IN, values)


def pt(*values: int | float) -> Value:
    return _with_unit(Unit.PT, values)


def pc(*values: int | float) -> Value:
    return _with_unit(Unit.PC, values)


def em(*values: int | float) -> Value:
    return _with_unit(Unit.EM, values)


def ex(*values: int | float) -> Value:
    return _with_unit(Unit.EX, values)


def ch(*values: int | float) -> Value:
    return _with_unit(Unit.CH, values)


def rem(*values: int | float) -> Value:
    return _with_unit(Unit.REM, values)


def vw(*values: int | float) -> Value:
    return _with_unit(Unit.VW, values)


def vh(*values: int | float) -> Value:
    return _with_unit(Unit.VH, values)


def vmin(*values: int | float) -> Value:
    return _with_unit(Unit.VMIN, values)


def vmax(*values: int | float) -> Value:
    return _with_unit(Unit.VMAX, values)


def percent(*values: int | float) -> Value:
    return _with_unit(Unit.PERCENT, values)


def deg(*values: int | float) -> Value:
    return _with_unit(Unit.DEG, values)


def rad(*values: int | float) -> Value:
    return _with_unit(Unit.RAD, values)


def grad(*values: int | float) -> Value:
    return _with_unit(Unit.GRAD, values)


def turn(*values: int | float) -> Value:
    return _with_unit(Unit.TURN, values)


def s(*values: int | float) -> Value:
    return _with_unit(Unit.S, values)


def ms(*values: int | float) -> Value:
    return _with_unit(Unit.MS, values)


def rgb(r: object, g: object, b: object) -> Raw:
    """The ``rgb()`` css function."""
    return Raw(f"rgb({r}, {g}, {b})")


# ---------------------------------------------------------------------------
# Text parsing (used by the stylegen.parser front-end)
# ---------------------------------------------------------------------------

_NUMERIC_RE = re.compile(
    r"""
    ^(?P<number>[+-]?(?:\d+\.\d*|\.\d+|\d+))   # integer or decimal
    (?P<unit>%|[a-zA-Z]+)?$                     # optional unit suffix
    """,
    re.VERBOSE,
)

_KNOWN_UNITS = {u.value for u in Unit}


def _parse_token(token: str) -> Value:
    match = _NUMERIC_RE.match(token)
    if match is None:
        return Raw(token)
    unit = (match.group("unit") or "").lower()
    if unit not in _KNOWN_UNITS:
        return Raw(token)
    raw_number = match.group("number")
    number = float(raw_number) if "." in raw_number else int(raw_number)
    return Numeric(number, Unit(unit))


def parse_value(text: str) -> Value:
    """Parse declaration value text into a Value.

    Quoted strings, function calls and comma lists are kept as a single Raw
    so their inner spacing survives untouched.
    """
    text = text.strip()
    if not text:
        raise InvalidValueError("empty value")
    if any(c in text for c in "\"'(),"):
        return Raw(text)
    return join(*(_parse_token(t) for t in text.split()))
