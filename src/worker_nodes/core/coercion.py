"""Coercion rules applied to caller-supplied pool options.

Every option is converted with one of three coercers, regardless of the type the
caller used:

``to_bool``
    ``None``, ``False``, zero, NaN and empty strings or containers become ``False``.
    Everything else becomes ``True``.

``to_number``
    ``bool`` becomes ``1``/``0``; integers stay integers; other reals become ``float``.
    Strings are stripped, then read as one of:

    - an unsigned ``0x``/``0o``/``0b`` literal (``"0x10"`` is ``16``),
    - a signed decimal integer (``"-3"``),
    - a decimal float (``"1.5"``, ``"1e3"``, ``".5"``),
    - ``"Infinity"``, optionally signed.

    Digit separators (``"1_000"``) and the spellings ``"inf"`` and ``"nan"`` are
    rejected. Anything that does not parse, ``None`` and containers become ``NAN``.
    Nothing raises.

``passthrough``
    Returns the argument itself.
"""

import math
import numbers
import re
from collections.abc import Callable
from typing import Any

Number = int | float

UNBOUNDED: float = math.inf
NAN: float = math.nan

Coercer = Callable[[Any], Any]

_PREFIXED_INT = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = re.compile(r"[+-]?Infinity")
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def to_bool(value: Any) -> bool:
    """Coerce a value to a strict boolean."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _parse_number(text: str) -> Number:
    text = text.strip()
    if _PREFIXED_INT.fullmatch(text):
        return int(text, 0)
    if _INFINITY.fullmatch(text):
        return -UNBOUNDED if text.startswith("-") else UNBOUNDED
    if not _DECIMAL.fullmatch(text):
        return NAN
    try:
        return int(text)
    except ValueError:
        return float(text)


def to_number(value: Any) -> Number:
    """Coerce a value to ``int`` or ``float``; unparseable input yields NaN."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        return _parse_number(value)
    return NAN


def passthrough(value: Any) -> Any:
    return value


def is_nan(value: Any) -> bool:
    """Return True if the value is the not-a-number sentinel."""
    return isinstance(value, float) and math.isnan(value)
