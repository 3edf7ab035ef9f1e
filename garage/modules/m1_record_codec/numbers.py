"""
#WHERE
    Used by block.py and header.py for every numeric field of the
    blueprint format.

#WHAT
    Locale-invariant number parsing and formatting.  Parsing is lenient by
    default: a field that does not parse falls back to 0.0 (floats) or -1
    (integers) and the record stays valid.  Strict mode raises instead.

#INPUT
    Raw field text / Python numbers.

#OUTPUT
    float / int values, or the canonical field text.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np

from garage.shared.errors import MalformedRecord

log = logging.getLogger(__name__)

INT_FALLBACK = -1
FLOAT_FALLBACK = 0.0

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1

_WS = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(rf"^{_WS}[+-]?[0-9]+{_WS}$", re.ASCII)
# Thousands separators are only allowed in the integral part.
_FLOAT_RE = re.compile(
    rf"^{_WS}[+-]?(?:[0-9][0-9,]*(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?{_WS}$",
    re.ASCII,
)
_SYMBOL_RE = re.compile(rf"^{_WS}([+-]?)(nan|infinity){_WS}$", re.ASCII | re.IGNORECASE)


def _fallback(text: str, kind: str, value, strict: bool):
    if strict:
        raise MalformedRecord(f"Unparsable {kind} field: {text!r}")
    log.debug("Numeric fallback: %r is not a valid %s, using %r", text, kind, value)
    return value


def parse_int(text: str, strict: bool = False) -> int:
    """Parse an invariant integer; -1 when the text is not one."""
    if _INT_RE.match(text):
        value = int(text.strip())
        if _INT32_MIN <= value <= _INT32_MAX:
            return value
    return _fallback(text, "integer", INT_FALLBACK, strict)


def parse_float(text: str, strict: bool = False) -> float:
    """Parse an invariant float; 0.0 when the text is not one.

    Accepts an optional sign, a fractional part, an exponent, ``,``
    thousands grouping and the ``NaN`` / ``Infinity`` symbols.
    """
    if _FLOAT_RE.match(text):
        # Out-of-range values saturate to +/-inf.
        return float(text.strip().replace(",", ""))
    symbol = _SYMBOL_RE.match(text)
    if symbol:
        sign, name = symbol.groups()
        if name.lower() == "nan":
            return math.nan
        return -math.inf if sign == "-" else math.inf
    return _fallback(text, "float", FLOAT_FALLBACK, strict)


def format_float(value: float) -> str:
    """Shortest round-trip text for *value*, never in scientific notation.

    Integral values carry no fractional part (``1``, ``-0``).
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return np.format_float_positional(value, unique=True, trim="-")


def format_int(value: int) -> str:
    return str(int(value))
