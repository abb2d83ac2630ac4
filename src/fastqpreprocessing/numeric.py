# src/fastqpreprocessing/numeric.py
"""
Best-effort numeric conversion for option values.

Both helpers read the longest numeric prefix of the token, after optional
leading whitespace, and fall back to ``0`` when there is none. No locale is
consulted, so ``"1,5"`` reads as ``1``. ``to_float`` also takes hexadecimal
floats (``"0x1p3"`` is 8.0); ``to_int`` is base 10 only. Range checking is
left to the rule lists of each command.
"""
from __future__ import annotations
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"""\s*(?:
        (?P<hex>[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)   # hex, optional binary exponent
        |(?P<dec>[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)                     # decimal, optional exponent
        |(?P<special>[+-]?(?:infinity|inf|nan))
    )""",
    re.VERBOSE | re.IGNORECASE,
)


def to_int(token: str) -> int:
    """``atoi``-style conversion: ``"16"`` -> 16, ``"12abc"`` -> 12, ``"abc"`` -> 0."""
    m = _INT_PREFIX.match(token)
    return int(m.group(1)) if m else 0


def to_float(token: str) -> float:
    """``atof``-style conversion: ``"1.5GB"`` -> 1.5, ``"2e"`` -> 2.0, ``"0x10"`` -> 16.0, ``"x"`` -> 0.0."""
    m = _FLOAT_PREFIX.match(token)
    if m is None:
        return 0.0
    if m.group("hex"):
        return float.fromhex(m.group("hex"))
    return float(m.group("dec") or m.group("special"))
