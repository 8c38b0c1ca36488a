"""Parsing of free-text money and count inputs"""

import math
import re
from typing import Optional, Union

_WHITESPACE = re.compile(r"\s")
_CURRENCY_SYMBOLS = re.compile(r"[€$£]")
# "1.234" style grouping: a dot followed by exactly three digits
_THOUSANDS_DOT = re.compile(r"\.(?=\d{3}(\D|$))")
_NON_NUMERIC = re.compile(r"[^\d.-]")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_money(raw: Optional[str]) -> float:
    """
    Parse a user-typed amount into a non-negative float.

    Accepts "1234.56", "1 234,56", "1.234,56", "€ 1234,56" and similar.
    Never raises: anything unparseable, non-finite or negative becomes 0.

    Example:
        "1.234,56" → "1234,56" → "1234.56" → 1234.56
    """
    if raw is None:
        return 0.0

    trimmed = raw.strip()
    if not trimmed:
        return 0.0

    normalized = _WHITESPACE.sub("", trimmed)
    normalized = _CURRENCY_SYMBOLS.sub("", normalized)
    normalized = _THOUSANDS_DOT.sub("", normalized)
    normalized = normalized.replace(",", ".", 1)
    normalized = _NON_NUMERIC.sub("", normalized)

    try:
        value = float(normalized)
    except ValueError:
        return 0.0

    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


def coerce_money(value: Union[float, str, None]) -> float:
    """Amount from either a JSON number or free text"""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return max(0.0, float(value)) if math.isfinite(value) else 0.0
    return parse_money(value)


def to_positive_int(raw: Optional[str], fallback: int) -> int:
    """Leading integer of a text field, or fallback when missing or not positive"""
    if raw is None:
        return fallback
    match = _LEADING_INT.match(str(raw))
    if not match:
        return fallback
    value = int(match.group(1))
    return value if value > 0 else fallback


def parse_override(raw: Union[float, str, None]) -> Optional[float]:
    """
    Parse the monthly savings override field.

    An empty field means "no override" (None); any other value is parsed
    with coerce_money and may legitimately come out as 0.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return coerce_money(raw)
