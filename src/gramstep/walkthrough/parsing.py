"""Coordinate text parsing for the input fields."""

from typing import Optional
import math
import re

# Longest leading decimal number, as a browser's parseFloat reads it
_LEADING_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _to_float(text: str) -> Optional[float]:
    """Value of the number at the start of text; trailing junk is ignored."""
    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_coordinate(text: str) -> Optional[float]:
    """Parse a coordinate typed by the user.

    Accepts plain numbers ("2.5", "-3") and simple fractions ("1/3").
    A fraction is only used when it has exactly two parts that both
    parse and a non-zero denominator; otherwise the leading number of
    the text is used, so "1/0" reads as 1 and "4x" as 4.

    Returns:
        The value, or None if the text does not start with a number.
    """
    clean = text.strip()
    if "/" in clean:
        parts = clean.split("/")
        if len(parts) == 2:
            num = _to_float(parts[0])
            den = _to_float(parts[1])
            if num is not None and den is not None and den != 0:
                return num / den
    return _to_float(clean)
