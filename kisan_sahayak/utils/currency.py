"""
Rupee amount helpers using the Indian numbering convention
"""
import math
import re
from typing import Union

RUPEE_SYMBOL = "₹"

_NON_NUMERIC = re.compile(r'[^0-9.-]+')
_LAKH_GROUPS = re.compile(r'(\d)(?=(\d{2})+$)')


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up

    Python's round() uses banker's rounding, which would turn 12.5 into 12.
    """
    return int(math.floor(value + 0.5))


def format_inr(amount: Union[int, float]) -> str:
    """
    Format a rupee amount with lakh/crore digit grouping

    Args:
        amount: Amount in rupees, rounded to a whole number before formatting

    Returns:
        Formatted string, e.g. 1234567 -> "₹12,34,567"
    """
    value = round_half_up(amount)
    sign = "-" if value < 0 else ""
    digits = str(abs(value))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        digits = _LAKH_GROUPS.sub(r'\1,', head) + "," + tail

    return f"{sign}{RUPEE_SYMBOL}{digits}"


def parse_inr(formatted: str) -> Union[int, float]:
    """
    Parse a formatted rupee string back to a number

    Args:
        formatted: String such as "₹12,34,567"

    Returns:
        Numeric value; an int when the amount is whole

    Raises:
        ValueError: If the string holds no number
    """
    cleaned = _NON_NUMERIC.sub('', formatted)
    if not cleaned:
        raise ValueError(f"No amount found in '{formatted}'")

    value = float(cleaned)
    return int(value) if value.is_integer() else value
