"""Currency display utilities"""

import math
from typing import Any
from loan_engine.config import settings

PLACEHOLDER = "—"


def group_indian(digits: str) -> str:
    """Indian digit grouping: last three digits, then pairs (12,34,567)"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(amount: Any, symbol: str | None = None) -> str:
    """
    Format a number as rupees with en-IN grouping, e.g. 1234567.891 → ₹12,34,567.89.

    Fractions are shown only when non-zero (at most 2 digits). Anything that is
    not a finite number renders as an em dash placeholder.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not math.isfinite(amount):
        return PLACEHOLDER

    symbol = settings.currency_symbol if symbol is None else symbol
    whole, _, fraction = f"{abs(amount):.2f}".partition(".")
    fraction = fraction.rstrip("0")
    sign = "-" if amount < 0 and (whole != "0" or fraction) else ""

    text = group_indian(whole)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{sign}{symbol}{text}"
