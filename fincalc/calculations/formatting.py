"""
Currency Rounding and Display

Every calculator reports amounts as whole rupees using round_currency.
format_inr renders an amount for display only.
"""

import math
from textwrap import wrap

CURRENCY_SYMBOL = "₹"


def round_currency(value: float) -> int:
    """
    Round to the nearest whole currency unit, halves toward +infinity.

    2.5 -> 3 and -2.5 -> -2, unlike the built-in round() which rounds
    halves to even.
    """
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def group_indian(whole: str) -> str:
    """
    Insert Indian digit grouping separators (1,23,45,678).

    The last three digits form one group, everything before them is split
    into pairs.
    """
    if len(whole) <= 3:
        return whole

    head, tail = whole[:-3], whole[-3:]
    groups = []
    if len(head) % 2 != 0:
        groups.append(head[0])
        head = head[1:]
    groups.extend(wrap(head, 2))

    return ",".join(groups) + "," + tail


def format_inr(amount: float) -> str:
    """
    Format an amount as Indian Rupees with no decimal places.

    Args:
        amount: Amount in rupees (may be fractional or negative)

    Returns:
        Display string such as "₹1,41,478" or "-₹5,000"
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite amount {amount}")

    # Display rounding rounds halves away from zero
    rounded = round_currency(abs(amount))
    sign = "-" if amount < 0 and rounded != 0 else ""

    return f"{sign}{CURRENCY_SYMBOL}{group_indian(str(rounded))}"
