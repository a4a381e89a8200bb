# src/finsim/utils/math_utils.py

import math


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer, with halves going towards +infinity."""
    return int(math.floor(value + 0.5))


def format_money(amount: float) -> str:
    """Formats an amount with thousands separators, keeping cents only when present."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"
