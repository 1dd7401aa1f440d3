"""Presentation helpers with a fixed US-dollar format"""

import math


def format_currency(amount: float) -> str:
    """Whole-dollar US format: 1234567.4 -> "$1,234,567", -1234 -> "-$1,234" """
    if amount is None or not math.isfinite(amount):
        amount = 0.0
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percentage(value: float) -> str:
    """One decimal place: 62.5 -> "62.5%" """
    if value is None or not math.isfinite(value):
        value = 0.0
    return f"{value:.1f}%"
