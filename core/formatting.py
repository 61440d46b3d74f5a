from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import pandas as pd

CURRENCY_SYMBOL = "Rp"
THOUSANDS_SEPARATOR = "."


def round_half_up(value: object, ndigits: int = 0) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    q = Decimal(10) ** -ndigits
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))


def format_number(value: object) -> str:
    """Whole number with Indonesian digit grouping, e.g. 1234567 -> '1.234.567'."""
    rounded = round_half_up(value)
    if rounded is None:
        return "N/A"
    return f"{int(rounded):,}".replace(",", THOUSANDS_SEPARATOR)


def format_currency(value: object) -> str:
    grouped = format_number(value)
    if grouped == "N/A":
        return grouped
    return f"{CURRENCY_SYMBOL} {grouped}"
