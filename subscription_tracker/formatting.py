"""Formatting utilities for currency display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

_CENT = Decimal("0.01")


def round_to_cent(amount: Union[float, int]) -> Decimal:
    """Round ``amount`` half-up to the nearest cent.

    The float's shortest decimal representation is rounded, so ``1.005``
    becomes ``1.01`` rather than following its binary expansion down.
    """
    return Decimal(repr(float(amount))).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a US-dollar amount.

    Args:
        amount: The amount to format
        include_sign: Whether to include the dollar sign

    Returns:
        Formatted currency string (e.g., "$1,234.56" or "1,234.56").
        Negative amounts carry the minus before the symbol ("-$5.00");
        infinities render as "$∞" / "-$∞" and NaN as "$NaN".

    Example:
        >>> format_currency(1234.565)
        '$1,234.57'
        >>> format_currency(41.666666, include_sign=False)
        '41.67'
    """
    symbol = "$" if include_sign else ""
    if math.isnan(amount):
        return f"{symbol}NaN"
    if math.isinf(amount):
        return f"{'-' if amount < 0 else ''}{symbol}∞"
    rounded = round_to_cent(amount)
    sign = "-" if rounded < 0 else ""
    formatted = f"{abs(rounded):,.2f}"
    return f"{sign}${formatted}" if include_sign else f"{sign}{formatted}"
