"""One-line derived ratios shown next to tables."""

from __future__ import annotations

from typing import Any

from dashboard.app.common.numbers import coerce_number, round_half_up


def ratio(total: Any, base: Any) -> float:
    """``total / base * 100``, or 0 when ``base`` is zero."""

    denominator = coerce_number(base)
    if denominator == 0:
        return 0.0
    return coerce_number(total) * 100 / denominator


def unit_price(total_price: Any, quantity: Any) -> int:
    """Per-unit price rounded to the nearest unit; 0 when either input is missing."""

    total = coerce_number(total_price)
    count = coerce_number(quantity)
    if not total or not count:
        return 0
    return round_half_up(total / count)


def margin_rate(total_quote_price: Any, manufacturing_cost: Any) -> float:
    """Margin as a percentage of the quoted price; 0 when nothing was quoted."""

    quote = coerce_number(total_quote_price)
    return ratio(quote - coerce_number(manufacturing_cost), quote)
