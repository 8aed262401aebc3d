"""Shareholder ledger aggregation over recorded investment rounds."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from dashboard.app.common.numbers import coerce_number

from .ratios import ratio

UNNAMED_INVESTOR = "기타"


@dataclass(slots=True)
class Shareholder:
    investor: str
    shares: float
    amount: float
    percent: float


@dataclass(slots=True)
class LedgerSummary:
    total_amount: float = 0.0
    total_shares: float = 0.0
    round_count: int = 0
    shareholders: List[Shareholder] = field(default_factory=list)


def summarize_investments(investments: Iterable[Mapping[str, Any]]) -> LedgerSummary:
    """Group investments by investor, largest holding first."""

    rows = list(investments)
    total_amount = sum((coerce_number(row.get("amount")) for row in rows), 0.0)
    total_shares = sum((coerce_number(row.get("shares")) for row in rows), 0.0)
    rounds = {row.get("round") for row in rows}

    grouped: Dict[str, Dict[str, float]] = defaultdict(lambda: {"shares": 0.0, "amount": 0.0})
    for row in rows:
        key = row.get("investor") or UNNAMED_INVESTOR
        grouped[key]["shares"] += coerce_number(row.get("shares"))
        grouped[key]["amount"] += coerce_number(row.get("amount"))

    shareholders = [
        Shareholder(
            investor=name,
            shares=values["shares"],
            amount=values["amount"],
            percent=ratio(values["shares"], total_shares),
        )
        for name, values in grouped.items()
    ]
    shareholders.sort(key=lambda holder: holder.shares, reverse=True)

    return LedgerSummary(
        total_amount=total_amount,
        total_shares=total_shares,
        round_count=len(rounds),
        shareholders=shareholders,
    )
