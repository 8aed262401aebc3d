"""Pure derived-metric calculators used by the dashboard views."""

from .allocation import AllocationEntity, apply_share, grand_total, is_over_allocated
from .leadtime import STAGE_FIELDS, ProcessTimeBreakdown, expected_lead_time
from .ratios import margin_rate, ratio, unit_price
from .shareholders import LedgerSummary, Shareholder, summarize_investments

__all__ = [
    "AllocationEntity",
    "apply_share",
    "grand_total",
    "is_over_allocated",
    "STAGE_FIELDS",
    "ProcessTimeBreakdown",
    "expected_lead_time",
    "margin_rate",
    "ratio",
    "unit_price",
    "LedgerSummary",
    "Shareholder",
    "summarize_investments",
]
