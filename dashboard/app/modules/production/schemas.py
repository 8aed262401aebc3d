"""Pydantic schemas for the production/sales screen."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from dashboard.app.common.models import BackendRecord
from dashboard.app.common.numbers import coerce_number


class SalesSummary(BackendRecord):
    year: int
    quarter: int
    month: int
    total_sales_all: float = 0.0
    total_sales_year: float = 0.0
    total_sales_quarter: float = 0.0
    total_sales_month: float = 0.0

    @field_validator(
        "total_sales_all",
        "total_sales_year",
        "total_sales_quarter",
        "total_sales_month",
        mode="before",
    )
    @classmethod
    def coerce_totals(cls, value: Any) -> float:
        return coerce_number(value)
