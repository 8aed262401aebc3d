"""Pydantic schemas for the investment ledger."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from dashboard.app.common.models import BackendRecord, FormPayload
from dashboard.app.common.numbers import coerce_number


class Investment(BackendRecord):
    id: int
    round: str
    contract_date: Optional[str] = None
    registration_date: Optional[str] = None
    shares: float = 0.0
    amount: float = 0.0
    investor: Optional[str] = None
    security_type: Optional[str] = None

    @field_validator("shares", "amount", mode="before")
    @classmethod
    def coerce_amounts(cls, value: Any) -> float:
        return coerce_number(value)


class InvestmentForm(FormPayload):
    """Multipart body for both creating and editing an investment."""

    round: str = Field(..., min_length=1)
    contract_date: Optional[date] = None
    registration_date: Optional[date] = None
    shares: float = 0.0
    amount: float = 0.0
    investor: str = ""
    security_type: str = ""

    @field_validator("shares", "amount", mode="before")
    @classmethod
    def coerce_amounts(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("investor", "security_type", mode="before")
    @classmethod
    def default_text(cls, value: Any) -> str:
        return value or ""
