"""Pydantic schemas for material-property test results."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from dashboard.app.common.models import BackendRecord, FormPayload
from dashboard.app.common.numbers import coerce_number


class ResearchRecord(BackendRecord):
    id: int
    sample_type: str
    property: str
    value: float = 0.0
    tester: Optional[str] = None
    test_date: Optional[str] = None
    filename: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> float:
        return coerce_number(value)


class ResearchCreate(FormPayload):
    sample_type: str = Field(..., min_length=1)
    property: str = Field(..., min_length=1)
    value: float
    tester: str = Field(..., min_length=1)
    test_date: date
