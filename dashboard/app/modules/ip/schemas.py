"""Pydantic schemas for intellectual-property records and their files."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from dashboard.app.common.models import BackendRecord, FormPayload
from dashboard.app.common.numbers import format_file_size


class IPRecord(BackendRecord):
    id: int
    title: str
    number: str
    apply_date: Optional[str] = None
    reg_date: Optional[str] = None
    inventors: Optional[str] = None
    status: Optional[str] = None


class IPFile(BackendRecord):
    id: int
    ip_id: int
    original_name: str
    stored_name: str
    upload_date: Optional[str] = None
    size: int = 0

    @property
    def display_size(self) -> str:
        return format_file_size(self.size)


class IPCreate(FormPayload):
    title: str = Field(..., min_length=1)
    number: str = Field(..., min_length=1)
    apply_date: Optional[date] = None
    reg_date: Optional[date] = None
    inventors: str = ""
    status: str = ""

    @field_validator("inventors", "status", mode="before")
    @classmethod
    def default_text(cls, value: Any) -> str:
        return value or ""
