"""Pydantic schemas for government/R&D projects."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator

from dashboard.app.common.models import BackendRecord, JsonPayload
from dashboard.app.common.numbers import optional_number


class ProjectStatus(str, Enum):
    IN_PROGRESS = "진행중"
    PLANNED = "신청예정"
    APPLIED = "신청완료"
    NOT_APPLIED = "미지원"
    SELECTED = "선정완료"


class Project(BackendRecord):
    id: int
    title: str
    organization: Optional[str] = None
    type: Optional[str] = None
    period: Optional[str] = None
    budget: Optional[float] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
    participants: Optional[str] = None
    files: List[str] = Field(default_factory=list)
    last_updated: Optional[str] = None

    @field_validator("budget", mode="before")
    @classmethod
    def coerce_budget(cls, value: Any) -> Optional[float]:
        return optional_number(value)

    @field_validator("files", mode="before")
    @classmethod
    def default_files(cls, value: Any) -> List[str]:
        return list(value or [])


class ProjectPayload(JsonPayload):
    """JSON body used for both creating and editing a project."""

    title: str = Field(..., min_length=1)
    organization: Optional[str] = None
    type: Optional[str] = None
    period: Optional[str] = None
    budget: Optional[float] = None
    status: Optional[ProjectStatus] = None
    due_date: Optional[date] = None
    participants: Optional[str] = None

    @field_validator("status", "due_date", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_project(cls, project: Project, **changes: Any) -> "ProjectPayload":
        data = project.model_dump(include=set(cls.model_fields))
        data.update(changes)
        return cls.model_validate(data)
