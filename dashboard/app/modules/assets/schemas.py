"""Pydantic schemas for the in-kind contribution (assets) screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from dashboard.app.common.models import BackendRecord, FormPayload, JsonPayload
from dashboard.app.common.numbers import coerce_number, optional_number
from dashboard.app.metrics.allocation import AllocationEntity


class _AllocationRow(BackendRecord, ABC):
    name: str
    shares: Dict[str, Optional[float]] = Field(default_factory=dict)

    @field_validator("shares", mode="before")
    @classmethod
    def default_shares(cls, value: Any) -> Any:
        if not value:
            return {}
        return {key: optional_number(share) for key, share in dict(value).items()}

    @abstractmethod
    def to_entity(self) -> AllocationEntity:
        """Calculator view of this row."""

    # Backend-provided totals are ignored; these are always derived.
    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_percent(self) -> float:
        return self.to_entity().total_percent

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_amount(self) -> int:
        return self.to_entity().total_amount

    @property
    def is_over_allocated(self) -> bool:
        return self.total_percent > 100


class PersonnelRow(_AllocationRow):
    person_id: int
    department: Optional[str] = None
    salary: float = 0.0

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, value: Any) -> float:
        return coerce_number(value)

    def to_entity(self) -> AllocationEntity:
        return AllocationEntity(id=self.person_id, base_value=self.salary, shares=dict(self.shares))


class EquipmentRow(_AllocationRow):
    equipment_id: int
    acquisition_cost: float = 0.0
    acquisition_date: Optional[str] = None

    @field_validator("acquisition_cost", mode="before")
    @classmethod
    def coerce_cost(cls, value: Any) -> float:
        return coerce_number(value)

    def to_entity(self) -> AllocationEntity:
        return AllocationEntity(id=self.equipment_id, base_value=self.acquisition_cost, shares=dict(self.shares))


class AssetsResponse(BackendRecord):
    projects: List[str] = Field(default_factory=list)
    personnel_rows: List[PersonnelRow] = Field(default_factory=list)
    personnel_salary_total: float = 0.0
    equipment_rows: List[EquipmentRow] = Field(default_factory=list)
    equipment_acquisition_total: float = 0.0

    @field_validator("projects", "personnel_rows", "equipment_rows", mode="before")
    @classmethod
    def default_lists(cls, value: Any) -> Any:
        return value or []

    @field_validator("personnel_salary_total", "equipment_acquisition_total", mode="before")
    @classmethod
    def default_totals(cls, value: Any) -> float:
        return coerce_number(value)


class ShareEdit(BaseModel):
    """One keystroke's worth of change to a share cell."""

    entity_id: int
    project_key: str = Field(..., min_length=1)
    value: Optional[float] = None

    @field_validator("project_key")
    @classmethod
    def validate_project_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("과제명이 비어 있습니다")
        return value


class ShareUpdate(JsonPayload):
    """Body of ``PUT /personnel/{id}/shares`` and ``PUT /equipment/{id}/shares``."""

    shares: Dict[str, float]

    @field_validator("shares", mode="before")
    @classmethod
    def normalize_shares(cls, value: Any) -> Dict[str, float]:
        if not isinstance(value, dict):
            raise ValueError("shares must be a mapping")
        normalized: Dict[str, float] = {}
        for key, share in value.items():
            if not isinstance(key, str) or not key.strip():
                raise ValueError("과제명이 비어 있습니다")
            normalized[key] = coerce_number(share)
        return normalized


class PersonnelCreate(FormPayload):
    name: str
    department: str = ""
    salary: float = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("이름을 입력해주세요")
        return name

    @field_validator("department", mode="before")
    @classmethod
    def default_department(cls, value: Any) -> str:
        return value or ""


class EquipmentCreate(FormPayload):
    name: str
    acquisition_cost: float = Field(..., ge=0)
    acquisition_date: date

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("장치명을 입력해주세요")
        return name


class AllocationSummary(BaseModel):
    base_total: float
    grand_total: int
    ratio: float


class AssetsSummary(BaseModel):
    personnel: AllocationSummary
    equipment: AllocationSummary
