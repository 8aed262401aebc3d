"""Pydantic schemas for process orders, their status and raw tracking data."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from dashboard.app.common.models import BackendRecord, FormPayload, JsonPayload
from dashboard.app.common.numbers import coerce_number
from dashboard.app.metrics.leadtime import STAGE_FIELDS, ProcessTimeBreakdown
from dashboard.app.metrics.ratios import margin_rate as compute_margin_rate, unit_price


class OrderStatus(str, Enum):
    QUOTING = "견적중"
    IN_PROGRESS = "진행중"
    MANUFACTURING = "제작중"
    ORDERED = "발주완료"
    DELIVERED = "납품완료"
    NOT_PROCEEDING = "미진행"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProcessOrder(BackendRecord):
    id: int
    company_name: str
    quote_date: Optional[str] = None
    category: Optional[str] = None
    product_name: str
    quantity: int = 0
    unit_manufacturing_cost: float = 0.0  # whole-order manufacturing cost
    unit_quote_price: float = 0.0
    total_quote_price: float = 0.0
    status: str = OrderStatus.QUOTING.value
    actual_order_amount: Optional[float] = None
    margin_rate: Optional[float] = None
    related_file: Optional[str] = None
    delivered_at: Optional[str] = None
    due_date: Optional[str] = None

    design_hr: Optional[float] = None
    printing_hr: Optional[float] = None
    infiltration_hr: Optional[float] = None
    bonding_hr: Optional[float] = None
    lsi_hr: Optional[float] = None
    machining_hr: Optional[float] = None
    coating_hr: Optional[float] = None

    @field_validator("unit_manufacturing_cost", "unit_quote_price", "total_quote_price", mode="before")
    @classmethod
    def coerce_amounts(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, value: Any) -> int:
        return int(coerce_number(value))

    @property
    def per_unit_quote(self) -> int:
        return unit_price(self.total_quote_price, self.quantity)

    @property
    def effective_margin_rate(self) -> float:
        if self.margin_rate is not None:
            return self.margin_rate
        return compute_margin_rate(self.total_quote_price, self.unit_manufacturing_cost)

    @property
    def breakdown(self) -> ProcessTimeBreakdown:
        return ProcessTimeBreakdown(**{name: getattr(self, name) for name in STAGE_FIELDS})

    @property
    def expected_lead_time_hr(self) -> float:
        return self.breakdown.expected_lead_time_hr

    @property
    def is_in_progress(self) -> bool:
        return self.status == OrderStatus.IN_PROGRESS.value


class ProcessOrderStatus(BackendRecord):
    id: int
    order_id: int
    total_process_time_hours: Optional[float] = None
    current_stage: Optional[str] = None
    progress_percent: Optional[float] = None
    current_detail: Optional[str] = None
    priority: Optional[str] = None


class UnitCost(BackendRecord):
    id: str
    category: str
    item_name: str
    unit_price: float = 0.0
    unit: str = ""
    note: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> str:
        return str(value)


class ProcessTracking(BackendRecord):
    id: int
    order_id: int
    product_volume_cm3: Optional[float] = None
    printing_time_hr: Optional[float] = None
    bed_density: Optional[float] = None
    note: Optional[str] = None


class OrderCreate(FormPayload):
    company_name: str = Field(..., min_length=1)
    quote_date: date = Field(default_factory=date.today)
    category: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    manufacturing_cost: float = Field(..., ge=0)
    total_quote_price: float = Field(..., ge=0)
    status: str = OrderStatus.QUOTING.value
    due_date: Optional[date] = None
    actual_order_amount: Optional[float] = None


class OrderStatusUpdate(JsonPayload):
    order_id: int
    total_process_time_hours: Optional[float] = None
    current_stage: Optional[str] = None
    progress_percent: Optional[float] = None
    current_detail: Optional[str] = None
    priority: Optional[str] = None

    @field_validator("current_stage", "current_detail", "priority", mode="before")
    @classmethod
    def blank_strings(cls, value: Any) -> Any:
        return _blank_to_none(value)


class TrackingPayload(JsonPayload):
    order_id: int
    product_volume_cm3: Optional[float] = None
    printing_time_hr: Optional[float] = None
    bed_density: Optional[float] = None
    note: Optional[str] = None

    @field_validator("note", mode="before")
    @classmethod
    def blank_note(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ProcessTimesUpdate(ProcessTimeBreakdown):
    """Body of ``PUT /process/orders/{id}/times``."""

    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> dict:
        return self.model_dump(mode="json")
