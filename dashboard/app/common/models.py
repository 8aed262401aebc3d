"""Common pydantic bases for backend records and request payloads."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BackendRecord(BaseModel):
    """Row returned by a backend listing endpoint.

    Unknown fields are ignored so that backend additions do not break views.
    """

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class FormPayload(BaseModel):
    """Request body sent to the backend as form fields."""

    model_config = ConfigDict(extra="forbid")

    def to_form(self, *, skip_none: bool = False) -> Dict[str, str]:
        form: Dict[str, str] = {}
        for name, value in self.model_dump().items():
            if value is None and skip_none:
                continue
            form[name] = _form_value(value)
        return form


class JsonPayload(BaseModel):
    """Request body sent to the backend as JSON."""

    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
