"""Pydantic schemas for IR and marketing material."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import field_validator

from dashboard.app.common.models import BackendRecord, FormPayload
from dashboard.app.common.numbers import format_file_size


class IRCategory(str, Enum):
    ALL = "전체"
    IR = "IR"
    PHOTO = "사진"
    VIDEO = "영상"
    BROCHURE = "브로셔"
    EXHIBITION = "전시회"


class IRFile(BackendRecord):
    id: int
    original_name: str
    stored_name: str
    category: Optional[str] = None
    folder: Optional[str] = None
    upload_date: Optional[str] = None
    size: int = 0

    @property
    def display_size(self) -> str:
        return format_file_size(self.size)


class IRUpload(FormPayload):
    category: IRCategory = IRCategory.IR
    folder: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, value: Any) -> Any:
        return value or IRCategory.IR

    @field_validator("category")
    @classmethod
    def reject_all(cls, value: IRCategory) -> IRCategory:
        if value is IRCategory.ALL:
            raise ValueError("업로드 자료의 구분을 선택하세요")
        return value

    @field_validator("folder", mode="before")
    @classmethod
    def blank_folder(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None
