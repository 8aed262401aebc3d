"""Controller for the research data screen."""

from __future__ import annotations

from typing import Any, List, Optional

from dashboard.app.common.views import BaseView
from dashboard.app.core.http import FileField

from .schemas import ResearchCreate, ResearchRecord
from .service import ResearchService


class ResearchView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = ResearchService(self.client)
        self.records: List[ResearchRecord] = []

    def refresh(self) -> bool:
        ok, records = self._load(self._service.list_records, failure="데이터 불러오기 실패")
        if not ok or records is None:
            return False
        self.records = records
        return True

    def add(self, payload: ResearchCreate, file: Optional[FileField] = None) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.create(payload, file),
            failure="업로드 실패",
            success="연구 데이터 등록 완료",
        )
        if ok:
            self.refresh()
        return ok

    def delete(self, record_id: int) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.delete(record_id),
            failure="삭제 실패",
            success="삭제 완료",
        )
        if ok:
            self.refresh()
        return ok

    def file_url(self, record: ResearchRecord) -> Optional[str]:
        if not record.filename:
            return None
        return self._service.file_url(record.filename)
