"""Controller for the IP screen."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from dashboard.app.common.views import BaseView, RecordNotFoundError
from dashboard.app.core.http import FileField

from .schemas import IPCreate, IPFile, IPRecord
from .service import IPService


class IPView(BaseView):
    """IP list plus the file panel of the record currently opened."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = IPService(self.client)
        self.records: List[IPRecord] = []
        self.current: Optional[IPRecord] = None
        self.files: List[IPFile] = []

    def refresh(self) -> bool:
        ok, records = self._load(self._service.list_records, failure="IP 데이터 불러오기 실패")
        if not ok or records is None:
            return False
        self.records = records
        return True

    def add(self, payload: IPCreate) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.create_record(payload),
            failure="IP 등록 실패",
            success="IP 등록 완료",
        )
        if ok:
            self.refresh()
        return ok

    def delete(self, ip_id: int) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.delete_record(ip_id),
            failure="IP 삭제 실패",
            success="IP 삭제 완료",
        )
        if ok:
            if self.current is not None and self.current.id == ip_id:
                self.close_files()
            self.refresh()
        return ok

    # ------------------------------------------------------------------ files
    def open_files(self, ip_id: int) -> bool:
        record = next((item for item in self.records if item.id == ip_id), None)
        if record is None:
            raise RecordNotFoundError(f"IP record {ip_id} not loaded")
        self.current = record
        self.files = []
        return self.refresh_files()

    def close_files(self) -> None:
        self.current = None
        self.files = []

    def refresh_files(self) -> bool:
        if self.current is None:
            return False
        ip_id = self.current.id
        ok, files = self._load(lambda: self._service.list_files(ip_id), failure="IP 파일 목록 불러오기 실패")
        if not ok or files is None:
            return False
        self.files = files
        return True

    def upload_files(self, files: Sequence[FileField]) -> bool:
        self._ensure_writable()
        if self.current is None:
            return False
        if not files:
            self.notifier.warning("업로드할 파일을 선택해 주세요.")
            return False
        ip_id = self.current.id
        ok, _ = self._attempt(
            lambda: self._service.upload_files(ip_id, files),
            failure="파일 업로드 실패",
            success="파일 업로드 완료",
        )
        if ok:
            self.refresh_files()
        return ok

    def delete_file(self, file_id: int) -> bool:
        self._ensure_writable()
        if self.current is None:
            return False
        ok, _ = self._attempt(
            lambda: self._service.delete_file(file_id),
            failure="파일 삭제 실패",
            success="파일 삭제 완료",
        )
        if ok:
            self.refresh_files()
        return ok

    def file_url(self, file: IPFile) -> str:
        return self._service.file_url(file.stored_name)
