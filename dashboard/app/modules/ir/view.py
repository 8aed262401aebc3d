"""Controller for the IR / marketing material screen."""

from __future__ import annotations

from typing import Any, List, Optional

from dashboard.app.common.views import BaseView
from dashboard.app.core.http import FileField

from .schemas import IRCategory, IRFile, IRUpload
from .service import IRService


class IRView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = IRService(self.client)
        self.active_category = IRCategory.ALL
        self.files: List[IRFile] = []

    def refresh(self) -> bool:
        category = self.active_category
        ok, files = self._load(
            lambda: self._service.list_files(category),
            failure="IR/마케팅 자료 불러오기 실패",
        )
        if not ok or files is None:
            return False
        self.files = files
        return True

    def change_category(self, category: IRCategory | str) -> bool:
        self.active_category = IRCategory(category)
        return self.refresh()

    def upload(self, file: Optional[FileField], *, category: Any = None, folder: Optional[str] = None) -> bool:
        self._ensure_writable()
        if file is None:
            self.notifier.warning("업로드할 파일을 선택해주세요.")
            return False
        payload = IRUpload(category=category, folder=folder)
        ok, _ = self._attempt(
            lambda: self._service.upload(payload, file),
            failure="업로드 실패",
            success="IR 자료 업로드 완료",
        )
        if ok:
            self.refresh()
        return ok

    def delete(self, file_id: int) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.delete(file_id),
            failure="삭제 실패",
            success="삭제 완료",
        )
        if ok:
            self.refresh()
        return ok

    def download_url(self, file: IRFile) -> str:
        return self._service.download_url(file)
