"""Backend calls for IR files."""

from __future__ import annotations

from typing import List

from dashboard.app.core.http import ApiClient, FileField

from .schemas import IRCategory, IRFile, IRUpload


class IRService:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_files(self, category: IRCategory = IRCategory.ALL) -> List[IRFile]:
        params = None if category is IRCategory.ALL else {"category": category.value}
        return [IRFile.model_validate(item) for item in self._client.get_json("/ir", params=params) or []]

    def upload(self, payload: IRUpload, file: FileField) -> None:
        self._client.post_form("/ir", payload.to_form(skip_none=True), files=[("file", file)])

    def delete(self, file_id: int) -> None:
        self._client.delete(f"/ir/{file_id}")

    def download_url(self, file: IRFile) -> str:
        if file.folder:
            return self._client.url_for(f"/uploads/ir/{file.folder}/{file.stored_name}")
        return self._client.url_for(f"/uploads/ir/{file.stored_name}")
