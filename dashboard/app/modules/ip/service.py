"""Backend calls for IP records and attached documents."""

from __future__ import annotations

from typing import List, Sequence

from dashboard.app.core.http import ApiClient, FileField

from .schemas import IPCreate, IPFile, IPRecord


class IPService:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_records(self) -> List[IPRecord]:
        return [IPRecord.model_validate(item) for item in self._client.get_json("/ip") or []]

    def create_record(self, payload: IPCreate) -> None:
        self._client.post_form("/ip", payload.to_form())

    def delete_record(self, ip_id: int) -> None:
        self._client.delete(f"/ip/{ip_id}")

    def list_files(self, ip_id: int) -> List[IPFile]:
        return [IPFile.model_validate(item) for item in self._client.get_json(f"/ip/{ip_id}/files") or []]

    def upload_files(self, ip_id: int, files: Sequence[FileField]) -> None:
        """Upload several documents in one multipart request under the ``files`` field."""

        self._client.post_form(f"/ip/{ip_id}/files", {}, files=[("files", item) for item in files])

    def delete_file(self, file_id: int) -> None:
        self._client.delete(f"/ip/files/{file_id}")

    def file_url(self, stored_name: str) -> str:
        return self._client.url_for(f"/uploads/ip/{stored_name}")
