"""Backend calls for research data."""

from __future__ import annotations

from typing import List, Optional

from dashboard.app.core.http import ApiClient, FileField

from .schemas import ResearchCreate, ResearchRecord


class ResearchService:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_records(self) -> List[ResearchRecord]:
        return [ResearchRecord.model_validate(item) for item in self._client.get_json("/research") or []]

    def create(self, payload: ResearchCreate, file: Optional[FileField] = None) -> None:
        files = [("file", file)] if file is not None else None
        self._client.post_form("/research", payload.to_form(), files=files)

    def delete(self, record_id: int) -> None:
        self._client.delete(f"/research/{record_id}")

    def file_url(self, filename: str) -> str:
        return self._client.url_for(f"/uploads/{filename}")
