"""Backend calls for personnel and equipment allocations."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from dashboard.app.core.http import ApiClient

from .schemas import AssetsResponse, EquipmentCreate, PersonnelCreate, ShareUpdate


class AllocationKind(str, Enum):
    PERSONNEL = "personnel"
    EQUIPMENT = "equipment"

    def label(self) -> str:
        mapping = {
            AllocationKind.PERSONNEL: "인건비",
            AllocationKind.EQUIPMENT: "장비",
        }
        return mapping.get(self, self.value)


class AssetsService:
    """Encapsulate the assets endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def fetch(self) -> AssetsResponse:
        return AssetsResponse.model_validate(self._client.get_json("/assets") or {})

    def persist_shares(self, kind: AllocationKind, entity_id: int, shares: Mapping[str, object]) -> None:
        """Send the full shares map of one entity for durable storage."""

        payload = ShareUpdate(shares=dict(shares))
        self._client.put_json(f"/{kind.value}/{entity_id}/shares", payload.to_json())

    def add_personnel(self, payload: PersonnelCreate) -> None:
        self._client.post_form("/personnel", payload.to_form())

    def add_equipment(self, payload: EquipmentCreate) -> None:
        self._client.post_form("/equipment", payload.to_form())
