"""Backend calls for process orders, status and raw tracking data."""

from __future__ import annotations

from typing import List, Optional

from dashboard.app.core.http import ApiClient, FileField

from .schemas import (
    OrderCreate,
    OrderStatusUpdate,
    ProcessOrder,
    ProcessOrderStatus,
    ProcessTimesUpdate,
    ProcessTracking,
    TrackingPayload,
    UnitCost,
)


class ProcessService:
    """Encapsulate the ``/process`` endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # ------------------------------------------------------------------ orders
    def list_orders(self) -> List[ProcessOrder]:
        return [ProcessOrder.model_validate(item) for item in self._client.get_json("/process/orders") or []]

    def create_order(self, payload: OrderCreate, file: Optional[FileField] = None) -> None:
        files = [("file", file)] if file else None
        self._client.post_form("/process/orders", payload.to_form(skip_none=True), files=files)

    def update_order(self, order: ProcessOrder) -> None:
        self._client.put_json(f"/process/orders/{order.id}", order.model_dump(mode="json"))

    def get_order_status(self, order_id: int) -> Optional[ProcessOrderStatus]:
        items = self._client.get_json(f"/process/orders/{order_id}/status") or []
        if not items:
            return None
        return ProcessOrderStatus.model_validate(items[0])

    def save_order_status(self, payload: OrderStatusUpdate) -> None:
        self._client.post_json(f"/process/orders/{payload.order_id}/status", payload.to_json())

    def save_process_times(self, order_id: int, payload: ProcessTimesUpdate) -> None:
        self._client.put_json(f"/process/orders/{order_id}/times", payload.to_json())

    # ------------------------------------------------------------------ raw data
    def list_unit_costs(self) -> List[UnitCost]:
        return [UnitCost.model_validate(item) for item in self._client.get_json("/process/unit-costs") or []]

    def list_trackings(self) -> List[ProcessTracking]:
        return [ProcessTracking.model_validate(item) for item in self._client.get_json("/process/trackings") or []]

    def create_tracking(self, payload: TrackingPayload) -> None:
        self._client.post_json("/process/trackings", payload.to_json())

    def update_tracking(self, tracking_id: int, payload: TrackingPayload) -> None:
        self._client.put_json(f"/process/trackings/{tracking_id}", {"id": tracking_id, **payload.to_json()})

    def delete_tracking(self, tracking_id: int) -> None:
        self._client.delete(f"/process/trackings/{tracking_id}")
