"""Controller for the process-data screen: orders, order status and raw data."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from dashboard.app.common.views import BaseView, RecordNotFoundError
from dashboard.app.core.http import BackendRequestError, FileField
from dashboard.app.metrics.leadtime import expected_lead_time

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
from .service import ProcessService

logger = logging.getLogger(__name__)


class ProcessDataView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = ProcessService(self.client)
        self.orders: List[ProcessOrder] = []
        self.selected_order: Optional[ProcessOrder] = None
        self.order_status: Optional[ProcessOrderStatus] = None
        self.unit_costs: List[UnitCost] = []
        self.trackings: List[ProcessTracking] = []

    def refresh(self) -> bool:
        orders_ok = self.refresh_orders()
        raw_ok = self.refresh_raw_data()
        return orders_ok and raw_ok

    # ------------------------------------------------------------------ orders
    def refresh_orders(self) -> bool:
        ok, orders = self._load(self._service.list_orders, failure="공정 견적/발주 데이터를 불러오지 못했습니다.")
        if not ok or orders is None:
            return False
        self.orders = orders
        if self.selected_order is not None:
            refreshed = self._order_by_id(self.selected_order.id)
            if refreshed is None:
                self.selected_order = None
                self.order_status = None
            else:
                self.selected_order = refreshed
                self._load_order_status(refreshed.id)
        return True

    def select_order(self, order_id: int) -> ProcessOrder:
        order = self._order_by_id(order_id)
        if order is None:
            raise RecordNotFoundError(f"Order {order_id} not loaded")
        self.selected_order = order
        self._load_order_status(order.id)
        return order

    def register_order(self, payload: OrderCreate, file: Optional[FileField] = None) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.create_order(payload, file),
            failure="공정 주문 등록에 실패했습니다.",
            success="공정 주문이 등록되었습니다.",
        )
        if ok:
            self.refresh_orders()
        return ok

    def save_order_status(self, **fields: Any) -> bool:
        self._ensure_writable()
        if self.selected_order is None:
            self.notifier.warning("먼저 상단에서 주문을 선택해 주세요.")
            return False
        payload = OrderStatusUpdate(order_id=self.selected_order.id, **fields)
        ok, _ = self._attempt(
            lambda: self._service.save_order_status(payload),
            failure="공정 상태 저장에 실패했습니다.",
            success="공정 상태가 저장되었습니다.",
        )
        if ok:
            self.refresh_orders()
        return ok

    # ------------------------------------------------------------------ lead time
    def lead_time(self, order_id: int) -> float:
        order = self._order_by_id(order_id)
        if order is None:
            raise RecordNotFoundError(f"Order {order_id} not loaded")
        return order.expected_lead_time_hr

    def preview_lead_time(self, order_id: int, **hours: Optional[float]) -> float:
        """Lead time of ``order_id`` with unsaved hour edits applied."""

        return expected_lead_time(self._merged_times(order_id, hours))

    def save_process_times(self, order_id: int, **hours: Optional[float]) -> bool:
        """Save edited hours; stages not passed keep their recorded values."""

        self._ensure_writable()
        payload = self._merged_times(order_id, hours)
        ok, _ = self._attempt(
            lambda: self._service.save_process_times(order_id, payload),
            failure="공정 시간 저장에 실패했습니다.",
            success="공정 시간이 저장되었습니다.",
        )
        if ok:
            self.refresh_orders()
        return ok

    # ------------------------------------------------------------------ raw data
    def refresh_raw_data(self) -> bool:
        def fetch() -> tuple[List[UnitCost], List[ProcessTracking]]:
            return self._service.list_unit_costs(), self._service.list_trackings()

        ok, result = self._load(fetch, failure="Raw data를 불러오지 못했습니다.")
        if not ok or result is None:
            return False
        self.unit_costs, self.trackings = result
        return True

    @property
    def in_progress_orders(self) -> List[ProcessOrder]:
        return [order for order in self.orders if order.is_in_progress]

    @property
    def visible_trackings(self) -> List[ProcessTracking]:
        in_progress = {order.id for order in self.in_progress_orders}
        return [tracking for tracking in self.trackings if tracking.order_id in in_progress]

    def order_for_tracking(self, tracking: ProcessTracking) -> Optional[ProcessOrder]:
        for order in self.in_progress_orders:
            if order.id == tracking.order_id:
                return order
        return None

    def save_tracking(self, payload: TrackingPayload, tracking_id: Optional[int] = None) -> bool:
        self._ensure_writable()
        if tracking_id is None:
            action = lambda: self._service.create_tracking(payload)  # noqa: E731
            success = "추적 데이터가 등록되었습니다."
        else:
            action = lambda: self._service.update_tracking(tracking_id, payload)  # noqa: E731
            success = "추적 데이터가 수정되었습니다."
        ok, _ = self._attempt(action, failure="추적 데이터 저장에 실패했습니다.", success=success)
        if ok:
            self.refresh_raw_data()
        return ok

    def delete_tracking(self, tracking_id: int) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.delete_tracking(tracking_id),
            failure="추적 데이터 삭제에 실패했습니다.",
            success="추적 데이터가 삭제되었습니다.",
        )
        if ok:
            self.refresh_raw_data()
        return ok

    # ------------------------------------------------------------------ internal
    def _order_by_id(self, order_id: int) -> Optional[ProcessOrder]:
        for order in self.orders:
            if order.id == order_id:
                return order
        return None

    def _merged_times(self, order_id: int, hours: Dict[str, Optional[float]]) -> ProcessTimesUpdate:
        order = self._order_by_id(order_id)
        if order is None:
            raise RecordNotFoundError(f"Order {order_id} not loaded")
        values: Dict[str, Any] = order.breakdown.model_dump()
        values.update(ProcessTimesUpdate(**hours).model_dump(exclude_unset=True))
        return ProcessTimesUpdate(**values)

    def _load_order_status(self, order_id: int) -> None:
        try:
            self.order_status = self._service.get_order_status(order_id)
        except (BackendRequestError, ValidationError) as exc:
            logger.warning("Could not load status for order %s: %s", order_id, exc)
            self.order_status = None
