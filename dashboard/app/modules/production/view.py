"""Controller for the production screen: sales summary and order pipeline."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from dashboard.app.common.views import BaseView, RecordNotFoundError
from dashboard.app.core.http import BackendRequestError, FileField
from dashboard.app.modules.process.schemas import OrderCreate, OrderStatus, ProcessOrder, ProcessOrderStatus
from dashboard.app.modules.process.service import ProcessService

from .schemas import SalesSummary

logger = logging.getLogger(__name__)


class ProductionView(BaseView):
    """Sales totals, the order table and the status panel of the selected order."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._process = ProcessService(self.client)
        self.summary: Optional[SalesSummary] = None
        self.orders: List[ProcessOrder] = []
        self.selected_order: Optional[ProcessOrder] = None
        self.order_status: Optional[ProcessOrderStatus] = None

    def refresh(self) -> bool:
        summary_ok = self.refresh_summary()
        orders_ok = self.refresh_orders()
        return summary_ok and orders_ok

    def refresh_summary(self) -> bool:
        ok, summary = self._attempt(
            lambda: SalesSummary.model_validate(self.client.get_json("/sales/summary")),
            failure="매출 요약 데이터를 불러오지 못했습니다.",
        )
        if not ok or summary is None:
            return False
        self.summary = summary
        return True

    def refresh_orders(self) -> bool:
        ok, orders = self._load(self._process.list_orders, failure="제작 및 매출 현황을 불러오지 못했습니다.")
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

    def change_status(self, order_id: int, new_status: OrderStatus | str) -> bool:
        self._ensure_writable()
        order = self._order_by_id(order_id)
        if order is None:
            raise RecordNotFoundError(f"Order {order_id} not loaded")
        status_value = new_status.value if isinstance(new_status, OrderStatus) else str(new_status)
        updated = order.model_copy(update={"status": status_value})
        ok, _ = self._attempt(
            lambda: self._process.update_order(updated),
            failure="상태 변경에 실패했습니다.",
            success=f"상태가 '{status_value}'로 변경되었습니다.",
        )
        if ok:
            self.refresh()
        return ok

    def register_order(self, payload: OrderCreate, file: Optional[FileField] = None) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._process.create_order(payload, file),
            failure="프로젝트 등록에 실패했습니다.",
            success="프로젝트(주문)가 등록되었습니다.",
        )
        if ok:
            self.refresh()
        return ok

    def _order_by_id(self, order_id: int) -> Optional[ProcessOrder]:
        return next((item for item in self.orders if item.id == order_id), None)

    def _load_order_status(self, order_id: int) -> None:
        try:
            self.order_status = self._process.get_order_status(order_id)
        except (BackendRequestError, ValidationError) as exc:
            logger.warning("Could not load status for order %s: %s", order_id, exc)
            self.order_status = None
