from __future__ import annotations

import pytest

from dashboard.app.auth.service import PermissionDeniedError
from dashboard.app.common.notifications import NoticeLevel
from dashboard.app.common.views import RecordNotFoundError
from dashboard.app.modules.process.schemas import OrderStatus
from dashboard.app.modules.production.view import ProductionView

SUMMARY = {
    "year": 2025,
    "quarter": 2,
    "month": 5,
    "total_sales_all": "12,000",
    "total_sales_year": 8000,
    "total_sales_quarter": None,
    "total_sales_month": 500,
}

ORDER = {
    "id": 5,
    "company_name": "Hanil",
    "product_name": "Nozzle",
    "quantity": 2,
    "total_quote_price": 1000,
    "status": "견적중",
}


@pytest.fixture
def view(backend, client, admin_session, config):
    backend.on("GET", "/sales/summary", SUMMARY)
    backend.on("GET", "/process/orders", [ORDER])
    production = ProductionView(admin_session, client, config=config)
    assert production.refresh()
    return production


def test_refresh_loads_summary_and_orders(view):
    assert view.summary.total_sales_all == 12000
    assert view.summary.total_sales_quarter == 0
    assert [order.id for order in view.orders] == [5]


def test_change_status_puts_full_order(backend, view):
    backend.on("PUT", "/process/orders/5", {"ok": True})

    assert view.change_status(5, OrderStatus.IN_PROGRESS)

    (request,) = backend.calls("PUT", "/process/orders/5")
    body = backend.json_body(request)
    assert body["status"] == "진행중"
    assert body["company_name"] == "Hanil"
    assert len(backend.calls("GET", "/sales/summary")) == 2


def test_change_status_of_unknown_order(view):
    with pytest.raises(RecordNotFoundError):
        view.change_status(42, "납품완료")


def test_viewer_cannot_change_status(backend, client, viewer_session, config):
    backend.on("GET", "/sales/summary", SUMMARY)
    backend.on("GET", "/process/orders", [ORDER])
    view = ProductionView(viewer_session, client, config=config)
    view.refresh()

    with pytest.raises(PermissionDeniedError):
        view.change_status(5, OrderStatus.DELIVERED)


def test_select_order_loads_status_panel(backend, view):
    backend.on("GET", "/process/orders/5/status", [{"id": 7, "order_id": 5, "current_stage": "coating", "progress_percent": 80}])

    order = view.select_order(5)

    assert order.product_name == "Nozzle"
    assert view.selected_order.id == 5
    assert view.order_status.current_stage == "coating"
    assert view.order_status.progress_percent == 80


def test_select_unknown_order(view):
    with pytest.raises(RecordNotFoundError):
        view.select_order(42)

    assert view.selected_order is None


def test_refresh_keeps_selection_of_existing_order(backend, view):
    backend.on("GET", "/process/orders/5/status", [])
    view.select_order(5)
    backend.on("GET", "/process/orders", [dict(ORDER, status="진행중")])
    backend.on("GET", "/process/orders/5/status", [{"id": 7, "order_id": 5, "current_stage": "printing"}])

    assert view.refresh_orders()

    assert view.selected_order.status == "진행중"
    assert view.order_status.current_stage == "printing"


def test_refresh_clears_selection_of_removed_order(backend, view):
    backend.on("GET", "/process/orders/5/status", [{"id": 7, "order_id": 5}])
    view.select_order(5)
    backend.on("GET", "/process/orders", [])

    assert view.refresh_orders()

    assert view.selected_order is None
    assert view.order_status is None


def test_malformed_status_leaves_panel_empty(backend, view):
    backend.on("GET", "/process/orders/5/status", [{"order_id": 5, "current_stage": "coating"}])

    view.select_order(5)

    assert view.selected_order.id == 5
    assert view.order_status is None


def test_malformed_summary_keeps_previous_totals(backend, view):
    backend.on("GET", "/sales/summary", {"year": "this year"})

    assert not view.refresh_summary()

    assert view.summary.total_sales_all == 12000
    assert view.session.notifier.last.level is NoticeLevel.ERROR
    assert view.session.notifier.last.message == "매출 요약 데이터를 불러오지 못했습니다."
