from __future__ import annotations

import pytest
from pydantic import ValidationError

from dashboard.app.auth.models import DashboardSession
from dashboard.app.auth.service import PermissionDeniedError
from dashboard.app.common.notifications import NoticeLevel
from dashboard.app.modules.assets.view import AssetsView

ASSETS = {
    "projects": ["A", "B"],
    "personnel_rows": [
        {
            "person_id": 1,
            "name": "Kim",
            "department": "R&D",
            "salary": 50000,
            "shares": {"A": 40},
            "total_amount": 999,
        },
        {"person_id": 2, "name": "Lee", "department": None, "salary": None, "shares": None},
    ],
    "personnel_salary_total": 50000,
    "equipment_rows": [
        {
            "equipment_id": 3,
            "name": "Printer",
            "acquisition_cost": "1,000",
            "acquisition_date": "2024-01-01",
            "shares": {"A": "50", "B": None},
        }
    ],
    "equipment_acquisition_total": 1000,
}


@pytest.fixture
def view(backend, client, admin_session, config):
    backend.on("GET", "/assets", ASSETS)
    assets = AssetsView(admin_session, client, config=config)
    assert assets.refresh()
    return assets


def test_refresh_derives_totals_locally(view):
    kim, lee = view.personnel_rows
    (printer,) = view.equipment_rows

    assert kim.total_percent == 40
    assert kim.total_amount == 20000
    assert lee.salary == 0
    assert lee.total_amount == 0
    assert printer.acquisition_cost == 1000
    assert printer.total_amount == 500
    assert view.projects == ["A", "B"]


def test_share_edit_recomputes_row_and_summary(view):
    row = view.change_personnel_share(1, "B", 70)

    assert row.shares == {"A": 40, "B": 70}
    assert row.total_percent == 110
    assert row.total_amount == 55000
    assert row.is_over_allocated
    assert view.personnel_grand_total == 55000
    summary = view.summary()
    assert summary.personnel.grand_total == 55000
    assert summary.personnel.ratio == 110.0
    assert summary.equipment.ratio == 50.0


def test_share_edit_is_clamped_by_view(view):
    assert view.change_personnel_share(1, "B", 500).shares["B"] == 200
    assert view.change_personnel_share(1, "B", -5).shares["B"] == 0
    assert view.change_personnel_share(1, "B", None).shares["B"] == 0


def test_share_edit_rejects_blank_project(view):
    with pytest.raises(ValidationError):
        view.change_equipment_share(3, "  ", 10)


def test_save_success_persists_and_refetches(backend, view):
    backend.on("PUT", "/personnel/1/shares", {"ok": True})
    view.change_personnel_share(1, "B", 70)

    assert view.save_personnel(1)

    (request,) = backend.calls("PUT", "/personnel/1/shares")
    assert backend.json_body(request) == {"shares": {"A": 40.0, "B": 70.0}}
    assert len(backend.calls("GET", "/assets")) == 2
    assert view.session.notifier.last.level is NoticeLevel.SUCCESS
    # re-fetched server state replaces the local edit
    assert view.personnel_rows[0].shares == {"A": 40}


def test_save_failure_keeps_edit(backend, view):
    backend.on("PUT", "/equipment/3/shares", {"detail": "db down"}, status_code=500)
    view.change_equipment_share(3, "B", 25)

    assert not view.save_equipment(3)

    assert view.equipment_rows[0].shares == {"A": 50, "B": 25}
    assert view.equipment_rows[0].total_amount == 750
    assert len(backend.calls("GET", "/assets")) == 1
    assert view.session.notifier.last.level is NoticeLevel.ERROR
    assert view.session.notifier.last.message == "장비 배분율 저장 실패"


def test_viewer_cannot_save(backend, client, viewer_session, config):
    backend.on("GET", "/assets", ASSETS)
    view = AssetsView(viewer_session, client, config=config)
    view.refresh()
    view.change_personnel_share(1, "B", 10)

    with pytest.raises(PermissionDeniedError):
        view.save_personnel(1)

    assert backend.calls("PUT", "/personnel/1/shares") == []


def test_view_requires_login(client):
    with pytest.raises(PermissionDeniedError):
        AssetsView(DashboardSession(), client)


def test_add_personnel_posts_form(backend, view):
    backend.on("POST", "/personnel", {"id": 9})

    assert view.add_personnel("Park", "3,000")

    (request,) = backend.calls("POST", "/personnel")
    assert backend.form_fields(request) == {"name": "Park", "department": "", "salary": "3000"}
    assert len(backend.calls("GET", "/assets")) == 2


def test_add_equipment_validates_before_request(backend, view):
    with pytest.raises(ValidationError):
        view.add_equipment("Mill", -1, "2024-05-01")

    assert backend.calls("POST", "/equipment") == []


def test_load_failure_keeps_previous_rows(backend, view):
    backend.on("GET", "/assets", {"detail": "timeout"}, status_code=504)

    assert not view.refresh()

    assert len(view.personnel_rows) == 2
    assert view.session.notifier.last.message == "현물 데이터 불러오기 실패"


def test_malformed_listing_degrades_to_notice(backend, view):
    backend.on("GET", "/assets", {"personnel_rows": [{"person_id": 1, "name": None, "salary": 10}]})

    assert not view.refresh()

    assert [row.person_id for row in view.personnel_rows] == [1, 2]
    assert view.session.notifier.last.level is NoticeLevel.ERROR
    assert view.session.notifier.last.message == "현물 데이터 불러오기 실패"


def test_save_followed_by_malformed_refetch(backend, view):
    backend.on("PUT", "/personnel/1/shares", {"ok": True})
    view.change_personnel_share(1, "B", 70)
    backend.on("GET", "/assets", {"equipment_rows": [{"equipment_id": "x", "name": "Mill"}]})

    assert view.save_personnel(1)

    levels = [notice.level for notice in view.session.notifier.notices]
    assert levels[-2:] == [NoticeLevel.SUCCESS, NoticeLevel.ERROR]
    assert view.personnel_rows[0].shares == {"A": 40, "B": 70}


def test_form_without_attachment_is_multipart(backend, view):
    backend.on("POST", "/equipment", {"id": 4})

    assert view.add_equipment("Mill", 1200, "2024-05-01")

    (request,) = backend.calls("POST", "/equipment")
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert backend.form_fields(request) == {
        "name": "Mill",
        "acquisition_cost": "1200",
        "acquisition_date": "2024-05-01",
    }


def test_allocation_row_base_is_abstract():
    from dashboard.app.modules.assets.schemas import _AllocationRow

    with pytest.raises(TypeError):
        _AllocationRow(name="x")
