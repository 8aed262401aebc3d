from __future__ import annotations

import pytest
from pydantic import ValidationError

from dashboard.app.common.notifications import NoticeLevel
from dashboard.app.modules.finance.schemas import InvestmentForm
from dashboard.app.modules.finance.view import FinanceView
from dashboard.app.modules.ip.schemas import IPCreate
from dashboard.app.modules.ip.view import IPView
from dashboard.app.modules.ir.schemas import IRCategory, IRFile
from dashboard.app.modules.ir.view import IRView
from dashboard.app.modules.projects.schemas import ProjectPayload
from dashboard.app.modules.projects.view import ProjectsView
from dashboard.app.modules.research.schemas import ResearchCreate
from dashboard.app.modules.research.view import ResearchView


# ---------------------------------------------------------------- finance


def test_finance_summary_and_create(backend, client, admin_session, config):
    backend.on(
        "GET",
        "/investments",
        [
            {"id": 1, "round": "Seed", "shares": 400, "amount": "2,000", "investor": "Alpha"},
            {"id": 2, "round": "Series A", "shares": 600, "amount": 9000, "investor": None},
        ],
    )
    backend.on("POST", "/investments", {"id": 3})
    view = FinanceView(admin_session, client, config=config)
    assert view.refresh()

    summary = view.summary()
    assert summary.total_amount == 11000
    assert summary.round_count == 2
    assert [(holder.investor, holder.percent) for holder in summary.shareholders] == [("기타", 60.0), ("Alpha", 40.0)]

    form = InvestmentForm(round="Bridge", contract_date="2025-03-01", shares="1,000", amount=5000, investor=None)
    assert view.add(form)

    (request,) = backend.calls("POST", "/investments")
    body = backend.form_fields(request)
    assert body["round"] == "Bridge"
    assert body["contract_date"] == "2025-03-01"
    assert body["registration_date"] == ""
    assert body["shares"] == "1000"
    assert body["investor"] == ""
    assert len(backend.calls("GET", "/investments")) == 2


def test_finance_delete_failure(backend, client, admin_session, config):
    backend.on("GET", "/investments", [])
    backend.on("DELETE", "/investments/9", {"detail": "not found"}, status_code=404)
    view = FinanceView(admin_session, client, config=config)

    assert not view.delete(9)
    assert admin_session.notifier.last.message == "투자 이력 삭제 실패"


def test_finance_malformed_listing_keeps_ledger(backend, client, admin_session, config):
    backend.on("GET", "/investments", [{"id": 1, "round": "Seed", "shares": 400}])
    view = FinanceView(admin_session, client, config=config)
    assert view.refresh()
    backend.on("GET", "/investments", [{"id": "first", "round": None}])

    assert not view.refresh()

    assert [item.round for item in view.investments] == ["Seed"]
    assert admin_session.notifier.last.level is NoticeLevel.ERROR
    assert admin_session.notifier.last.message == "투자 이력 불러오기 실패"


# ---------------------------------------------------------------- ip


def test_ip_files_panel(backend, client, admin_session, config):
    backend.on("GET", "/ip", [{"id": 4, "title": "Nozzle", "number": "10-2024-0001"}])
    backend.on(
        "GET",
        "/ip/4/files",
        [{"id": 8, "ip_id": 4, "original_name": "claim.pdf", "stored_name": "abc_claim.pdf", "size": 2048}],
    )
    backend.on("POST", "/ip/4/files", {"ok": True})
    view = IPView(admin_session, client, config=config)
    view.refresh()

    assert view.open_files(4)
    (document,) = view.files
    assert document.display_size == "2.0 KB"
    assert view.file_url(document) == "http://testserver/uploads/ip/abc_claim.pdf"

    assert view.upload_files([("a.pdf", b"%PDF-a"), ("b.pdf", b"%PDF-b")])
    (request,) = backend.calls("POST", "/ip/4/files")
    assert request.content.count(b'name="files"') == 2
    assert len(backend.calls("GET", "/ip/4/files")) == 2


def test_ip_upload_without_files_warns(backend, client, admin_session, config):
    backend.on("GET", "/ip", [{"id": 4, "title": "Nozzle", "number": "10-2024-0001"}])
    backend.on("GET", "/ip/4/files", [])
    view = IPView(admin_session, client, config=config)
    view.refresh()
    view.open_files(4)

    assert not view.upload_files([])
    assert admin_session.notifier.last.level is NoticeLevel.WARNING


def test_ip_create_requires_title():
    with pytest.raises(ValidationError):
        IPCreate(title="", number="10-1")


# ---------------------------------------------------------------- ir


def test_ir_category_filter(backend, client, admin_session, config):
    backend.on("GET", "/ir", [{"id": 1, "original_name": "deck.pdf", "stored_name": "deck.pdf", "category": "IR", "size": 0}])
    view = IRView(admin_session, client, config=config)

    assert view.refresh()
    assert view.change_category("사진")

    first, second = backend.calls("GET", "/ir")
    assert "category" not in first.url.params
    assert second.url.params["category"] == "사진"
    assert view.active_category is IRCategory.PHOTO
    assert view.files[0].display_size == "-"


def test_ir_upload_defaults_category(backend, client, admin_session, config):
    backend.on("GET", "/ir", [])
    backend.on("POST", "/ir", {"id": 2})
    view = IRView(admin_session, client, config=config)

    assert view.upload(("deck.pdf", b"%PDF"), category=None, folder="  ")

    (request,) = backend.calls("POST", "/ir")
    assert b'name="category"' in request.content
    assert b"\r\n\r\nIR\r\n" in request.content
    assert b'name="folder"' not in request.content
    assert b'filename="deck.pdf"' in request.content


def test_ir_upload_without_file_warns(backend, client, admin_session, config):
    view = IRView(admin_session, client, config=config)

    assert not view.upload(None)
    assert backend.calls("POST", "/ir") == []
    assert admin_session.notifier.last.level is NoticeLevel.WARNING


def test_ir_download_url_with_folder(client, admin_session, config):
    view = IRView(admin_session, client, config=config)
    in_folder = IRFile(id=1, original_name="a.jpg", stored_name="a.jpg", folder="2024-expo")
    flat = IRFile(id=2, original_name="b.jpg", stored_name="b.jpg")

    assert view.download_url(in_folder) == "http://testserver/uploads/ir/2024-expo/a.jpg"
    assert view.download_url(flat) == "http://testserver/uploads/ir/b.jpg"


# ---------------------------------------------------------------- projects


def test_projects_create_update_and_files(backend, client, admin_session, config):
    backend.on(
        "GET",
        "/projects",
        [{"id": 3, "title": "R&D", "budget": "1,500", "status": "진행중", "files": ["plan.hwp"]}],
    )
    backend.on("POST", "/projects", {"id": 4})
    backend.on("PUT", "/projects/3", {"id": 3})
    view = ProjectsView(admin_session, client, config=config)
    view.refresh()

    project = view.select(3)
    assert project.budget == 1500
    assert view.file_urls(project) == ["http://testserver/project_uploads/project_3/plan.hwp"]

    assert view.save(ProjectPayload(title="New", due_date="2025-12-31", status=""))
    created = backend.json_body(backend.calls("POST", "/projects")[0])
    assert created["due_date"] == "2025-12-31"
    assert created["status"] is None

    assert view.save(ProjectPayload.from_project(project, status="선정완료"), project_id=3)
    updated = backend.json_body(backend.calls("PUT", "/projects/3")[0])
    assert updated["title"] == "R&D"
    assert updated["status"] == "선정완료"


def test_projects_delete_clears_selection(backend, client, admin_session, config):
    backend.on("GET", "/projects", [{"id": 3, "title": "R&D"}])
    backend.on("DELETE", "/projects/3")
    view = ProjectsView(admin_session, client, config=config)
    view.refresh()
    view.select(3)

    assert view.delete(3)
    assert view.selected is None


# ---------------------------------------------------------------- research


def test_research_create_with_file(backend, client, admin_session, config):
    backend.on("GET", "/research", [{"id": 1, "sample_type": "SiC", "property": "density", "value": "3.1", "filename": None}])
    backend.on("POST", "/research", {"id": 2})
    view = ResearchView(admin_session, client, config=config)
    view.refresh()

    assert view.file_url(view.records[0]) is None

    payload = ResearchCreate(sample_type="SiC", property="strength", value=410.5, tester="Kim", test_date="2025-01-02")
    assert view.add(payload, ("result.csv", b"a,b"))

    (request,) = backend.calls("POST", "/research")
    assert b'name="test_date"' in request.content
    assert b"\r\n\r\n2025-01-02\r\n" in request.content
    assert b'filename="result.csv"' in request.content
