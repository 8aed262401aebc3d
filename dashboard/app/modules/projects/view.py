"""Controller for the projects screen."""

from __future__ import annotations

from typing import Any, List, Optional

from dashboard.app.common.views import BaseView, RecordNotFoundError
from dashboard.app.core.http import FileField

from .schemas import Project, ProjectPayload
from .service import ProjectsService


class ProjectsView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = ProjectsService(self.client)
        self.projects: List[Project] = []
        self.selected: Optional[Project] = None

    def refresh(self) -> bool:
        ok, projects = self._load(self._service.list_projects, failure="데이터 불러오기 실패")
        if not ok or projects is None:
            return False
        self.projects = projects
        if self.selected is not None:
            self.selected = self._lookup(self.selected.id)
        return True

    def select(self, project_id: int) -> Project:
        project = self._lookup(project_id)
        if project is None:
            raise RecordNotFoundError(f"Project {project_id} not loaded")
        self.selected = project
        return project

    def save(self, payload: ProjectPayload, project_id: Optional[int] = None) -> bool:
        """Create a project, or update it when ``project_id`` is given."""

        self._ensure_writable()
        if project_id is None:
            action, success = (lambda: self._service.create(payload)), "과제 등록 완료"
        else:
            action, success = (lambda: self._service.update(project_id, payload)), "과제 수정 완료"
        ok, _ = self._attempt(action, failure="저장 실패", success=success)
        if ok:
            self.refresh()
        return ok

    def delete(self, project_id: int) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.delete(project_id),
            failure="삭제 실패",
            success="삭제 완료",
        )
        if ok:
            if self.selected is not None and self.selected.id == project_id:
                self.selected = None
            self.refresh()
        return ok

    def upload(self, project_id: int, file: FileField) -> bool:
        self._ensure_writable()
        ok, _ = self._attempt(
            lambda: self._service.upload(project_id, file),
            failure="업로드 실패",
            success="파일 업로드 완료",
        )
        if ok:
            self.refresh()
        return ok

    def file_urls(self, project: Project) -> List[str]:
        return [self._service.file_url(project.id, name) for name in project.files]

    def _lookup(self, project_id: int) -> Optional[Project]:
        return next((item for item in self.projects if item.id == project_id), None)
