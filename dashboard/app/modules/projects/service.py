"""Backend calls for projects and their attachments."""

from __future__ import annotations

from typing import List

from dashboard.app.core.http import ApiClient, FileField

from .schemas import Project, ProjectPayload


class ProjectsService:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_projects(self) -> List[Project]:
        return [Project.model_validate(item) for item in self._client.get_json("/projects") or []]

    def create(self, payload: ProjectPayload) -> None:
        self._client.post_json("/projects", payload.to_json())

    def update(self, project_id: int, payload: ProjectPayload) -> None:
        self._client.put_json(f"/projects/{project_id}", payload.to_json())

    def delete(self, project_id: int) -> None:
        self._client.delete(f"/projects/{project_id}")

    def upload(self, project_id: int, file: FileField) -> None:
        self._client.post_form(f"/projects/{project_id}/upload", {}, files=[("file", file)])

    def file_url(self, project_id: int, name: str) -> str:
        return self._client.url_for(f"/project_uploads/project_{project_id}/{name}")
