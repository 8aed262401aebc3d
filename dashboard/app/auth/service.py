"""Session management: login against the backend and role guards."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from dashboard.app.core.http import ApiClient, BackendRequestError

from . import schemas
from .models import DashboardSession, Role

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when signing in fails."""


class PermissionDeniedError(Exception):
    """Raised when the current session may not perform an action."""


class SessionManager:
    """Own the single :class:`DashboardSession` of a dashboard instance."""

    def __init__(self, client: ApiClient, session: Optional[DashboardSession] = None) -> None:
        self._client = client
        self._session = session or DashboardSession()

    @property
    def session(self) -> DashboardSession:
        return self._session

    def login(self, role: Role | str, password: str) -> DashboardSession:
        try:
            form = schemas.LoginForm(username=role, password=password)
        except ValidationError as exc:
            raise AuthenticationError("비밀번호를 입력하세요") from exc

        try:
            payload = self._client.post_form("/login", form.to_form())
        except BackendRequestError as exc:
            logger.warning("Login rejected for role %s: %s", form.username.value, exc)
            self._session.notifier.error("아이디 또는 비밀번호가 틀렸습니다")
            raise AuthenticationError("아이디 또는 비밀번호가 틀렸습니다") from exc

        try:
            response = schemas.LoginResponse.model_validate(payload)
        except ValidationError as exc:
            raise AuthenticationError("로그인 응답에 권한 정보가 없습니다") from exc

        self._session._activate(response.role)
        self._session.notifier.success("로그인 성공!")
        logger.info("Signed in as %s", response.role.value)
        return self._session

    def logout(self) -> None:
        self._session._clear()


def require_login(session: DashboardSession) -> None:
    if not session.is_authenticated:
        raise PermissionDeniedError("로그인이 필요합니다")


def require_write(session: DashboardSession) -> None:
    require_login(session)
    if not session.can_write:
        raise PermissionDeniedError("뷰어 권한: 일부 기능은 사용이 제한됩니다")
