"""Base class for screen controllers."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from dashboard.app.auth.models import DashboardSession
from dashboard.app.auth.service import require_login, require_write
from dashboard.app.common.notifications import Notifier
from dashboard.app.core.config import Settings, settings as default_settings
from dashboard.app.core.http import ApiClient, BackendRequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordNotFoundError(LookupError):
    """Raised when a view is asked about a row it does not hold."""


class BaseView:
    """Hold one screen's fetched data and route its backend calls.

    Each view owns its copy of the data. Saves are single attempts; a
    successful save is followed by a full re-fetch and a failed one keeps
    the in-memory state untouched. A malformed response body is handled
    like an error status.
    """

    def __init__(
        self,
        session: DashboardSession,
        client: ApiClient,
        *,
        config: Optional[Settings] = None,
    ) -> None:
        require_login(session)
        self.session = session
        self.client = client
        self.config = config or default_settings
        self.loading = False

    @property
    def notifier(self) -> Notifier:
        return self.session.notifier

    def _ensure_writable(self) -> None:
        require_write(self.session)

    def _attempt(
        self,
        action: Callable[[], T],
        *,
        failure: str,
        success: Optional[str] = None,
    ) -> tuple[bool, Optional[T]]:
        try:
            result = action()
        except (BackendRequestError, ValidationError) as exc:
            logger.exception("%s: %s", failure, exc)
            self.notifier.error(failure)
            return False, None
        if success:
            logger.info(success)
            self.notifier.success(success)
        return True, result

    def _load(self, action: Callable[[], T], *, failure: str) -> tuple[bool, Optional[T]]:
        self.loading = True
        try:
            return self._attempt(action, failure=failure)
        finally:
            self.loading = False
