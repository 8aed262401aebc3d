"""Session state shared by every dashboard view."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from dashboard.app.common.notifications import Notifier


class Role(str, Enum):
    ADMIN = "admin"
    VIEWER = "viewer"

    def label(self) -> str:
        mapping = {
            Role.ADMIN: "관리자",
            Role.VIEWER: "뷰어",
        }
        return mapping.get(self, self.value)

    @property
    def can_write(self) -> bool:
        return self is Role.ADMIN


@dataclass
class DashboardSession:
    """Authenticated context handed to each view at construction.

    The owning :class:`~dashboard.app.auth.service.SessionManager` is the only
    writer of ``role``; views only read it.
    """

    role: Optional[Role] = None
    logged_in_at: Optional[datetime] = None
    notifier: Notifier = field(default_factory=Notifier)

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    @property
    def can_write(self) -> bool:
        return self.role is not None and self.role.can_write

    def _activate(self, role: Role) -> None:
        self.role = role
        self.logged_in_at = datetime.now(tz=timezone.utc)

    def _clear(self) -> None:
        self.role = None
        self.logged_in_at = None
