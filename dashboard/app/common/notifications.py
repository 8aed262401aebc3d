"""User-facing notices raised by dashboard views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class Notice:
    level: NoticeLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


class Notifier:
    """Collect notices for the presentation layer to display."""

    def __init__(self) -> None:
        self._notices: List[Notice] = []

    def success(self, message: str) -> Notice:
        return self._push(NoticeLevel.SUCCESS, message)

    def info(self, message: str) -> Notice:
        return self._push(NoticeLevel.INFO, message)

    def warning(self, message: str) -> Notice:
        return self._push(NoticeLevel.WARNING, message)

    def error(self, message: str) -> Notice:
        return self._push(NoticeLevel.ERROR, message)

    @property
    def notices(self) -> List[Notice]:
        return list(self._notices)

    @property
    def last(self) -> Optional[Notice]:
        return self._notices[-1] if self._notices else None

    def drain(self) -> List[Notice]:
        """Return pending notices and clear the queue."""

        pending, self._notices = self._notices, []
        return pending

    def _push(self, level: NoticeLevel, message: str) -> Notice:
        notice = Notice(level=level, message=message)
        self._notices.append(notice)
        return notice
