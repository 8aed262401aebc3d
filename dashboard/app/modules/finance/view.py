"""Controller for the finance screen (investment history and shareholders)."""

from __future__ import annotations

from typing import Any, Callable, List

from dashboard.app.common.views import BaseView
from dashboard.app.metrics.shareholders import LedgerSummary, summarize_investments

from .schemas import Investment, InvestmentForm


class FinanceView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.investments: List[Investment] = []

    def refresh(self) -> bool:
        ok, investments = self._load(self._fetch, failure="투자 이력 불러오기 실패")
        if not ok or investments is None:
            return False
        self.investments = investments
        return True

    def add(self, form: InvestmentForm) -> bool:
        self._ensure_writable()
        return self._write(
            lambda: self.client.post_form("/investments", form.to_form()),
            failure="투자 이력 등록 실패",
            success="투자 이력 등록 완료",
        )

    def update(self, investment_id: int, form: InvestmentForm) -> bool:
        self._ensure_writable()
        return self._write(
            lambda: self.client.put_form(f"/investments/{investment_id}", form.to_form()),
            failure="투자 이력 수정 실패",
            success="투자 이력 수정 완료",
        )

    def delete(self, investment_id: int) -> bool:
        self._ensure_writable()
        return self._write(
            lambda: self.client.delete(f"/investments/{investment_id}"),
            failure="투자 이력 삭제 실패",
            success="투자 이력 삭제 완료",
        )

    def summary(self) -> LedgerSummary:
        return summarize_investments(item.model_dump() for item in self.investments)

    def _fetch(self) -> List[Investment]:
        return [Investment.model_validate(item) for item in self.client.get_json("/investments") or []]

    def _write(self, action: Callable[[], Any], *, failure: str, success: str) -> bool:
        ok, _ = self._attempt(action, failure=failure, success=success)
        if ok:
            self.refresh()
        return ok
