"""Controller for the in-kind contribution screen (personnel and equipment tabs)."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from dashboard.app.common.numbers import clamp, coerce_number
from dashboard.app.common.views import BaseView, RecordNotFoundError
from dashboard.app.metrics.allocation import apply_share, grand_total
from dashboard.app.metrics.ratios import ratio

from .schemas import (
    AllocationSummary,
    AssetsSummary,
    EquipmentCreate,
    EquipmentRow,
    PersonnelCreate,
    PersonnelRow,
    ShareEdit,
)
from .service import AllocationKind, AssetsService

logger = logging.getLogger(__name__)


class AssetsView(BaseView):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._service = AssetsService(self.client)
        self.projects: List[str] = []
        self.personnel_rows: List[PersonnelRow] = []
        self.equipment_rows: List[EquipmentRow] = []
        self.personnel_salary_total: float = 0.0
        self.equipment_acquisition_total: float = 0.0

    # ------------------------------------------------------------------ load
    def refresh(self) -> bool:
        ok, response = self._load(self._service.fetch, failure="현물 데이터 불러오기 실패")
        if not ok or response is None:
            return False
        self.projects = list(response.projects)
        self.personnel_rows = list(response.personnel_rows)
        self.equipment_rows = list(response.equipment_rows)
        self.personnel_salary_total = response.personnel_salary_total
        self.equipment_acquisition_total = response.equipment_acquisition_total
        return True

    # ------------------------------------------------------------------ edits
    def change_personnel_share(self, person_id: int, project: str, value: Optional[float]) -> PersonnelRow:
        edit = ShareEdit(entity_id=person_id, project_key=project, value=self._clamp(value))
        index, row = self._find_personnel(edit.entity_id)
        updated = apply_share(row.to_entity(), edit.project_key, edit.value)
        new_row = row.model_copy(update={"shares": dict(updated.shares)})
        self.personnel_rows[index] = new_row
        return new_row

    def change_equipment_share(self, equipment_id: int, project: str, value: Optional[float]) -> EquipmentRow:
        edit = ShareEdit(entity_id=equipment_id, project_key=project, value=self._clamp(value))
        index, row = self._find_equipment(edit.entity_id)
        updated = apply_share(row.to_entity(), edit.project_key, edit.value)
        new_row = row.model_copy(update={"shares": dict(updated.shares)})
        self.equipment_rows[index] = new_row
        return new_row

    # ------------------------------------------------------------------ saves
    def save_personnel(self, person_id: int) -> bool:
        self._ensure_writable()
        _, row = self._find_personnel(person_id)
        return self._save_shares(AllocationKind.PERSONNEL, row.person_id, row)

    def save_equipment(self, equipment_id: int) -> bool:
        self._ensure_writable()
        _, row = self._find_equipment(equipment_id)
        return self._save_shares(AllocationKind.EQUIPMENT, row.equipment_id, row)

    def add_personnel(self, name: str, salary: Any, department: Optional[str] = None) -> bool:
        self._ensure_writable()
        payload = PersonnelCreate(name=name, department=department, salary=coerce_number(salary))
        ok, _ = self._attempt(
            lambda: self._service.add_personnel(payload),
            failure="인건비 인력 등록 실패",
            success="인건비 인력 등록 완료",
        )
        if ok:
            self.refresh()
        return ok

    def add_equipment(self, name: str, acquisition_cost: Any, acquisition_date: Any) -> bool:
        self._ensure_writable()
        payload = EquipmentCreate(
            name=name,
            acquisition_cost=coerce_number(acquisition_cost),
            acquisition_date=acquisition_date,
        )
        ok, _ = self._attempt(
            lambda: self._service.add_equipment(payload),
            failure="장비 등록 실패",
            success="장비 등록 완료",
        )
        if ok:
            self.refresh()
        return ok

    # ------------------------------------------------------------------ totals
    @property
    def personnel_grand_total(self) -> int:
        return grand_total(self.personnel_rows)

    @property
    def equipment_grand_total(self) -> int:
        return grand_total(self.equipment_rows)

    def summary(self) -> AssetsSummary:
        personnel_total = self.personnel_grand_total
        equipment_total = self.equipment_grand_total
        return AssetsSummary(
            personnel=AllocationSummary(
                base_total=self.personnel_salary_total,
                grand_total=personnel_total,
                ratio=ratio(personnel_total, self.personnel_salary_total),
            ),
            equipment=AllocationSummary(
                base_total=self.equipment_acquisition_total,
                grand_total=equipment_total,
                ratio=ratio(equipment_total, self.equipment_acquisition_total),
            ),
        )

    # ------------------------------------------------------------------ internal
    def _save_shares(self, kind: AllocationKind, entity_id: int, row: PersonnelRow | EquipmentRow) -> bool:
        ok, _ = self._attempt(
            lambda: self._service.persist_shares(kind, entity_id, row.shares),
            failure=f"{kind.label()} 배분율 저장 실패",
            success=f'"{row.name}" {kind.label()} 배분율 저장 완료',
        )
        if not ok:
            return False
        logger.info("Saved %s shares for id=%s", kind.value, entity_id)
        self.refresh()
        return True

    def _clamp(self, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return clamp(coerce_number(value), self.config.share_min, self.config.share_max)

    def _find_personnel(self, person_id: int) -> tuple[int, PersonnelRow]:
        for index, row in enumerate(self.personnel_rows):
            if row.person_id == person_id:
                return index, row
        raise RecordNotFoundError(f"Personnel {person_id} not loaded")

    def _find_equipment(self, equipment_id: int) -> tuple[int, EquipmentRow]:
        for index, row in enumerate(self.equipment_rows):
            if row.equipment_id == equipment_id:
                return index, row
        raise RecordNotFoundError(f"Equipment {equipment_id} not loaded")
