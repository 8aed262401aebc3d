"""Landing dashboard statistics."""

from __future__ import annotations

from pydantic import BaseModel


class DashboardStats(BaseModel):
    research_count: int = 0
    ip_count: int = 0
    ir_count: int = 0
    project_count: int = 0
    total_labor: float = 0.0
    total_machine: float = 0.0
