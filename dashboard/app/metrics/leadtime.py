"""Expected lead time of a manufacturing order from its sub-process hours."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from dashboard.app.common.numbers import coerce_number

STAGE_FIELDS: Tuple[str, ...] = (
    "design_hr",
    "printing_hr",
    "infiltration_hr",
    "bonding_hr",
    "lsi_hr",
    "machining_hr",
    "coating_hr",
)


class ProcessTimeBreakdown(BaseModel):
    """Hours per sub-process for one order; ``None`` means not recorded."""

    model_config = ConfigDict(extra="ignore")

    design_hr: Optional[float] = None
    printing_hr: Optional[float] = None
    infiltration_hr: Optional[float] = None
    bonding_hr: Optional[float] = None
    lsi_hr: Optional[float] = None
    machining_hr: Optional[float] = None
    coating_hr: Optional[float] = None

    @property
    def expected_lead_time_hr(self) -> float:
        return expected_lead_time(self)


def expected_lead_time(
    breakdown: Union[ProcessTimeBreakdown, Mapping[str, Any]],
    stages: Optional[Iterable[str]] = None,
) -> float:
    """Sum the sub-process hours of ``breakdown``.

    Absent fields count as 0 and negative values are summed as given.
    ``stages`` restricts the sum to the applicable fields of a process type.
    """

    values = breakdown.model_dump() if isinstance(breakdown, ProcessTimeBreakdown) else breakdown
    selected = STAGE_FIELDS if stages is None else tuple(stages)
    total = 0.0
    for name in selected:
        total += coerce_number(values.get(name))
    return total
