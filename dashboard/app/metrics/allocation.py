"""In-kind contribution allocation: per-entity share totals and grand totals.

An entity (a person or a piece of equipment) carries a base value in
thousands of currency units and a percentage share per project. Totals are
always derived from ``shares`` and ``base_value`` on access, so an entity
can never hold stale totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Mapping, Protocol

from dashboard.app.common.numbers import coerce_number, round_half_up


class HasTotalAmount(Protocol):
    @property
    def total_amount(self) -> int: ...


@dataclass(frozen=True, slots=True)
class AllocationEntity:
    """Entity whose base value is apportioned across projects by percentage."""

    id: int
    base_value: float
    shares: Mapping[str, float] = field(default_factory=dict, hash=False)

    @property
    def total_percent(self) -> float:
        return sum_shares(self.shares)

    @property
    def total_amount(self) -> int:
        return allocated_amount(self.base_value, self.total_percent)


def sum_shares(shares: Mapping[str, Any]) -> float:
    # null / malformed values count as zero
    return sum((coerce_number(value) for value in shares.values()), 0.0)


def allocated_amount(base_value: Any, total_percent: float) -> int:
    return round_half_up(coerce_number(base_value) * (total_percent / 100.0))


def apply_share(entity: AllocationEntity, project_key: str, new_value: Any) -> AllocationEntity:
    """Return a copy of ``entity`` with one project's share replaced.

    ``new_value`` of ``None`` is stored as ``0``. No bounds are applied:
    negative and above-100 values are kept as given.
    """

    shares: Dict[str, Any] = dict(entity.shares)
    shares[project_key] = coerce_number(new_value)
    return replace(entity, shares=shares)


def grand_total(entities: Iterable[HasTotalAmount]) -> int:
    """Sum ``total_amount`` over a collection; an empty collection yields 0."""

    return sum((entity.total_amount or 0 for entity in entities), 0)


def is_over_allocated(entity: AllocationEntity) -> bool:
    return entity.total_percent > 100
