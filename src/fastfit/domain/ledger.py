"""Domain models for consumed items."""

from dataclasses import dataclass
from uuid import UUID

from fastfit.domain.catalog import MenuItem


@dataclass(frozen=True)
class ConsumptionRecord:
    """A menu item logged as eaten during the session."""

    id: UUID
    item: MenuItem


@dataclass(frozen=True)
class ConsumedTotals:
    """Running totals over the consumption ledger."""

    calories: int = 0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
