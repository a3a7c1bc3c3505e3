"""Session log of consumed menu items."""

import logging
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from fastfit.domain.catalog import MenuItem
from fastfit.domain.ledger import ConsumedTotals, ConsumptionRecord
from fastfit.services.budget import consumed_totals

_logger = logging.getLogger(__name__)


@dataclass
class ConsumptionLedger:
    """Ordered record of what was eaten; totals are always derived."""

    _records: list[ConsumptionRecord] = field(default_factory=list)

    @property
    def records(self) -> tuple[ConsumptionRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, item: MenuItem) -> ConsumptionRecord:
        """Append an item and return its record."""
        record = ConsumptionRecord(id=uuid4(), item=item)
        self._records.append(record)
        return record

    def remove_at(self, index: int) -> ConsumptionRecord | None:
        """Remove the record at a position; out-of-range positions are ignored."""
        if not 0 <= index < len(self._records):
            _logger.debug("Ignoring ledger removal at index %s", index)
            return None
        return self._records.pop(index)

    def remove_by_id(self, record_id: UUID) -> ConsumptionRecord | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return self.remove_at(index)
        return None

    def clear(self) -> None:
        self._records.clear()

    def totals(self) -> ConsumedTotals:
        return consumed_totals(self._records)
