"""
Sales ledger service (the in-memory record store).

Owns the canonical, most-recent-first list of SaleRecord for one dashboard
session and mirrors mutations to the persistence repository.

Handles:
- Load from the repository (empty on failure or when not configured)
- Seeding from in-memory data
- Create / update / delete with rollback when the remote call fails
- A version counter bumped on every change, used to key derived views

Each mutation swaps in a new list, so readers never observe a half-applied
change. Load and mutations hold one lock across check, change and persist, so
a rollback never discards another caller's change.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from domain.event_date import event_label_sort_key
from domain.sale import SaleRecord, new_sale_id
from repositories.sale_repository import PersistenceError, SaleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LedgerMutation:
    """
    Result of a create/update/delete.

    success: True if the ledger now reflects the requested change
    sale: The record created/updated/deleted (None if not found)
    persisted: True if the change was also written to the data store
    error: Human-readable reason when success is False
    """

    success: bool
    sale: Optional[SaleRecord] = None
    persisted: bool = False
    error: Optional[str] = None


class SalesLedger:
    """
    Canonical sale collection for a dashboard session.

    The ledger is the only writer of its collection. Derived views read
    `snapshot()` and `version`.
    """

    def __init__(self, repository: Optional[SaleRepository] = None) -> None:
        self._repository = repository
        self._sales: List[SaleRecord] = []
        self._version = 0
        self._lock = threading.RLock()

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_persistent(self) -> bool:
        return self._repository is not None and self._repository.is_configured

    def __len__(self) -> int:
        return len(self._sales)

    def snapshot(self) -> Tuple[SaleRecord, ...]:
        return tuple(self._sales)

    def get(self, sale_id: str) -> Optional[SaleRecord]:
        for sale in self._sales:
            if sale.sale_id == sale_id:
                return sale
        return None

    def event_dates(self) -> List[str]:
        """Distinct event-date labels present in the ledger, chronological."""

        return sorted({sale.event_date for sale in self._sales if sale.event_date}, key=event_label_sort_key)

    def _replace(self, sales: List[SaleRecord]) -> None:
        self._sales = sales
        self._version += 1

    def load(self) -> List[SaleRecord]:
        """
        Replace the collection with the repository's contents.

        Yields an empty ledger when the repository is missing, not
        configured, or fails; stale or seed data is never kept.
        """

        with self._lock:
            if not self.is_persistent:
                logger.info("Sales repository not configured; starting with an empty ledger")
                self._replace([])
                return []

            try:
                sales = self._repository.list_sales()  # type: ignore[union-attr]
            except PersistenceError:
                logger.exception("Failed to load sales; ledger cleared")
                self._replace([])
                return []

            self._replace(list(sales))
            logger.info("Loaded sales ledger", extra={"sale_count": len(sales)})
            return list(sales)

    def seed(self, sales: Iterable[SaleRecord]) -> None:
        """Replace the collection with in-memory seed data (not persisted)."""

        sales = list(sales)
        ids = [sale.sale_id for sale in sales]
        if len(set(ids)) != len(ids):
            raise ValueError("seed sales must have unique sale_id values")
        with self._lock:
            self._replace(sales)

    def _persist(
        self,
        action: str,
        call: Callable[[], None],
        previous: List[SaleRecord],
        sale: SaleRecord,
    ) -> LedgerMutation:
        """Run the remote call; roll the collection back if it fails."""

        if not self.is_persistent:
            return LedgerMutation(success=True, sale=sale, persisted=False)

        try:
            call()
        except PersistenceError as e:
            logger.warning(
                f"Rolling back {action}: data store call failed",
                extra={"sale_id": sale.sale_id, "action": action, "error": str(e)},
            )
            self._replace(previous)
            return LedgerMutation(success=False, sale=sale, persisted=False, error=str(e))

        return LedgerMutation(success=True, sale=sale, persisted=True)

    def create(self, sale: SaleRecord) -> LedgerMutation:
        """
        Add a sale at the front of the ledger.

        A record with an empty id cannot exist, so callers that do not have
        an id yet use `create_from_fields`. Duplicate ids are rejected.
        """

        with self._lock:
            if self.get(sale.sale_id) is not None:
                return LedgerMutation(success=False, sale=sale, error=f"Sale {sale.sale_id} already exists")

            previous = self._sales
            self._replace([sale] + previous)
            return self._persist("create", lambda: self._repository.insert_sale(sale), previous, sale)  # type: ignore[union-attr]

    def create_from_fields(self, sale_id: Optional[str] = None, **fields) -> LedgerMutation:
        """Build a SaleRecord (fresh id when none is given) and create it."""

        return self.create(SaleRecord(sale_id=sale_id or new_sale_id(), **fields))

    def update(self, sale: SaleRecord) -> LedgerMutation:
        """
        Replace the sale with the same id in place.

        No effect (and no remote call) when the id is unknown.
        """

        with self._lock:
            index = next((i for i, s in enumerate(self._sales) if s.sale_id == sale.sale_id), None)
            if index is None:
                return LedgerMutation(success=False, sale=None, error=f"Sale {sale.sale_id} not found")

            previous = self._sales
            updated = list(previous)
            updated[index] = sale
            self._replace(updated)
            return self._persist("update", lambda: self._repository.update_sale(sale), previous, sale)  # type: ignore[union-attr]

    def delete(self, sale_id: str, confirmed: bool = False) -> LedgerMutation:
        """
        Remove the sale with `sale_id`.

        The presentation layer must confirm the deletion first; unconfirmed
        or unknown ids leave the ledger unchanged.
        """

        with self._lock:
            sale = self.get(sale_id)
            if sale is None:
                return LedgerMutation(success=False, sale=None, error=f"Sale {sale_id} not found")
            if not confirmed:
                return LedgerMutation(success=False, sale=sale, error="Deletion must be confirmed")

            previous = self._sales
            self._replace([s for s in previous if s.sale_id != sale_id])
            return self._persist("delete", lambda: self._repository.delete_sale(sale_id), previous, sale)  # type: ignore[union-attr]


__all__ = ["LedgerMutation", "SalesLedger"]
