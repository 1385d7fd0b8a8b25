"""
Domain: Sale records.

A SaleRecord is one ticket transaction. Contract rules enforced here:
- profit is always derived: profit = sale_price - sector_cost - plan_cost.
  It is never passed in and never edited independently.
- sector_cost, plan_cost and sale_price are non-negative.
- sale_id is a non-empty string and never changes once the record exists.

Sector and payment method are free text. The closed vocabularies live in
`domain.catalog` and are not enforced on stored values.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import uuid4


class DeliveryStatus(str, Enum):
    SENT = "ENVIADO"
    PENDING = "PENDENTE"


def new_sale_id() -> str:
    """Generate a fresh sale identifier."""

    return str(uuid4())


def _require_non_negative(name: str, value: Decimal) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0")


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """
    Immutable ticket sale.

    Updates produce a new instance via `with_changes`, which recomputes
    profit from the three money fields.
    """

    sale_id: str
    account: str
    sector: str
    sector_cost: Decimal
    plan_cost: Decimal
    sale_price: Decimal
    buyer_name: str
    delivery_status: DeliveryStatus
    contact: str
    payment_method: str
    event_date: str
    profit: Decimal = field(init=False)

    def __post_init__(self) -> None:
        if not self.sale_id:
            raise ValueError("sale_id must be a non-empty string")

        for name in ("sector_cost", "plan_cost", "sale_price"):
            value = Decimal(str(getattr(self, name)))
            _require_non_negative(name, value)
            object.__setattr__(self, name, value)

        if not isinstance(self.delivery_status, DeliveryStatus):
            object.__setattr__(self, "delivery_status", DeliveryStatus(self.delivery_status))

        object.__setattr__(self, "profit", self.sale_price - self.sector_cost - self.plan_cost)

    @property
    def total_cost(self) -> Decimal:
        return self.sector_cost + self.plan_cost

    def with_changes(self, **changes: Any) -> "SaleRecord":
        """
        Return a copy with `changes` applied and profit recomputed.

        Raises ValueError when asked to change sale_id or profit.
        """

        if "sale_id" in changes and changes["sale_id"] != self.sale_id:
            raise ValueError("sale_id is immutable")
        if "profit" in changes:
            raise ValueError("profit is derived and cannot be set")
        changes.pop("sale_id", None)
        return replace(self, **changes)
