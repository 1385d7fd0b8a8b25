"""
Pytest configuration and shared fixtures.

Adds the ticket-sales-dashboard directory to the Python path so tests can
import domain, repositories, services and api.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

import pytest

# Add the ticket-sales-dashboard directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.sale import DeliveryStatus, SaleRecord  # noqa: E402
from repositories.sale_repository import PersistenceError  # noqa: E402


def make_sale(
    sale_id: str = "sale-1",
    sector: str = "SETOR PRETO",
    sale_price: str = "100",
    sector_cost: str = "10",
    plan_cost: str = "10",
    buyer_name: str = "Ana Souza",
    **overrides,
) -> SaleRecord:
    fields = dict(
        account="123.456.789-00",
        delivery_status=DeliveryStatus.PENDING,
        contact="+55 11 98888-1001",
        payment_method="Nubank",
        event_date="02/11/25",
    )
    fields.update(overrides)
    return SaleRecord(
        sale_id=sale_id,
        sector=sector,
        sale_price=Decimal(sale_price),
        sector_cost=Decimal(sector_cost),
        plan_cost=Decimal(plan_cost),
        buyer_name=buyer_name,
        **fields,
    )


class FakeSaleRepository:
    """In-memory SaleRepository recording calls; can be told to fail."""

    def __init__(self, sales: Optional[List[SaleRecord]] = None, configured: bool = True) -> None:
        self.sales: List[SaleRecord] = list(sales or [])
        self.configured = configured
        self.fail_on: set[str] = set()
        self.calls: List[tuple] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def _maybe_fail(self, action: str) -> None:
        if action in self.fail_on:
            raise PersistenceError(f"Failed to {action}: simulated outage")

    def list_sales(self) -> List[SaleRecord]:
        self.calls.append(("list",))
        self._maybe_fail("list")
        return list(self.sales)

    def insert_sale(self, sale: SaleRecord) -> None:
        self.calls.append(("insert", sale.sale_id))
        self._maybe_fail("insert")
        self.sales.insert(0, sale)

    def update_sale(self, sale: SaleRecord) -> None:
        self.calls.append(("update", sale.sale_id))
        self._maybe_fail("update")
        self.sales = [sale if s.sale_id == sale.sale_id else s for s in self.sales]

    def delete_sale(self, sale_id: str) -> None:
        self.calls.append(("delete", sale_id))
        self._maybe_fail("delete")
        self.sales = [s for s in self.sales if s.sale_id != sale_id]


@pytest.fixture
def scenario_sales() -> List[SaleRecord]:
    """Two sector-A sales to buyer X and one sector-B sale to buyer Y."""

    return [
        make_sale("s1", sector="A", sale_price="100", sector_cost="10", plan_cost="10", buyer_name="X"),
        make_sale("s2", sector="A", sale_price="50", sector_cost="5", plan_cost="5", buyer_name="X"),
        make_sale("s3", sector="B", sale_price="200", sector_cost="20", plan_cost="0", buyer_name="Y"),
    ]


@pytest.fixture
def fake_repository(scenario_sales) -> FakeSaleRepository:
    return FakeSaleRepository(scenario_sales)
