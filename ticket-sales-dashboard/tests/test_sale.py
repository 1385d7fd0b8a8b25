"""
Tests for `domain/sale.py`.

Covers contract rules:
- profit is derived from sale_price, sector_cost and plan_cost, never set.
- Money fields are non-negative.
- SaleRecord is immutable; with_changes returns a new record with profit recomputed.
- sale_id cannot change.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from conftest import make_sale
from domain.sale import DeliveryStatus, SaleRecord, new_sale_id


def test_profit_is_sale_price_minus_costs() -> None:
    sale = make_sale(sale_price="150", sector_cost="60", plan_cost="10")

    assert sale.profit == Decimal("80")
    assert sale.total_cost == Decimal("70")


def test_profit_can_be_negative_when_costs_exceed_price() -> None:
    sale = make_sale(sale_price="50", sector_cost="60", plan_cost="10")

    assert sale.profit == Decimal("-20")


def test_profit_cannot_be_passed_in() -> None:
    with pytest.raises(TypeError):
        SaleRecord(  # type: ignore[call-arg]
            sale_id="x",
            account="",
            sector="A",
            sector_cost=Decimal("1"),
            plan_cost=Decimal("1"),
            sale_price=Decimal("5"),
            buyer_name="X",
            delivery_status=DeliveryStatus.SENT,
            contact="",
            payment_method="Nubank",
            event_date="02/11/25",
            profit=Decimal("999"),
        )


@pytest.mark.parametrize("field", ["sale_price", "sector_cost", "plan_cost"])
def test_negative_money_fields_are_rejected(field: str) -> None:
    with pytest.raises(ValueError):
        make_sale(**{field: "-1"})


def test_empty_sale_id_is_rejected() -> None:
    with pytest.raises(ValueError):
        make_sale(sale_id="")


def test_numbers_are_coerced_to_decimal() -> None:
    sale = make_sale(plan_cost="0.5", sector_cost="0").with_changes(sale_price=100.5)

    assert isinstance(sale.sale_price, Decimal)
    assert sale.profit == Decimal("100.0")


def test_delivery_status_accepts_stored_string() -> None:
    sale = make_sale(delivery_status="ENVIADO")

    assert sale.delivery_status is DeliveryStatus.SENT


def test_sale_record_is_immutable() -> None:
    sale = make_sale()

    with pytest.raises(FrozenInstanceError):
        sale.profit = Decimal("1")  # type: ignore[misc]


def test_with_changes_recomputes_profit_and_keeps_original() -> None:
    sale = make_sale(sale_price="100", sector_cost="10", plan_cost="10")

    changed = sale.with_changes(sale_price=Decimal("200"))

    assert changed.profit == Decimal("180")
    assert sale.profit == Decimal("80")
    assert changed.sale_id == sale.sale_id


def test_with_changes_refuses_new_id_or_profit() -> None:
    sale = make_sale()

    with pytest.raises(ValueError):
        sale.with_changes(sale_id="other")
    with pytest.raises(ValueError):
        sale.with_changes(profit=Decimal("1"))


def test_new_sale_id_is_unique() -> None:
    assert new_sale_id() != new_sale_id()
