"""
Tests for `domain/filters.py`.

Covers contract rules:
- An all-"all" / empty-search FilterConfig accepts every sale.
- Each criterion is an exact match; all active criteria must hold.
- Search is a case-insensitive substring over buyer, account, contact, sector.
"""

from __future__ import annotations

import pytest

from conftest import make_sale
from domain.filters import ALL, FilterConfig, filter_sales, sale_matches
from domain.sale import DeliveryStatus


@pytest.fixture
def ledger():
    return [
        make_sale("1", sector="SETOR PRETO", buyer_name="Ana Souza", event_date="02/11/25",
                  delivery_status=DeliveryStatus.SENT, payment_method="Nubank"),
        make_sale("2", sector="SETOR AZUL", buyer_name="Bruno Lima", event_date="04/11/25",
                  delivery_status=DeliveryStatus.PENDING, payment_method="Itaú",
                  account="987.654.321-00", contact="bruno@example.com"),
        make_sale("3", sector="SETOR PRETO", buyer_name="Carla", event_date="04/11/25",
                  delivery_status=DeliveryStatus.PENDING, payment_method="Nubank"),
    ]


def ids(sales):
    return [sale.sale_id for sale in sales]


def test_empty_config_accepts_everything(ledger) -> None:
    config = FilterConfig()

    assert config.is_empty
    assert filter_sales(ledger, config) == ledger


def test_blank_selections_mean_all() -> None:
    config = FilterConfig(event_date="", sector="", delivery_status="", payment_method="", search="   ")

    assert config == FilterConfig()


def test_event_date_filter(ledger) -> None:
    assert ids(filter_sales(ledger, FilterConfig(event_date="04/11/25"))) == ["2", "3"]


def test_sector_filter_is_exact(ledger) -> None:
    assert ids(filter_sales(ledger, FilterConfig(sector="SETOR PRETO"))) == ["1", "3"]
    assert filter_sales(ledger, FilterConfig(sector="setor preto")) == []


def test_status_filter_accepts_enum_or_string(ledger) -> None:
    assert ids(filter_sales(ledger, FilterConfig(delivery_status=DeliveryStatus.SENT))) == ["1"]
    assert ids(filter_sales(ledger, FilterConfig(delivery_status="PENDENTE"))) == ["2", "3"]


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(ValueError):
        FilterConfig(delivery_status="LOST")


def test_payment_filter(ledger) -> None:
    assert ids(filter_sales(ledger, FilterConfig(payment_method="Itaú"))) == ["2"]


@pytest.mark.parametrize(
    "term, expected",
    [
        ("ana", ["1"]),          # buyer name, case-insensitive
        ("987.654", ["2"]),      # account
        ("EXAMPLE.COM", ["2"]),  # contact
        ("azul", ["2"]),         # sector
        ("nobody", []),
    ],
)
def test_search_fields(ledger, term, expected) -> None:
    assert ids(filter_sales(ledger, FilterConfig(search=term))) == expected


def test_criteria_combine_with_and(ledger) -> None:
    config = FilterConfig(event_date="04/11/25", sector="SETOR PRETO", search="carla")
    assert ids(filter_sales(ledger, config)) == ["3"]

    # Search matches sale 1, but the date filter excludes it.
    assert filter_sales(ledger, FilterConfig(event_date="04/11/25", search="ana")) == []


def test_predicate_is_pure(ledger) -> None:
    config = FilterConfig(sector="SETOR PRETO")
    first = [sale_matches(config, sale) for sale in ledger]
    second = [sale_matches(config, sale) for sale in ledger]

    assert first == second == [True, False, True]
    assert config.sector != ALL


def test_filter_config_is_hashable() -> None:
    assert hash(FilterConfig(sector="A")) == hash(FilterConfig(sector="A"))
