"""
Domain: closed vocabularies and new-sale defaults.

Sectors and payment methods offered by the sale form. Stored records may
carry values outside these lists; membership checks are informational.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from .event_date import today_label
from .sale import DeliveryStatus

SECTORS: tuple[str, ...] = (
    "SETOR PRETO",
    "SETOR VERMELHO",
    "VERMELHO SUPERIOR",
    "SETOR MARROM",
    "SETOR LARANJA",
    "SETOR AMARELO",
    "SETOR VERDE",
    "SETOR AZUL",
)

PAYMENT_METHODS: tuple[str, ...] = (
    "Nubank",
    "Infinite",
    "Itaú",
    "Bradesco",
    "Santander",
    "Caixa",
    "Banco do Brasil",
    "Inter",
    "C6 Bank",
    "PicPay",
    "Mercado Pago",
    "Outro",
)

DEFAULT_SECTOR: str = SECTORS[0]
DEFAULT_PAYMENT_METHOD: str = PAYMENT_METHODS[0]
DEFAULT_DELIVERY_STATUS: DeliveryStatus = DeliveryStatus.PENDING


def is_known_sector(sector: str) -> bool:
    return sector in SECTORS


def is_known_payment_method(payment_method: str) -> bool:
    return payment_method in PAYMENT_METHODS


def new_sale_defaults(today: Optional[date] = None) -> Dict[str, Any]:
    """
    Field values a blank sale form starts with.

    The event date defaults to today's label (DD/MM/YY).
    """

    return {
        "account": "",
        "sector": DEFAULT_SECTOR,
        "sector_cost": Decimal("0"),
        "plan_cost": Decimal("0"),
        "sale_price": Decimal("0"),
        "buyer_name": "",
        "delivery_status": DEFAULT_DELIVERY_STATUS,
        "contact": "",
        "payment_method": DEFAULT_PAYMENT_METHOD,
        "event_date": today_label(today or date.today()),
    }
