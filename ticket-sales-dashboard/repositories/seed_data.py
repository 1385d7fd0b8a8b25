"""
In-memory seed sales.

Used to populate a ledger for demos (`SalesLedger.seed`) and by
`scripts/seed_sales.py` to fill an empty Supabase table. Never used as a
fallback when loading from Supabase fails.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from domain.sale import DeliveryStatus, SaleRecord

# (id, conta, setor, custo_setor, custo_plano, valor_venda, nome_pix, status, contato, pagamento, data)
_SEED_ROWS = [
    ("seed-0001", "123.456.789-00", "SETOR PRETO", "60", "10", "150", "Ana Souza", "ENVIADO", "+55 11 98888-1001", "Nubank", "02/11/25"),
    ("seed-0002", "987.654.321-00", "SETOR VERMELHO", "80", "10", "180", "Bruno Lima", "ENVIADO", "+55 11 98888-1002", "Itaú", "02/11/25"),
    ("seed-0003", "123.456.789-00", "SETOR AZUL", "40", "10", "95", "Ana Souza", "PENDENTE", "+55 11 98888-1001", "Nubank", "04/11/25"),
    ("seed-0004", "456.789.123-00", "VERMELHO SUPERIOR", "70", "10", "140", "Carla Mendes", "ENVIADO", "+55 21 97777-2003", "PicPay", "04/11/25"),
    ("seed-0005", "987.654.321-00", "SETOR PRETO", "60", "10", "160", "Bruno Lima", "PENDENTE", "+55 11 98888-1002", "Inter", "05/11/25"),
    ("seed-0006", "321.654.987-00", "SETOR VERDE", "35", "10", "85", "Diego Alves", "ENVIADO", "+55 31 96666-3004", "Mercado Pago", "05/11/25"),
    ("seed-0007", "123.456.789-00", "SETOR AMARELO", "45", "10", "100", "Ana Souza", "ENVIADO", "+55 11 98888-1001", "Nubank", "06/11/25"),
    ("seed-0008", "654.987.321-00", "SETOR LARANJA", "50", "10", "110", "Elisa Rocha", "PENDENTE", "+55 41 95555-4005", "C6 Bank", "06/11/25"),
]


def seed_sales() -> List[SaleRecord]:
    """Fresh SaleRecord instances for the seed rows, most recent first."""

    sales = [
        SaleRecord(
            sale_id=sale_id,
            account=account,
            sector=sector,
            sector_cost=Decimal(sector_cost),
            plan_cost=Decimal(plan_cost),
            sale_price=Decimal(sale_price),
            buyer_name=buyer_name,
            delivery_status=DeliveryStatus(status),
            contact=contact,
            payment_method=payment_method,
            event_date=event_date,
        )
        for (
            sale_id, account, sector, sector_cost, plan_cost, sale_price,
            buyer_name, status, contact, payment_method, event_date,
        ) in _SEED_ROWS
    ]
    sales.reverse()
    return sales


__all__ = ["seed_sales"]
