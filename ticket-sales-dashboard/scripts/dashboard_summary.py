#!/usr/bin/env python3
"""
Dashboard Summary Script

Loads the sales ledger from Supabase and prints the dashboard figures:
KPIs, sector rankings by profit and volume, and recurring clients.

Usage:
    python dashboard_summary.py
    python dashboard_summary.py --date 02/11/25
    python dashboard_summary.py --sector "SETOR PRETO" --status PENDENTE
    python dashboard_summary.py --seed            # use in-memory seed data
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.filters import ALL, FilterConfig
from repositories.sale_repository import SupabaseSaleRepository
from repositories.seed_data import seed_sales
from services.aggregation_service import client_shares
from services.dashboard_service import DashboardPipeline, DashboardView
from services.formatting import format_brl, format_share
from services.sales_ledger import SalesLedger


def render_summary(view: DashboardView) -> str:
    """Plain-text rendering of a dashboard view."""

    kpis = view.kpis
    lines = [
        "=" * 60,
        "DASHBOARD",
        "=" * 60,
        f"Lucro total:         {format_brl(kpis.total_profit)}",
        f"Custo total:         {format_brl(kpis.total_cost)}",
        f"Ingressos vendidos:  {kpis.tickets_sold}",
        f"Clientes:            {kpis.distinct_clients}",
        f"Ticket médio:        {format_brl(kpis.average_ticket)}",
        "",
        "Ranking por lucro:",
        "-" * 60,
    ]
    for index, (entry, share) in enumerate(zip(view.profit_ranking, view.profit_ranking.shares()), start=1):
        lines.append(
            f"{index:>2}. {entry.sector:<20} {format_brl(entry.profit):>14}  "
            f"({entry.sales_count} vendas) {format_share(share):>5}"
        )

    lines += ["", "Ranking por vendas:", "-" * 60]
    for index, entry in enumerate(view.volume_ranking, start=1):
        lines.append(f"{index:>2}. {entry.sector:<20} {entry.sales_count} vendas")

    lines += ["", "Top clientes recorrentes:", "-" * 60]
    if not view.top_clients:
        lines.append("(nenhum cliente com mais de uma compra)")
    for index, (client, share) in enumerate(zip(view.top_clients, client_shares(view.top_clients)), start=1):
        lines.append(
            f"{index:>2}º {client.name:<20} {format_brl(client.total_spent):>14}  "
            f"({client.purchases} compras) {format_share(share):>5}"
        )

    lines.append("=" * 60)
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print ticket sales dashboard figures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--date", "-d", default=ALL, help="Event date label (DD/MM/YY)")
    parser.add_argument("--sector", default=ALL, help="Sector name")
    parser.add_argument("--status", choices=["ENVIADO", "PENDENTE", ALL], default=ALL, help="Delivery status")
    parser.add_argument("--payment", default=ALL, help="Payment method")
    parser.add_argument("--search", "-s", default="", help="Search buyer, account, contact or sector")
    parser.add_argument("--seed", action="store_true", help="Use in-memory seed data instead of Supabase")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.seed:
        ledger = SalesLedger()
        ledger.seed(seed_sales())
    else:
        ledger = SalesLedger(SupabaseSaleRepository.from_environment())
        ledger.load()

    filters = FilterConfig(
        event_date=args.date,
        sector=args.sector,
        delivery_status=args.status,
        payment_method=args.payment,
        search=args.search,
    )

    view = DashboardPipeline(ledger).view(filters)
    print(f"Jogos disponíveis: {', '.join(view.available_dates) or '-'}")
    print(render_summary(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
