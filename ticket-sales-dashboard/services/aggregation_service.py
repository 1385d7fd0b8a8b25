"""
Aggregation service for dashboard figures.

Pure functions over a (filtered) sequence of SaleRecord:
- KPI summary
- Sector rankings by profit and by sales volume
- Recurring-client ranking

Grouping uses exact string equality on sector and buyer name; no case or
whitespace normalization. Sorting is stable, so entries with equal keys
keep the order in which their group was first seen.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Sequence

from domain.sale import SaleRecord
from domain.stats import ClientStat, KpiSummary, RankingKind, SectorRanking, SectorStat

RECURRING_CLIENT_LIMIT: int = 5
RECURRING_MIN_PURCHASES: int = 2


def compute_kpis(sales: Sequence[SaleRecord]) -> KpiSummary:
    """
    Compute the five headline figures.

    average_ticket = sum(sale_price) / count, defined as 0 for no sales.
    """

    total_profit = sum((sale.profit for sale in sales), Decimal("0"))
    total_cost = sum((sale.total_cost for sale in sales), Decimal("0"))
    revenue = sum((sale.sale_price for sale in sales), Decimal("0"))
    tickets = len(sales)

    return KpiSummary(
        total_profit=total_profit,
        total_cost=total_cost,
        tickets_sold=tickets,
        distinct_clients=len({sale.buyer_name for sale in sales}),
        average_ticket=revenue / tickets if tickets > 0 else Decimal("0"),
    )


def aggregate_sectors(sales: Sequence[SaleRecord]) -> List[SectorStat]:
    """One SectorStat per distinct sector, in first-seen order."""

    profit: Dict[str, Decimal] = {}
    counts: Dict[str, int] = {}
    for sale in sales:
        profit[sale.sector] = profit.get(sale.sector, Decimal("0")) + sale.profit
        counts[sale.sector] = counts.get(sale.sector, 0) + 1

    return [SectorStat(sector=sector, profit=profit[sector], sales_count=counts[sector]) for sector in profit]


def rank_sectors(sales: Sequence[SaleRecord], kind: RankingKind) -> SectorRanking:
    """Rank sectors descending by profit (PROFIT) or sale count (VOLUME)."""

    stats = aggregate_sectors(sales)
    if kind is RankingKind.PROFIT:
        ordered = sorted(stats, key=lambda s: s.profit, reverse=True)
    else:
        ordered = sorted(stats, key=lambda s: s.sales_count, reverse=True)
    return SectorRanking(kind=kind, entries=tuple(ordered))


def rank_recurring_clients(
    sales: Sequence[SaleRecord],
    limit: int = RECURRING_CLIENT_LIMIT,
    min_purchases: int = RECURRING_MIN_PURCHASES,
) -> List[ClientStat]:
    """
    Top recurring clients by total spend.

    Only buyers with at least `min_purchases` purchases (default: more than
    one) are kept; the result is truncated to `limit` entries.
    """

    spent: Dict[str, Decimal] = {}
    purchases: Dict[str, int] = {}
    for sale in sales:
        spent[sale.buyer_name] = spent.get(sale.buyer_name, Decimal("0")) + sale.sale_price
        purchases[sale.buyer_name] = purchases.get(sale.buyer_name, 0) + 1

    recurring = [
        ClientStat(name=name, total_spent=spent[name], purchases=purchases[name])
        for name in spent
        if purchases[name] >= min_purchases
    ]
    recurring.sort(key=lambda c: c.total_spent, reverse=True)
    return recurring[:limit]


def client_shares(clients: Sequence[ClientStat]) -> List[Decimal]:
    """Spend of each client relative to the top spender (0 if top is 0)."""

    if not clients:
        return []
    top = clients[0].total_spent
    if top <= 0:
        return [Decimal("0") for _ in clients]
    return [client.total_spent / top for client in clients]


__all__ = [
    "RECURRING_CLIENT_LIMIT",
    "RECURRING_MIN_PURCHASES",
    "compute_kpis",
    "aggregate_sectors",
    "rank_sectors",
    "rank_recurring_clients",
    "client_shares",
]
