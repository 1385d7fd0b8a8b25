"""
Dashboard service (derivation pipeline).

ledger snapshot -> filter predicate -> filtered sales -> aggregation
-> DashboardView

`build_dashboard` is pure. `DashboardPipeline` wraps it with a single-entry
memo keyed on (ledger.version, FilterConfig); any ledger mutation or filter
change evicts the previous entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from domain.event_date import event_label_sort_key
from domain.filters import FilterConfig, filter_sales
from domain.sale import SaleRecord
from domain.stats import ClientStat, KpiSummary, RankingKind, SectorRanking
from services.aggregation_service import compute_kpis, rank_recurring_clients, rank_sectors
from services.sales_ledger import SalesLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DashboardView:
    """Everything the presentation layer renders for one filter selection."""

    filters: FilterConfig
    sales: Tuple[SaleRecord, ...]
    kpis: KpiSummary
    profit_ranking: SectorRanking
    volume_ranking: SectorRanking
    top_clients: Tuple[ClientStat, ...]
    available_dates: Tuple[str, ...]


def build_dashboard(sales: Sequence[SaleRecord], filters: FilterConfig) -> DashboardView:
    """
    Derive the full dashboard from the ledger contents.

    available_dates lists every event date in the unfiltered ledger so the
    date selector keeps showing all games while one is selected.
    """

    filtered = filter_sales(sales, filters)
    dates = sorted({sale.event_date for sale in sales if sale.event_date}, key=event_label_sort_key)

    return DashboardView(
        filters=filters,
        sales=tuple(filtered),
        kpis=compute_kpis(filtered),
        profit_ranking=rank_sectors(filtered, RankingKind.PROFIT),
        volume_ranking=rank_sectors(filtered, RankingKind.VOLUME),
        top_clients=tuple(rank_recurring_clients(filtered)),
        available_dates=tuple(dates),
    )


class DashboardPipeline:
    """Recomputes the DashboardView when the ledger or filters change."""

    def __init__(self, ledger: SalesLedger) -> None:
        self._ledger = ledger
        self._cache_key: Optional[Tuple[int, FilterConfig]] = None
        self._cached: Optional[DashboardView] = None

    @property
    def ledger(self) -> SalesLedger:
        return self._ledger

    def view(self, filters: Optional[FilterConfig] = None) -> DashboardView:
        filters = filters or FilterConfig()
        key = (self._ledger.version, filters)
        if self._cached is not None and self._cache_key == key:
            return self._cached

        view = build_dashboard(self._ledger.snapshot(), filters)
        self._cache_key = key
        self._cached = view
        logger.debug(
            "Dashboard recomputed",
            extra={"ledger_version": key[0], "matching_sales": len(view.sales)},
        )
        return view

    def filtered_sales(self, filters: Optional[FilterConfig] = None) -> List[SaleRecord]:
        return list(self.view(filters).sales)


__all__ = ["DashboardView", "DashboardPipeline", "build_dashboard"]
