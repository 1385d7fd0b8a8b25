"""
Domain: derived dashboard figures.

These read models are recomputed from the filtered ledger on every change
and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class KpiSummary:
    """
    Headline figures for the filtered ledger.

    average_ticket is 0 when there are no sales.
    """

    total_profit: Decimal
    total_cost: Decimal
    tickets_sold: int
    distinct_clients: int
    average_ticket: Decimal


@dataclass(frozen=True, slots=True)
class SectorStat:
    sector: str
    profit: Decimal
    sales_count: int


@dataclass(frozen=True, slots=True)
class ClientStat:
    name: str
    total_spent: Decimal
    purchases: int


class RankingKind(str, Enum):
    PROFIT = "profit"
    VOLUME = "volume"


@dataclass(frozen=True, slots=True)
class SectorRanking:
    """Sector stats ordered by the measure selected by `kind`."""

    kind: RankingKind
    entries: Tuple[SectorStat, ...]

    def value_of(self, entry: SectorStat) -> Decimal:
        if self.kind is RankingKind.PROFIT:
            return entry.profit
        return Decimal(entry.sales_count)

    def shares(self) -> List[Decimal]:
        """
        Each entry's measure relative to the leader (bar widths, 0..1 for
        non-negative values). All zeros when the leader's measure is 0.
        """

        if not self.entries:
            return []
        leader = self.value_of(self.entries[0])
        if leader <= 0:
            return [Decimal("0") for _ in self.entries]
        return [self.value_of(entry) / leader for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
