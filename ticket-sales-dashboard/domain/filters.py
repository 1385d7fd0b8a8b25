"""
Domain: dashboard filter selection and the per-sale predicate.

Every criterion is an independent AND-condition. A criterion set to ALL
(or an empty search term) is skipped. The search term is matched
case-insensitively as a substring of buyer name, account, contact or
sector; any one of those four fields matching is enough.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union

from .sale import DeliveryStatus, SaleRecord

ALL: str = "all"


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Active filter selection. Hashable, so it can key a memo cache."""

    event_date: str = ALL
    sector: str = ALL
    delivery_status: Union[DeliveryStatus, str] = ALL
    payment_method: str = ALL
    search: str = ""

    def __post_init__(self) -> None:
        # Blank selections mean "no filter".
        for name in ("event_date", "sector", "delivery_status", "payment_method"):
            if not getattr(self, name):
                object.__setattr__(self, name, ALL)
        if self.delivery_status != ALL and not isinstance(self.delivery_status, DeliveryStatus):
            object.__setattr__(self, "delivery_status", DeliveryStatus(self.delivery_status))
        object.__setattr__(self, "search", (self.search or "").strip())

    @property
    def is_empty(self) -> bool:
        """True when no criterion is active (every sale passes)."""
        return (
            self.event_date == ALL
            and self.sector == ALL
            and self.delivery_status == ALL
            and self.payment_method == ALL
            and not self.search
        )


def _matches_search(term: str, sale: SaleRecord) -> bool:
    needle = term.lower()
    return any(
        needle in (value or "").lower()
        for value in (sale.buyer_name, sale.account, sale.contact, sale.sector)
    )


def sale_matches(config: FilterConfig, sale: SaleRecord) -> bool:
    """Return True iff `sale` passes every active criterion in `config`."""

    if config.event_date != ALL and sale.event_date != config.event_date:
        return False
    if config.sector != ALL and sale.sector != config.sector:
        return False
    if config.delivery_status != ALL and sale.delivery_status != config.delivery_status:
        return False
    if config.payment_method != ALL and sale.payment_method != config.payment_method:
        return False
    if config.search:
        return _matches_search(config.search, sale)
    return True


def filter_sales(sales: Iterable[SaleRecord], config: FilterConfig) -> List[SaleRecord]:
    """Apply the predicate to every sale, keeping ledger order."""

    return [sale for sale in sales if sale_matches(config, sale)]


__all__ = ["ALL", "FilterConfig", "sale_matches", "filter_sales"]
