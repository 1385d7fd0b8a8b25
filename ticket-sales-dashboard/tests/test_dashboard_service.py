"""
Tests for `services/dashboard_service.py`.

Covers:
- build_dashboard derives every figure from the filtered sales only.
- DashboardPipeline recomputes when the ledger version or filters change
  and reuses the previous view otherwise.
"""

from __future__ import annotations

from decimal import Decimal

from conftest import make_sale
from domain.filters import FilterConfig
from repositories.seed_data import seed_sales
from services.dashboard_service import DashboardPipeline, build_dashboard
from services.sales_ledger import SalesLedger


def test_build_dashboard_for_scenario(scenario_sales) -> None:
    view = build_dashboard(scenario_sales, FilterConfig())

    assert view.kpis.total_profit == Decimal("300")
    assert [entry.sector for entry in view.profit_ranking] == ["B", "A"]
    assert [entry.sector for entry in view.volume_ranking] == ["A", "B"]
    assert [client.name for client in view.top_clients] == ["X"]
    assert view.sales == tuple(scenario_sales)


def test_build_dashboard_uses_filtered_sales(scenario_sales) -> None:
    view = build_dashboard(scenario_sales, FilterConfig(sector="B"))

    assert [sale.sale_id for sale in view.sales] == ["s3"]
    assert view.kpis.total_profit == Decimal("180")
    assert view.top_clients == ()


def test_available_dates_ignore_filters() -> None:
    sales = seed_sales()

    view = build_dashboard(sales, FilterConfig(event_date="02/11/25"))

    assert all(sale.event_date == "02/11/25" for sale in view.sales)
    assert view.available_dates == ("02/11/25", "04/11/25", "05/11/25", "06/11/25")


def test_empty_ledger_view() -> None:
    view = build_dashboard([], FilterConfig())

    assert view.kpis.average_ticket == Decimal("0")
    assert len(view.profit_ranking) == 0
    assert view.top_clients == ()
    assert view.available_dates == ()


class TestPipeline:

    def test_same_inputs_reuse_view(self, scenario_sales):
        ledger = SalesLedger()
        ledger.seed(scenario_sales)
        pipeline = DashboardPipeline(ledger)

        first = pipeline.view(FilterConfig(sector="A"))

        assert pipeline.view(FilterConfig(sector="A")) is first

    def test_filter_change_recomputes(self, scenario_sales):
        ledger = SalesLedger()
        ledger.seed(scenario_sales)
        pipeline = DashboardPipeline(ledger)

        first = pipeline.view(FilterConfig(sector="A"))
        second = pipeline.view(FilterConfig(sector="B"))

        assert second is not first
        assert second.kpis.tickets_sold == 1

    def test_ledger_change_recomputes(self, scenario_sales):
        ledger = SalesLedger()
        ledger.seed(scenario_sales)
        pipeline = DashboardPipeline(ledger)
        before = pipeline.view()

        ledger.create(make_sale("s4", sector="A", buyer_name="Y"))
        after = pipeline.view()

        assert after is not before
        assert after.kpis.tickets_sold == 4
        assert [client.name for client in after.top_clients] == ["Y", "X"]

    def test_filtered_sales(self, scenario_sales):
        ledger = SalesLedger()
        ledger.seed(scenario_sales)

        sales = DashboardPipeline(ledger).filtered_sales(FilterConfig(search="y"))

        assert [sale.sale_id for sale in sales] == ["s3"]
