"""
Dashboard API Endpoints.

KPIs, sector rankings and recurring clients for the current filter selection.
"""

from fastapi import APIRouter, Depends

from api.dependencies import filters_applied, get_filters, get_ledger, get_pipeline
from api.models import DashboardOptionsResponse, DashboardResponse
from domain.catalog import PAYMENT_METHODS, SECTORS, new_sale_defaults
from domain.filters import FilterConfig
from domain.sale import DeliveryStatus
from services.dashboard_service import DashboardPipeline
from services.sales_ledger import SalesLedger

router = APIRouter()


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard",
    description="KPIs, sector rankings, recurring clients and the filtered sales ledger."
)
def get_dashboard(
    filters: FilterConfig = Depends(get_filters),
    pipeline: DashboardPipeline = Depends(get_pipeline),
):
    """
    Compute the dashboard for the given filters.

    **Example usage:**
    - Whole ledger: `GET /api/v1/dashboard`
    - One game: `GET /api/v1/dashboard?date=02/11/25`
    - Combine filters: `GET /api/v1/dashboard?sector=SETOR PRETO&status=PENDENTE&search=ana`
    """
    view = pipeline.view(filters)
    return DashboardResponse.from_view(view, filters_applied(filters))


@router.get(
    "/dashboard/options",
    response_model=DashboardOptionsResponse,
    summary="Filter and Form Options",
)
def get_dashboard_options(ledger: SalesLedger = Depends(get_ledger)):
    """Choices for the filter controls and defaults for a new sale."""
    defaults = new_sale_defaults()
    defaults["delivery_status"] = defaults["delivery_status"].value
    return DashboardOptionsResponse(
        sectors=list(SECTORS),
        payment_methods=list(PAYMENT_METHODS),
        delivery_statuses=[status.value for status in DeliveryStatus],
        available_dates=ledger.event_dates(),
        new_sale_defaults=defaults,
    )
