"""
Request-scoped accessors for the dashboard session state.

The ledger and pipeline live on `app.state`, one per application instance.
"""

from fastapi import HTTPException, Query, Request

from domain.filters import ALL, FilterConfig
from services.dashboard_service import DashboardPipeline
from services.sales_ledger import SalesLedger


def get_pipeline(request: Request) -> DashboardPipeline:
    return request.app.state.pipeline


def get_ledger(request: Request) -> SalesLedger:
    return request.app.state.pipeline.ledger


def get_filters(
    date: str = Query(ALL, description="Event date label (e.g., '02/11/25') or 'all'"),
    sector: str = Query(ALL, description="Sector name or 'all'"),
    status: str = Query(ALL, description="'ENVIADO', 'PENDENTE' or 'all'"),
    payment: str = Query(ALL, description="Payment method or 'all'"),
    search: str = Query("", description="Matches buyer, account, contact or sector"),
) -> FilterConfig:
    try:
        return FilterConfig(
            event_date=date,
            sector=sector,
            delivery_status=status,
            payment_method=payment,
            search=search,
        )
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid status. Must be 'ENVIADO', 'PENDENTE' or 'all', got '{status}'"
        )


def filters_applied(filters: FilterConfig) -> dict:
    """Active criteria only, for echoing back to the client."""

    applied = {
        "date": filters.event_date,
        "sector": filters.sector,
        "status": getattr(filters.delivery_status, "value", filters.delivery_status),
        "payment": filters.payment_method,
    }
    result = {key: value for key, value in applied.items() if value != ALL}
    if filters.search:
        result["search"] = filters.search
    return result
