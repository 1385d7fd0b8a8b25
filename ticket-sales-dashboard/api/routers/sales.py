"""
Sales API Endpoints.

Ledger listing and create/update/delete of individual sales.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import filters_applied, get_filters, get_ledger, get_pipeline
from api.models import MutationResponse, SaleListResponse, SaleRequest, SaleResponse
from domain.filters import FilterConfig
from domain.sale import SaleRecord
from services.dashboard_service import DashboardPipeline
from services.sales_ledger import LedgerMutation, SalesLedger

logger = logging.getLogger(__name__)

router = APIRouter()


def _mutation_response(result: LedgerMutation, message: str) -> MutationResponse:
    if not result.success:
        # Only a failed remote call reaches here; validation failures are mapped by callers.
        raise HTTPException(status_code=502, detail=f"Data store rejected the change: {result.error}")

    if not result.persisted:
        message += " (not persisted: data store not configured)"

    return MutationResponse(
        success=True,
        persisted=result.persisted,
        sale=SaleResponse.from_sale(result.sale) if result.sale else None,
        message=message,
    )


@router.get(
    "/sales",
    response_model=SaleListResponse,
    summary="List Sales",
    description="Sales ledger, most recent first, with the same filters as the dashboard."
)
def list_sales(
    filters: FilterConfig = Depends(get_filters),
    pipeline: DashboardPipeline = Depends(get_pipeline),
):
    sales = pipeline.filtered_sales(filters)
    return SaleListResponse(
        items=[SaleResponse.from_sale(sale) for sale in sales],
        total_count=len(sales),
        filters_applied=filters_applied(filters),
    )


@router.post(
    "/sales",
    response_model=MutationResponse,
    status_code=201,
    summary="Create Sale",
)
def create_sale(request: SaleRequest, ledger: SalesLedger = Depends(get_ledger)):
    """
    Record a new sale. The id is generated and profit is computed as
    sale_price - sector_cost - plan_cost.
    """
    result = ledger.create_from_fields(**request.model_dump())
    return _mutation_response(result, "Sale created.")


@router.put(
    "/sales/{sale_id}",
    response_model=MutationResponse,
    summary="Update Sale",
)
def update_sale(sale_id: str, request: SaleRequest, ledger: SalesLedger = Depends(get_ledger)):
    """Replace every editable field of an existing sale; profit is recomputed."""
    if ledger.get(sale_id) is None:
        raise HTTPException(status_code=404, detail=f"Sale {sale_id} not found")

    result = ledger.update(SaleRecord(sale_id=sale_id, **request.model_dump()))
    return _mutation_response(result, "Sale updated.")


@router.delete(
    "/sales/{sale_id}",
    response_model=MutationResponse,
    summary="Delete Sale",
)
def delete_sale(
    sale_id: str,
    confirm: bool = Query(False, description="Must be true; the client asks the user first"),
    ledger: SalesLedger = Depends(get_ledger),
):
    if ledger.get(sale_id) is None:
        raise HTTPException(status_code=404, detail=f"Sale {sale_id} not found")
    if not confirm:
        raise HTTPException(status_code=400, detail="Deletion must be confirmed with confirm=true")

    result = ledger.delete(sale_id, confirmed=True)
    return _mutation_response(result, "Sale deleted.")


@router.post(
    "/sales/reload",
    response_model=SaleListResponse,
    summary="Reload Sales",
    description="Reload the ledger from the data store. Yields an empty ledger if it is unavailable."
)
def reload_sales(ledger: SalesLedger = Depends(get_ledger)):
    sales = ledger.load()
    logger.info("Ledger reloaded via API", extra={"sale_count": len(sales)})
    return SaleListResponse(items=[SaleResponse.from_sale(sale) for sale in sales], total_count=len(sales), filters_applied={})
