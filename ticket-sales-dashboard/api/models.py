"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.catalog import DEFAULT_PAYMENT_METHOD, DEFAULT_SECTOR
from domain.sale import DeliveryStatus, SaleRecord
from domain.stats import ClientStat, KpiSummary, SectorRanking
from services.aggregation_service import client_shares
from services.dashboard_service import DashboardView
from services.formatting import format_brl


# ============================================================================
# Sale Models
# ============================================================================

class SaleRequest(BaseModel):
    """Create or update payload. Profit is always derived server-side."""
    account: str = ""
    sector: str = DEFAULT_SECTOR
    sector_cost: Decimal = Field(Decimal("0"), ge=0)
    plan_cost: Decimal = Field(Decimal("0"), ge=0)
    sale_price: Decimal = Field(Decimal("0"), ge=0)
    buyer_name: str = Field(..., min_length=1, description="Buyer (PIX) name")
    delivery_status: DeliveryStatus = DeliveryStatus.PENDING
    contact: str = ""
    payment_method: str = DEFAULT_PAYMENT_METHOD
    event_date: str = Field(..., min_length=1, description="Event date label (DD/MM/YY)")

    class Config:
        json_schema_extra = {
            "example": {
                "account": "123.456.789-00",
                "sector": "SETOR PRETO",
                "sector_cost": "60.00",
                "plan_cost": "10.00",
                "sale_price": "150.00",
                "buyer_name": "Ana Souza",
                "delivery_status": "PENDENTE",
                "contact": "+55 11 98888-1001",
                "payment_method": "Nubank",
                "event_date": "02/11/25"
            }
        }


class SaleResponse(BaseModel):
    """Single sale in API response."""
    sale_id: str
    account: str
    sector: str
    sector_cost: Decimal
    plan_cost: Decimal
    sale_price: Decimal
    profit: Decimal
    buyer_name: str
    delivery_status: DeliveryStatus
    contact: str
    payment_method: str
    event_date: str

    @classmethod
    def from_sale(cls, sale: SaleRecord) -> "SaleResponse":
        return cls(
            sale_id=sale.sale_id,
            account=sale.account,
            sector=sale.sector,
            sector_cost=sale.sector_cost,
            plan_cost=sale.plan_cost,
            sale_price=sale.sale_price,
            profit=sale.profit,
            buyer_name=sale.buyer_name,
            delivery_status=sale.delivery_status,
            contact=sale.contact,
            payment_method=sale.payment_method,
            event_date=sale.event_date,
        )


class SaleListResponse(BaseModel):
    """Response for the (filtered) sales ledger."""
    items: List[SaleResponse]
    total_count: int
    filters_applied: dict


class MutationResponse(BaseModel):
    """Response after create/update/delete."""
    success: bool
    persisted: bool
    sale: Optional[SaleResponse] = None
    message: Optional[str] = None


# ============================================================================
# Dashboard Models
# ============================================================================

class KpiResponse(BaseModel):
    total_profit: Decimal
    total_cost: Decimal
    tickets_sold: int
    distinct_clients: int
    average_ticket: Decimal
    total_profit_label: str
    total_cost_label: str
    average_ticket_label: str

    @classmethod
    def from_summary(cls, kpis: KpiSummary) -> "KpiResponse":
        return cls(
            total_profit=kpis.total_profit,
            total_cost=kpis.total_cost,
            tickets_sold=kpis.tickets_sold,
            distinct_clients=kpis.distinct_clients,
            average_ticket=kpis.average_ticket,
            total_profit_label=format_brl(kpis.total_profit),
            total_cost_label=format_brl(kpis.total_cost),
            average_ticket_label=format_brl(kpis.average_ticket),
        )


class SectorRankingEntry(BaseModel):
    position: int
    sector: str
    profit: Decimal
    sales_count: int
    share: Decimal = Field(..., description="Measure relative to the leader (0..1)")


class SectorRankingResponse(BaseModel):
    kind: str
    entries: List[SectorRankingEntry]

    @classmethod
    def from_ranking(cls, ranking: SectorRanking) -> "SectorRankingResponse":
        return cls(
            kind=ranking.kind.value,
            entries=[
                SectorRankingEntry(
                    position=index + 1,
                    sector=entry.sector,
                    profit=entry.profit,
                    sales_count=entry.sales_count,
                    share=share,
                )
                for index, (entry, share) in enumerate(zip(ranking.entries, ranking.shares()))
            ],
        )


class ClientRankingEntry(BaseModel):
    position: int
    name: str
    total_spent: Decimal
    purchases: int
    share: Decimal


def client_entries(clients: List[ClientStat]) -> List[ClientRankingEntry]:
    return [
        ClientRankingEntry(
            position=index + 1,
            name=client.name,
            total_spent=client.total_spent,
            purchases=client.purchases,
            share=share,
        )
        for index, (client, share) in enumerate(zip(clients, client_shares(clients)))
    ]


class DashboardResponse(BaseModel):
    """Full dashboard for one filter selection."""
    filters_applied: dict
    kpis: KpiResponse
    profit_ranking: SectorRankingResponse
    volume_ranking: SectorRankingResponse
    top_clients: List[ClientRankingEntry]
    available_dates: List[str]
    sales: List[SaleResponse]

    @classmethod
    def from_view(cls, view: DashboardView, filters_applied: dict) -> "DashboardResponse":
        return cls(
            filters_applied=filters_applied,
            kpis=KpiResponse.from_summary(view.kpis),
            profit_ranking=SectorRankingResponse.from_ranking(view.profit_ranking),
            volume_ranking=SectorRankingResponse.from_ranking(view.volume_ranking),
            top_clients=client_entries(list(view.top_clients)),
            available_dates=list(view.available_dates),
            sales=[SaleResponse.from_sale(sale) for sale in view.sales],
        )


class DashboardOptionsResponse(BaseModel):
    """Choices for the filter controls and the blank sale form."""
    sectors: List[str]
    payment_methods: List[str]
    delivery_statuses: List[str]
    available_dates: List[str]
    new_sale_defaults: dict

