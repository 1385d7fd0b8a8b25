"""
Ticket Sales Dashboard API - Main Application.

FastAPI application with CORS enabled for frontend communication. Each
application instance owns one SalesLedger (the dashboard session) and the
DashboardPipeline deriving views from it.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from repositories.sale_repository import SupabaseSaleRepository
from services.dashboard_service import DashboardPipeline
from services.sales_ledger import SalesLedger


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.load_on_startup:
        app.state.pipeline.ledger.load()
    yield


def create_app(ledger: Optional[SalesLedger] = None) -> FastAPI:
    """
    Build the application.

    Without a ledger, one backed by Supabase (from the environment) is
    created and loaded on startup.
    """
    app = FastAPI(
        title="Ticket Sales Dashboard API",
        description="KPIs, rankings and ledger management for ticket resale",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # TODO: Restrict origins once the frontend host is fixed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.load_on_startup = ledger is None
    if ledger is None:
        ledger = SalesLedger(SupabaseSaleRepository.from_environment())
    app.state.pipeline = DashboardPipeline(ledger)

    @app.get("/health", tags=["Health"])
    def health_check():
        """
        Health check endpoint.

        Returns the API status, version and whether sales are persisted.
        """
        return {
            "status": "healthy",
            "version": __version__,
            "service": "ticket-sales-dashboard-api",
            "persistence": "supabase" if app.state.pipeline.ledger.is_persistent else "memory",
        }

    @app.get("/", tags=["Root"])
    def root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "Ticket Sales Dashboard API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }

    from api.routers import dashboard, sales

    app.include_router(dashboard.router, prefix="/api/v1", tags=["Dashboard"])
    app.include_router(sales.router, prefix="/api/v1", tags=["Sales"])

    return app


app = create_app()
