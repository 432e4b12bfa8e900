"""Dashboard Routes — revenue chart, latest invoices and summary cards."""

from fastapi import APIRouter, Depends

from finboard.api.dependencies import get_store
from finboard.config import Settings, get_settings
from finboard.core.repository_protocols import DashboardStore
from finboard.schemas.invoice import CardDataResponse
from finboard.services import dashboard_queries

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/revenue")
async def get_revenue(store: DashboardStore = Depends(get_store)):
    return {"revenue": await dashboard_queries.fetch_revenue(store)}


@router.get("/latest-invoices")
async def get_latest_invoices(
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    invoices = await dashboard_queries.fetch_latest_invoices(
        store, limit=settings.latest_invoices_limit, currency=settings.currency,
    )
    return {"invoices": invoices}


@router.get("/cards", response_model=CardDataResponse)
async def get_card_data(
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return await dashboard_queries.fetch_card_data(store, currency=settings.currency)
