"""Customer Routes — select options and the searchable customer table."""

from fastapi import APIRouter, Depends, Query

from finboard.api.dependencies import get_store
from finboard.config import Settings, get_settings
from finboard.core.repository_protocols import DashboardStore
from finboard.services import dashboard_queries

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("")
async def list_customers(store: DashboardStore = Depends(get_store)):
    """id/name pairs ordered by name, for the invoice form select."""
    return {"customers": await dashboard_queries.fetch_customers(store)}


@router.get("/table")
async def customer_table(
    query: str = Query(""),
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    customers = await dashboard_queries.fetch_filtered_customers(
        store, query, currency=settings.currency,
    )
    return {"customers": customers}
