"""Invoice Routes — listing, pagination, edit pre-fill and the three mutations.

Invariants:
    - Mutations read the form body (application/x-www-form-urlencoded or multipart)
      and answer {"effects": [...]} in the order the client must apply them
    - The invoice id of an update comes from the path, never from the form
    - GET /pages is declared before GET /{invoice_id} so it is not shadowed

Design Decisions:
    - Routes only translate HTTP <-> service calls; validation, wrapping and
      effects live in services/invoice_actions.py
"""

from fastapi import APIRouter, Depends, Query, Request, status

from finboard.api.dependencies import get_store
from finboard.config import Settings, get_settings
from finboard.core.domain_types import InvoiceId
from finboard.core.repository_protocols import DashboardStore
from finboard.schemas.invoice import ActionResponse, InvoiceEditResponse
from finboard.services import dashboard_queries, invoice_actions

router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


@router.get("")
async def list_invoices(
    query: str = Query(""),
    page: int = Query(1, ge=1),
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """One page of invoices whose status matches the search."""
    invoices = await dashboard_queries.fetch_filtered_invoices(
        store, query, page, per_page=settings.items_per_page,
    )
    return {"invoices": invoices, "page": page}


@router.get("/pages")
async def count_invoice_pages(
    query: str = Query(""),
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    total_pages = await dashboard_queries.fetch_invoices_pages(
        store, query, per_page=settings.items_per_page,
    )
    return {"total_pages": total_pages}


@router.get("/{invoice_id}", response_model=InvoiceEditResponse)
async def get_invoice(
    invoice_id: str, store: DashboardStore = Depends(get_store),
):
    """Invoice fields for the edit form (amount in major units)."""
    return await dashboard_queries.fetch_invoice_by_id(
        store, InvoiceId(invoice_id),
    )


@router.post(
    "", response_model=ActionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    request: Request,
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    form = dict(await request.form())
    effects = await invoice_actions.create_invoice(
        store, form, view_path=settings.invoices_path,
    )
    return ActionResponse(effects=[e.to_dict() for e in effects])


@router.put("/{invoice_id}", response_model=ActionResponse)
async def update_invoice(
    invoice_id: str,
    request: Request,
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    form = dict(await request.form())
    effects = await invoice_actions.update_invoice(
        store, InvoiceId(invoice_id), form, view_path=settings.invoices_path,
    )
    return ActionResponse(effects=[e.to_dict() for e in effects])


@router.delete("/{invoice_id}", response_model=ActionResponse)
async def delete_invoice(
    invoice_id: str,
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    effects = await invoice_actions.delete_invoice(
        store, InvoiceId(invoice_id), view_path=settings.invoices_path,
    )
    return ActionResponse(effects=[e.to_dict() for e in effects])
