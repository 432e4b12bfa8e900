"""Invoice Schemas — form validation and response shapes for invoice endpoints.

Invariants:
    - InvoiceForm.customer_id: stripped, non-empty
    - InvoiceForm.amount: number >= 0 with at most two decimals (major units)
    - InvoiceForm.status: exactly "pending" or "paid"
    - parse_invoice_form raises core ValidationError, never pydantic's

Design Decisions:
    - Form field names follow the HTML form ("customerId"), accepted by alias;
      snake_case names are accepted too for JSON callers
    - Pydantic errors flattened into {field: [messages]} for inline form display
"""

from collections.abc import Mapping
from decimal import Decimal

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError,
    field_validator,
)

from finboard.core.domain_types import InvoiceStatus
from finboard.core.errors import ValidationError

_FIELD_MESSAGES: dict[str, str] = {
    "customer_id": "Please select a customer.",
    "amount": "Please enter an amount of $0 or more, with at most two decimals.",
    "status": "Please select an invoice status.",
}


class InvoiceForm(BaseModel):
    """Create/update form — date and id are never taken from the form."""
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(ge=0, decimal_places=2, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("customer_id")
    @classmethod
    def strip_customer_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("customer_id cannot be empty or whitespace")
        return v


def parse_invoice_form(form: Mapping[str, object]) -> InvoiceForm:
    """Validate raw form fields. Raises ValidationError with per-field messages."""
    raw = {
        "customerId": form.get("customerId", form.get("customer_id")),
        "amount": form.get("amount"),
        "status": form.get("status"),
    }
    try:
        return InvoiceForm.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def _field_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = str(err["loc"][0]) if err["loc"] else "form"
        field = "customer_id" if loc == "customerId" else loc
        message = _FIELD_MESSAGES.get(field, err["msg"])
        if message not in errors.setdefault(field, []):
            errors[field].append(message)
    return errors


# --- Responses ----------------------------------------------------------------

class InvoiceEditResponse(BaseModel):
    """Invoice pre-populated into the edit form (amount in major units)."""
    id: str
    customer_id: str
    amount: float
    status: str


class CardDataResponse(BaseModel):
    number_of_invoices: int
    total_pending_invoices: int
    number_of_customers: int
    total_paid_invoices: str


class ActionResponse(BaseModel):
    """Ordered effects the client applies after a mutation."""
    effects: list[dict]
