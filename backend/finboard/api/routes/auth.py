"""Auth Routes — credentials login returning an inline error message.

Invariants:
    - Rejected credentials answer 200 with {"error": "<message>"}: the form
      renders the message inline instead of an error page
    - Successful sign-in answers {"error": null}
"""

from fastapi import APIRouter, Depends, Request

from finboard.api.dependencies import get_authenticator
from finboard.core.repository_protocols import Authenticator
from finboard.services import invoice_actions

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login")
async def login(
    request: Request, authenticator: Authenticator = Depends(get_authenticator),
):
    form = {k: str(v) for k, v in (await request.form()).items()}
    message = await invoice_actions.authenticate(authenticator, form)
    return {"error": message}
