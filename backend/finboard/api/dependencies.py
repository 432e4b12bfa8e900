"""Request Dependencies — build the explicit store/authenticator handles per request.

Invariants:
    - One AsyncSession per request, shared by the store and the authenticator
    - Services never see the session, only the Protocol-shaped handle

Design Decisions:
    - Handles built in FastAPI dependencies so tests swap them with
      app.dependency_overrides instead of patching module globals
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.core.repository_protocols import Authenticator, DashboardStore
from finboard.infrastructure.credentials import UserCredentialsAuthenticator
from finboard.infrastructure.database import get_db
from finboard.infrastructure.sql_store import SqlDashboardStore


async def get_store(db: AsyncSession = Depends(get_db)) -> DashboardStore:
    return SqlDashboardStore(db)


async def get_authenticator(db: AsyncSession = Depends(get_db)) -> Authenticator:
    return UserCredentialsAuthenticator(db)
