"""Credentials Sign-In — Authenticator backed by the users table.

Invariants:
    - Unknown email, wrong password and malformed form all raise
      AuthenticationError(kind="CredentialsSignin") (no user enumeration)
    - Database failures raise AuthenticationError(kind="CallbackRouteError")
      chained to the cause
    - Unsupported providers raise AuthenticationError(kind="ProviderNotSupported")
    - A stored value that is not a bcrypt hash never verifies

Design Decisions:
    - bcrypt modular crypt strings: "$2a$" and "$2b$" hashes written by other
      bcrypt implementations verify without conversion
"""

import logging
from collections.abc import Mapping

import bcrypt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.core.errors import AuthenticationError
from finboard.models.user import User
from finboard.schemas.auth import LoginForm

logger = logging.getLogger(__name__)

_ROUNDS = 12


def hash_password(password: str, rounds: int = _ROUNDS) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=rounds),
    ).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash, or a password beyond bcrypt's 72-byte limit
        return False


class UserCredentialsAuthenticator:
    """Checks an email/password form against the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def sign_in(self, provider: str, form: Mapping[str, str]) -> None:
        if provider != "credentials":
            raise AuthenticationError("ProviderNotSupported")
        try:
            login = LoginForm.model_validate(
                {"email": form.get("email"), "password": form.get("password")},
            )
        except PydanticValidationError as e:
            raise AuthenticationError(AuthenticationError.CREDENTIALS_SIGNIN) from e

        try:
            result = await self._db.execute(
                select(User).where(User.email == login.email),
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch user: {e}")
            raise AuthenticationError("CallbackRouteError") from e

        if user is None or not verify_password(login.password, user.password):
            raise AuthenticationError(AuthenticationError.CREDENTIALS_SIGNIN)
        logger.info("User signed in", extra={"operation": "sign_in"})
