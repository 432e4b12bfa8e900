"""authenticate — maps AuthenticationError kinds to inline messages, re-raises the rest."""

import pytest

from finboard.core.errors import AuthenticationError
from finboard.services.invoice_actions import authenticate
from tests.services.fake_store import FakeAuthenticator

FORM = {"email": "user@nextmail.com", "password": "123456"}


async def test_success_returns_none():
    authenticator = FakeAuthenticator()
    assert await authenticate(authenticator, FORM) is None
    assert authenticator.calls == [("credentials", FORM)]


async def test_invalid_credentials_message(invalid_credentials):
    assert await authenticate(invalid_credentials, FORM) == "Invalid credentials."


@pytest.mark.parametrize("kind", ["CallbackRouteError", "ProviderNotSupported", ""])
async def test_other_authentication_kinds_are_generic(kind):
    authenticator = FakeAuthenticator(AuthenticationError(kind))
    assert await authenticate(authenticator, FORM) == "Something went wrong."


async def test_unrecognized_errors_propagate_unchanged():
    boom = KeyError("redirect")
    authenticator = FakeAuthenticator(boom)
    with pytest.raises(KeyError) as exc_info:
        await authenticate(authenticator, FORM)
    assert exc_info.value is boom
