"""
Authenticators.

The transport calls ``authenticate(request)`` on every outgoing
``httpx.Request``. Obtaining tokens (API-key exchange and the like) is
left to the caller; these classes only attach what they are given.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

import httpx

from codeengine_client.config import ServiceSettings
from codeengine_client.exceptions import ValidationError

AUTHTYPE_BEARERTOKEN = "bearertoken"
AUTHTYPE_NOAUTH = "noauth"

TokenCallback = Callable[[], Awaitable[Optional[str]]]


class Authenticator(ABC):
    """Abstract base class for authenticators."""

    @abstractmethod
    async def authenticate(self, request: httpx.Request) -> httpx.Request:
        """Attach credentials to the request and return it."""
        ...

    def can_refresh(self) -> bool:
        """Whether a 401 response should trigger ``refresh()`` and a replay."""
        return False

    async def refresh(self) -> bool:
        """Obtain fresh credentials. Returns True if they changed."""
        return False


class NoAuthAuthenticator(Authenticator):
    """Sends requests without credentials."""

    async def authenticate(self, request: httpx.Request) -> httpx.Request:
        return request


class BearerTokenAuthenticator(Authenticator):
    """Attaches a bearer token, optionally refreshed through a callback."""

    def __init__(
        self,
        bearer_token: Optional[str] = None,
        refresh_callback: Optional[TokenCallback] = None,
    ):
        self._bearer_token = bearer_token
        self._refresh_callback = refresh_callback

    @property
    def bearer_token(self) -> Optional[str]:
        return self._bearer_token

    def set_bearer_token(self, bearer_token: Optional[str]) -> None:
        """Replace the token used for subsequent requests."""
        self._bearer_token = bearer_token

    def set_refresh_callback(self, callback: Optional[TokenCallback]) -> None:
        """Set the coroutine function that returns a new token."""
        self._refresh_callback = callback

    def is_authenticated(self) -> bool:
        return self._bearer_token is not None

    async def authenticate(self, request: httpx.Request) -> httpx.Request:
        if self._bearer_token:
            request.headers["Authorization"] = f"Bearer {self._bearer_token}"
        return request

    def can_refresh(self) -> bool:
        return self._refresh_callback is not None

    async def refresh(self) -> bool:
        if self._refresh_callback is None:
            return False
        new_token = await self._refresh_callback()
        if not new_token or new_token == self._bearer_token:
            return False
        self._bearer_token = new_token
        return True


def get_authenticator_from_settings(settings: ServiceSettings) -> Authenticator:
    """
    Build an authenticator from external settings.

    Raises:
        ValidationError: If the auth type is unknown or incomplete
    """
    auth_type = settings.auth_type.lower()
    if auth_type == AUTHTYPE_NOAUTH:
        return NoAuthAuthenticator()
    if auth_type == AUTHTYPE_BEARERTOKEN:
        if not settings.bearer_token:
            raise ValidationError(
                "A bearer token is required for the bearertoken auth type",
                field_errors={"bearer_token": "This field is required"},
            )
        return BearerTokenAuthenticator(settings.bearer_token)
    raise ValidationError(
        f"Unsupported auth type: {settings.auth_type}",
        field_errors={"auth_type": f"Expected one of: {AUTHTYPE_BEARERTOKEN}, {AUTHTYPE_NOAUTH}"},
    )
