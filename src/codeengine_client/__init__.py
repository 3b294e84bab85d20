"""
Code Engine Client Library.

A typed async HTTP client for the Code Engine v2 API.

Example usage:
    ```python
    from codeengine_client import BearerTokenAuthenticator, CodeEngineClient
    from codeengine_client.options import ListConfigMapsOptions

    async with CodeEngineClient(authenticator=BearerTokenAuthenticator(token)) as client:
        # Get a single resource
        project = await client.projects.get(project_id)

        # Walk all pages of a list
        pager = client.config_maps.pager(ListConfigMapsOptions(project_id=project_id))
        config_maps = await pager.get_all()
    ```
"""

from codeengine_client.version import __version__

# Main client
from codeengine_client.client import CodeEngineClient

# Authentication
from codeengine_client.auth import (
    Authenticator,
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
    get_authenticator_from_settings,
)

# Configuration
from codeengine_client.config import (
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    RetryPolicy,
    ServiceConfig,
    ServiceSettings,
)

# Request pipeline components (for advanced usage)
from codeengine_client.decoder import decode, encode
from codeengine_client.http import AsyncHTTPClient
from codeengine_client.pager import Pager, PagerState
from codeengine_client.request_builder import RequestBuilder, RequestSpec
from codeengine_client.response import DetailedResponse

# Exceptions
from codeengine_client.exceptions import (
    # Base exception
    CodeEngineClientError,
    # Local errors
    ValidationError,
    DecodeError,
    PagerExhaustedError,
    # Network errors
    NetworkError,
    ConnectionError,
    TimeoutError,
    # API errors
    APIError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
)

__all__ = [
    "__version__",
    # Main client
    "CodeEngineClient",
    # Authentication
    "Authenticator",
    "BearerTokenAuthenticator",
    "NoAuthAuthenticator",
    "get_authenticator_from_settings",
    # Configuration
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SERVICE_URL",
    "RetryPolicy",
    "ServiceConfig",
    "ServiceSettings",
    # Request pipeline
    "AsyncHTTPClient",
    "DetailedResponse",
    "Pager",
    "PagerState",
    "RequestBuilder",
    "RequestSpec",
    "decode",
    "encode",
    # Exceptions
    "CodeEngineClientError",
    "ValidationError",
    "DecodeError",
    "PagerExhaustedError",
    "NetworkError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
]
