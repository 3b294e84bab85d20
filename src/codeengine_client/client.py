"""
Main Code Engine API client.

This module provides the CodeEngineClient class, the primary entry point
for the Code Engine API. It owns the service configuration, the
authenticator and the HTTP session, and hands out endpoint clients.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import urlparse

import httpx

from codeengine_client.auth import Authenticator, NoAuthAuthenticator, get_authenticator_from_settings
from codeengine_client.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_RETRY_INTERVAL,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    RetryPolicy,
    ServiceConfig,
    ServiceSettings,
)
from codeengine_client.endpoints import (
    AllowedOutboundDestinationsClient,
    AppsClient,
    BindingsClient,
    BuildsClient,
    ConfigMapsClient,
    DomainMappingsClient,
    JobsClient,
    ProjectsClient,
    ReclamationsClient,
    SecretsClient,
)
from codeengine_client.exceptions import ValidationError
from codeengine_client.http import AsyncHTTPClient
from codeengine_client.request_builder import RequestBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CodeEngineClient:
    """
    Main client for the Code Engine API.

    This class provides:
    - Service configuration (URL, default headers, gzip, retries)
    - Lazy-loaded endpoint clients
    - Session lifecycle management

    Example usage:
        ```python
        auth = BearerTokenAuthenticator("my-token")
        async with CodeEngineClient(authenticator=auth) as client:
            project = await client.projects.get("15314cc3-85b4-4338-903f-c28cdee6d005")

            pager = client.apps.pager(ListAppsOptions(project_id=project.id, limit=100))
            apps = await pager.get_all()
        ```

    Or from environment variables (CODE_ENGINE_URL, CODE_ENGINE_BEARER_TOKEN, ...):
        ```python
        client = CodeEngineClient.using_external_config()
        # ... use client ...
        await client.close()
        ```
    """

    def __init__(
        self,
        service_url: str = DEFAULT_SERVICE_URL,
        *,
        authenticator: Optional[Authenticator] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        enable_gzip_compression: bool = False,
        max_retries: int = 0,
        max_retry_interval: float = DEFAULT_MAX_RETRY_INTERVAL,
        service_name: str = DEFAULT_SERVICE_NAME,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Code Engine client.

        Args:
            service_url: Base URL of the API, including the version path
            authenticator: Authenticator applied to every request
            headers: Headers sent with every request
            timeout: Request timeout in seconds
            enable_gzip_compression: Compress request bodies
            max_retries: Retries for transient failures (0 disables them)
            max_retry_interval: Upper bound for a single backoff in seconds
            service_name: Service name used in SDK headers
            transport: Custom httpx transport (mainly for tests)
        """
        config = ServiceConfig(
            service_url=_validate_service_url(service_url),
            service_name=service_name,
            default_headers=dict(headers or {}),
            enable_gzip_compression=enable_gzip_compression,
            timeout=timeout,
            retry_policy=RetryPolicy(max_retries=max_retries, max_retry_interval=max_retry_interval),
        )
        self._setup(config, authenticator or NoAuthAuthenticator(), transport)

    def _setup(
        self,
        config: ServiceConfig,
        authenticator: Authenticator,
        transport: Optional[httpx.AsyncBaseTransport],
    ) -> None:
        self._config = config
        self._authenticator = authenticator
        self._transport = transport
        self._http = AsyncHTTPClient(config=config, authenticator=authenticator, transport=transport)
        self._builder = RequestBuilder(config.service_name)
        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    # =========================================================================
    # Construction from external configuration
    # =========================================================================

    @classmethod
    def from_settings(
        cls,
        settings: ServiceSettings,
        *,
        authenticator: Optional[Authenticator] = None,
        service_name: str = DEFAULT_SERVICE_NAME,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CodeEngineClient":
        """
        Create a client from loaded settings.

        The authenticator is built from the settings unless one is given.
        """
        client = cls(
            settings.url or DEFAULT_SERVICE_URL,
            authenticator=authenticator or get_authenticator_from_settings(settings),
            timeout=settings.timeout,
            enable_gzip_compression=settings.enable_gzip,
            service_name=service_name,
            transport=transport,
        )
        if settings.enable_retries:
            client.enable_retries(settings.max_retries, settings.retry_interval)
        return client

    @classmethod
    def using_external_config(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        env_file: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CodeEngineClient":
        """
        Create a client configured from environment variables.

        Args:
            service_name: Prefix of the variables, e.g. "code_engine" reads
                CODE_ENGINE_URL, CODE_ENGINE_BEARER_TOKEN, ...
            env_file: Optional credentials file in ``.env`` format

        Raises:
            ValidationError: If the configured authentication is incomplete
        """
        settings = ServiceSettings.for_service(service_name, env_file)
        return cls.from_settings(settings, service_name=service_name, transport=transport)

    @staticmethod
    def get_service_url_for_region(region: str) -> str:
        """
        Regional URLs are not supported by this service.

        Raises:
            ValidationError: Always
        """
        raise ValidationError(
            f"Service does not support regional URLs (region: {region})",
            field_errors={"region": "Regional URLs are not supported"},
        )

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def authenticator(self) -> Authenticator:
        return self._authenticator

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    def get_service_url(self) -> str:
        return self._config.service_url

    def set_service_url(self, service_url: str) -> None:
        """
        Change the base URL used by subsequent requests.

        Raises:
            ValidationError: If the URL is empty or not absolute
        """
        self._config.service_url = _validate_service_url(service_url)
        logger.debug(f"Service URL set to {self._config.service_url}")

    def set_default_headers(self, headers: Optional[Dict[str, str]]) -> None:
        """Replace the headers sent with every request."""
        self._config.default_headers = dict(headers or {})

    def get_enable_gzip_compression(self) -> bool:
        return self._config.enable_gzip_compression

    def set_enable_gzip_compression(self, enable_gzip: bool) -> None:
        self._config.enable_gzip_compression = enable_gzip

    def enable_retries(self, max_retries: int = 0, max_retry_interval: float = 0) -> None:
        """
        Retry transient failures of idempotent requests.

        Args:
            max_retries: Retries per request; 0 selects the default (4)
            max_retry_interval: Longest single backoff in seconds; 0 selects
                the default (30)
        """
        if max_retries < 0 or max_retry_interval < 0:
            raise ValidationError("Retry settings must not be negative")
        self._config.retry_policy = self._config.retry_policy.model_copy(
            update={
                "max_retries": max_retries or DEFAULT_MAX_RETRIES,
                "max_retry_interval": float(max_retry_interval or DEFAULT_MAX_RETRY_INTERVAL),
            }
        )
        logger.debug(
            f"Retries enabled (max_retries={self._config.retry_policy.max_retries}, "
            f"max_retry_interval={self._config.retry_policy.max_retry_interval}s)"
        )

    def disable_retries(self) -> None:
        self._config.retry_policy = self._config.retry_policy.model_copy(update={"max_retries": 0})

    def clone(self) -> "CodeEngineClient":
        """
        Copy this client.

        The copy shares the authenticator and transport but has its own
        configuration and HTTP session, so changing one client's settings
        leaves the other untouched.
        """
        copy = type(self).__new__(type(self))
        copy._setup(self._config.model_copy(deep=True), self._authenticator, self._transport)
        return copy

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._http, self._builder)
        return self._endpoint_clients[class_name]

    @property
    def projects(self) -> ProjectsClient:
        return self._get_endpoint_client(ProjectsClient)

    @property
    def reclamations(self) -> ReclamationsClient:
        return self._get_endpoint_client(ReclamationsClient)

    @property
    def allowed_outbound_destinations(self) -> AllowedOutboundDestinationsClient:
        return self._get_endpoint_client(AllowedOutboundDestinationsClient)

    @property
    def apps(self) -> AppsClient:
        return self._get_endpoint_client(AppsClient)

    @property
    def jobs(self) -> JobsClient:
        return self._get_endpoint_client(JobsClient)

    @property
    def builds(self) -> BuildsClient:
        return self._get_endpoint_client(BuildsClient)

    @property
    def bindings(self) -> BindingsClient:
        return self._get_endpoint_client(BindingsClient)

    @property
    def config_maps(self) -> ConfigMapsClient:
        return self._get_endpoint_client(ConfigMapsClient)

    @property
    def secrets(self) -> SecretsClient:
        return self._get_endpoint_client(SecretsClient)

    @property
    def domain_mappings(self) -> DomainMappingsClient:
        return self._get_endpoint_client(DomainMappingsClient)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> "CodeEngineClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"CodeEngineClient(service_url={self._config.service_url!r})"


def _validate_service_url(service_url: str) -> str:
    parsed = urlparse(service_url or "")
    if not parsed.scheme or not parsed.netloc:
        raise ValidationError(
            f"Invalid service URL: {service_url!r}",
            field_errors={"service_url": "Must be a non-empty absolute URL"},
        )
    return service_url.rstrip("/")
