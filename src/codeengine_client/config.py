"""
Service configuration.

``ServiceConfig`` holds what every request of one client shares.
``ServiceSettings`` loads the same values from environment variables or a
credentials file, keyed by the service name (``CODE_ENGINE_URL``,
``CODE_ENGINE_BEARER_TOKEN``, ...).
"""

import logging
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "https://api.au-syd.codeengine.cloud.ibm.com/v2"
DEFAULT_SERVICE_NAME = "code_engine"

DEFAULT_MAX_RETRIES = 4
DEFAULT_MAX_RETRY_INTERVAL = 30.0

DEFAULT_RETRY_STATUS_CODES = frozenset({429, 502, 503, 504})
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


class RetryPolicy(BaseModel):
    """
    When and how often failed requests are retried.

    ``max_retries == 0`` disables retries. Eligibility is explicit: a
    request is retried only if its method is in ``retry_methods`` (or the
    request overrides that with ``idempotent``) and the failure is a
    transport error or a status in ``retry_status_codes``.
    """

    max_retries: int = Field(0, ge=0, description="Extra attempts after the first")
    max_retry_interval: float = Field(
        DEFAULT_MAX_RETRY_INTERVAL, ge=0, description="Upper bound for a single backoff in seconds"
    )
    retry_status_codes: FrozenSet[int] = DEFAULT_RETRY_STATUS_CODES
    retry_methods: FrozenSet[str] = IDEMPOTENT_METHODS

    @property
    def enabled(self) -> bool:
        return self.max_retries > 0

    def is_retryable_method(self, method: str, idempotent: Optional[bool] = None) -> bool:
        if idempotent is not None:
            return idempotent
        return method.upper() in self.retry_methods

    def is_retryable_status(self, status_code: int) -> bool:
        return status_code in self.retry_status_codes

    def backoff(self, attempt: int, retry_after: Optional[float] = None) -> float:
        """Seconds to wait before retry number ``attempt`` (0-based)."""
        if retry_after is not None and retry_after >= 0:
            return min(retry_after, self.max_retry_interval)
        return min(float(2 ** attempt), self.max_retry_interval)


class ServiceConfig(BaseModel):
    """Configuration shared by all operations of one client."""

    service_url: str = DEFAULT_SERVICE_URL
    service_name: str = DEFAULT_SERVICE_NAME
    default_headers: Dict[str, str] = Field(default_factory=dict)
    enable_gzip_compression: bool = False
    timeout: float = 30.0
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)


class ServiceSettings(BaseSettings):
    """
    External configuration for a service.

    Settings are loaded from environment variables prefixed with the
    upper-cased service name, and optionally from a credentials file in
    ``.env`` format. Example: CODE_ENGINE_URL, CODE_ENGINE_AUTH_TYPE.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODE_ENGINE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: Optional[str] = Field(default=None, description="Service URL override")
    auth_type: str = Field(default="bearertoken", description="bearertoken or noauth")
    bearer_token: Optional[str] = Field(default=None, description="Static bearer token")
    enable_gzip: bool = Field(default=False, description="Compress request bodies")
    enable_retries: bool = Field(default=False, description="Retry transient failures")
    max_retries: int = Field(default=0, ge=0, description="0 selects the default")
    retry_interval: float = Field(default=0.0, ge=0, description="0 selects the default")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @classmethod
    def for_service(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        env_file: Optional[str] = None,
    ) -> "ServiceSettings":
        """
        Load settings for ``service_name``.

        Args:
            service_name: Name used to derive the variable prefix
            env_file: Optional credentials file in ``.env`` format

        Returns:
            Loaded settings
        """
        prefix = service_name.upper().replace("-", "_") + "_"
        logger.info(f"Loading {service_name} settings (prefix {prefix})")
        return cls(_env_prefix=prefix, _env_file=env_file)
