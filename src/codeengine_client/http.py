"""
Async HTTP transport for the Code Engine API.

This module sends ``RequestSpec`` objects with httpx and provides:
- Base URL and default header management
- Authenticator injection (with one refresh-and-replay on 401)
- Optional gzip compression of request bodies
- Retries with capped exponential backoff for eligible requests
- Mapping of error responses to exceptions
"""

import asyncio
import gzip
import json
import logging
from typing import Any, Dict, Optional

import httpx

from codeengine_client.auth import Authenticator, NoAuthAuthenticator
from codeengine_client.config import ServiceConfig
from codeengine_client.exceptions import (
    APIError,
    ConnectionError as ClientConnectionError,
    DecodeError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from codeengine_client.request_builder import RequestSpec
from codeengine_client.response import DetailedResponse

logger = logging.getLogger(__name__)


def _parse_retry_after(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(int(value.strip()), 0)
    except ValueError:
        # HTTP-date form is not used by the service
        return None


class AsyncHTTPClient:
    """
    Async HTTP client for Code Engine API requests.

    This client handles:
    - Resolving request paths against the configured service URL
    - Authentication via the configured authenticator
    - Response decoding and error mapping
    - Automatic retries for transient failures
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        authenticator: Optional[Authenticator] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Service configuration (URL, headers, gzip, retries)
            authenticator: Authenticator applied to every request
            transport: Custom httpx transport (mainly for tests)
        """
        self.config = config or ServiceConfig()
        self.authenticator = authenticator or NoAuthAuthenticator()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self.config.service_url.rstrip("/")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url

    def _encode_content(self, spec: RequestSpec, headers: Dict[str, str]) -> Optional[bytes]:
        if not spec.has_body:
            return None
        content = json.dumps(spec.body).encode("utf-8")
        if self.config.enable_gzip_compression:
            content = gzip.compress(content)
            headers["Content-Encoding"] = "gzip"
        return content

    async def _build_request(self, spec: RequestSpec) -> httpx.Request:
        """Turn a spec into an authenticated httpx request."""
        client = await self._get_client()
        headers = spec.merged_headers(self.config.default_headers)
        content = self._encode_content(spec, headers)
        request = client.build_request(
            spec.method,
            self._build_url(spec.path),
            params=spec.query_params or None,
            headers=headers,
            content=content,
        )
        return await self.authenticator.authenticate(request)

    def _error_from_response(self, response: httpx.Response) -> APIError:
        """Convert an HTTP error response to the matching exception."""
        status_code = response.status_code
        message: Optional[str] = None
        error_code: Optional[str] = None
        errors = None
        trace = None

        # Try to parse error details from response body
        try:
            body = response.json()
        except Exception:
            body = None

        if isinstance(body, dict):
            if isinstance(body.get("errors"), list):
                errors = [e for e in body["errors"] if isinstance(e, dict)]
                if errors:
                    message = errors[0].get("message")
                    error_code = errors[0].get("code")
            for key in ("message", "error", "detail"):
                if not message and isinstance(body.get(key), str):
                    message = body[key]
            error_code = error_code or body.get("code") or body.get("error_code")
            trace = body.get("trace")

        if not message:
            message = response.text or f"HTTP {status_code}"

        return exception_from_response(
            status_code,
            message,
            error_code=error_code,
            errors=errors,
            trace=trace,
            retry_after=_parse_retry_after(response),
        )

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Raise the exception matching an HTTP error response."""
        raise self._error_from_response(response)

    def _to_detailed_response(self, response: httpx.Response) -> DetailedResponse:
        result: Any = None
        if response.content:
            content_type = response.headers.get("Content-Type", "")
            if not content_type or "json" in content_type:
                try:
                    result = response.json()
                except ValueError as e:
                    raise DecodeError(
                        f"Response body is not valid JSON: {e}",
                        status_code=response.status_code,
                    )
            else:
                result = response.text
        return DetailedResponse(response.status_code, response.headers, result)

    async def _send_with_retries(self, spec: RequestSpec) -> DetailedResponse:
        client = await self._get_client()
        policy = self.config.retry_policy
        max_attempts = 1
        if policy.enabled and policy.is_retryable_method(spec.method, spec.idempotent):
            max_attempts += policy.max_retries

        refreshed = False
        attempt = 0
        while True:
            request = await self._build_request(spec)
            logger.debug(f"{spec.method} {request.url} (attempt {attempt + 1}/{max_attempts})")

            retry_after: Optional[int] = None
            try:
                response = await client.send(request)
            except httpx.TimeoutException as e:
                error: Exception = ClientTimeoutError(f"Request timed out: {e}")
            except httpx.TransportError as e:
                error = ClientConnectionError(f"Connection failed: {e}")
            else:
                logger.debug(f"{spec.method} {request.url} -> {response.status_code}")
                if response.is_success:
                    return self._to_detailed_response(response)

                # Handle 401 with a credential refresh, once per call
                if response.status_code == 401 and not refreshed and self.authenticator.can_refresh():
                    refreshed = True
                    if await self.authenticator.refresh():
                        logger.debug("Credentials refreshed, replaying request")
                        continue

                error = self._error_from_response(response)
                if not policy.is_retryable_status(response.status_code):
                    raise error
                retry_after = _parse_retry_after(response)

            if attempt + 1 >= max_attempts:
                raise error

            delay = policy.backoff(attempt, retry_after)
            logger.warning(
                f"{spec.method} {spec.path} failed ({error}); "
                f"retrying in {delay:.2f}s ({attempt + 1}/{max_attempts - 1})"
            )
            await asyncio.sleep(delay)
            attempt += 1

    async def send(
        self,
        spec: RequestSpec,
        *,
        deadline: Optional[float] = None,
    ) -> DetailedResponse:
        """
        Send a request, retrying transient failures per the retry policy.

        Args:
            spec: The request to send
            deadline: Seconds allowed for the whole call, retries included

        Returns:
            The response envelope

        Raises:
            APIError: On non-2xx responses
            ConnectionError: On connection failures
            TimeoutError: On request timeout or an expired deadline
            DecodeError: If a JSON response body cannot be parsed
        """
        if deadline is None:
            return await self._send_with_retries(spec)
        try:
            return await asyncio.wait_for(self._send_with_retries(spec), timeout=deadline)
        except asyncio.TimeoutError:
            raise ClientTimeoutError(
                f"Deadline of {deadline}s exceeded for {spec.method} {spec.path}"
            )


