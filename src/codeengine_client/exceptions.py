"""
Exception hierarchy for the Code Engine client library.

Local failures (bad caller input, undecodable responses, misuse of a pager)
never reach the network. Remote failures map HTTP status codes onto
``APIError`` subclasses and keep the parsed server error body.
"""

from typing import Any, Dict, List, Optional


class CodeEngineClientError(Exception):
    """
    Base exception for all Code Engine client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Server error code (e.g., "resource_not_found")
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Local Errors
# =============================================================================


class ValidationError(CodeEngineClientError):
    """
    Caller input is malformed.

    Raised before any request is sent, e.g. for a missing path parameter,
    an empty ``If-Match`` value or invalid pager options.
    """

    def __init__(
        self,
        message: str = "Validation error",
        *,
        details: Optional[Dict[str, Any]] = None,
        field_errors: Optional[Dict[str, str]] = None,
    ):
        if field_errors:
            details = details or {}
            details["field_errors"] = field_errors
        super().__init__(message, details=details)
        self.field_errors = field_errors or {}


class DecodeError(CodeEngineClientError):
    """
    A response body does not match the expected shape.

    Attributes:
        field_path: Dotted path of the offending field, if known
        expected: Description of the expected type, if known
    """

    def __init__(
        self,
        message: str = "Failed to decode response",
        *,
        field_path: Optional[str] = None,
        expected: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.field_path = field_path
        self.expected = expected


class PagerExhaustedError(CodeEngineClientError):
    """``get_next()`` was called on a pager that has no more pages."""

    def __init__(self, message: str = "No more results available"):
        super().__init__(message)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(CodeEngineClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    network-related issues.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out or the call deadline expired."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# API Errors (non-2xx responses)
# =============================================================================


class APIError(CodeEngineClientError):
    """
    The server answered with a non-2xx status.

    Attributes:
        errors: The ``errors`` list of the response body, if any
        trace: The server trace identifier, if any
    """

    def __init__(
        self,
        message: str = "API error",
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        trace: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.errors = errors or []
        self.trace = trace


class BadRequestError(APIError):
    """The server rejected the request as invalid (400)."""

    def __init__(self, message: str = "Bad request", *, status_code: int = 400, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthenticationError(APIError):
    """Authentication failed or credentials are invalid (401)."""

    def __init__(self, message: str = "Authentication required", *, status_code: int = 401, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthorizationError(APIError):
    """Access denied due to insufficient permissions (403)."""

    def __init__(self, message: str = "Access denied", *, status_code: int = 403, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class NotFoundError(APIError):
    """Requested resource was not found (404)."""

    def __init__(self, message: str = "Resource not found", *, status_code: int = 404, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class ConflictError(APIError):
    """
    Request conflicts with the current state of the resource.

    Raised for 409 and for 412 (``If-Match`` precondition failed). Never
    retried automatically: re-fetch the resource and retry the whole
    operation with its current ``entity_tag``.
    """

    def __init__(self, message: str = "Resource conflict", *, status_code: int = 409, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)

    @property
    def precondition_failed(self) -> bool:
        return self.status_code == 412


class RateLimitError(APIError):
    """
    Rate limit exceeded (429).

    The retry_after attribute indicates how many seconds to wait.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """Server-side error occurred (5xx)."""

    def __init__(self, message: str = "Server error", *, status_code: int = 500, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable (503)."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
    trace: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> APIError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Server error code
        details: Additional error details
        errors: Parsed ``errors`` list from the body
        trace: Server trace identifier
        retry_after: Parsed ``Retry-After`` header (429/503 only)

    Returns:
        Appropriate APIError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else APIError

    kwargs: Dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code,
        "details": details,
        "errors": errors,
        "trace": trace,
    }
    if exception_class in (RateLimitError, ServiceUnavailableError):
        kwargs["retry_after"] = retry_after
    return exception_class(message, **kwargs)
