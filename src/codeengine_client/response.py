"""Response envelope returned by the transport."""

from typing import Any, Mapping, Optional

import httpx


class DetailedResponse:
    """
    Status code, headers and decoded body of one HTTP response.

    ``result`` is the decoded JSON body, or ``None`` when the response had
    no body (e.g. a 202/204 from a delete).
    """

    def __init__(
        self,
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
        result: Any = None,
    ):
        self.status_code = status_code
        self.headers = httpx.Headers(headers or {})
        self.result = result

    def get_result(self) -> Any:
        return self.result

    def get_status_code(self) -> int:
        return self.status_code

    def get_headers(self) -> httpx.Headers:
        return self.headers

    def __repr__(self) -> str:
        return f"DetailedResponse(status_code={self.status_code}, result={self.result!r})"
