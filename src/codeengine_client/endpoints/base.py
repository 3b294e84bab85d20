"""
Base class for endpoint clients.

Every operation goes through ``_call``: build the request, send it, decode
the result. List operations additionally get a pager factory.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from codeengine_client.decoder import decode
from codeengine_client.exceptions import ValidationError
from codeengine_client.http import AsyncHTTPClient
from codeengine_client.options import ListOptions
from codeengine_client.pager import FetchPage, Pager
from codeengine_client.request_builder import CONTENT_TYPE_JSON, RequestBuilder

T = TypeVar("T")

HEADER_REFRESH_TOKEN = "Refresh-Token"


def require_if_match(if_match: Optional[str]) -> str:
    """Return ``if_match`` or raise if it is missing or empty."""
    if not if_match:
        raise ValidationError(
            "if_match is required; pass the entity_tag of the resource",
            field_errors={"if_match": "This parameter is required"},
        )
    return if_match


class BaseEndpointClient:
    """
    Base class for all endpoint clients.

    Provides the request pipeline shared by all operations.
    """

    def __init__(self, http_client: AsyncHTTPClient, builder: RequestBuilder):
        """
        Initialize the endpoint client.

        Args:
            http_client: Transport used to send requests
            builder: Request builder of the owning client
        """
        self._http = http_client
        self._builder = builder

    async def _call(
        self,
        method: str,
        url_template: str,
        *,
        operation_id: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        response_model: Optional[Type[T]] = None,
        content_type: str = CONTENT_TYPE_JSON,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Optional[T]:
        """
        Build, send and decode one operation.

        ``refresh_token`` (the IAM refresh token of the account) is sent as
        the ``Refresh-Token`` header, replacing one given in ``headers``.

        Returns:
            The decoded result, or None when ``response_model`` is None
        """
        if refresh_token is not None:
            headers = {
                **{k: v for k, v in (headers or {}).items() if k.lower() != HEADER_REFRESH_TOKEN.lower()},
                HEADER_REFRESH_TOKEN: refresh_token,
            }
        spec = self._builder.build(
            method,
            url_template,
            path_params,
            query_params,
            headers,
            body,
            operation_id=operation_id,
            content_type=content_type,
            accept=CONTENT_TYPE_JSON if response_model is not None else None,
            idempotent=idempotent,
        )
        response = await self._http.send(spec, deadline=deadline)
        if response_model is None:
            return None
        return decode(response.get_result(), response_model)

    def _pager(
        self,
        fetch_page: FetchPage,
        options: ListOptions,
        items_field: str,
        start: Optional[str] = None,
    ) -> Pager:
        return Pager(fetch_page, options, items_field, start=start)
