"""
Request construction.

Turns an operation description (method, URL template, path/query
parameters, headers, body) into a ``RequestSpec`` that the transport can
send. Building is pure: nothing here touches the network.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from codeengine_client.common import get_sdk_headers
from codeengine_client.decoder import encode
from codeengine_client.exceptions import ValidationError

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MERGE_PATCH = "application/merge-patch+json"

SERVICE_VERSION = "V2"

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


@dataclass
class RequestSpec:
    """Everything needed to send one HTTP request."""

    method: str
    url_template: str
    path: str
    path_params: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, str] = field(default_factory=dict)
    # Set by the caller of the operation
    headers: Dict[str, str] = field(default_factory=dict)
    # SDK identification and content negotiation; only fill gaps
    sdk_headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    operation_id: Optional[str] = None
    # None: decided by the retry policy from the method
    idempotent: Optional[bool] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def merged_headers(self, default_headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Headers to send: call headers, then client defaults, then SDK headers.
        """
        return merge_headers(self.headers, default_headers, self.sdk_headers)


def resolve_path(url_template: str, path_params: Optional[Mapping[str, Any]]) -> str:
    """
    Substitute ``{name}`` placeholders in a URL template.

    Every placeholder needs a non-empty value; values are percent-encoded
    so they always stay a single path segment.

    Raises:
        ValidationError: If a placeholder has no value
    """
    path_params = path_params or {}
    missing = {}
    for name in _PLACEHOLDER.findall(url_template):
        value = path_params.get(name)
        if value is None or str(value) == "":
            missing[name] = "This path parameter is required"
    if missing:
        raise ValidationError(
            f"Missing required path parameter(s): {', '.join(sorted(missing))}",
            field_errors=missing,
        )

    def substitute(match: "re.Match[str]") -> str:
        return quote(str(path_params[match.group(1)]), safe="")

    return _PLACEHOLDER.sub(substitute, url_template)


def clean_query_params(query_params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop ``None`` values and render the rest as strings."""
    params: Dict[str, str] = {}
    for name, value in (query_params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[name] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            params[name] = ",".join(str(v) for v in value)
        else:
            params[name] = str(value)
    return params


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge header layers where earlier layers win.

    Header names compare case-insensitively, so a caller-supplied
    ``accept`` is not overridden by a later ``Accept``.
    """
    merged: Dict[str, str] = {}
    seen = set()
    for layer in layers:
        for name, value in (layer or {}).items():
            if value is None or name.lower() in seen:
                continue
            seen.add(name.lower())
            merged[name] = value
    return merged


class RequestBuilder:
    """Builds ``RequestSpec`` objects for one service."""

    def __init__(self, service_name: str, service_version: str = SERVICE_VERSION):
        self.service_name = service_name
        self.service_version = service_version

    def build(
        self,
        method: str,
        url_template: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        *,
        operation_id: Optional[str] = None,
        content_type: str = CONTENT_TYPE_JSON,
        accept: Optional[str] = CONTENT_TYPE_JSON,
        idempotent: Optional[bool] = None,
    ) -> RequestSpec:
        """
        Build a request.

        Args:
            method: HTTP method
            url_template: Path template, e.g. "/projects/{project_id}/apps"
            path_params: Values for the template placeholders
            query_params: Query parameters; ``None`` values are omitted
            headers: Caller headers; these always win over SDK headers
            body: JSON body (dict or pydantic model)
            operation_id: Operation name for the analytics header
            content_type: Content type used when there is a body
            accept: Accept header, or None to send none
            idempotent: Override retry eligibility for this request

        Returns:
            The request spec

        Raises:
            ValidationError: If a path parameter is missing or empty
        """
        path = resolve_path(url_template, path_params)

        negotiation: Dict[str, str] = {}
        if accept:
            negotiation["Accept"] = accept
        if body is not None:
            negotiation["Content-Type"] = content_type

        return RequestSpec(
            method=method.upper(),
            url_template=url_template,
            path=path,
            path_params={k: str(v) for k, v in (path_params or {}).items() if v is not None},
            query_params=clean_query_params(query_params),
            headers=merge_headers(headers),
            sdk_headers=merge_headers(
                get_sdk_headers(self.service_name, self.service_version, operation_id),
                negotiation,
            ),
            body=encode(body),
            operation_id=operation_id,
            idempotent=idempotent,
        )
