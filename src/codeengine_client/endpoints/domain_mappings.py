from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.domain_mappings import (
    DomainMapping,
    DomainMappingList,
    DomainMappingPatch,
    DomainMappingPrototype,
)
from codeengine_client.options import ListDomainMappingsOptions
from codeengine_client.pager import Pager
from codeengine_client.request_builder import CONTENT_TYPE_MERGE_PATCH

_DOMAIN_MAPPINGS = "/projects/{project_id}/domain_mappings"
_DOMAIN_MAPPING = _DOMAIN_MAPPINGS + "/{name}"


class DomainMappingsClient(BaseEndpointClient):
    """
    Client for domain mapping endpoints.

    A domain mapping routes a custom domain (its ``name``) to an app.
    """

    async def list(
        self,
        options: ListDomainMappingsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> DomainMappingList:
        return await self._call(
            "GET",
            _DOMAIN_MAPPINGS,
            operation_id="list_domain_mappings",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=DomainMappingList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListDomainMappingsOptions) -> Pager[DomainMapping]:
        return self._pager(self.list, options, "domain_mappings")

    async def create(
        self,
        project_id: str,
        prototype: Union[DomainMappingPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> DomainMapping:
        return await self._call(
            "POST",
            _DOMAIN_MAPPINGS,
            operation_id="create_domain_mapping",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=DomainMapping,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> DomainMapping:
        return await self._call(
            "GET",
            _DOMAIN_MAPPING,
            operation_id="get_domain_mapping",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=DomainMapping,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        await self._call(
            "DELETE",
            _DOMAIN_MAPPING,
            operation_id="delete_domain_mapping",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def update(
        self,
        project_id: str,
        name: str,
        if_match: str,
        patch: Union[DomainMappingPatch, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> DomainMapping:
        """Point a domain mapping at another component or TLS secret."""
        return await self._call(
            "PATCH",
            _DOMAIN_MAPPING,
            operation_id="update_domain_mapping",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=patch,
            content_type=CONTENT_TYPE_MERGE_PATCH,
            response_model=DomainMapping,
            refresh_token=refresh_token,
            deadline=deadline,
        )
