from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.allowed_outbound_destinations import (
    AllowedOutboundDestination,
    AllowedOutboundDestinationList,
    AllowedOutboundDestinationPatch,
    AllowedOutboundDestinationPrototype,
)
from codeengine_client.options import ListAllowedOutboundDestinationsOptions
from codeengine_client.pager import Pager
from codeengine_client.request_builder import CONTENT_TYPE_MERGE_PATCH

_COLLECTION = "/projects/{project_id}/allowed_outbound_destinations"
_ITEM = _COLLECTION + "/{name}"


class AllowedOutboundDestinationsClient(BaseEndpointClient):
    """
    Client for allowed outbound destination endpoints.

    Results decode into the variant matching their ``type``; unrecognized
    types decode into ``UnknownAllowedOutboundDestination``.
    """

    async def list(
        self,
        options: ListAllowedOutboundDestinationsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> AllowedOutboundDestinationList:
        return await self._call(
            "GET",
            _COLLECTION,
            operation_id="list_allowed_outbound_destinations",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=AllowedOutboundDestinationList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListAllowedOutboundDestinationsOptions) -> Pager[AllowedOutboundDestination]:
        return self._pager(self.list, options, "allowed_outbound_destinations")

    async def create(
        self,
        project_id: str,
        prototype: Union[AllowedOutboundDestinationPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> AllowedOutboundDestination:
        return await self._call(
            "POST",
            _COLLECTION,
            operation_id="create_allowed_outbound_destination",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=AllowedOutboundDestination,
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
    ) -> AllowedOutboundDestination:
        return await self._call(
            "GET",
            _ITEM,
            operation_id="get_allowed_outbound_destination",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=AllowedOutboundDestination,
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
            _ITEM,
            operation_id="delete_allowed_outbound_destination",
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
        patch: Union[AllowedOutboundDestinationPatch, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> AllowedOutboundDestination:
        """
        Update a destination with a merge patch.

        Args:
            project_id: Project of the destination
            name: Destination name
            if_match: Entity tag of the version being updated, or "*"
            patch: Fields to change

        Raises:
            ValidationError: If ``if_match`` is empty
            ConflictError: If the destination changed since ``if_match``
        """
        return await self._call(
            "PATCH",
            _ITEM,
            operation_id="update_allowed_outbound_destination",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=patch,
            content_type=CONTENT_TYPE_MERGE_PATCH,
            response_model=AllowedOutboundDestination,
            refresh_token=refresh_token,
            deadline=deadline,
        )
