from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient
from codeengine_client.models.bindings import Binding, BindingList, BindingPrototype
from codeengine_client.options import ListBindingsOptions
from codeengine_client.pager import Pager

_BINDINGS = "/projects/{project_id}/bindings"
_BINDING = _BINDINGS + "/{id}"


class BindingsClient(BaseEndpointClient):
    """
    Client for service binding endpoints.

    Bindings are addressed by id, not by name.
    """

    async def list(
        self,
        options: ListBindingsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> BindingList:
        return await self._call(
            "GET",
            _BINDINGS,
            operation_id="list_bindings",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=BindingList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListBindingsOptions) -> Pager[Binding]:
        return self._pager(self.list, options, "bindings")

    async def create(
        self,
        project_id: str,
        prototype: Union[BindingPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Binding:
        """Bind a service access secret to an app or job."""
        return await self._call(
            "POST",
            _BINDINGS,
            operation_id="create_binding",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=Binding,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get(
        self,
        project_id: str,
        id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Binding:
        return await self._call(
            "GET",
            _BINDING,
            operation_id="get_binding",
            path_params={"project_id": project_id, "id": id},
            headers=headers,
            response_model=Binding,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete(
        self,
        project_id: str,
        id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        await self._call(
            "DELETE",
            _BINDING,
            operation_id="delete_binding",
            path_params={"project_id": project_id, "id": id},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )
