from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.config_maps import (
    ConfigMap,
    ConfigMapList,
    ConfigMapPrototype,
    ConfigMapReplace,
)
from codeengine_client.options import ListConfigMapsOptions
from codeengine_client.pager import Pager

_CONFIG_MAPS = "/projects/{project_id}/configmaps"
_CONFIG_MAP = _CONFIG_MAPS + "/{name}"


class ConfigMapsClient(BaseEndpointClient):
    """
    Client for config map endpoints.
    """

    async def list(
        self,
        options: ListConfigMapsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> ConfigMapList:
        """List the config maps of a project (one page)."""
        return await self._call(
            "GET",
            _CONFIG_MAPS,
            operation_id="list_config_maps",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=ConfigMapList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListConfigMapsOptions) -> Pager[ConfigMap]:
        return self._pager(self.list, options, "configmaps")

    async def create(
        self,
        project_id: str,
        prototype: Union[ConfigMapPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> ConfigMap:
        return await self._call(
            "POST",
            _CONFIG_MAPS,
            operation_id="create_config_map",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=ConfigMap,
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
    ) -> ConfigMap:
        return await self._call(
            "GET",
            _CONFIG_MAP,
            operation_id="get_config_map",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=ConfigMap,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def replace(
        self,
        project_id: str,
        name: str,
        if_match: str,
        data: Union[ConfigMapReplace, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> ConfigMap:
        """
        Replace the data of a config map.

        Args:
            project_id: Project of the config map
            name: Config map name
            if_match: Entity tag of the version being replaced, or "*"
            data: The new content

        Raises:
            ValidationError: If ``if_match`` is empty
            ConflictError: If the config map changed since ``if_match``
        """
        return await self._call(
            "PUT",
            _CONFIG_MAP,
            operation_id="replace_config_map",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=data,
            response_model=ConfigMap,
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
            _CONFIG_MAP,
            operation_id="delete_config_map",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )
