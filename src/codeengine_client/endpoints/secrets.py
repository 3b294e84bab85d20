from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.secrets import Secret, SecretList, SecretPrototype, SecretReplace
from codeengine_client.options import ListSecretsOptions
from codeengine_client.pager import Pager

_SECRETS = "/projects/{project_id}/secrets"
_SECRET = _SECRETS + "/{name}"


class SecretsClient(BaseEndpointClient):
    """
    Client for secret endpoints.

    Secret ``data`` is decoded according to the secret's ``format``.
    """

    async def list(
        self,
        options: ListSecretsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> SecretList:
        return await self._call(
            "GET",
            _SECRETS,
            operation_id="list_secrets",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=SecretList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListSecretsOptions) -> Pager[Secret]:
        return self._pager(self.list, options, "secrets")

    async def create(
        self,
        project_id: str,
        prototype: Union[SecretPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Secret:
        return await self._call(
            "POST",
            _SECRETS,
            operation_id="create_secret",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=Secret,
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
    ) -> Secret:
        return await self._call(
            "GET",
            _SECRET,
            operation_id="get_secret",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=Secret,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def replace(
        self,
        project_id: str,
        name: str,
        if_match: str,
        data: Union[SecretReplace, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Secret:
        """Replace the data of a secret. ``if_match`` must not be empty."""
        return await self._call(
            "PUT",
            _SECRET,
            operation_id="replace_secret",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=data,
            response_model=Secret,
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
            _SECRET,
            operation_id="delete_secret",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )
