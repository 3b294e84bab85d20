from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.apps import (
    App,
    AppInstance,
    AppInstanceList,
    AppList,
    AppPatch,
    AppPrototype,
    AppRevision,
    AppRevisionList,
)
from codeengine_client.options import (
    ListAppInstancesOptions,
    ListAppRevisionsOptions,
    ListAppsOptions,
)
from codeengine_client.pager import Pager
from codeengine_client.request_builder import CONTENT_TYPE_MERGE_PATCH

_APPS = "/projects/{project_id}/apps"
_APP = _APPS + "/{name}"
_REVISIONS = _APPS + "/{app_name}/revisions"
_REVISION = _REVISIONS + "/{name}"
_INSTANCES = _APPS + "/{app_name}/instances"


class AppsClient(BaseEndpointClient):
    """
    Client for app endpoints, including app revisions and instances.
    """

    async def list(
        self,
        options: ListAppsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> AppList:
        """List the apps of a project (one page)."""
        return await self._call(
            "GET",
            _APPS,
            operation_id="list_apps",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=AppList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListAppsOptions) -> Pager[App]:
        return self._pager(self.list, options, "apps")

    async def create(
        self,
        project_id: str,
        prototype: Union[AppPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> App:
        """Create an app."""
        return await self._call(
            "POST",
            _APPS,
            operation_id="create_app",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=App,
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
    ) -> App:
        return await self._call(
            "GET",
            _APP,
            operation_id="get_app",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=App,
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
            _APP,
            operation_id="delete_app",
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
        patch: Union[AppPatch, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> App:
        """
        Update an app with a merge patch.

        Only the fields set on ``patch`` are sent. A new revision is
        created when the patch changes the app's runtime settings.

        Raises:
            ValidationError: If ``if_match`` is empty
            ConflictError: If the app changed since ``if_match``
        """
        return await self._call(
            "PATCH",
            _APP,
            operation_id="update_app",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=patch,
            content_type=CONTENT_TYPE_MERGE_PATCH,
            response_model=App,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    # =========================================================================
    # Revisions
    # =========================================================================

    async def list_revisions(
        self,
        options: ListAppRevisionsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> AppRevisionList:
        return await self._call(
            "GET",
            _REVISIONS,
            operation_id="list_app_revisions",
            path_params={"project_id": options.project_id, "app_name": options.app_name},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=AppRevisionList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def revisions_pager(self, options: ListAppRevisionsOptions) -> Pager[AppRevision]:
        return self._pager(self.list_revisions, options, "revisions")

    async def get_revision(
        self,
        project_id: str,
        app_name: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> AppRevision:
        return await self._call(
            "GET",
            _REVISION,
            operation_id="get_app_revision",
            path_params={"project_id": project_id, "app_name": app_name, "name": name},
            headers=headers,
            response_model=AppRevision,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete_revision(
        self,
        project_id: str,
        app_name: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        await self._call(
            "DELETE",
            _REVISION,
            operation_id="delete_app_revision",
            path_params={"project_id": project_id, "app_name": app_name, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    # =========================================================================
    # Instances
    # =========================================================================

    async def list_instances(
        self,
        options: ListAppInstancesOptions,
        *,
        deadline: Optional[float] = None,
    ) -> AppInstanceList:
        """List the running instances of an app (one page)."""
        return await self._call(
            "GET",
            _INSTANCES,
            operation_id="list_app_instances",
            path_params={"project_id": options.project_id, "app_name": options.app_name},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=AppInstanceList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def instances_pager(self, options: ListAppInstancesOptions) -> Pager[AppInstance]:
        return self._pager(self.list_instances, options, "instances")
