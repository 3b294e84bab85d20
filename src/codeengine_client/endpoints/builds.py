from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.builds import (
    Build,
    BuildList,
    BuildPatch,
    BuildPrototype,
    BuildRun,
    BuildRunList,
    BuildRunPrototype,
)
from codeengine_client.options import ListBuildRunsOptions, ListBuildsOptions
from codeengine_client.pager import Pager
from codeengine_client.request_builder import CONTENT_TYPE_MERGE_PATCH

_BUILDS = "/projects/{project_id}/builds"
_BUILD = _BUILDS + "/{name}"
_RUNS = "/projects/{project_id}/build_runs"
_RUN = _RUNS + "/{name}"


class BuildsClient(BaseEndpointClient):
    """
    Client for build and build run endpoints.
    """

    async def list(
        self,
        options: ListBuildsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> BuildList:
        """List the build definitions of a project (one page)."""
        return await self._call(
            "GET",
            _BUILDS,
            operation_id="list_builds",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=BuildList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListBuildsOptions) -> Pager[Build]:
        return self._pager(self.list, options, "builds")

    async def create(
        self,
        project_id: str,
        prototype: Union[BuildPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Build:
        return await self._call(
            "POST",
            _BUILDS,
            operation_id="create_build",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=Build,
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
    ) -> Build:
        return await self._call(
            "GET",
            _BUILD,
            operation_id="get_build",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=Build,
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
            _BUILD,
            operation_id="delete_build",
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
        patch: Union[BuildPatch, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Build:
        """Update a build with a merge patch."""
        return await self._call(
            "PATCH",
            _BUILD,
            operation_id="update_build",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=patch,
            content_type=CONTENT_TYPE_MERGE_PATCH,
            response_model=Build,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    # =========================================================================
    # Build runs
    # =========================================================================

    async def list_runs(
        self,
        options: ListBuildRunsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> BuildRunList:
        """List build runs, optionally only those of ``options.build_name``."""
        return await self._call(
            "GET",
            _RUNS,
            operation_id="list_build_runs",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=BuildRunList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def runs_pager(self, options: ListBuildRunsOptions) -> Pager[BuildRun]:
        return self._pager(self.list_runs, options, "build_runs")

    async def create_run(
        self,
        project_id: str,
        prototype: Union[BuildRunPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> BuildRun:
        """Start a build run, from a build definition or inline settings."""
        return await self._call(
            "POST",
            _RUNS,
            operation_id="create_build_run",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=BuildRun,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get_run(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> BuildRun:
        return await self._call(
            "GET",
            _RUN,
            operation_id="get_build_run",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=BuildRun,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete_run(
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
            _RUN,
            operation_id="delete_build_run",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )
