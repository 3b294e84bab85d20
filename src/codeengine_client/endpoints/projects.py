from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient
from codeengine_client.models.projects import (
    Project,
    ProjectEgressIPAddresses,
    ProjectList,
    ProjectPrototype,
    ProjectStatusDetails,
)
from codeengine_client.options import ListProjectsOptions
from codeengine_client.pager import Pager


class ProjectsClient(BaseEndpointClient):
    """
    Client for project endpoints.
    """

    async def list(
        self,
        options: Optional[ListProjectsOptions] = None,
        *,
        deadline: Optional[float] = None,
    ) -> ProjectList:
        """List all projects of the account (one page)."""
        options = options or ListProjectsOptions()
        return await self._call(
            "GET",
            "/projects",
            operation_id="list_projects",
            query_params=options.query_params(),
            headers=options.headers,
            response_model=ProjectList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: Optional[ListProjectsOptions] = None) -> Pager[Project]:
        """Pager over all projects."""
        return self._pager(self.list, options or ListProjectsOptions(), "projects")

    async def create(
        self,
        prototype: Union[ProjectPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Project:
        """Create a project."""
        return await self._call(
            "POST",
            "/projects",
            operation_id="create_project",
            body=prototype,
            headers=headers,
            response_model=Project,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Project:
        """Get a project."""
        return await self._call(
            "GET",
            "/projects/{project_id}",
            operation_id="get_project",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=Project,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        """Delete a project. Deletion is asynchronous on the server."""
        await self._call(
            "DELETE",
            "/projects/{project_id}",
            operation_id="delete_project",
            path_params={"project_id": project_id},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get_egress_ips(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> ProjectEgressIPAddresses:
        """Get the egress IP addresses of a project."""
        return await self._call(
            "GET",
            "/projects/{project_id}/egress_ips",
            operation_id="get_project_egress_ips",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=ProjectEgressIPAddresses,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get_status_details(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> ProjectStatusDetails:
        """Get the status details of a project."""
        return await self._call(
            "GET",
            "/projects/{project_id}/status_details",
            operation_id="get_project_status_details",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=ProjectStatusDetails,
            refresh_token=refresh_token,
            deadline=deadline,
        )
