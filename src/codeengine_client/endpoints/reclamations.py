from typing import Dict, Optional

from codeengine_client.endpoints.base import BaseEndpointClient
from codeengine_client.models.reclamations import Reclamation, ReclamationList
from codeengine_client.options import ListReclamationsOptions
from codeengine_client.pager import Pager


class ReclamationsClient(BaseEndpointClient):
    """
    Client for reclamation endpoints.

    A deleted project is kept as a reclamation until its target time; it
    can be restored until then or reclaimed (hard-deleted) right away.
    """

    async def list(
        self,
        options: Optional[ListReclamationsOptions] = None,
        *,
        deadline: Optional[float] = None,
    ) -> ReclamationList:
        """List reclamations (one page)."""
        options = options or ListReclamationsOptions()
        return await self._call(
            "GET",
            "/reclamations",
            operation_id="list_reclamations",
            query_params=options.query_params(),
            headers=options.headers,
            response_model=ReclamationList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: Optional[ListReclamationsOptions] = None) -> Pager[Reclamation]:
        return self._pager(self.list, options or ListReclamationsOptions(), "reclamations")

    async def get(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Reclamation:
        """Get the reclamation of a deleted project."""
        return await self._call(
            "GET",
            "/reclamations/{project_id}",
            operation_id="get_reclamation",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=Reclamation,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def reclaim(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Reclamation:
        """Permanently delete a project held as reclamation."""
        return await self._call(
            "POST",
            "/reclamations/{project_id}/reclaim",
            operation_id="reclaim_reclamation",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=Reclamation,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def restore(
        self,
        project_id: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Reclamation:
        """Restore a deleted project."""
        return await self._call(
            "POST",
            "/reclamations/{project_id}/restore",
            operation_id="restore_reclamation",
            path_params={"project_id": project_id},
            headers=headers,
            response_model=Reclamation,
            refresh_token=refresh_token,
            deadline=deadline,
        )
