from typing import List, Optional

from pydantic import Field

from codeengine_client.models.base import CodeEngineModel, ListResponse


class Reclamation(CodeEngineModel):
    """A soft-deleted project awaiting reclaim or restore."""

    account_id: Optional[str] = None
    created_at: Optional[str] = None
    details: Optional[str] = None
    href: Optional[str] = None
    id: Optional[str] = None
    project_id: Optional[str] = None
    reason: Optional[str] = None
    region: Optional[str] = None
    resource_group_id: Optional[str] = None
    resource_type: Optional[str] = None
    status: Optional[str] = None
    target_time: Optional[str] = Field(None, description="When the project will be hard deleted")


class ReclamationList(ListResponse):
    reclamations: Optional[List[Reclamation]] = None
