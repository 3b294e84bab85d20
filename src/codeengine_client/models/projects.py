from typing import List, Optional

from pydantic import Field

from codeengine_client.models.base import CodeEngineModel, ListResponse


class Project(CodeEngineModel):
    account_id: Optional[str] = None
    created_at: Optional[str] = Field(None, description="Creation timestamp")
    crn: Optional[str] = None
    href: Optional[str] = None
    id: Optional[str] = Field(None, description="Project identifier")
    name: Optional[str] = None
    region: Optional[str] = None
    resource_group_id: Optional[str] = None
    resource_type: Optional[str] = None
    status: Optional[str] = Field(None, description="active, creating, deleting, ...")
    reason: Optional[str] = Field(None, description="Reason for the current status")
    details: Optional[str] = None


class ProjectList(ListResponse):
    projects: Optional[List[Project]] = None


class ProjectPrototype(CodeEngineModel):
    name: str
    resource_group_id: Optional[str] = None
    tags: Optional[List[str]] = None


class ProjectEgressIPAddresses(CodeEngineModel):
    private: Optional[List[str]] = None
    public: Optional[List[str]] = None


class ProjectStatusDetails(CodeEngineModel):
    domain: Optional[str] = Field(None, description="ready or unknown")
    project: Optional[str] = Field(None, description="enabled or disabled")
    vpe_not_enabled: Optional[bool] = None
