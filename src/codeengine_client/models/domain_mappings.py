from typing import List, Optional

from pydantic import Field

from codeengine_client.models.base import ComponentRef, CodeEngineModel, ListResponse, ResourceModel


class DomainMappingStatus(CodeEngineModel):
    reason: Optional[str] = None


class DomainMapping(ResourceModel):
    cname_target: Optional[str] = None
    component: Optional[ComponentRef] = None
    status: Optional[str] = None
    status_details: Optional[DomainMappingStatus] = None
    tls_secret: Optional[str] = None
    user_managed: Optional[bool] = None
    visibility: Optional[str] = Field(None, description="public, private or custom")


class DomainMappingList(ListResponse):
    domain_mappings: Optional[List[DomainMapping]] = None


class DomainMappingPrototype(CodeEngineModel):
    component: ComponentRef
    name: str
    tls_secret: str


class DomainMappingPatch(CodeEngineModel):
    component: Optional[ComponentRef] = None
    tls_secret: Optional[str] = None
