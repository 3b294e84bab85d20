from typing import List, Optional

from codeengine_client.models.base import ComponentRef, CodeEngineModel, ListResponse
from codeengine_client.models.secrets import ServiceInstanceRef


class Binding(CodeEngineModel):
    component: Optional[ComponentRef] = None
    href: Optional[str] = None
    id: Optional[str] = None
    prefix: Optional[str] = None
    project_id: Optional[str] = None
    resource_type: Optional[str] = None
    secret_name: Optional[str] = None
    status: Optional[str] = None


class BindingList(ListResponse):
    bindings: Optional[List[Binding]] = None


class BindingPrototype(CodeEngineModel):
    component: ComponentRef
    prefix: str
    secret_name: str


__all__ = ["Binding", "BindingList", "BindingPrototype", "ServiceInstanceRef"]
