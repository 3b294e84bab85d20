from typing import Dict, List, Optional

from codeengine_client.models.base import CodeEngineModel, ListResponse, ResourceModel


class ConfigMap(ResourceModel):
    data: Optional[Dict[str, str]] = None
    immutable: Optional[bool] = None


class ConfigMapList(ListResponse):
    configmaps: Optional[List[ConfigMap]] = None


class ConfigMapPrototype(CodeEngineModel):
    name: str
    data: Optional[Dict[str, str]] = None
    immutable: Optional[bool] = None


class ConfigMapReplace(CodeEngineModel):
    """Body of a PUT; the new data replaces the old data entirely."""

    data: Optional[Dict[str, str]] = None
