from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CodeEngineModel(BaseModel):
    """
    Base class for all API models.

    Every field is optional on the wire. Whether a field was present in a
    response (or set by the caller) is tracked in ``model_fields_set``, so
    an absent field and an explicit ``null`` stay distinguishable.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def is_set(self, field_name: str) -> bool:
        """True if the field was present in the input, even as null."""
        return field_name in self.model_fields_set

    def as_patch(self) -> Dict[str, Any]:
        """JSON body containing exactly the fields that were set."""
        return self.model_dump(mode="json", exclude_unset=True)


class PaginationListNextMetadata(CodeEngineModel):
    href: Optional[str] = Field(None, description="URL of the next page")
    start: Optional[str] = Field(None, description="Token of the next page")


class PaginationListFirstMetadata(CodeEngineModel):
    href: Optional[str] = Field(None, description="URL of the first page")


class ListResponse(CodeEngineModel):
    """Fields shared by every paged list response."""

    first: Optional[PaginationListFirstMetadata] = None
    limit: Optional[int] = Field(None, description="Maximum number of items per page")
    next: Optional[PaginationListNextMetadata] = None


class ResourceModel(CodeEngineModel):
    """Fields shared by project-scoped resources."""

    created_at: Optional[str] = Field(None, description="Creation timestamp")
    entity_tag: Optional[str] = Field(None, description="Version tag used for If-Match")
    href: Optional[str] = Field(None, description="URL of the resource")
    id: Optional[str] = Field(None, description="Resource identifier")
    name: Optional[str] = Field(None, description="Resource name")
    project_id: Optional[str] = Field(None, description="Owning project")
    region: Optional[str] = None
    resource_type: Optional[str] = None


class EnvVar(CodeEngineModel):
    key: Optional[str] = None
    name: Optional[str] = None
    prefix: Optional[str] = None
    reference: Optional[str] = None
    type: Optional[str] = Field(None, description="literal, config_map_full_reference, secret_key_reference, ...")
    value: Optional[str] = None


class VolumeMount(CodeEngineModel):
    mount_path: Optional[str] = None
    name: Optional[str] = None
    reference: Optional[str] = None
    type: Optional[str] = Field(None, description="config_map or secret")


class ProbeSettings(CodeEngineModel):
    failure_threshold: Optional[int] = None
    initial_delay: Optional[int] = None
    interval: Optional[int] = None
    path: Optional[str] = None
    port: Optional[int] = None
    timeout: Optional[int] = None
    type: Optional[str] = Field(None, description="tcp or http")


class ComponentRef(CodeEngineModel):
    name: Optional[str] = None
    resource_type: Optional[str] = Field(None, description="app_v2, job_v2, ...")


class RunSpec(CodeEngineModel):
    """Runtime settings shared by apps, jobs and their runs."""

    image_port: Optional[int] = None
    image_reference: Optional[str] = None
    image_secret: Optional[str] = None
    run_arguments: Optional[List[str]] = None
    run_as_user: Optional[int] = None
    run_commands: Optional[List[str]] = None
    run_env_variables: Optional[List[EnvVar]] = None
    run_service_account: Optional[str] = None
    run_volume_mounts: Optional[List[VolumeMount]] = None
    scale_cpu_limit: Optional[str] = None
    scale_ephemeral_storage_limit: Optional[str] = None
    scale_memory_limit: Optional[str] = None
