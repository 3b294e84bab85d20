"""
Applications, their revisions and their running instances.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from codeengine_client.models.base import (
    CodeEngineModel,
    ListResponse,
    ProbeSettings,
    ResourceModel,
    RunSpec,
)


class AppStatus(CodeEngineModel):
    latest_created_revision: Optional[str] = None
    latest_ready_revision: Optional[str] = None
    reason: Optional[str] = None


class _AppSettings(RunSpec):
    """Fields accepted on create, patch and returned on read."""

    managed_domain_mappings: Optional[str] = Field(
        None, description="local, local_private, local_public"
    )
    probe_liveness: Optional[ProbeSettings] = None
    probe_readiness: Optional[ProbeSettings] = None
    scale_concurrency: Optional[int] = None
    scale_concurrency_target: Optional[int] = None
    scale_down_delay: Optional[int] = None
    scale_initial_instances: Optional[int] = None
    scale_max_instances: Optional[int] = None
    scale_min_instances: Optional[int] = None
    scale_request_timeout: Optional[int] = None


class App(ResourceModel, _AppSettings):
    build: Optional[str] = None
    build_run: Optional[str] = None
    endpoint: Optional[str] = None
    endpoint_internal: Optional[str] = None
    status: Optional[str] = Field(None, description="ready, deploying, failed, ...")
    status_details: Optional[AppStatus] = None


class AppList(ListResponse):
    apps: Optional[List[App]] = None


class AppPrototype(_AppSettings):
    name: str
    image_reference: str


class AppPatch(_AppSettings):
    """
    Merge-patch body for an app.

    Only the fields that were set are sent; set a field to ``None`` to
    clear it on the server.
    """


class AppRevisionStatus(CodeEngineModel):
    actual_instances: Optional[int] = None
    reason: Optional[str] = None


class AppRevision(ResourceModel, _AppSettings):
    app_name: Optional[str] = None
    status: Optional[str] = None
    status_details: Optional[AppRevisionStatus] = None


class AppRevisionList(ListResponse):
    revisions: Optional[List[AppRevision]] = None


class ContainerStatus(CodeEngineModel):
    current_state: Optional[Dict[str, Any]] = None
    last_observed_state: Optional[Dict[str, Any]] = None


class AppInstance(CodeEngineModel):
    app_name: Optional[str] = None
    created_at: Optional[str] = None
    href: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    region: Optional[str] = None
    resource_type: Optional[str] = None
    restarts: Optional[int] = None
    revision_name: Optional[str] = None
    scale_cpu_limit: Optional[str] = None
    scale_ephemeral_storage_limit: Optional[str] = None
    scale_memory_limit: Optional[str] = None
    status: Optional[str] = None
    system_container: Optional[ContainerStatus] = None
    user_container: Optional[ContainerStatus] = None


class AppInstanceList(ListResponse):
    instances: Optional[List[AppInstance]] = None
