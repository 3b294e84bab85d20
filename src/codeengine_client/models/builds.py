from typing import List, Optional

from pydantic import Field

from codeengine_client.models.base import CodeEngineModel, ListResponse, ResourceModel


class _BuildSettings(CodeEngineModel):
    output_image: Optional[str] = None
    output_secret: Optional[str] = None
    source_context_dir: Optional[str] = None
    source_revision: Optional[str] = None
    source_secret: Optional[str] = None
    source_type: Optional[str] = Field(None, description="git or local")
    source_url: Optional[str] = None
    strategy_size: Optional[str] = Field(None, description="small, medium, large, ...")
    strategy_spec_file: Optional[str] = None
    strategy_type: Optional[str] = Field(None, description="dockerfile or buildpacks")
    timeout: Optional[int] = None


class BuildStatus(CodeEngineModel):
    reason: Optional[str] = None


class Build(ResourceModel, _BuildSettings):
    status: Optional[str] = None
    status_details: Optional[BuildStatus] = None


class BuildList(ListResponse):
    builds: Optional[List[Build]] = None


class BuildPrototype(_BuildSettings):
    name: str
    output_image: str
    output_secret: str
    strategy_type: str


class BuildPatch(_BuildSettings):
    """Merge-patch body for a build."""


class BuildRunStatus(CodeEngineModel):
    completion_time: Optional[str] = None
    output_digest: Optional[str] = None
    reason: Optional[str] = None
    source_timestamp: Optional[str] = None
    start_time: Optional[str] = None


class BuildRun(ResourceModel, _BuildSettings):
    build_name: Optional[str] = None
    service_account: Optional[str] = None
    status: Optional[str] = Field(None, description="pending, running, succeeded, failed")
    status_details: Optional[BuildRunStatus] = None


class BuildRunList(ListResponse):
    build_runs: Optional[List[BuildRun]] = None


class BuildRunPrototype(_BuildSettings):
    build_name: Optional[str] = None
    name: Optional[str] = None
    service_account: Optional[str] = None
