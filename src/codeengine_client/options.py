"""
Options for list operations.

One model per list operation. Required parameters are required fields, so
a missing project or parent name fails at construction time rather than
when the request is built. ``start`` is normally left alone: the pager
fills it from the previous page.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ListOptions(BaseModel):
    """Paging parameters shared by every list operation."""

    model_config = ConfigDict(extra="forbid")

    limit: Optional[int] = Field(None, description="Maximum number of items per page")
    start: Optional[str] = Field(None, description="Token of the page to fetch")
    headers: Optional[Dict[str, str]] = Field(None, description="Extra request headers")
    refresh_token: Optional[str] = Field(None, description="Sent as the Refresh-Token header")

    def query_params(self) -> Dict[str, Any]:
        return {"limit": self.limit, "start": self.start}


class ListProjectsOptions(ListOptions):
    pass


class ListReclamationsOptions(ListOptions):
    pass


class ProjectListOptions(ListOptions):
    """List options for resources that live inside a project."""

    project_id: str


class ListAllowedOutboundDestinationsOptions(ProjectListOptions):
    pass


class ListAppsOptions(ProjectListOptions):
    pass


class ListAppRevisionsOptions(ProjectListOptions):
    app_name: str


class ListAppInstancesOptions(ProjectListOptions):
    app_name: str


class ListJobsOptions(ProjectListOptions):
    pass


class ListJobRunsOptions(ProjectListOptions):
    job_name: Optional[str] = Field(None, description="Only runs of this job")

    def query_params(self) -> Dict[str, Any]:
        params = super().query_params()
        params["job_name"] = self.job_name
        return params


class ListBuildsOptions(ProjectListOptions):
    pass


class ListBuildRunsOptions(ProjectListOptions):
    build_name: Optional[str] = Field(None, description="Only runs of this build")

    def query_params(self) -> Dict[str, Any]:
        params = super().query_params()
        params["build_name"] = self.build_name
        return params


class ListBindingsOptions(ProjectListOptions):
    pass


class ListConfigMapsOptions(ProjectListOptions):
    pass


class ListSecretsOptions(ProjectListOptions):
    pass


class ListDomainMappingsOptions(ProjectListOptions):
    pass
