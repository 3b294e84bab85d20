from typing import List, Optional

from pydantic import Field

from codeengine_client.models.base import CodeEngineModel, ListResponse, ResourceModel, RunSpec


class _JobSettings(RunSpec):
    run_mode: Optional[str] = Field(None, description="task or daemon")
    scale_array_spec: Optional[str] = Field(None, description='Array indices, e.g. "0-5,7"')
    scale_max_execution_time: Optional[int] = None
    scale_retry_limit: Optional[int] = None


class Job(ResourceModel, _JobSettings):
    build: Optional[str] = None
    build_run: Optional[str] = None


class JobList(ListResponse):
    jobs: Optional[List[Job]] = None


class JobPrototype(_JobSettings):
    name: str
    image_reference: str


class JobPatch(_JobSettings):
    """Merge-patch body for a job."""


class JobRunStatus(CodeEngineModel):
    completion_time: Optional[str] = None
    failed: Optional[int] = None
    indices_failed: Optional[str] = None
    indices_pending: Optional[str] = None
    indices_running: Optional[str] = None
    indices_succeeded: Optional[str] = None
    indices_unknown: Optional[str] = None
    pending: Optional[int] = None
    requested: Optional[int] = None
    running: Optional[int] = None
    start_time: Optional[str] = None
    succeeded: Optional[int] = None
    unknown: Optional[int] = None


class JobRun(ResourceModel, _JobSettings):
    job_name: Optional[str] = None
    scale_array_size_variable_override: Optional[int] = None
    status: Optional[str] = Field(None, description="pending, running, completed, failed")
    status_details: Optional[JobRunStatus] = None


class JobRunList(ListResponse):
    job_runs: Optional[List[JobRun]] = None


class JobRunPrototype(_JobSettings):
    """
    Body for submitting a job run.

    Either reference an existing job with ``job_name`` or describe the
    workload inline with ``image_reference``.
    """

    job_name: Optional[str] = None
    name: Optional[str] = None
    scale_array_size_variable_override: Optional[int] = None
