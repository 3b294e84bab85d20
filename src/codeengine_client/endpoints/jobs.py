from typing import Any, Dict, Optional, Union

from codeengine_client.endpoints.base import BaseEndpointClient, require_if_match
from codeengine_client.models.jobs import (
    Job,
    JobList,
    JobPatch,
    JobPrototype,
    JobRun,
    JobRunList,
    JobRunPrototype,
)
from codeengine_client.options import ListJobRunsOptions, ListJobsOptions
from codeengine_client.pager import Pager
from codeengine_client.request_builder import CONTENT_TYPE_MERGE_PATCH

_JOBS = "/projects/{project_id}/jobs"
_JOB = _JOBS + "/{name}"
_RUNS = "/projects/{project_id}/job_runs"
_RUN = _RUNS + "/{name}"


class JobsClient(BaseEndpointClient):
    """
    Client for job and job run endpoints.
    """

    async def list(
        self,
        options: ListJobsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> JobList:
        """List the jobs of a project (one page)."""
        return await self._call(
            "GET",
            _JOBS,
            operation_id="list_jobs",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=JobList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def pager(self, options: ListJobsOptions) -> Pager[Job]:
        return self._pager(self.list, options, "jobs")

    async def create(
        self,
        project_id: str,
        prototype: Union[JobPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Job:
        return await self._call(
            "POST",
            _JOBS,
            operation_id="create_job",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=Job,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Job:
        return await self._call(
            "GET",
            _JOB,
            operation_id="get_job",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=Job,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        await self._call(
            "DELETE",
            _JOB,
            operation_id="delete_job",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def update(
        self,
        project_id: str,
        name: str,
        if_match: str,
        patch: Union[JobPatch, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> Job:
        """Update a job with a merge patch."""
        return await self._call(
            "PATCH",
            _JOB,
            operation_id="update_job",
            path_params={"project_id": project_id, "name": name},
            headers={**(headers or {}), "If-Match": require_if_match(if_match)},
            body=patch,
            content_type=CONTENT_TYPE_MERGE_PATCH,
            response_model=Job,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    # =========================================================================
    # Job runs
    # =========================================================================

    async def list_runs(
        self,
        options: ListJobRunsOptions,
        *,
        deadline: Optional[float] = None,
    ) -> JobRunList:
        """List job runs, optionally only those of ``options.job_name``."""
        return await self._call(
            "GET",
            _RUNS,
            operation_id="list_job_runs",
            path_params={"project_id": options.project_id},
            query_params=options.query_params(),
            headers=options.headers,
            response_model=JobRunList,
            refresh_token=options.refresh_token,
            deadline=deadline,
        )

    def runs_pager(self, options: ListJobRunsOptions) -> Pager[JobRun]:
        return self._pager(self.list_runs, options, "job_runs")

    async def create_run(
        self,
        project_id: str,
        prototype: Union[JobRunPrototype, Dict[str, Any]],
        *,
        headers: Optional[Dict[str, str]] = None,
        idempotent: Optional[bool] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> JobRun:
        """
        Submit a job run.

        Not retried by default: each accepted request starts a new run.
        Pass ``idempotent=True`` to opt in, e.g. when the run has a fixed
        ``name`` so that a duplicate submission is rejected.
        """
        return await self._call(
            "POST",
            _RUNS,
            operation_id="create_job_run",
            path_params={"project_id": project_id},
            body=prototype,
            headers=headers,
            response_model=JobRun,
            idempotent=idempotent,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def get_run(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> JobRun:
        return await self._call(
            "GET",
            _RUN,
            operation_id="get_job_run",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            response_model=JobRun,
            refresh_token=refresh_token,
            deadline=deadline,
        )

    async def delete_run(
        self,
        project_id: str,
        name: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        refresh_token: Optional[str] = None,
        deadline: Optional[float] = None,
    ) -> None:
        await self._call(
            "DELETE",
            _RUN,
            operation_id="delete_job_run",
            path_params={"project_id": project_id, "name": name},
            headers=headers,
            refresh_token=refresh_token,
            deadline=deadline,
        )
