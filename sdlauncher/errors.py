"""
Launch errors for sd-launcher.

Every stage of the resolution chain raises its own error type so the
caller can tell a bad build ID from a malformed SCM URL or a full disk
without reading logs.

Hierarchy:
    LaunchError
    ├── BuildFetchError     (stage "build", carries build_id)
    ├── JobFetchError       (stage "job", carries job_id)
    ├── PipelineFetchError  (stage "pipeline", carries pipeline_id)
    ├── ScmParseError       (stage "scm", carries scm_url)
    └── WorkspaceError      (stage "workspace", carries path)

The underlying exception, when there is one, is chained as __cause__.
"""

from __future__ import annotations


class LaunchError(Exception):
    """Base exception for all launch failures."""

    stage: str = "launch"

    def __init__(self, message: str, *, reason: str | None = None):
        super().__init__(message)
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"{self.args[0]}: {self.reason}"
        return self.args[0]


class BuildFetchError(LaunchError):
    """Raised when the build record cannot be fetched."""

    stage = "build"

    def __init__(self, build_id: str, *, reason: str | None = None):
        super().__init__(f'fetching build ID "{build_id}"', reason=reason)
        self.build_id = build_id


class JobFetchError(LaunchError):
    """Raised when the job record cannot be fetched."""

    stage = "job"

    def __init__(self, job_id: str, *, reason: str | None = None):
        super().__init__(f'fetching Job ID "{job_id}"', reason=reason)
        self.job_id = job_id


class PipelineFetchError(LaunchError):
    """Raised when the pipeline record cannot be fetched."""

    stage = "pipeline"

    def __init__(self, pipeline_id: str, *, reason: str | None = None):
        super().__init__(f'fetching Pipeline ID "{pipeline_id}"', reason=reason)
        self.pipeline_id = pipeline_id


class ScmParseError(LaunchError):
    """Raised when an SCM URL does not match host:org/repo#branch."""

    stage = "scm"

    def __init__(self, scm_url: str, *, reason: str | None = None):
        super().__init__(f'parsing SCM URL "{scm_url}"', reason=reason)
        self.scm_url = scm_url


class WorkspaceError(LaunchError):
    """Raised when the workspace directory cannot be created."""

    stage = "workspace"

    def __init__(self, path: str, *, reason: str | None = None):
        super().__init__(f'creating workspace "{path}"', reason=reason)
        self.path = path
