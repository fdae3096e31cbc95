"""
Build resolution chain for sd-launcher.

Turns a build ID into everything the step runner needs:

    build ID → Build → Job → Pipeline → ScmLocation → workspace path

Each stage feeds the next, so stages run strictly in order. The first
failure is wrapped in its stage's LaunchError and raised; later stages
are never called and nothing partial is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sdlauncher.errors import BuildFetchError, JobFetchError, PipelineFetchError
from sdlauncher.scm import ScmLocation, parse_scm_url
from sdlauncher.workspace import DEFAULT_WORKSPACE_ROOT, FileSystem, create_workspace

if TYPE_CHECKING:
    from sdlauncher.screwdriver.api import MetadataClient
    from sdlauncher.screwdriver.schemas import Build, Job, Pipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """
    Outcome of a successful resolution.

    Attributes:
        build: The build being launched
        job: The job the build belongs to
        pipeline: The pipeline the job belongs to
        scm: Parsed source location of the pipeline
        workspace: Directory the source will be checked out into
    """

    build: Build
    job: Job
    pipeline: Pipeline
    scm: ScmLocation
    workspace: str


async def launch(
    client: MetadataClient,
    build_id: str,
    *,
    workspace_root: str = DEFAULT_WORKSPACE_ROOT,
    filesystem: FileSystem | None = None,
) -> LaunchResult:
    """
    Resolve a build ID to its source location and workspace.

    Args:
        client: Metadata lookups (ScrewdriverClient or any MetadataClient)
        build_id: ID of the build to launch
        workspace_root: Root directory for workspaces
        filesystem: Filesystem for workspace creation

    Returns:
        LaunchResult for the build

    Raises:
        BuildFetchError: If the build lookup fails
        JobFetchError: If the job lookup fails
        PipelineFetchError: If the pipeline lookup fails
        ScmParseError: If the pipeline's SCM URL is malformed
        WorkspaceError: If the workspace directory cannot be created
    """
    logger.info(f"Launching build {build_id}")

    try:
        build = await client.build_from_id(build_id)
    except Exception as e:
        raise BuildFetchError(build_id, reason=str(e)) from e

    try:
        job = await client.job_from_id(build.job_id)
    except Exception as e:
        raise JobFetchError(build.job_id, reason=str(e)) from e

    try:
        pipeline = await client.pipeline_from_id(job.pipeline_id)
    except Exception as e:
        raise PipelineFetchError(job.pipeline_id, reason=str(e)) from e

    scm = parse_scm_url(pipeline.scm_url)
    logger.info(f"Build {build_id} checks out {scm.org}/{scm.repo}#{scm.branch} from {scm.host}")

    workspace = create_workspace(
        scm.org,
        scm.repo,
        root=workspace_root,
        filesystem=filesystem,
    )

    return LaunchResult(
        build=build,
        job=job,
        pipeline=pipeline,
        scm=scm,
        workspace=workspace,
    )
