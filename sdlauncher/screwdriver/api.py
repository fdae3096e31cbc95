"""
Metadata client protocol for sd-launcher.

Defines the interface the resolution chain uses to look up builds,
jobs and pipelines. ScrewdriverClient is the HTTP implementation;
tests pass any object with the same three coroutines.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sdlauncher.screwdriver.schemas import Build, Job, Pipeline


@runtime_checkable
class MetadataClient(Protocol):
    """
    Protocol for build metadata lookups.

    Implementations must provide:
    - build_from_id(): Fetch a build
    - job_from_id(): Fetch a job
    - pipeline_from_id(): Fetch a pipeline

    Each call is a single request; transport, authentication, timeouts
    and retries belong to the implementation. Failures are raised.
    """

    async def build_from_id(self, build_id: str) -> Build:
        ...

    async def job_from_id(self, job_id: str) -> Job:
        ...

    async def pipeline_from_id(self, pipeline_id: str) -> Pipeline:
        ...
