"""
Screwdriver API Client for sd-launcher.

Async access to the Screwdriver v4 REST API for the three lookups the
launcher needs.

Usage:
    config = ApiConfig(
        token="...",
        base_url="https://api.screwdriver.cd/v4",
    )
    async with ScrewdriverClient(config) as client:
        build = await client.build_from_id("12345")
        job = await client.job_from_id(build.job_id)
        pipeline = await client.pipeline_from_id(job.pipeline_id)
"""

from __future__ import annotations

import logging
from typing import TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from sdlauncher.screwdriver.base import ApiClient, ApiError
from sdlauncher.screwdriver.schemas import Build, Job, Pipeline

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _segment(value: str) -> str:
    """Escape an opaque ID as a single URL path segment."""
    escaped = quote(value, safe="")
    # Dot segments would be collapsed by URL normalization
    if escaped in (".", ".."):
        escaped = escaped.replace(".", "%2E")
    return escaped


class ScrewdriverClient(ApiClient):
    """
    Async client for the Screwdriver API.

    Satisfies the MetadataClient protocol. Authenticates with a bearer
    token and validates every payload into its pydantic record.
    """

    @property
    def name(self) -> str:
        return "screwdriver"

    def _get_auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.token}"}

    async def _fetch(self, path: str, model: type[RecordT]) -> RecordT:
        data = await self._get_json(path)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Invalid {model.__name__} payload: {e}", self.name) from e

    async def build_from_id(self, build_id: str) -> Build:
        """Fetch a build by ID."""
        logger.debug(f"[screwdriver] Fetching build {build_id}")
        return await self._fetch(f"builds/{_segment(build_id)}", Build)

    async def job_from_id(self, job_id: str) -> Job:
        """Fetch a job by ID."""
        logger.debug(f"[screwdriver] Fetching job {job_id}")
        return await self._fetch(f"jobs/{_segment(job_id)}", Job)

    async def pipeline_from_id(self, pipeline_id: str) -> Pipeline:
        """Fetch a pipeline by ID."""
        logger.debug(f"[screwdriver] Fetching pipeline {pipeline_id}")
        return await self._fetch(f"pipelines/{_segment(pipeline_id)}", Pipeline)
