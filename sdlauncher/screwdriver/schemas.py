"""
Pydantic schemas for the Screwdriver API.

Only the fields the launcher reads are modelled; everything else in
the payload is ignored. IDs are opaque: the API sends numbers, the
launcher treats them as strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_id(value: Any) -> Any:
    """Coerce numeric IDs to strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    return value


class _Record(BaseModel):
    """Base for immutable API records."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Build(_Record):
    """A single build, belonging to a job."""

    id: str = Field("", description="Build ID")
    job_id: str = Field("", alias="jobId", description="ID of the job this build ran for")

    @field_validator("id", "job_id", mode="before")
    @classmethod
    def coerce_ids(cls, value: Any) -> Any:
        return _as_id(value)


class Job(_Record):
    """A job definition, belonging to a pipeline."""

    id: str = Field("", description="Job ID")
    pipeline_id: str = Field("", alias="pipelineId", description="ID of the owning pipeline")

    @field_validator("id", "pipeline_id", mode="before")
    @classmethod
    def coerce_ids(cls, value: Any) -> Any:
        return _as_id(value)


class Pipeline(_Record):
    """A pipeline, tied to one source repository."""

    id: str = Field("", description="Pipeline ID")
    scm_url: str = Field("", alias="scmUrl", description="Encoded location host:org/repo#branch")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_ids(cls, value: Any) -> Any:
        return _as_id(value)
