"""
Screwdriver API layer for sd-launcher.

Follows the usual client layout:

1. Protocol: MetadataClient, what the launcher depends on
2. Schemas: Pydantic models for Build, Job and Pipeline
3. Client: ScrewdriverClient, the HTTP implementation

Directory Structure:
    screwdriver/
    ├── api.py        # MetadataClient protocol
    ├── base.py       # ApiClient, ApiConfig, errors
    ├── client.py     # ScrewdriverClient
    └── schemas.py    # Pydantic models
"""

from sdlauncher.screwdriver.api import MetadataClient
from sdlauncher.screwdriver.base import (
    ApiClient,
    ApiConfig,
    ApiError,
    AuthenticationError,
    NotFoundError,
)
from sdlauncher.screwdriver.client import ScrewdriverClient
from sdlauncher.screwdriver.schemas import Build, Job, Pipeline

__all__ = [
    "ApiClient",
    "ApiConfig",
    "ApiError",
    "AuthenticationError",
    "Build",
    "Job",
    "MetadataClient",
    "NotFoundError",
    "Pipeline",
    "ScrewdriverClient",
]
