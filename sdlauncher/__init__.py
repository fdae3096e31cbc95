"""
sd-launcher - resolution front-end for a Screwdriver build launcher.

Given a build ID, sd-launcher walks Build → Job → Pipeline through the
Screwdriver API, parses the pipeline's SCM URL and prepares the local
workspace the source will be checked out into:

- **Resolution chain**: `launch()` runs the lookups in order and fails fast
- **SCM URL parser**: `parse_scm_url()` for host:org/repo#branch
- **Workspace layout**: `<root>/src/<org>/<repo>`
- **Metadata client**: `MetadataClient` protocol, `ScrewdriverClient` over HTTP

Quick Start:
    >>> from sdlauncher import ApiConfig, ScrewdriverClient, launch
    >>>
    >>> config = ApiConfig(token="...", base_url="https://api.screwdriver.cd/v4")
    >>> async with ScrewdriverClient(config) as client:
    ...     result = await launch(client, "12345")
    >>> result.workspace
    '/opt/screwdriver/workspace/src/screwdriver-cd/launcher.git'
"""

__version__ = "0.1.0"
__license__ = "MIT"

from sdlauncher.errors import (
    BuildFetchError,
    JobFetchError,
    LaunchError,
    PipelineFetchError,
    ScmParseError,
    WorkspaceError,
)
from sdlauncher.launch import LaunchResult, launch
from sdlauncher.scm import ScmLocation, parse_scm_url
from sdlauncher.screwdriver import ApiConfig, MetadataClient, ScrewdriverClient
from sdlauncher.workspace import (
    DEFAULT_WORKSPACE_ROOT,
    FileSystem,
    LocalFileSystem,
    build_workspace_path,
    create_workspace,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Resolution
    "launch",
    "LaunchResult",
    # SCM
    "ScmLocation",
    "parse_scm_url",
    # Workspace
    "DEFAULT_WORKSPACE_ROOT",
    "FileSystem",
    "LocalFileSystem",
    "build_workspace_path",
    "create_workspace",
    # Metadata client
    "ApiConfig",
    "MetadataClient",
    "ScrewdriverClient",
    # Errors
    "LaunchError",
    "BuildFetchError",
    "JobFetchError",
    "PipelineFetchError",
    "ScmParseError",
    "WorkspaceError",
]
