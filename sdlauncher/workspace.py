"""
Workspace layout for sd-launcher.

A build's source is checked out under a fixed root:

    <root>/src/<org>/<repo>

The path is a logical identifier built with forward slashes on every
platform. Directory creation goes through a FileSystem so callers and
tests can substitute their own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from sdlauncher.errors import WorkspaceError

logger = logging.getLogger(__name__)

DEFAULT_WORKSPACE_ROOT = "/opt/screwdriver/workspace"


@runtime_checkable
class FileSystem(Protocol):
    """
    Filesystem operations needed to prepare a workspace.

    Implementations must provide:
    - is_dir(): Whether a directory already exists at path
    - make_dirs(): Create path and any missing parents
    """

    def is_dir(self, path: str) -> bool:
        ...

    def make_dirs(self, path: str) -> None:
        """Create the directory; raise OSError on failure."""
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def make_dirs(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)


def build_workspace_path(org: str, repo: str, root: str = DEFAULT_WORKSPACE_ROOT) -> str:
    """
    Compute the source directory for org/repo.

    Host and branch do not take part: the same repository always maps
    to the same directory.
    """
    return f"{root.rstrip('/')}/src/{org}/{repo}"


def create_workspace(
    org: str,
    repo: str,
    *,
    root: str = DEFAULT_WORKSPACE_ROOT,
    filesystem: FileSystem | None = None,
) -> str:
    """
    Compute the workspace path and make sure the directory exists.

    An existing directory is not an error. Nothing is ever removed.

    Args:
        org: Organization name
        repo: Repository name
        root: Workspace root
        filesystem: Filesystem to use (defaults to LocalFileSystem)

    Returns:
        The workspace path

    Raises:
        WorkspaceError: On empty org/repo or any filesystem failure
    """
    path = build_workspace_path(org, repo, root)
    if not org or not repo:
        raise WorkspaceError(path, reason="org and repo must be non-empty")

    fs = filesystem or LocalFileSystem()

    try:
        if fs.is_dir(path):
            logger.debug(f"Workspace already exists: {path}")
            return path
        fs.make_dirs(path)
    except OSError as e:
        raise WorkspaceError(path, reason=e.strerror or str(e)) from e

    logger.info(f"Created workspace: {path}")
    return path
