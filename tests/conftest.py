"""
Pytest configuration and fixtures for sd-launcher tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
# This allows `from sdlauncher import ...` to work without an install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from sdlauncher.screwdriver import Build, Job, Pipeline  # noqa: E402

DEFAULT_SCM_URL = "git@github.com:screwdriver-cd/launcher.git#master"


class MockAPI:
    """
    MetadataClient test double.

    Each lookup delegates to the matching override when one is given,
    otherwise returns a default record. Every call is recorded.
    """

    def __init__(self, build_from_id=None, job_from_id=None, pipeline_from_id=None):
        self._build_from_id = build_from_id
        self._job_from_id = job_from_id
        self._pipeline_from_id = pipeline_from_id
        self.calls: list[tuple[str, str]] = []

    async def build_from_id(self, build_id: str) -> Build:
        self.calls.append(("build", build_id))
        if self._build_from_id is not None:
            return self._build_from_id(build_id)
        return Build()

    async def job_from_id(self, job_id: str) -> Job:
        self.calls.append(("job", job_id))
        if self._job_from_id is not None:
            return self._job_from_id(job_id)
        return Job()

    async def pipeline_from_id(self, pipeline_id: str) -> Pipeline:
        self.calls.append(("pipeline", pipeline_id))
        if self._pipeline_from_id is not None:
            return self._pipeline_from_id(pipeline_id)
        return Pipeline(scm_url=DEFAULT_SCM_URL)


class FakeFileSystem:
    """In-memory FileSystem that records created directories."""

    def __init__(self, existing=(), error: OSError | None = None):
        self.dirs: set[str] = set(existing)
        self.created: list[str] = []
        self.error = error

    def is_dir(self, path: str) -> bool:
        return path in self.dirs

    def make_dirs(self, path: str) -> None:
        if self.error is not None:
            raise self.error
        self.dirs.add(path)
        self.created.append(path)


@pytest.fixture
def scm_url():
    """Sample SCM URL for testing."""
    return DEFAULT_SCM_URL


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem."""
    return FakeFileSystem()
