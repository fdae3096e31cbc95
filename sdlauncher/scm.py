"""
SCM URL parsing.

Pipelines store their source location in a compact form:

    <host>:<org>/<repo>#<branch>

e.g. ``git@github.com:screwdriver-cd/launcher.git#master``. The host may
carry a ``user@`` prefix and the repo keeps its ``.git`` suffix; neither
is decomposed or stripped, so ``str(parse_scm_url(url)) == url`` for
every URL that parses.
"""

from __future__ import annotations

from dataclasses import dataclass

from sdlauncher.errors import ScmParseError


@dataclass(frozen=True, slots=True)
class ScmLocation:
    """
    Structured SCM location.

    Attributes:
        host: Host token, possibly with a user prefix (git@github.com)
        org: Organization or owner
        repo: Repository name, suffix included (launcher.git)
        branch: Branch to check out
    """

    host: str
    org: str
    repo: str
    branch: str

    def __str__(self) -> str:
        return f"{self.host}:{self.org}/{self.repo}#{self.branch}"


def _split_once(value: str, separator: str, scm_url: str) -> tuple[str, str]:
    head, found, tail = value.partition(separator)
    if not found:
        raise ScmParseError(scm_url, reason=f"missing {separator!r} separator")
    return head, tail


def parse_scm_url(scm_url: str) -> ScmLocation:
    """
    Parse a compact SCM URL.

    Each component is taken by splitting on the first occurrence of its
    separator, in the order ``:``, ``#``, ``/``.

    Args:
        scm_url: Encoded location (host:org/repo#branch)

    Returns:
        Parsed ScmLocation

    Raises:
        ScmParseError: If a separator is missing or a component is empty
    """
    host, remainder = _split_once(scm_url, ":", scm_url)
    path, branch = _split_once(remainder, "#", scm_url)
    org, repo = _split_once(path, "/", scm_url)

    for component, value in (("host", host), ("org", org), ("repo", repo), ("branch", branch)):
        if not value:
            raise ScmParseError(scm_url, reason=f"empty {component}")

    return ScmLocation(host=host, org=org, repo=repo, branch=branch)
