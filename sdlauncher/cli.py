"""
Command-line entry point for sd-launcher.

    sd-launcher BUILD_ID [--token TOKEN] [--api-uri URI] [--workspace-root DIR]
                [--log-level LEVEL] [--log-http]

Resolves one build and logs its source location and workspace. Flags
override the SD_* environment settings.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from enum import IntEnum

from pydantic import ValidationError

from sdlauncher import __version__
from sdlauncher.config import LauncherSettings, get_settings
from sdlauncher.errors import LaunchError
from sdlauncher.launch import LaunchResult, launch
from sdlauncher.screwdriver import ApiConfig, ScrewdriverClient

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    LAUNCH_FAILED = 1
    CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sd-launcher",
        description="Resolve a Screwdriver build to its source location and workspace.",
    )
    parser.add_argument("build_id", help="ID of the build to launch")
    parser.add_argument("--token", help="Screwdriver API token (default: $SD_TOKEN)")
    parser.add_argument("--api-uri", help="Screwdriver API base URL (default: $SD_API_URI)")
    parser.add_argument("--workspace-root", help="Workspace root (default: $SD_WORKSPACE_ROOT)")
    parser.add_argument("--log-level", help="Log level (default: $SD_LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-http",
        action="store_true",
        default=None,
        help="Log API requests and responses at DEBUG (default: $SD_LOG_HTTP)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _merge_settings(args: argparse.Namespace, settings: LauncherSettings) -> LauncherSettings:
    overrides = {
        "token": args.token,
        "api_uri": args.api_uri,
        "workspace_root": args.workspace_root,
        "log_level": args.log_level,
        "log_http": args.log_http,
    }
    merged = settings.model_dump()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return LauncherSettings.model_validate(merged)


async def _run(build_id: str, settings: LauncherSettings) -> LaunchResult:
    config = ApiConfig(
        token=settings.token.get_secret_value(),
        base_url=settings.api_uri,
        timeout=settings.http_timeout,
        log_requests=settings.log_http,
        log_responses=settings.log_http,
    )
    async with ScrewdriverClient(config) as client:
        return await launch(client, build_id, workspace_root=settings.workspace_root)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the launcher and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = _merge_settings(args, get_settings())
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return ExitCode.CONFIG_ERROR

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not settings.token.get_secret_value():
        logger.error("No API token: pass --token or set SD_TOKEN")
        return ExitCode.CONFIG_ERROR

    try:
        result = asyncio.run(_run(args.build_id, settings))
    except LaunchError as e:
        logger.error(f"Launch failed at {e.stage} stage: {e}")
        return ExitCode.LAUNCH_FAILED

    logger.info(f"Source: {result.scm}")
    logger.info(f"Workspace: {result.workspace}")
    return ExitCode.SUCCESS
