"""Installed Xcode discovery."""

from __future__ import annotations

from pathlib import PurePosixPath

from loguru import logger

from ..process import CommandRunner, execute, split_lines

XCODE_BUNDLE_QUERY = "kMDItemCFBundleIdentifier == 'com.apple.dt.Xcode'"
HEADER = "Installed Xcode versions:"
USAGE_HINT = "To switch the active Xcode, run: sudo xcode-select -s <path-to-Xcode.app>"
ACTIVE_MARKER = " [ACTIVE]"
UNKNOWN_BUILD = "Unknown Build"


def active_developer_dir(runner: CommandRunner) -> str | None:
    result = execute(runner, "xcode-select", "-p", error_prefix="Error getting active developer directory")
    if not result.succeeded or not result.text:
        return None
    return result.text


def discover_installations(runner: CommandRunner) -> list[str]:
    result = execute(runner, "mdfind", XCODE_BUNDLE_QUERY, error_prefix="Error searching for Xcode installations")
    if not result.succeeded:
        return []
    return split_lines(result.text)


def read_version(runner: CommandRunner, install_path: str) -> str | None:
    result = execute(
        runner,
        "defaults",
        "read",
        f"{install_path}/Contents/Info",
        "CFBundleShortVersionString",
        error_prefix="Error reading Xcode version",
    )
    if not result.succeeded or not result.text:
        return None
    return result.text


def read_build(runner: CommandRunner, install_path: str) -> str:
    result = execute(
        runner,
        "defaults",
        "read",
        f"{install_path}/Contents/version",
        "ProductBuildVersion",
        error_prefix="Error reading Xcode build",
    )
    if not result.succeeded or not result.text:
        return UNKNOWN_BUILD
    return result.text


def format_installation(install_path: str, version: str, build: str, *, active: bool) -> str:
    app_name = PurePosixPath(install_path).name
    line = f"• {app_name} {version} ({build}) - {install_path}"
    if active:
        line += ACTIVE_MARKER
    return line


def list_xcode_versions(runner: CommandRunner) -> str:
    """List every Xcode found by Spotlight, marking the active one.

    An installation whose version cannot be read is left out. A missing build
    number degrades to ``Unknown Build``.
    """
    active_dir = active_developer_dir(runner) or ""
    lines = [HEADER]
    for install_path in discover_installations(runner):
        version = read_version(runner, install_path)
        if version is None:
            logger.debug("xcode.skip path={} reason=no-version", install_path)
            continue
        build = read_build(runner, install_path)
        # xcode-select reports <bundle>/Contents/Developer, so containment is enough.
        active = bool(active_dir) and install_path in active_dir
        lines.append(format_installation(install_path, version, build, active=active))
    lines.append(USAGE_HINT)
    return "\n".join(lines)
