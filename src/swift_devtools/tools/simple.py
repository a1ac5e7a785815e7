"""Single-command operations.

Each function runs one fixed command line and returns its result text as-is.
"""

from __future__ import annotations

from ..process import CommandRunner, run


def swift_version(runner: CommandRunner) -> str:
    return run(runner, "swift", "--version", error_prefix="Error getting Swift version")


def list_simulators(runner: CommandRunner) -> str:
    return run(runner, "xcrun", "simctl", "list", "devices", error_prefix="Error listing simulators")


def xcode_version(runner: CommandRunner) -> str:
    return run(runner, "xcodebuild", "-version", error_prefix="Error getting Xcode version")


def xcode_sdks(runner: CommandRunner) -> str:
    return run(runner, "xcodebuild", "-showsdks", error_prefix="Error listing Xcode SDKs")


def connected_devices(runner: CommandRunner) -> str:
    return run(runner, "xcrun", "xctrace", "list", "devices", error_prefix="Error listing connected devices")


def macos_version(runner: CommandRunner) -> str:
    return run(runner, "sw_vers", error_prefix="Error getting macOS version")


def system_architecture(runner: CommandRunner) -> str:
    return run(runner, "uname", "-m", error_prefix="Error getting system architecture")
