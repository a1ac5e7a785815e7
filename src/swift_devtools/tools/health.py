"""Developer tools health report.

Seven independent probes run in a fixed order. Each one contributes exactly
one line, marked with ``OK_GLYPH`` or ``FAIL_GLYPH``; a failing probe never
stops the ones after it.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..process import CommandRunner, ExecutionResult, execute, split_lines

OK_GLYPH = "✅"
FAIL_GLYPH = "❌"
HEADER = "Developer tools health check:"

SWIFT_VERSION_PATTERN = re.compile(r"Swift version (\d+(?:\.\d+)+)")


@dataclass(frozen=True)
class CheckOutcome:
    label: str
    ok: bool
    detail: str
    hint: str | None = None

    def render(self) -> str:
        glyph = OK_GLYPH if self.ok else FAIL_GLYPH
        line = f"{glyph} {self.label}: {self.detail}"
        if not self.ok and self.hint:
            line += f". {self.hint}"
        return line


HealthCheck = Callable[[CommandRunner], CheckOutcome]


def _first_line(result: ExecutionResult) -> str:
    lines = split_lines(result.text)
    return lines[0] if lines else ""


def check_xcode(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "xcodebuild", "-version", error_prefix="Error getting Xcode version")
    lines = split_lines(result.text)
    if not result.succeeded or not lines:
        return CheckOutcome("Xcode", False, "not installed", "Install Xcode from the App Store")
    return CheckOutcome("Xcode", True, " ".join(lines[:2]))


def check_active_path(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "xcode-select", "-p", error_prefix="Error getting active developer directory")
    path = _first_line(result)
    if not result.succeeded or not path:
        return CheckOutcome(
            "Active developer directory",
            False,
            "not set",
            "Run: sudo xcode-select -s /Applications/Xcode.app",
        )
    return CheckOutcome("Active developer directory", True, path)


def check_command_line_tools(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "xcrun", "--find", "clang", error_prefix="Error locating command line tools")
    path = _first_line(result)
    if not result.succeeded or not path:
        return CheckOutcome("Command Line Tools", False, "not installed", "Run: xcode-select --install")
    return CheckOutcome("Command Line Tools", True, f"installed ({path})")


def check_swift(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "swift", "--version", error_prefix="Error getting Swift version")
    if not result.succeeded:
        return CheckOutcome("Swift", False, "not available", "Install Xcode or a toolchain from swift.org")
    match = SWIFT_VERSION_PATTERN.search(result.text)
    if match is None:
        return CheckOutcome("Swift", False, "unable to parse version")
    return CheckOutcome("Swift", True, match.group(1))


def check_sdk(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "xcrun", "--show-sdk-version", error_prefix="Error getting SDK version")
    version = _first_line(result)
    if not result.succeeded or not version:
        return CheckOutcome("macOS SDK", False, "not found", "Check the active developer directory")
    return CheckOutcome("macOS SDK", True, version)


def check_license(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "xcodebuild", "-license", "check", error_prefix="Error checking Xcode license")
    if not result.succeeded:
        return CheckOutcome("Xcode license", False, "not accepted", "Run: sudo xcodebuild -license accept")
    return CheckOutcome("Xcode license", True, "accepted")


def check_developer_mode(runner: CommandRunner) -> CheckOutcome:
    result = execute(runner, "DevToolsSecurity", "-status", error_prefix="Error checking developer mode")
    output = result.text.lower()
    if result.succeeded and "enabled" in output and "disabled" not in output:
        return CheckOutcome("Developer mode", True, "enabled")
    return CheckOutcome("Developer mode", False, "disabled", "Run: sudo DevToolsSecurity -enable")


CHECKS: tuple[HealthCheck, ...] = (
    check_xcode,
    check_active_path,
    check_command_line_tools,
    check_swift,
    check_sdk,
    check_license,
    check_developer_mode,
)


def check_dev_tools(runner: CommandRunner) -> str:
    lines = [HEADER]
    for check in CHECKS:
        lines.append(check(runner).render())
    return "\n".join(lines)
