"""Operation catalog for swift-devtools."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..process import CommandRunner, SubprocessRunner
from . import health, simple, xcode
from .registry import ToolDescriptor, ToolRegistry

Interpreter = Callable[[CommandRunner], str]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    interpreter: Interpreter
    fallback: str


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec("swift_version", "Returns the current Swift version", simple.swift_version, "No version"),
    ToolSpec("list_simulator", "Lists available simulators", simple.list_simulators, "No simulators found"),
    ToolSpec(
        "xcode_version",
        "Returns Xcode version and build information",
        simple.xcode_version,
        "No Xcode version",
    ),
    ToolSpec("xcode_sdks", "Lists all available Xcode SDKs", simple.xcode_sdks, "No SDKs found"),
    ToolSpec(
        "connected_devices",
        "Lists all connected iOS/macOS devices",
        simple.connected_devices,
        "No devices found",
    ),
    ToolSpec("macos_version", "Returns macOS version information", simple.macos_version, "No macOS version"),
    ToolSpec(
        "system_architecture",
        "Returns system architecture (arm64/x86_64)",
        simple.system_architecture,
        "No architecture info",
    ),
    ToolSpec(
        "list_xcode_versions",
        "Lists installed Xcode versions and marks the active one",
        xcode.list_xcode_versions,
        "No Xcode installations found",
    ),
    ToolSpec(
        "check_dev_tools",
        "Runs a health check over the Swift/Xcode developer tooling",
        health.check_dev_tools,
        "No health report",
    ),
)


def _bind(interpreter: Interpreter, runner: CommandRunner) -> Callable[[], str]:
    def _handler() -> str:
        return interpreter(runner)

    return _handler


def build_tool_registry(runner: CommandRunner | None = None) -> ToolRegistry:
    """Build the fixed registry with every operation bound to ``runner``."""
    runner = runner or SubprocessRunner()
    registry = ToolRegistry()
    for spec in TOOL_SPECS:
        registry.register(
            ToolDescriptor(
                name=spec.name,
                description=spec.description,
                handler=_bind(spec.interpreter, runner),
                fallback=spec.fallback,
            )
        )
    return registry
