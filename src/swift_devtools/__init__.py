"""swift-devtools - Swift/Xcode developer environment inspection over MCP."""

from .dispatcher import Dispatcher
from .process import CommandRunner, ExecutionRequest, ExecutionResult, SubprocessRunner
from .tools import ToolRegistry, build_tool_registry

__version__ = "1.0.0"

__all__ = [
    "CommandRunner",
    "Dispatcher",
    "ExecutionRequest",
    "ExecutionResult",
    "SubprocessRunner",
    "ToolRegistry",
    "build_tool_registry",
]
