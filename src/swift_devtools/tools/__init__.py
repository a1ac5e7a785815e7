"""Operations exposed by swift-devtools."""

from .catalog import TOOL_SPECS, ToolSpec, build_tool_registry
from .registry import ToolDescriptor, ToolRegistry

__all__ = [
    "TOOL_SPECS",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolSpec",
    "build_tool_registry",
]
