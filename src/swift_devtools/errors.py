"""Application-level exception types for swift-devtools."""

from __future__ import annotations


class SwiftDevToolsError(Exception):
    """Base exception for swift-devtools."""


class ConfigurationError(SwiftDevToolsError):
    """Raised when settings cannot be loaded or are invalid."""


class UnknownToolError(SwiftDevToolsError):
    """Raised when a caller asks for an operation that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Wrong tool name: {name}")
        self.name = name
