"""Operation dispatch."""

from __future__ import annotations

from loguru import logger

from .errors import UnknownToolError
from .process import CommandRunner
from .tools import ToolDescriptor, ToolRegistry, build_tool_registry


class Dispatcher:
    """Map an operation name to its handler and return the handler's text.

    Lookup is an exact string match. Unknown names raise ``UnknownToolError``;
    everything else resolves to text, with the operation's fallback standing in
    for an empty result.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @classmethod
    def from_runner(cls, runner: CommandRunner | None = None) -> Dispatcher:
        return cls(build_tool_registry(runner))

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_operations(self) -> list[ToolDescriptor]:
        return self._registry.descriptors()

    def dispatch(self, name: str) -> str:
        descriptor = self._registry.get(name)
        if descriptor is None:
            logger.warning("dispatch.unknown name={!r}", name)
            raise UnknownToolError(name)

        text = self._registry.execute(name)
        if not text:
            return descriptor.fallback
        return text
