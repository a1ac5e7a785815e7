"""Operation registry."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from ..errors import UnknownToolError

ToolHandler = Callable[[], str]

EMPTY_INPUT_SCHEMA: dict[str, Any] = {"type": "object"}


@dataclass(frozen=True)
class ToolDescriptor:
    """Operation metadata and runtime handle."""

    name: str
    description: str
    handler: ToolHandler
    fallback: str = ""
    input_schema: dict[str, Any] = field(default_factory=lambda: dict(EMPTY_INPUT_SCHEMA))


class ToolRegistry:
    """Ordered registry of parameterless operations.

    Declared order is kept so listing the catalog is stable.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise ValueError(f"Duplicate tool name: {descriptor.name}")
        self._tools[descriptor.name] = descriptor

    def get(self, name: str) -> ToolDescriptor | None:
        return self._tools.get(name)

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def execute(self, name: str) -> str:
        descriptor = self.get(name)
        if descriptor is None:
            raise UnknownToolError(name)

        logger.info("tool.call.start name={}", name)
        start = time.monotonic()
        try:
            return descriptor.handler()
        except Exception:
            logger.exception("tool.call.error name={}", name)
            raise
        finally:
            duration = time.monotonic() - start
            logger.info("tool.call.end name={} duration={:.3f}ms", name, duration * 1000)
