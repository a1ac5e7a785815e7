from __future__ import annotations

from collections.abc import Iterable

import pytest

from swift_devtools.process import CommandRunner, ExecutionRequest, ExecutionResult


class FakeRunner(CommandRunner):
    """In-memory runner returning canned results keyed by argv."""

    def __init__(self, results: dict[tuple[str, ...], ExecutionResult] | None = None) -> None:
        self.results: dict[tuple[str, ...], ExecutionResult] = dict(results or {})
        self.calls: list[ExecutionRequest] = []

    def set(self, argv: Iterable[str], result: ExecutionResult) -> None:
        self.results[tuple(argv)] = result

    def ok(self, argv: Iterable[str], stdout: str) -> None:
        self.set(argv, ExecutionResult.success(stdout))

    def fail(self, argv: Iterable[str], exit_code: int = 1, stderr: str = "boom") -> None:
        argv = tuple(argv)
        self.set(argv, ExecutionResult.exited("Error", exit_code, stderr))

    def execute(self, request: ExecutionRequest) -> ExecutionResult:
        self.calls.append(request)
        result = self.results.get(tuple(request.argv))
        if result is None:
            return ExecutionResult.launch_failed(
                request.error_prefix, FileNotFoundError(2, "No such file or directory", request.command)
            )
        return result

    def argvs(self) -> list[tuple[str, ...]]:
        return [tuple(request.argv) for request in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
