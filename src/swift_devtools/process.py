"""External process execution.

Every operation exposed by the server ends up here: a command line is run as
a child process, both output streams are captured, and the outcome is folded
into a single string. Process failures are never raised to callers; they are
encoded in the result text so the calling agent always receives something it
can show.

The ``CommandRunner`` interface has one method so interpreters can be driven
by an in-memory fake in tests without spawning processes.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

from loguru import logger

DEFAULT_ERROR_PREFIX = "Command failed"

ResultStatus = Literal["ok", "exit", "launch"]


@dataclass(frozen=True)
class ExecutionRequest:
    """A command name, its arguments and the prefix used for failure text."""

    command: str
    args: tuple[str, ...] = ()
    error_prefix: str = DEFAULT_ERROR_PREFIX

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("command must not be empty")

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


@dataclass(frozen=True)
class ExecutionResult:
    """Normalized outcome of one process run.

    ``text`` is the only payload callers see. ``status`` tells the composite
    interpreters which of the three outcome forms produced it.
    """

    text: str
    status: ResultStatus = "ok"
    exit_code: int | None = 0

    @property
    def succeeded(self) -> bool:
        return self.status == "ok"

    @classmethod
    def success(cls, stdout: str) -> ExecutionResult:
        return cls(text=stdout.strip(), status="ok", exit_code=0)

    @classmethod
    def exited(cls, prefix: str, exit_code: int, stderr: str) -> ExecutionResult:
        return cls(
            text=f"{prefix}: Process failed with status {exit_code}. {stderr}",
            status="exit",
            exit_code=exit_code,
        )

    @classmethod
    def launch_failed(cls, prefix: str, error: BaseException) -> ExecutionResult:
        return cls(text=f"{prefix}: {error}", status="launch", exit_code=None)


class CommandRunner(ABC):
    """Abstract interface for running external commands.

    Real implementations spawn processes. Fake implementations return canned
    results for unit tests.
    """

    @abstractmethod
    def execute(self, request: ExecutionRequest) -> ExecutionResult:
        """Run the request to completion and return its normalized result.

        Implementations must not raise for launch failures or non-zero exit
        statuses; both are represented as failed results.
        """
        ...


class SubprocessRunner(CommandRunner):
    """Run commands with ``subprocess`` using the host's executable search path.

    The call blocks until the child exits. No timeout is applied and output
    is fully buffered before returning.
    """

    def execute(self, request: ExecutionRequest) -> ExecutionResult:
        logger.debug("process.run argv={}", request.argv)
        try:
            completed = subprocess.run(  # noqa: S603
                request.argv,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.warning("process.launch_failed argv={} error={}", request.argv, exc)
            return ExecutionResult.launch_failed(request.error_prefix, exc)

        if completed.returncode != 0:
            logger.warning("process.exit argv={} status={}", request.argv, completed.returncode)
            return ExecutionResult.exited(request.error_prefix, completed.returncode, completed.stderr or "")
        return ExecutionResult.success(completed.stdout or "")


def execute(
    runner: CommandRunner,
    command: str,
    *args: str,
    error_prefix: str = DEFAULT_ERROR_PREFIX,
) -> ExecutionResult:
    """Build a request from a command line and execute it."""
    return runner.execute(ExecutionRequest(command=command, args=tuple(args), error_prefix=error_prefix))


def run(
    runner: CommandRunner,
    command: str,
    *args: str,
    error_prefix: str = DEFAULT_ERROR_PREFIX,
) -> str:
    """Run a command line and return only its result text."""
    return execute(runner, command, *args, error_prefix=error_prefix).text


def split_lines(text: str) -> list[str]:
    """Return the non-blank, stripped lines of command output."""
    return [line.strip() for line in text.splitlines() if line.strip()]
