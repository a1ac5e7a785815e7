import pytest

from swift_devtools.dispatcher import Dispatcher
from swift_devtools.errors import UnknownToolError
from swift_devtools.tools import TOOL_SPECS

EXPECTED_NAMES = [
    "swift_version",
    "list_simulator",
    "xcode_version",
    "xcode_sdks",
    "connected_devices",
    "macos_version",
    "system_architecture",
    "list_xcode_versions",
    "check_dev_tools",
]


def test_catalog_keeps_declared_order(runner) -> None:
    dispatcher = Dispatcher.from_runner(runner)

    assert [descriptor.name for descriptor in dispatcher.list_operations()] == EXPECTED_NAMES
    assert all(descriptor.input_schema == {"type": "object"} for descriptor in dispatcher.list_operations())


@pytest.mark.parametrize("name", ["unknown", "Swift_Version", "swift_version ", "swift", ""])
def test_unknown_operation_raises_with_name(runner, name) -> None:
    dispatcher = Dispatcher.from_runner(runner)

    with pytest.raises(UnknownToolError) as exc_info:
        dispatcher.dispatch(name)

    assert str(exc_info.value) == f"Wrong tool name: {name}"
    assert exc_info.value.name == name
    assert runner.calls == []


@pytest.mark.parametrize("name", EXPECTED_NAMES)
def test_registered_operation_always_returns_text(runner, name) -> None:
    text = Dispatcher.from_runner(runner).dispatch(name)

    assert isinstance(text, str)
    assert text


def test_dispatch_returns_command_output(runner) -> None:
    runner.ok(("uname", "-m"), "arm64\n")

    assert Dispatcher.from_runner(runner).dispatch("system_architecture") == "arm64"


@pytest.mark.parametrize(("name", "argv"), [("swift_version", ("swift", "--version")), ("macos_version", ("sw_vers",))])
def test_empty_result_uses_fallback(runner, name, argv) -> None:
    runner.ok(argv, "   \n")
    fallback = next(spec.fallback for spec in TOOL_SPECS if spec.name == name)

    assert Dispatcher.from_runner(runner).dispatch(name) == fallback
