import pytest

from swift_devtools.tools.health import CHECKS, FAIL_GLYPH, HEADER, OK_GLYPH, check_dev_tools

LABELS = [
    "Xcode",
    "Active developer directory",
    "Command Line Tools",
    "Swift",
    "macOS SDK",
    "Xcode license",
    "Developer mode",
]

SWIFT_OUTPUT = (
    "swift-driver version: 1.90.11.1 Apple Swift version 5.10 (swiftlang-5.10.0.13 clang-1500.3.9.4)\n"
    "Target: arm64-apple-macosx14.0\n"
)


def _healthy(runner) -> None:
    runner.ok(("xcodebuild", "-version"), "Xcode 15.4\nBuild version 15F31d\n")
    runner.ok(("xcode-select", "-p"), "/Applications/Xcode.app/Contents/Developer\n")
    runner.ok(("xcrun", "--find", "clang"), "/usr/bin/clang\n")
    runner.ok(("swift", "--version"), SWIFT_OUTPUT)
    runner.ok(("xcrun", "--show-sdk-version"), "14.5\n")
    runner.ok(("xcodebuild", "-license", "check"), "")
    runner.ok(("DevToolsSecurity", "-status"), "Developer mode is currently enabled.\n")


def _check_lines(report: str) -> list[str]:
    lines = report.splitlines()
    assert lines[0] == HEADER
    return lines[1:]


def test_healthy_environment(runner) -> None:
    _healthy(runner)

    lines = _check_lines(check_dev_tools(runner))

    assert lines == [
        f"{OK_GLYPH} Xcode: Xcode 15.4 Build version 15F31d",
        f"{OK_GLYPH} Active developer directory: /Applications/Xcode.app/Contents/Developer",
        f"{OK_GLYPH} Command Line Tools: installed (/usr/bin/clang)",
        f"{OK_GLYPH} Swift: 5.10",
        f"{OK_GLYPH} macOS SDK: 14.5",
        f"{OK_GLYPH} Xcode license: accepted",
        f"{OK_GLYPH} Developer mode: enabled",
    ]


def test_every_check_fails_without_tools(runner) -> None:
    lines = _check_lines(check_dev_tools(runner))

    assert len(lines) == len(CHECKS) == 7
    assert all(line.startswith(f"{FAIL_GLYPH} ") for line in lines)
    assert [line.split(" ", 1)[1].split(":", 1)[0] for line in lines] == LABELS


def test_failure_does_not_stop_later_checks(runner) -> None:
    _healthy(runner)
    runner.fail(("xcodebuild", "-version"), exit_code=1, stderr="xcode-select: error")

    lines = _check_lines(check_dev_tools(runner))

    assert lines[0].startswith(f"{FAIL_GLYPH} Xcode: not installed. Install Xcode")
    assert all(line.startswith(OK_GLYPH) for line in lines[1:])
    assert runner.argvs()[-1] == ("DevToolsSecurity", "-status")


def test_unparsable_swift_version_is_degraded(runner) -> None:
    _healthy(runner)
    runner.ok(("swift", "--version"), "something unexpected")

    lines = _check_lines(check_dev_tools(runner))

    assert lines[3] == f"{FAIL_GLYPH} Swift: unable to parse version"


@pytest.mark.parametrize(
    ("output", "ok"),
    [
        ("Developer mode is currently enabled.", True),
        ("Developer mode is currently disabled.", False),
        ("", False),
    ],
)
def test_developer_mode_probe(runner, output, ok) -> None:
    _healthy(runner)
    runner.ok(("DevToolsSecurity", "-status"), output)

    last = _check_lines(check_dev_tools(runner))[-1]

    assert last.startswith(OK_GLYPH if ok else FAIL_GLYPH)


def test_license_not_accepted_includes_hint(runner) -> None:
    _healthy(runner)
    runner.fail(("xcodebuild", "-license", "check"), exit_code=69)

    lines = _check_lines(check_dev_tools(runner))

    assert lines[5] == f"{FAIL_GLYPH} Xcode license: not accepted. Run: sudo xcodebuild -license accept"
