"""Run swift-devtools with ``python -m swift_devtools``."""

from swift_devtools.cli import app

if __name__ == "__main__":
    app()
