"""Command-line entry point for swift-devtools."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from .config import Settings, get_settings
from .dispatcher import Dispatcher
from .errors import ConfigurationError, UnknownToolError

app = typer.Typer(
    name="swift-dev-tools-mcp",
    help="Swift/Xcode developer tooling over MCP.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(1) from exc


def _build_dispatcher() -> Dispatcher:
    return Dispatcher.from_runner()


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        serve()


@app.command()
def serve() -> None:
    """Run the MCP server over stdin/stdout."""
    from .server import serve as serve_stdio

    settings = _load_settings()
    serve_stdio(settings)


@app.command("tools")
def list_tools() -> None:
    """Show the available operations."""
    _load_settings()
    dispatcher = _build_dispatcher()
    table = Table(title="Operations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for descriptor in dispatcher.list_operations():
        table.add_row(descriptor.name, descriptor.description)
    Console().print(table)


@app.command()
def call(name: str = typer.Argument(..., help="Operation name")) -> None:
    """Run one operation locally and print its result."""
    _load_settings()
    dispatcher = _build_dispatcher()
    try:
        text = dispatcher.dispatch(name)
    except UnknownToolError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2) from exc
    typer.echo(text)
