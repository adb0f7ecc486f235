"""CLI for zettel-nav (render outlines, replay navigation commands)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from zettel_nav.commands import COMMANDS, run_command
from zettel_nav.config import DEFAULT_SHOW_BODY, DEFAULT_STARTUP, resolve_outline_file
from zettel_nav.core.importer.json_reader import load_outline_file
from zettel_nav.core.outline.memory import MemoryOutline
from zettel_nav.core.tree.render import render_outline
from zettel_nav.errors import NavigationError, UnknownCommandError
from zettel_nav.logging_config import configure_logging
from zettel_nav.models.heading import Startup
from zettel_nav.navigator import Navigator

app = typer.Typer(help="zettel-nav: walk a Zettelkasten outline heading by heading.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_outline(path: Path | None, startup: Startup) -> MemoryOutline:
    """Load the outline file, raising if it doesn't exist."""
    src = path or resolve_outline_file()
    if src is None or not src.is_file():
        logger.error("Outline file not found: {}", src or "no default outline file")
        raise typer.Exit(1)
    try:
        headings = load_outline_file(src)
    except (json.JSONDecodeError, ValueError) as e:
        logger.error("Cannot read outline {}: {}", src, e)
        raise typer.Exit(1) from e
    return MemoryOutline(headings, startup=startup)


@app.command()
def show(
    outline_file: Annotated[
        Path | None,
        typer.Argument(help="Outline JSON file"),
    ] = None,
    startup: Startup = typer.Option(DEFAULT_STARTUP, "--startup", "-s", help="Initial fold state"),
) -> None:
    """Render an outline with its initial fold state."""
    outline = _open_outline(outline_file, startup)
    typer.echo(render_outline(outline, mark_point=False), nl=False)


@app.command()
def walk(
    steps: Annotated[
        list[str],
        typer.Argument(help="Commands to run in order (see 'commands')"),
    ],
    outline_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Outline JSON file"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", help="Title of the heading to start on"),
    ] = None,
    show_body: bool = typer.Option(
        DEFAULT_SHOW_BODY, "--show-body/--headings-only", help="Display mode for the session"
    ),
    startup: Startup = typer.Option(DEFAULT_STARTUP, "--startup", "-s", help="Initial fold state"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Print the heading after each step"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Replay navigation commands in a fresh session and show where they end."""
    outline = _open_outline(outline_file, startup)
    if start is not None:
        try:
            outline.goto(start)
        except KeyError:
            logger.error("Heading not found: {!r}", start)
            raise typer.Exit(1) from None

    navigator = Navigator(outline, show_body=show_body)
    visited: list[str | None] = []
    stopped: str | None = None

    for step in steps:
        try:
            run_command(navigator, step)
        except UnknownCommandError as e:
            logger.error("{}", e)
            raise typer.Exit(1) from e
        except NavigationError as e:
            stopped = str(e)
            break
        title = outline.current.title if outline.current else None
        visited.append(title)
        if trace and not output_json:
            typer.echo(f"{step}: {title}")

    if output_json:
        data = {
            "point": outline.current.title if outline.current else None,
            "visited": visited,
            "stopped": stopped,
            "show_body": navigator.show_body,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    if stopped:
        typer.echo(stopped)
    typer.echo(render_outline(outline), nl=False)


@app.command()
def commands() -> None:
    """List the navigation commands available for binding."""
    for name in COMMANDS:
        typer.echo(name)
