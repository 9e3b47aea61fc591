"""Command-line interface for repobot"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from repobot.conf import settings
from repobot.dispatch.context import build_event_context, load_event_payload
from repobot.dispatch.exceptions import EventPayloadError
from repobot.dispatch.log import configure_logging
from repobot.dispatch.modes import MODE_REGISTRY, is_valid_mode
from repobot.dispatch.selector import explain_selection, select_mode

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)

# Exit code for unreadable/invalid event payloads.
EXIT_BAD_PAYLOAD = 2


@app.callback()
def run(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log mode selection details."),
    ] = False,
) -> None:
    """Pick the operating mode for a repository event."""
    level = "DEBUG" if verbose else settings.LOG_LEVEL
    configure_logging(level, settings.LOG_FILE)


@app.command()
def select(
    event_name: Annotated[
        str,
        typer.Option("--event-name", envvar="GITHUB_EVENT_NAME", help="Event name."),
    ],
    event_path: Annotated[
        Path | None,
        typer.Option("--event-path", envvar="GITHUB_EVENT_PATH", help="JSON event payload file."),
    ] = None,
    prompt: Annotated[
        str | None,
        typer.Option("--prompt", help="Explicit prompt (defaults to REPOBOT_PROMPT)."),
    ] = None,
    trigger_phrase: Annotated[
        str | None,
        typer.Option("--trigger-phrase", help="Trigger phrase (defaults to REPOBOT_TRIGGER_PHRASE)."),
    ] = None,
    explain: Annotated[
        bool,
        typer.Option("--explain", help="Also print the precedence rule that matched."),
    ] = False,
) -> None:
    """Print the mode that should handle the event."""
    payload = None
    if event_path is not None:
        try:
            payload = load_event_payload(event_path)
        except EventPayloadError as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(code=EXIT_BAD_PAYLOAD) from None

    context = build_event_context(
        event_name,
        payload,
        prompt=settings.PROMPT if prompt is None else prompt,
        trigger_phrase=settings.TRIGGER_PHRASE if trigger_phrase is None else trigger_phrase,
    )
    mode = select_mode(context)

    if explain:
        rule = explain_selection(context)
        console.print(f"{mode.name} (rule: {rule.name})", highlight=False)
    else:
        console.print(mode.name, highlight=False)


@app.command()
def validate(name: Annotated[str, typer.Argument(help="Mode name to check.")]) -> None:
    """Check a mode name against the catalog."""
    if is_valid_mode(name):
        console.print(f"'{name}' is a valid mode", highlight=False)
        raise typer.Exit(code=0)

    known = ", ".join(sorted(MODE_REGISTRY.get_all_mode_names()))
    err_console.print(f"[red]'{name}' is not a valid mode.[/] Known modes: {known}")
    raise typer.Exit(code=1)


@app.command()
def modes() -> None:
    """List available modes."""
    table = Table("Mode", "Description", "Tracks progress")
    for mode in MODE_REGISTRY:
        table.add_row(mode.name, mode.description, "yes" if mode.tracks_progress else "no")
    console.print(table)


def main() -> None:
    app()
