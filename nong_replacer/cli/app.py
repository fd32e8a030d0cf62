"""
Defines the command-line interface for the application using Typer.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from nong_replacer import __version__
from nong_replacer.cli import dialogs
from nong_replacer.cli.formatters import (
    error_line,
    format_error_with_suggestions,
    success_line,
    usage_text,
)
from nong_replacer.core.replacer import SongReplacer
from nong_replacer.exceptions import NongReplacerError, SongIdError
from nong_replacer.models.config import ReplacerConfig
from nong_replacer.models.source import parse_song_id

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("nong_replacer")

HELP_TOKENS = ("help", "--help", "-help")

app = typer.Typer(
    name="nong-replacer",
    help="Replace a Geometry Dash song with a local file or a URL.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _exit_with_usage(ctx: typer.Context, requested: bool) -> None:
    console.print(usage_text(ctx.find_root().info_name or "nong-replacer"), markup=False)
    raise typer.Exit(code=0 if requested else 1)


@app.command(context_settings={"help_option_names": ["--help", "-help"]})
def replace(
    ctx: typer.Context,
    song_id: str | None = typer.Argument(
        None, help="Numeric ID of the song to replace.", show_default=False
    ),
    source: str | None = typer.Argument(
        None,
        help="Path or http(s) URL of the new song. Omit to pick a file.",
        show_default=False,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """Replace the song with the given ID."""
    if version:
        console.print(f"[bold]nong-replacer[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    if song_id is None or song_id in HELP_TOKENS:
        _exit_with_usage(ctx, requested=song_id is not None)

    log_level = "WARNING"
    if verbose >= 2:
        log_level = "DEBUG"
    elif verbose == 1:
        log_level = "INFO"
    logging.getLogger("nong_replacer").setLevel(log_level)

    try:
        parsed_id = parse_song_id(song_id)
    except SongIdError as e:
        console.print(f"[red]Error parsing song ID:[/red] {escape(str(e))}")
        _exit_with_usage(ctx, requested=False)

    replacer = SongReplacer(
        ReplacerConfig.from_env(),
        pick_file=dialogs.pick_song_file,
        pick_directory=dialogs.pick_songs_dir,
    )
    try:
        result = replacer.replace(parsed_id, source)
    except NongReplacerError as e:
        console.print(error_line(e))
        if verbose:
            console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    console.print(success_line(result.destination, result.transcoded))
