"""
Functions for formatting messages in the console using Rich.
"""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def usage_text(prog_name: str) -> str:
    return f"Usage: {prog_name} <song ID> [path or URL]"


def error_line(error: Exception) -> str:
    """A single-line error message, markup-safe."""
    return f"[bold red]Error:[/bold red] {escape(str(error))}"


def success_line(destination, transcoded: bool) -> str:
    how = "converted" if transcoded else "copied"
    return f"[green]Success[/green] [dim]({how} to {escape(str(destination))})[/dim]"


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "SongsDirectoryError": [
            "• Launch the game once so it creates its songs folder.",
            "• Pick the folder manually when asked.",
        ],
        "DownloadError": [
            "• Check the URL points directly at an audio file.",
            "• Check your internet connection.",
        ],
        "TranscodeError": [
            "• Make sure ffmpeg is installed and on your PATH.",
            "• Or set FFMPEG_PATH to the folder containing ffmpeg.",
        ],
        "SourceError": [
            "• Pass a file path or URL after the song ID.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )
