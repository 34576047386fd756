"""Main CLI application using Typer."""
import asyncio
import json
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..content import CodeBlockSegment, MessageContent
from ..ui.formatting import render_code_block, render_plain_text
from .loaders import get_code_theme, get_log_level, load_conversation

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatbubble",
    help="Chat message bubbles: code-fence parsing and a terminal viewer",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def parse(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Text file holding a raw message body"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the parsed segments as JSON"
    ),
    render: bool = typer.Option(
        False,
        "--render",
        "-r",
        help="Render the segments the way a bubble shows them"
    ),
):
    """Parse a message into plain text and code block segments."""
    try:
        raw = file.read_text(encoding="utf-8")
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    content = MessageContent.from_text(raw)

    if as_json:
        console.print_json(json.dumps(content.model_dump(mode="json")["segments"]))
        return

    if render:
        theme = get_code_theme()
        for segment in content.segments:
            if isinstance(segment, CodeBlockSegment):
                console.print(Panel(render_code_block(segment, theme), title=segment.language, title_align="right"))
            else:
                console.print(render_plain_text(segment))
        return

    table = Table(title=f"Segments in {file.name}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="bold cyan")
    table.add_column("Language", style="yellow")
    table.add_column("Content")

    for index, segment in enumerate(content.segments):
        if isinstance(segment, CodeBlockSegment):
            language = segment.language if segment.closed else f"{segment.language} (unclosed)"
            table.add_row(str(index), "code", language, segment.code)
        else:
            table.add_row(str(index), "text", "", render_plain_text(segment))

    console.print(table)
    console.print(f"[dim]{len(content.code_blocks)} code block(s)[/dim]")


@app.command()
def view(
    conversation: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Conversation file (.json, .yaml)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    stream: bool = typer.Option(
        False,
        "--stream",
        "-s",
        help="Replay the last response as a stream"
    ),
):
    """Open a conversation in the terminal viewer."""
    try:
        messages = load_conversation(conversation)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if not messages:
        console.print("[yellow]Conversation has no messages.[/yellow]")
        raise typer.Exit(code=1)

    async def _view():
        from ..ui import run_textual_tui

        await run_textual_tui(
            messages=messages,
            log_level=log_level or get_log_level(),
            code_theme=get_code_theme(),
            stream_last=stream,
        )

    try:
        asyncio.run(_view())
    except KeyboardInterrupt:
        pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
