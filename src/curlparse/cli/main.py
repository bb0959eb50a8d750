"""curlparse CLI - turn curl commands into structured HTTP requests."""

import json
import os
import sys
from pathlib import Path
from typing import Annotated, Any

import click
import typer
from rich.panel import Panel
from rich.table import Table

import curlparse
from curlparse import console as cp_console
from curlparse.config import get_settings
from curlparse.exceptions import CommandSourceError
from curlparse.logging import configure_logging, get_logger, level_for_verbosity
from curlparse.models import ParsedRequest
from curlparse.parser import parse

# Configure logging early using env vars directly; the -v/-vv and
# --log-format flags in main_callback() may reconfigure later.
configure_logging(
    level=os.environ.get("CURLPARSE_LOG_LEVEL", "WARNING"),
    json_output=os.environ.get("CURLPARSE_LOG_FORMAT", "console") == "json",
)

LOG = get_logger(__name__)

app = typer.Typer(
    name="curlparse",
    help="""
    curlparse - turn curl commands into structured HTTP requests

    \b
    Quick start:
      curlparse parse "curl -X POST -d '{\\"a\\": 1}' https://api.example.com"
      pbpaste | curlparse parse --file -
      curlparse parse --file request.sh --format table
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v for info, -vv for debug)",
        ),
    ] = 0,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            click_type=click.Choice(["console", "json"]),
            help="Log output format: console (human-readable) or json (structured)",
        ),
    ] = None,
) -> None:
    """curlparse - turn curl commands into structured HTTP requests."""
    settings = get_settings()
    json_output = (log_format or settings.log_format) == "json"
    configure_logging(
        level=level_for_verbosity(verbose, default=settings.log_level),
        json_output=json_output,
    )


def _read_command(command: str | None, file: str | None) -> str:
    """Resolve the curl command from an argument, a file, or ``-`` (stdin).

    Raises:
        CommandSourceError: If no command was given, the file cannot be
            read, or the command is blank.
    """
    if file == "-":
        text = sys.stdin.read()
    elif file:
        path = Path(file)
        if not path.is_file():
            raise CommandSourceError(f"File not found: {file}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandSourceError(f"Cannot read {file}: {exc}") from exc
    elif command is not None:
        text = command
    else:
        raise CommandSourceError("No curl command given. Pass it as an argument or use --file.")

    if not text.strip():
        raise CommandSourceError("The curl command is empty.")
    return text


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _request_table(request: ParsedRequest) -> Table:
    table = Table(title="Parsed request", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim")
    table.add_column("Value", overflow="fold")

    table.add_row("method", request.method)
    table.add_row("url", request.url or "[dim]-[/dim]")
    for name, value in request.headers.items():
        table.add_row(f"header {name}", value)
    if request.body is not None:
        table.add_row("body", _format_value(request.body))
    for name, value in request.form.items():
        table.add_row(f"form {name}", value)
    for name, value in request.cookies.items():
        table.add_row(f"cookie {name}", value)
    if request.auth.type != "none":
        auth = request.auth
        detail = auth.token if auth.type == "bearer" else f"{auth.username}:{auth.password}"
        table.add_row(f"auth {auth.type}", detail)
    for name, value in request.options.to_dict().items():
        if value not in (None, False):
            table.add_row(f"option {name}", _format_value(value))
    return table


@app.command("parse")
def parse_command(
    command: Annotated[
        str | None,
        typer.Argument(help="curl command to parse (quote it as one argument)"),
    ] = None,
    file: Annotated[
        str | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the command from a file, or '-' for stdin",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            click_type=click.Choice(["json", "table"]),
            help="Output format (default: CURLPARSE_OUTPUT_FORMAT or json)",
        ),
    ] = None,
) -> None:
    """Parse a curl command and print the request it describes.

    \b
    Examples:
        curlparse parse "curl -u admin:secret https://api.example.com/users"
        curlparse parse --file request.sh --format table
        pbpaste | curlparse parse -f -
    """
    settings = get_settings()

    try:
        text = _read_command(command, file)
    except CommandSourceError as exc:
        cp_console.error(exc.user_message)
        raise typer.Exit(1) from None

    request = parse(text)
    LOG.info("command_parsed", method=request.method, url=request.url)

    if not request.url:
        cp_console.warn("No URL found in the command")

    if (output_format or settings.output_format) == "table":
        cp_console.out_console.print(_request_table(request))
    else:
        cp_console.out_console.print_json(data=request.to_dict(), indent=settings.json_indent)


@app.command("version")
def version() -> None:
    """Show curlparse version."""
    cp_console.out_console.print(
        Panel(
            f"[bold cyan]curlparse[/bold cyan] v{curlparse.__version__}",
            title="curl commands to structured requests",
            border_style="cyan",
        )
    )


@app.command("config")
def config() -> None:
    """Show current curlparse configuration."""
    settings = get_settings()

    info = f"""
[dim]Log level:[/dim]      {settings.log_level}
[dim]Log format:[/dim]     {settings.log_format}
[dim]Output format:[/dim]  {settings.output_format}
[dim]JSON indent:[/dim]    {settings.json_indent}"""

    cp_console.out_console.print(Panel(info.strip(), title="⚙ Configuration", border_style="cyan"))


if __name__ == "__main__":
    app()
