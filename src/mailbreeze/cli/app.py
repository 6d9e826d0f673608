"""Main CLI application for mailbreeze."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import IntEnum

import msgspec
import typer
from rich.console import Console

from mailbreeze.cli.atyper import ATyper
from mailbreeze.cli.display import show_error
from mailbreeze.client import MailBreeze
from mailbreeze.config.credentials import MissingApiKeyError
from mailbreeze.display.json import output_json_error, output_json_pretty
from mailbreeze.errors.types import ErrorKind, MailBreezeError

# Create the main app
app = ATyper(
    name="mailbreeze",
    help="Send and manage email through the MailBreeze API",
    add_completion=True,
    no_args_is_help=True,
)


class ExitCode(IntEnum):
    """Exit codes for mailbreeze."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 2
    NETWORK_ERROR = 3
    CONFIG_ERROR = 4


def _show_version(value: bool) -> None:
    if value:
        from mailbreeze import __version__

        typer.echo(f"mailbreeze {__version__}")
        raise typer.Exit()


def exit_code_for(error: Exception) -> ExitCode:
    """Map a terminal error to the process exit code."""
    if isinstance(error, MailBreezeError):
        if error.kind is ErrorKind.AUTHENTICATION:
            return ExitCode.AUTH_ERROR
        if error.is_timeout or error.is_network_error:
            return ExitCode.NETWORK_ERROR
        return ExitCode.GENERAL_ERROR
    if isinstance(error, (ValueError, msgspec.ValidationError)):
        return ExitCode.CONFIG_ERROR
    return ExitCode.GENERAL_ERROR


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log requests and retries"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Enable quiet mode"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    """MailBreeze - send email, manage lists and verify addresses."""
    from mailbreeze.config import LoggingConfig, get_config
    from mailbreeze.core.logging import configure_logging

    # Quiet wins over verbose
    if verbose and quiet:
        verbose = False

    ctx.meta["json"] = json
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet

    # A broken config still lets `config reset` run; API commands fail on it later
    try:
        logging_config = get_config().logging
    except (ValueError, msgspec.ValidationError):
        logging_config = LoggingConfig()

    level = "debug" if verbose else logging_config.level
    configure_logging(level, json=logging_config.json)


@asynccontextmanager
async def api_session(ctx: typer.Context) -> AsyncIterator[MailBreeze]:
    """Open a client for one command and turn API errors into exit codes."""
    json_mode = ctx.meta.get("json", False)

    try:
        client = MailBreeze()
    except (ValueError, msgspec.ValidationError) as e:
        if json_mode:
            output_json_pretty({"error": {"kind": "config", "message": str(e)}})
        else:
            console = Console(stderr=True)
            console.print(f"[red]{e}[/red]")
            if isinstance(e, MissingApiKeyError):
                console.print("Run: [cyan]mailbreeze key set[/cyan]")
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e

    try:
        async with client:
            yield client
    except MailBreezeError as e:
        if json_mode:
            output_json_error(e)
        else:
            show_error(e)
        raise typer.Exit(exit_code_for(e)) from e


def run_app() -> None:
    """Run the CLI app."""
    app()


# Command modules register themselves on import; must come after app is defined
from mailbreeze.cli.commands import config as config_cmd  # noqa: E402
from mailbreeze.cli.commands import emails as emails_cmd  # noqa: E402
from mailbreeze.cli.commands import key as key_cmd  # noqa: E402
from mailbreeze.cli.commands import send  # noqa: E402, F401
from mailbreeze.cli.commands import verify as verify_cmd  # noqa: E402

app.add_typer(emails_cmd.emails_app, name="emails")
app.add_typer(verify_cmd.verify_app, name="verify")
app.add_typer(key_cmd.key_app, name="key")
app.add_typer(config_cmd.config_app, name="config")
