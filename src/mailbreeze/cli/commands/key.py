"""API key management commands for mailbreeze."""

from __future__ import annotations

import typer
from rich.console import Console

from mailbreeze.cli.app import ExitCode
from mailbreeze.cli.atyper import ATyper
from mailbreeze.config.credentials import API_KEY_ENV_VAR
from mailbreeze.config.credentials import check_credential_permissions
from mailbreeze.config.credentials import delete_api_key
from mailbreeze.config.credentials import find_api_key
from mailbreeze.config.credentials import store_api_key
from mailbreeze.config.paths import credentials_file
from mailbreeze.display.json import output_json_pretty

# Create key group
key_app = ATyper(help="Manage the MailBreeze API key.")

SOURCE_LABELS = {
    "env": f"{API_KEY_ENV_VAR} environment variable",
    "file": "credential file",
}


def mask_key(api_key: str) -> str:
    """Show only the start and end of a key."""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}…{api_key[-4:]}"


@key_app.callback(invoke_without_command=True)
def key_callback(ctx: typer.Context) -> None:
    """Show API key status.

    If no subcommand is provided, shows where the key is loaded from.
    """
    if ctx.invoked_subcommand is not None:
        return

    console = Console()
    json_mode = ctx.meta.get("json", False)
    quiet = ctx.meta.get("quiet", False)
    verbose = ctx.meta.get("verbose", False)

    api_key, source = find_api_key()
    path = credentials_file()

    if json_mode:
        output_json_pretty(
            {
                "configured": api_key is not None,
                "source": source,
                "path": str(path),
            }
        )
        return

    if quiet:
        console.print("configured" if api_key else "not configured")
        return

    if api_key:
        console.print(
            f"[green]✓[/green] API key configured ({SOURCE_LABELS[source]}): "
            f"{mask_key(api_key)}"
        )
    else:
        console.print("[yellow]✗[/yellow] API key not configured")
        console.print("\n[dim]Run 'mailbreeze key set' to configure[/dim]")

    if not check_credential_permissions(path):
        console.print(
            f"[yellow]Warning:[/yellow] {path} is readable by other users and is ignored"
        )

    if verbose:
        console.print(f"\n[dim]Credential file: {path}[/dim]")


@key_app.command("set")
def set_key(
    value: str = typer.Argument(None, help="API key (or enter interactively)"),
) -> None:
    """Store the API key."""
    console = Console()

    if value is None:
        value = typer.prompt("Enter MailBreeze API key", hide_input=True)

    if not value or not value.strip():
        console.print("[red]API key cannot be empty[/red]")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    try:
        path = store_api_key(value)
    except OSError as e:
        console.print(f"[red]Error saving API key:[/red] {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e

    console.print(f"[green]✓[/green] API key saved to {path}")


@key_app.command("delete")
def delete_key(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete the stored API key."""
    console = Console()

    if not force and not typer.confirm("Delete the stored API key?"):
        raise typer.Abort()

    if delete_api_key():
        console.print("[green]✓[/green] Deleted stored API key")
    else:
        console.print("[yellow]No stored API key found[/yellow]")
