"""Config management commands for mailbreeze."""

from __future__ import annotations

import msgspec
import msgspec.toml
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from mailbreeze.cli.app import ExitCode
from mailbreeze.cli.atyper import ATyper
from mailbreeze.config.paths import config_dir
from mailbreeze.config.paths import config_file
from mailbreeze.config.paths import credentials_file
from mailbreeze.config.settings import get_config
from mailbreeze.config.settings import reset_config
from mailbreeze.display.json import output_json_pretty

# Create config group
config_app = ATyper(help="Manage configuration settings.", no_args_is_help=True)


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Display current settings, including environment overrides."""
    console = Console()
    json_mode = ctx.meta.get("json", False)
    verbose = ctx.meta.get("verbose", False)
    quiet = ctx.meta.get("quiet", False)

    try:
        config = get_config()
    except (ValueError, msgspec.ValidationError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e

    config_path = config_file()

    if json_mode:
        output_json_pretty({**msgspec.to_builtins(config), "path": str(config_path)})
        return

    if quiet:
        console.print(str(config_path))
        return

    toml_data = msgspec.toml.encode(config)
    console.print(
        Panel(Syntax(toml_data.decode(), "toml"), title=f"Config: {config_path}")
    )

    if verbose and not config_path.exists():
        console.print("[dim]Using default configuration (file not created yet)[/dim]")


@config_app.command("path")
def config_path_command(ctx: typer.Context) -> None:
    """Show paths used by mailbreeze."""
    console = Console()
    paths = {
        "config_dir": str(config_dir()),
        "config_file": str(config_file()),
        "credentials_file": str(credentials_file()),
    }

    if ctx.meta.get("json", False):
        output_json_pretty(paths)
        return

    if ctx.meta.get("quiet", False):
        console.print(paths["config_dir"])
        return

    console.print(f"Config dir:    {paths['config_dir']}")
    console.print(f"Config file:   {paths['config_file']}")
    console.print(f"Credentials:   {paths['credentials_file']}")


@config_app.command("reset")
def config_reset_command(
    ctx: typer.Context,
    confirm: bool = typer.Option(
        False,
        "--confirm",
        "-y",
        help="Skip confirmation prompt",
    ),
) -> None:
    """Reset configuration to defaults."""
    console = Console()
    json_mode = ctx.meta.get("json", False)

    # JSON mode never prompts
    if not confirm and not json_mode:
        confirm = typer.confirm(
            "This will reset your configuration to defaults. Continue?",
            default=False,
        )
        if not confirm:
            console.print("Reset cancelled")
            raise typer.Exit()

    cfg_path = config_file()
    existed = cfg_path.exists()
    reset_config()

    if json_mode:
        output_json_pretty(
            {
                "reset": existed,
                "deleted": str(cfg_path) if existed else None,
            }
        )
        return

    if existed:
        console.print("[green]✓[/green] Configuration reset to defaults")
        console.print(f"\nDeleted: {cfg_path}")
    else:
        console.print("[yellow]No custom configuration to reset[/yellow]")
