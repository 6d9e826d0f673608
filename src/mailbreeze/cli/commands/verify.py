"""Email verification commands for mailbreeze."""

from __future__ import annotations

import typer
from rich.console import Console

from mailbreeze.cli.app import api_session
from mailbreeze.cli.atyper import ATyper
from mailbreeze.cli.display import render_verification_stats
from mailbreeze.cli.display import render_verification_status
from mailbreeze.cli.display import render_verify_results
from mailbreeze.display.json import output_json_pretty

# Create verify group
verify_app = ATyper(help="Verify email addresses.", no_args_is_help=True)


@verify_app.command("email")
async def verify_email_command(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Address to verify"),
) -> None:
    """Verify a single address."""
    async with api_session(ctx) as client:
        result = await client.verification.verify(address)

    if ctx.meta.get("json", False):
        output_json_pretty(result)
        return

    console = Console()
    if ctx.meta.get("quiet", False):
        console.print(result.result)
        return

    console.print(render_verify_results([result]))
    if result.cached:
        console.print("[dim]Result served from cache[/dim]")


@verify_app.command("batch")
async def verify_batch_command(
    ctx: typer.Context,
    addresses: list[str] = typer.Argument(..., help="Addresses to verify"),
) -> None:
    """Start batch verification."""
    async with api_session(ctx) as client:
        result = await client.verification.batch(list(addresses))

    if ctx.meta.get("json", False):
        output_json_pretty(result)
        return

    console = Console()
    if ctx.meta.get("quiet", False):
        console.print(result.verification_id)
        return

    if result.results:
        console.print(render_verify_results(result.results))
        return

    console.print(
        f"[green]✓[/green] Batch [cyan]{result.verification_id}[/cyan] started "
        f"({result.total_emails} addresses, {result.credits_deducted} credits)"
    )
    console.print(
        f"\n[dim]Check progress with: mailbreeze verify status {result.verification_id}[/dim]"
    )


@verify_app.command("status")
async def verify_status_command(
    ctx: typer.Context,
    verification_id: str = typer.Argument(..., help="Batch verification ID"),
) -> None:
    """Show the status of a batch verification."""
    async with api_session(ctx) as client:
        status = await client.verification.get(verification_id)

    if ctx.meta.get("json", False):
        output_json_pretty(status)
        return

    console = Console()
    if ctx.meta.get("quiet", False):
        console.print(status.status)
        return
    console.print(render_verification_status(status))


@verify_app.command("stats")
async def verify_stats_command(ctx: typer.Context) -> None:
    """Show verification statistics."""
    async with api_session(ctx) as client:
        stats = await client.verification.stats()

    if ctx.meta.get("json", False):
        output_json_pretty(stats)
        return

    Console().print(render_verification_stats(stats))
