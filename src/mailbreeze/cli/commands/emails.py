"""Email inspection commands for mailbreeze."""

from __future__ import annotations

import typer
from rich.console import Console

from mailbreeze.cli.app import api_session
from mailbreeze.cli.atyper import ATyper
from mailbreeze.cli.display import render_email
from mailbreeze.cli.display import render_email_stats
from mailbreeze.cli.display import render_emails
from mailbreeze.display.json import output_json_pretty

# Create emails group
emails_app = ATyper(help="Inspect sent emails.", no_args_is_help=True)


@emails_app.command("list")
async def emails_list_command(
    ctx: typer.Context,
    page: int = typer.Option(None, "--page", "-p", min=1, help="Page number"),
    limit: int = typer.Option(None, "--limit", "-l", min=1, help="Emails per page"),
    status: str = typer.Option(None, "--status", help="Filter by delivery status"),
    to: str = typer.Option(None, "--to", help="Filter by recipient"),
    from_: str = typer.Option(None, "--from", help="Filter by sender"),
    start_date: str = typer.Option(None, "--since", help="Earliest send date"),
    end_date: str = typer.Option(None, "--until", help="Latest send date"),
) -> None:
    """List sent emails."""
    console = Console()
    json_mode = ctx.meta.get("json", False)
    quiet = ctx.meta.get("quiet", False)

    async with api_session(ctx) as client:
        result = await client.emails.list(
            page=page,
            limit=limit,
            status=status,
            to=to,
            from_=from_,
            start_date=start_date,
            end_date=end_date,
        )

    if json_mode:
        output_json_pretty(result)
        return

    if quiet:
        for email in result.data:
            console.print(f"{email.id} {email.status}")
        return

    if not result.data:
        console.print("[dim]No emails found[/dim]")
        return

    console.print(render_emails(result))
    if result.pagination.has_next:
        console.print(
            f"\n[dim]More results: --page {result.pagination.page + 1}[/dim]"
        )


@emails_app.command("get")
async def emails_get_command(
    ctx: typer.Context,
    email_id: str = typer.Argument(..., help="Email ID"),
) -> None:
    """Show a single email."""
    async with api_session(ctx) as client:
        email = await client.emails.get(email_id)

    if ctx.meta.get("json", False):
        output_json_pretty(email)
        return

    console = Console()
    if ctx.meta.get("quiet", False):
        console.print(email.status)
        return
    console.print(render_email(email))


@emails_app.command("stats")
async def emails_stats_command(ctx: typer.Context) -> None:
    """Show email statistics for the domain."""
    async with api_session(ctx) as client:
        stats = await client.emails.stats()

    if ctx.meta.get("json", False):
        output_json_pretty(stats)
        return

    Console().print(render_email_stats(stats))
