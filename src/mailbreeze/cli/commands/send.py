"""Send command for mailbreeze."""

from __future__ import annotations

import typer
from rich.console import Console

from mailbreeze.cli.app import api_session
from mailbreeze.cli.app import app
from mailbreeze.display.json import output_json_pretty
from mailbreeze.models import SendEmailParams


def parse_variables(pairs: list[str]) -> dict[str, str] | None:
    """Parse repeated ``key=value`` options into a mapping."""
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--var")
        variables[key] = value
    return variables or None


@app.command("send")
async def send_command(
    ctx: typer.Context,
    from_: str = typer.Option(..., "--from", help="Sender address"),
    to: list[str] = typer.Option(..., "--to", help="Recipient (repeatable)"),
    cc: list[str] = typer.Option(None, "--cc", help="Cc recipient (repeatable)"),
    bcc: list[str] = typer.Option(None, "--bcc", help="Bcc recipient (repeatable)"),
    subject: str = typer.Option(None, "--subject", "-s", help="Subject line"),
    html: str = typer.Option(None, "--html", help="HTML body"),
    text: str = typer.Option(None, "--text", help="Plain text body"),
    template: str = typer.Option(None, "--template", help="Template ID"),
    var: list[str] = typer.Option(
        None, "--var", help="Template variable as key=value (repeatable)"
    ),
    idempotency_key: str = typer.Option(
        None, "--idempotency-key", help="Deduplicate retried sends"
    ),
) -> None:
    """Send an email."""
    console = Console()
    json_mode = ctx.meta.get("json", False)
    quiet = ctx.meta.get("quiet", False)

    params = SendEmailParams(
        from_=from_,
        to=list(to),
        cc=list(cc) if cc else None,
        bcc=list(bcc) if bcc else None,
        subject=subject,
        html=html,
        text=text,
        template_id=template,
        variables=parse_variables(var or []),
    )

    async with api_session(ctx) as client:
        result = await client.emails.send(params, idempotency_key=idempotency_key)

    if json_mode:
        output_json_pretty(result)
        return

    if quiet:
        console.print(result.id)
        return

    console.print(f"[green]✓[/green] Email {result.status}: [cyan]{result.id}[/cyan]")
