"""Rich display components for mailbreeze CLI."""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mailbreeze.errors.messages import get_remediation
from mailbreeze.errors.types import ErrorKind, MailBreezeError
from mailbreeze.models import (
    Email,
    EmailStats,
    PaginatedList,
    VerificationStats,
    VerificationStatus,
    VerifyEmailResult,
)

STATUS_COLORS = {
    "delivered": "green",
    "sent": "green",
    "valid": "green",
    "completed": "green",
    "queued": "yellow",
    "pending": "yellow",
    "processing": "yellow",
    "risky": "yellow",
    "unknown": "dim",
    "bounced": "red",
    "failed": "red",
    "invalid": "red",
}


def _status(value: str) -> Text:
    return Text(value, style=STATUS_COLORS.get(value, ""))


class ErrorDisplay:
    """Rich renderable for displaying a terminal API error."""

    def __init__(self, error: MailBreezeError):
        self.error = error

    def __rich_console__(self, console: Console, options: dict) -> RenderableType:
        error = self.error
        color = "yellow" if error.kind is ErrorKind.RATE_LIMIT else "red"

        content = Text()
        content.append(error.message, style=color)

        details = [f"code: {error.code}"]
        if error.status_code:
            details.append(f"status: {error.status_code}")
        if error.request_id:
            details.append(f"request id: {error.request_id}")
        content.append("\n" + "  ".join(details), style="dim")

        if remediation := get_remediation(error):
            content.append("\n\n")
            content.append(Text.from_markup(remediation))

        title = "Error"
        if error.kind is not ErrorKind.GENERIC:
            title = f"{title} {escape(f'[{error.kind}]')}"

        yield Panel(content, title=title, border_style=color, expand=False)


def show_error(error: MailBreezeError, console: Console | None = None) -> None:
    """Display an API error with remediation."""
    if console is None:
        console = Console(stderr=True)
    console.print(ErrorDisplay(error))


def render_emails(page: PaginatedList[Email]) -> Table:
    """Build a table for a page of emails."""
    pagination = page.pagination
    table = Table(
        title=f"Emails (page {pagination.page} of {pagination.total_pages})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("ID", style="cyan")
    table.add_column("To")
    table.add_column("Subject")
    table.add_column("Status")
    table.add_column("Created", style="dim")

    for email in page.data:
        table.add_row(
            email.id,
            ", ".join(email.to),
            email.subject,
            _status(email.status),
            email.created_at,
        )
    return table


def render_email(email: Email) -> Table:
    """Build a key/value grid for one email."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()

    grid.add_row("ID", email.id)
    grid.add_row("From", email.from_)
    grid.add_row("To", ", ".join(email.to))
    if email.cc:
        grid.add_row("Cc", ", ".join(email.cc))
    grid.add_row("Subject", email.subject)
    grid.add_row("Status", _status(email.status))
    grid.add_row("Created", email.created_at)
    for label, value in (
        ("Sent", email.sent_at),
        ("Delivered", email.delivered_at),
        ("Opened", email.opened_at),
        ("Clicked", email.clicked_at),
    ):
        if value:
            grid.add_row(label, value)
    return grid


def render_email_stats(stats: EmailStats) -> Table:
    table = Table(title="Email Statistics", show_header=True, header_style="bold")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for label, value in (
        ("Sent", stats.sent),
        ("Delivered", stats.delivered),
        ("Bounced", stats.bounced),
        ("Opened", stats.opened),
        ("Clicked", stats.clicked),
        ("Complained", stats.complained),
    ):
        table.add_row(label, str(value))
    for label, rate in (
        ("Delivery rate", stats.delivery_rate),
        ("Open rate", stats.open_rate),
        ("Click rate", stats.click_rate),
        ("Bounce rate", stats.bounce_rate),
    ):
        table.add_row(label, f"{rate:.1f}%")
    return table


def render_verify_results(results: list[VerifyEmailResult]) -> Table:
    """Build a table of verification results."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Email", style="cyan")
    table.add_column("Result")
    table.add_column("Reason", style="dim")
    table.add_column("Risk", justify="right")

    for result in results:
        table.add_row(
            result.email,
            _status(result.result),
            result.reason or "",
            "" if result.risk_score is None else f"{result.risk_score:g}",
        )
    return table


def render_verification_status(status: VerificationStatus) -> RenderableType:
    summary = Text()
    summary.append(f"Batch {status.id}: ", style="bold")
    summary.append_text(_status(status.status))
    summary.append(
        f"  ({status.processed_emails}/{status.total_emails} processed)", style="dim"
    )
    if not status.results:
        return summary

    return Group(summary, render_verify_results(status.results))


def render_verification_stats(stats: VerificationStats) -> Table:
    table = Table(
        title="Verification Statistics", show_header=True, header_style="bold"
    )
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for label, value in (
        ("Total verified", stats.total_verified),
        ("Valid", stats.valid),
        ("Invalid", stats.invalid),
        ("Risky", stats.risky),
        ("Unknown", stats.unknown),
        ("Cached", stats.cached),
        ("Credits used", stats.credits_used),
    ):
        table.add_row(label, str(value))
    return table
