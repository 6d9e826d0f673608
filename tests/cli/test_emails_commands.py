"""Tests for emails and verify CLI commands."""

from __future__ import annotations

import msgspec
from conftest import envelope
from typer.testing import CliRunner

from mailbreeze.cli.app import app

runner = CliRunner()

EMAIL = {
    "id": "email_1",
    "from": "hello@acme.test",
    "to": ["user@example.com"],
    "subject": "Welcome aboard",
    "status": "delivered",
    "createdAt": "2025-01-15T12:00:00Z",
}

PAGINATION = {
    "page": 1,
    "limit": 20,
    "total": 40,
    "totalPages": 2,
    "hasNext": True,
    "hasPrev": False,
}


class TestEmailsCommands:
    """Tests for mailbreeze emails."""

    def test_list(self, api):
        log = api(lambda r: envelope({"emails": [EMAIL], "pagination": PAGINATION}))

        result = runner.invoke(app, ["emails", "list", "--status", "delivered", "--limit", "20"])

        assert result.exit_code == 0
        assert "email_1" in result.stdout
        assert "--page 2" in result.stdout
        assert dict(log.last.url.params) == {"limit": "20", "status": "delivered"}

    def test_list_empty(self, api):
        api(lambda r: envelope([]))

        result = runner.invoke(app, ["emails", "list"])

        assert "No emails found" in result.stdout

    def test_list_json_uses_wire_names(self, api):
        api(lambda r: envelope({"emails": [EMAIL], "pagination": PAGINATION}))

        result = runner.invoke(app, ["--json", "emails", "list"])

        data = msgspec.json.decode(result.stdout)
        assert data["data"][0]["from"] == "hello@acme.test"
        assert data["pagination"]["hasNext"] is True

    def test_list_quiet(self, api):
        api(lambda r: envelope({"emails": [EMAIL], "pagination": PAGINATION}))

        result = runner.invoke(app, ["-q", "emails", "list"])

        assert result.stdout.strip() == "email_1 delivered"

    def test_get(self, api):
        log = api(lambda r: envelope(EMAIL))

        result = runner.invoke(app, ["emails", "get", "email_1"])

        assert result.exit_code == 0
        assert log.last.url.path == "/emails/email_1"
        assert "Welcome aboard" in result.stdout

    def test_stats(self, api):
        api(lambda r: envelope({"stats": {"sent": 12, "deliveryRate": 91.5}}))

        result = runner.invoke(app, ["emails", "stats"])

        assert result.exit_code == 0
        assert "91.5%" in result.stdout

    def test_stats_json(self, api):
        api(lambda r: envelope({"stats": {"sent": 12}}))

        result = runner.invoke(app, ["--json", "emails", "stats"])

        assert msgspec.json.decode(result.stdout)["sent"] == 12


class TestVerifyCommands:
    """Tests for mailbreeze verify."""

    def test_verify_email(self, api):
        log = api(
            lambda r: envelope(
                {"email": "user@example.com", "isValid": True, "result": "valid", "cached": True}
            )
        )

        result = runner.invoke(app, ["verify", "email", "user@example.com"])

        assert result.exit_code == 0
        assert msgspec.json.decode(log.last.content) == {"email": "user@example.com"}
        assert "valid" in result.stdout
        assert "cache" in result.stdout

    def test_verify_email_quiet(self, api):
        api(lambda r: envelope({"email": "x@y.test", "isValid": False, "result": "invalid"}))

        result = runner.invoke(app, ["--quiet", "verify", "email", "x@y.test"])

        assert result.stdout.strip() == "invalid"

    def test_batch_started(self, api):
        log = api(
            lambda r: envelope(
                {
                    "verificationId": "ver_1",
                    "totalEmails": 2,
                    "status": "processing",
                    "creditsDeducted": 2,
                }
            )
        )

        result = runner.invoke(app, ["verify", "batch", "a@b.test", "c@d.test"])

        assert result.exit_code == 0
        assert msgspec.json.decode(log.last.content) == {"emails": ["a@b.test", "c@d.test"]}
        assert "ver_1" in result.stdout

    def test_status(self, api):
        log = api(
            lambda r: envelope(
                {
                    "id": "ver_1",
                    "status": "completed",
                    "totalEmails": 1,
                    "processedEmails": 1,
                    "results": [
                        {"email": "a@b.test", "isValid": True, "result": "valid"}
                    ],
                }
            )
        )

        result = runner.invoke(app, ["verify", "status", "ver_1"])

        assert result.exit_code == 0
        assert log.last.url.params["includeResults"] == "true"
        assert "a@b.test" in result.stdout

    def test_stats_json(self, api):
        api(lambda r: envelope({"totalVerified": 7, "valid": 5}))

        result = runner.invoke(app, ["--json", "verify", "stats"])

        data = msgspec.json.decode(result.stdout)
        assert data["totalVerified"] == 7
