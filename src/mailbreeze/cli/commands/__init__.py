"""CLI commands for mailbreeze."""
