"""Data models for inbound Slack payloads."""

from slack_calculator.models.slack import SlashCommand

__all__ = [
    "SlashCommand",
]
