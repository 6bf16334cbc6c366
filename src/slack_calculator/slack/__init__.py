"""Slack ingress: slash command routing, signature verification, and Block Kit replies."""

from slack_calculator.slack.handlers import handle_slash_command
from slack_calculator.slack.router import router
from slack_calculator.slack.verification import verify_slack_request

__all__ = [
    "handle_slash_command",
    "router",
    "verify_slack_request",
]
