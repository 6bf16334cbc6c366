"""Slack slash command router with signature verification."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from slack_calculator.models.slack import SlashCommand
from slack_calculator.slack.handlers import handle_slash_command
from slack_calculator.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/commands")
async def slack_commands(
    command: SlashCommand = Depends(verify_slack_request),
) -> JSONResponse:
    """Receive a verified `/add`, `/subtract`, `/multiply` or `/divide` command."""
    return handle_slash_command(command)
