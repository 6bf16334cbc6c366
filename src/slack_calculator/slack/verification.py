"""Slack request signature verification as a FastAPI dependency."""

import asyncio
import logging

from fastapi import HTTPException, Request
from pydantic import ValidationError

from slack_calculator.config import ConfigurationError, get_settings
from slack_calculator.models.slack import SlashCommand
from slack_calculator.security import InboundRequest, build_request_gate

logger = logging.getLogger(__name__)


async def verify_slack_request(request: Request) -> SlashCommand:
    """Verify the Slack request signature and return the parsed slash command.

    Reads the raw body FIRST (before any form parsing) to ensure the
    signature verification uses the exact bytes Slack signed. The gate runs in
    a worker thread because secret resolution makes blocking GCP calls.

    Raises HTTPException(500) when configuration is missing or the secret
    cannot be resolved, and HTTPException(400) when the signature is invalid
    or the verified body is not a slash command.
    """
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        raise HTTPException(status_code=500, detail="Server configuration error") from exc

    body = await request.body()
    inbound = InboundRequest.from_headers(request.headers, body)

    gate = build_request_gate(settings)
    decision = await asyncio.to_thread(gate.authorize, inbound)
    if not decision.proceed:
        raise HTTPException(status_code=decision.status_code, detail=decision.message)

    try:
        return SlashCommand.from_form_body(body)
    except (ValidationError, UnicodeDecodeError):
        logger.warning("Verified request body is not a slash command payload")
        raise HTTPException(status_code=400, detail="Invalid slash command payload") from None
