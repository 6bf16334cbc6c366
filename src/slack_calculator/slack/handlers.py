"""Slash command dispatch: parse, calculate, format."""

import logging

from fastapi.responses import JSONResponse

from slack_calculator.calculator import (
    CalculationError,
    Expression,
    ExpressionError,
    calculate,
)
from slack_calculator.models.slack import SlashCommand
from slack_calculator.slack.blocks import (
    build_error_blocks,
    build_response_body,
    build_success_blocks,
)

logger = logging.getLogger(__name__)


def handle_slash_command(command: SlashCommand) -> JSONResponse:
    """Evaluate a verified slash command and return the Slack response body.

    Parse and calculation errors are user errors: they are reported back in
    the channel as error blocks with a 200 status, not as HTTP failures.
    """
    try:
        expression = Expression.parse(command.command, command.text)
        calculation = calculate(expression)
    except (ExpressionError, CalculationError) as exc:
        logger.info(
            "Calculation rejected for %s %r: %s", command.command, command.text, exc
        )
        return JSONResponse(build_response_body(build_error_blocks(str(exc))))

    logger.info("Calculated %s = %s for user %s", expression, calculation, command.user_id)
    return JSONResponse(build_response_body(build_success_blocks(expression, calculation)))
