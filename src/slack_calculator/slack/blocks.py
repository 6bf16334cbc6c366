"""Block Kit response bodies for calculation results and errors.

Built with slack_sdk's block models and serialized with ``to_dict()`` so the
response body is exactly what Slack expects for a slash command reply.
"""

from slack_sdk.models.blocks import MarkdownTextObject, PlainTextObject, SectionBlock

from slack_calculator.calculator import Expression, format_number

SUCCESS_HEADING = "*Calculation complete* :white_check_mark:"
ERROR_HEADING = "*Unable to calculate* :warning:"
EXPRESSION_HEADING = "*Expression*"
CALCULATION_HEADING = "*Calculation*"


def build_success_blocks(expression: Expression, calculation: float) -> list[dict]:
    """Heading section with a two-column expression / calculation field grid."""
    block = SectionBlock(
        text=MarkdownTextObject(text=SUCCESS_HEADING),
        fields=[
            MarkdownTextObject(text=EXPRESSION_HEADING),
            MarkdownTextObject(text=CALCULATION_HEADING),
            PlainTextObject(text=str(expression)),
            PlainTextObject(text=format_number(calculation)),
        ],
    )
    return [block.to_dict()]


def build_error_blocks(message: str) -> list[dict]:
    """Heading section followed by the plain-text error message."""
    return [
        SectionBlock(text=MarkdownTextObject(text=ERROR_HEADING)).to_dict(),
        SectionBlock(text=PlainTextObject(text=message)).to_dict(),
    ]


def build_response_body(blocks: list[dict]) -> dict:
    """Wrap blocks in an in-channel slash command response."""
    return {"response_type": "in_channel", "blocks": blocks}
