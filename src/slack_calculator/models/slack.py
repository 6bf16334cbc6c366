"""Slack slash command payload model."""

from urllib.parse import parse_qs

from pydantic import BaseModel


class SlashCommand(BaseModel):
    """Fields of a form-encoded slash command invocation that the service uses."""

    command: str
    text: str = ""
    user_id: str | None = None
    channel_id: str | None = None
    response_url: str | None = None

    @classmethod
    def from_form_body(cls, raw_body: bytes) -> "SlashCommand":
        """Parse an ``application/x-www-form-urlencoded`` body (first value per key)."""
        form = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
        fields = {key: values[0] for key, values in form.items() if key in cls.model_fields}
        return cls(**fields)
