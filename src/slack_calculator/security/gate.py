"""Request gate: the only path from an inbound webhook to business logic."""

import logging
from dataclasses import dataclass
from enum import Enum

from slack_calculator.config import Settings
from slack_calculator.gcp import get_kms_client, get_storage_client
from slack_calculator.security.secrets import SecretLocation, SecretResolver
from slack_calculator.security.signature import (
    InboundRequest,
    SignatureVerifier,
    VerificationStatus,
)

logger = logging.getLogger(__name__)

INVALID_SIGNATURE_MESSAGE = "Invalid request signature."
VERIFICATION_FAILED_MESSAGE = "Unable to verify request signature."


class GateAction(str, Enum):
    """What the caller should do with a request."""

    PROCEED = "proceed"
    REJECT = "reject"
    FAIL = "fail"


@dataclass(frozen=True)
class GateDecision:
    """Gate verdict with the HTTP status and message to return when not proceeding."""

    action: GateAction
    status_code: int
    message: str = ""

    @property
    def proceed(self) -> bool:
        return self.action == GateAction.PROCEED


class RequestGate:
    """Maps signature verification outcomes to proceed / 400 / 500 decisions."""

    def __init__(self, verifier: SignatureVerifier):
        self.verifier = verifier

    def authorize(self, request: InboundRequest, now: int | None = None) -> GateDecision:
        outcome = self.verifier.verify(request, now=now)

        if outcome.status == VerificationStatus.VALID:
            return GateDecision(action=GateAction.PROCEED, status_code=200)

        if outcome.status == VerificationStatus.INVALID:
            logger.info("Rejected Slack request: %s", outcome.reason)
            return GateDecision(
                action=GateAction.REJECT,
                status_code=400,
                message=INVALID_SIGNATURE_MESSAGE,
            )

        logger.error(
            "Signature verification could not complete: %s",
            outcome.cause,
            exc_info=outcome.cause,
        )
        return GateDecision(
            action=GateAction.FAIL,
            status_code=500,
            message=VERIFICATION_FAILED_MESSAGE,
        )


def build_request_gate(settings: Settings) -> RequestGate:
    """Wire resolver, verifier and gate for the configured secret location.

    The secret is resolved fresh on every verification.
    """
    location = SecretLocation.from_settings(settings)

    def resolve_secret() -> str:
        # Clients are created here so credential lookup runs in the worker
        # thread and its failures become transient verification failures.
        resolver = SecretResolver(get_storage_client(), get_kms_client())
        return resolver.resolve(location)

    return RequestGate(SignatureVerifier(secret_provider=resolve_secret))
