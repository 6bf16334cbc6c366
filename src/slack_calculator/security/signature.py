"""Slack request signature verification.

Slack signs every request with HMAC-SHA256 over ``{version}:{timestamp}:{body}``
and sends the result as ``x-slack-signature: {version}={hex digest}`` alongside
``x-slack-request-timestamp``. Verification is linear and stops at the first
failing check:

1. Both headers present and non-empty.
2. Timestamp is an integer no more than 300 seconds in the past.
3. Version is read from the signature header (text before the first ``=``).
4. The secret is resolved and the expected signature computed.
5. Provided and expected signatures are compared in constant time.

Outcomes are returned as values, never raised, so a rejected request cannot
slip through to business logic via a mishandled exception.
"""

import hashlib
import hmac
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-slack-signature"
TIMESTAMP_HEADER = "x-slack-request-timestamp"

# Replay window in seconds
MAX_REQUEST_AGE_SECONDS = 60 * 5


@dataclass(frozen=True)
class InboundRequest:
    """Header and body values needed to authenticate one webhook call."""

    signature: str | None
    timestamp: str | None
    raw_body: bytes

    @classmethod
    def from_headers(cls, headers, raw_body: bytes) -> "InboundRequest":
        """Build from any case-insensitive header mapping (e.g. Starlette ``Headers``)."""
        return cls(
            signature=headers.get(SIGNATURE_HEADER),
            timestamp=headers.get(TIMESTAMP_HEADER),
            raw_body=raw_body,
        )


class VerificationStatus(str, Enum):
    """Result of checking a request signature."""

    VALID = "valid"
    INVALID = "invalid"
    TRANSIENT_FAILURE = "transient_failure"


@dataclass(frozen=True)
class VerificationOutcome:
    """Verification result with the rejection reason or infrastructure cause."""

    status: VerificationStatus
    reason: str | None = None
    cause: BaseException | None = None

    @classmethod
    def valid(cls) -> "VerificationOutcome":
        return cls(status=VerificationStatus.VALID)

    @classmethod
    def invalid(cls, reason: str) -> "VerificationOutcome":
        return cls(status=VerificationStatus.INVALID, reason=reason)

    @classmethod
    def transient_failure(cls, cause: BaseException) -> "VerificationOutcome":
        return cls(status=VerificationStatus.TRANSIENT_FAILURE, cause=cause)

    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID


def compute_signature(secret: str, version: str, timestamp: str, raw_body: bytes) -> str:
    """Return ``{version}={hex HMAC-SHA256}`` over ``{version}:{timestamp}:{raw_body}``.

    The body is signed as its literal bytes so non-UTF-8 payloads still verify.
    """
    basestring = f"{version}:{timestamp}:".encode("utf-8") + raw_body
    digest = hmac.new(secret.encode("utf-8"), basestring, hashlib.sha256).hexdigest()
    return f"{version}={digest}"


class SignatureVerifier:
    """Decides whether an inbound request was signed by Slack.

    Args:
        secret_provider: Zero-argument callable returning the signing secret.
            Called only after the header and freshness checks pass, once per
            verification. Any exception it raises becomes a transient failure.
        max_age_seconds: Replay window; older timestamps are rejected.
    """

    def __init__(
        self,
        secret_provider: Callable[[], str],
        max_age_seconds: int = MAX_REQUEST_AGE_SECONDS,
    ):
        self.secret_provider = secret_provider
        self.max_age_seconds = max_age_seconds

    def verify(self, request: InboundRequest, now: int | None = None) -> VerificationOutcome:
        """Verify ``request``, resolving the secret only if the cheap checks pass."""
        if now is None:
            now = int(time.time())

        rejection = self._check_headers(request, now)
        if rejection is not None:
            return rejection

        try:
            secret = self.secret_provider()
        except Exception as exc:
            return VerificationOutcome.transient_failure(exc)

        return self._check_signature(request, secret)

    def verify_with_secret(
        self, request: InboundRequest, secret: str, now: int | None = None
    ) -> VerificationOutcome:
        """Verify ``request`` against a secret the caller already holds."""
        if now is None:
            now = int(time.time())

        rejection = self._check_headers(request, now)
        if rejection is not None:
            return rejection
        return self._check_signature(request, secret)

    def _check_headers(self, request: InboundRequest, now: int) -> VerificationOutcome | None:
        if not request.signature or not request.timestamp:
            return VerificationOutcome.invalid("missing signature or timestamp header")

        if not (request.timestamp.isascii() and request.timestamp.isdigit()):
            return VerificationOutcome.invalid("timestamp is not an integer")
        timestamp = int(request.timestamp)

        # One-sided: future timestamps are accepted, matching Slack's reference check.
        if now - timestamp > self.max_age_seconds:
            return VerificationOutcome.invalid("timestamp outside replay window")

        return None

    def _check_signature(self, request: InboundRequest, secret: str) -> VerificationOutcome:
        version = request.signature.split("=", 1)[0]
        expected = compute_signature(secret, version, request.timestamp, request.raw_body)

        if not hmac.compare_digest(
            request.signature.encode("utf-8"), expected.encode("utf-8")
        ):
            return VerificationOutcome.invalid("signature mismatch")

        return VerificationOutcome.valid()
