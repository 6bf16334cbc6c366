"""Request authenticity: encrypted secret resolution, signature checks, and the gate."""

from slack_calculator.security.gate import (
    GateAction,
    GateDecision,
    RequestGate,
    build_request_gate,
)
from slack_calculator.security.secrets import (
    InfrastructureError,
    SecretLocation,
    SecretResolver,
)
from slack_calculator.security.signature import (
    InboundRequest,
    SignatureVerifier,
    VerificationOutcome,
    VerificationStatus,
    compute_signature,
)

__all__ = [
    "GateAction",
    "GateDecision",
    "InboundRequest",
    "InfrastructureError",
    "RequestGate",
    "SecretLocation",
    "SecretResolver",
    "SignatureVerifier",
    "VerificationOutcome",
    "VerificationStatus",
    "build_request_gate",
    "compute_signature",
]
