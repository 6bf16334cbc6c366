"""Google Cloud clients backing the encrypted signing secret."""

from slack_calculator.gcp.clients import get_kms_client, get_storage_client, reset_clients

__all__ = [
    "get_kms_client",
    "get_storage_client",
    "reset_clients",
]
