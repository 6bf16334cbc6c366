"""Cloud Storage and Cloud KMS client singletons.

Both clients are created lazily on first use from Application Default
Credentials, so importing this module never touches the network or the
credential chain. Follows the lazy-init pattern used for every external client
in the service. Only the clients are cached; secrets fetched through them are not.
"""

from google.cloud import kms, storage

_storage_client: storage.Client | None = None
_kms_client: kms.KeyManagementServiceClient | None = None


def get_storage_client() -> storage.Client:
    """Return a cached Cloud Storage client instance."""
    global _storage_client
    if _storage_client is None:
        _storage_client = storage.Client()
    return _storage_client


def get_kms_client() -> kms.KeyManagementServiceClient:
    """Return a cached Cloud KMS client instance."""
    global _kms_client
    if _kms_client is None:
        _kms_client = kms.KeyManagementServiceClient()
    return _kms_client


def reset_clients() -> None:
    """Reset cached client instances. Used for testing."""
    global _storage_client, _kms_client
    _storage_client = None
    _kms_client = None
