"""Encrypted signing secret retrieval.

The Slack signing secret lives in a Cloud Storage object encrypted with a
Cloud KMS key. Resolution is two sequential blocking calls: download the
ciphertext, then ask KMS to decrypt it. Nothing is cached and nothing is
retried; a single failure surfaces immediately as InfrastructureError.
"""

import logging
from dataclasses import dataclass

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import kms, storage

from slack_calculator.config import Settings

logger = logging.getLogger(__name__)

# Transport and API failures from either Google client
_INFRASTRUCTURE_ERRORS = (GoogleAPIError, GoogleAuthError, OSError)


class InfrastructureError(Exception):
    """Raised when the secret cannot be fetched from storage or decrypted."""


@dataclass(frozen=True)
class SecretLocation:
    """Where the encrypted secret lives and which key decrypts it."""

    bucket_name: str
    object_name: str
    crypto_key_path: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "SecretLocation":
        return cls(
            bucket_name=settings.storage_bucket_name,
            object_name=settings.slack_signing_secret_path,
            crypto_key_path=settings.crypto_key_path,
        )


class SecretResolver:
    """Fetches and decrypts a secret stored as a KMS-encrypted storage object."""

    def __init__(
        self,
        storage_client: storage.Client,
        kms_client: kms.KeyManagementServiceClient,
    ):
        self.storage = storage_client
        self.kms = kms_client

    def __repr__(self):
        return "SecretResolver(storage=..., kms=...)"

    def resolve(self, location: SecretLocation) -> str:
        """Return the plaintext secret at ``location``.

        The plaintext is decoded as UTF-8 and stripped, since secret files are
        commonly written with a trailing newline.

        Raises:
            InfrastructureError: If the download or decrypt call fails, or the
                plaintext is not valid UTF-8.
        """
        ciphertext = self._download(location)
        plaintext = self._decrypt(location, ciphertext)
        try:
            return plaintext.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise InfrastructureError(
                f"Decrypted secret from gs://{location.bucket_name}/{location.object_name} "
                "is not valid UTF-8"
            ) from exc

    def _download(self, location: SecretLocation) -> bytes:
        try:
            blob = self.storage.bucket(location.bucket_name).blob(location.object_name)
            ciphertext = blob.download_as_bytes()
        except _INFRASTRUCTURE_ERRORS as exc:
            raise InfrastructureError(
                f"Failed to download gs://{location.bucket_name}/{location.object_name}: "
                f"{type(exc).__name__}"
            ) from exc
        logger.debug(
            "Downloaded %d byte ciphertext from gs://%s/%s",
            len(ciphertext),
            location.bucket_name,
            location.object_name,
        )
        return ciphertext

    def _decrypt(self, location: SecretLocation, ciphertext: bytes) -> bytes:
        # The client base64-encodes bytes fields on the wire, so the raw object
        # content is passed through as-is.
        try:
            response = self.kms.decrypt(
                request={"name": location.crypto_key_path, "ciphertext": ciphertext}
            )
        except _INFRASTRUCTURE_ERRORS as exc:
            raise InfrastructureError(
                f"Failed to decrypt secret with {location.crypto_key_path}: "
                f"{type(exc).__name__}"
            ) from exc
        return response.plaintext
