"""Tests for encrypted secret resolution (Cloud Storage download + Cloud KMS decrypt)."""

from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import InvalidArgument, NotFound, PermissionDenied
from google.auth.exceptions import DefaultCredentialsError

from slack_calculator.security.secrets import (
    InfrastructureError,
    SecretLocation,
    SecretResolver,
)

LOCATION = SecretLocation(
    bucket_name="secrets-bucket",
    object_name="slack/signing-secret.enc",
    crypto_key_path="projects/p/locations/global/keyRings/r/cryptoKeys/k",
)
CIPHERTEXT = b"\x0a\x24encrypted-bytes\x00\xff"


def _storage(ciphertext: bytes = CIPHERTEXT) -> MagicMock:
    """Build a mock storage client whose blob downloads ``ciphertext``."""
    client = MagicMock()
    client.bucket.return_value.blob.return_value.download_as_bytes.return_value = ciphertext
    return client


def _kms(plaintext: bytes = b"s3cr3t") -> MagicMock:
    """Build a mock KMS client whose decrypt returns ``plaintext``."""
    client = MagicMock()
    client.decrypt.return_value = MagicMock(plaintext=plaintext)
    return client


def test_resolve_returns_decrypted_secret():
    resolver = SecretResolver(_storage(), _kms(b"s3cr3t"))
    assert resolver.resolve(LOCATION) == "s3cr3t"


def test_resolve_reads_configured_bucket_and_object():
    storage = _storage()
    SecretResolver(storage, _kms()).resolve(LOCATION)

    storage.bucket.assert_called_once_with("secrets-bucket")
    storage.bucket.return_value.blob.assert_called_once_with("slack/signing-secret.enc")


def test_resolve_decrypts_object_bytes_with_configured_key():
    kms = _kms()
    SecretResolver(_storage(), kms).resolve(LOCATION)

    kms.decrypt.assert_called_once_with(
        request={
            "name": "projects/p/locations/global/keyRings/r/cryptoKeys/k",
            "ciphertext": CIPHERTEXT,
        }
    )


@pytest.mark.parametrize("plaintext", [b"s3cr3t\n", b"  s3cr3t\r\n", b"\ts3cr3t \n\n"])
def test_resolve_strips_surrounding_whitespace(plaintext: bytes):
    assert SecretResolver(_storage(), _kms(plaintext)).resolve(LOCATION) == "s3cr3t"


def test_resolve_is_not_cached():
    """Every call downloads and decrypts again."""
    storage, kms = _storage(), _kms()
    resolver = SecretResolver(storage, kms)

    resolver.resolve(LOCATION)
    resolver.resolve(LOCATION)

    assert storage.bucket.return_value.blob.return_value.download_as_bytes.call_count == 2
    assert kms.decrypt.call_count == 2


@pytest.mark.parametrize(
    "error",
    [NotFound("no such object"), PermissionDenied("denied"), DefaultCredentialsError("no adc")],
)
def test_download_failure_raises_infrastructure_error(error: Exception):
    storage = _storage()
    storage.bucket.return_value.blob.return_value.download_as_bytes.side_effect = error
    kms = _kms()

    with pytest.raises(InfrastructureError, match="Failed to download") as exc_info:
        SecretResolver(storage, kms).resolve(LOCATION)

    assert exc_info.value.__cause__ is error
    kms.decrypt.assert_not_called()


def test_network_failure_raises_infrastructure_error():
    storage = _storage()
    storage.bucket.return_value.blob.return_value.download_as_bytes.side_effect = ConnectionError(
        "reset"
    )
    with pytest.raises(InfrastructureError):
        SecretResolver(storage, _kms()).resolve(LOCATION)


@pytest.mark.parametrize(
    "error",
    [InvalidArgument("malformed ciphertext"), PermissionDenied("denied"), NotFound("bad key path")],
)
def test_decrypt_failure_raises_infrastructure_error(error: Exception):
    kms = _kms()
    kms.decrypt.side_effect = error

    with pytest.raises(InfrastructureError, match="Failed to decrypt") as exc_info:
        SecretResolver(_storage(), kms).resolve(LOCATION)

    assert exc_info.value.__cause__ is error


def test_non_utf8_plaintext_raises_infrastructure_error():
    with pytest.raises(InfrastructureError, match="not valid UTF-8"):
        SecretResolver(_storage(), _kms(b"\xff\xfe\xfd")).resolve(LOCATION)


def test_error_messages_never_contain_secret():
    kms = _kms()
    kms.decrypt.side_effect = PermissionDenied("denied")
    with pytest.raises(InfrastructureError) as exc_info:
        SecretResolver(_storage(), kms).resolve(LOCATION)
    assert "s3cr3t" not in str(exc_info.value)


def test_secret_location_from_settings():
    settings = MagicMock()
    settings.storage_bucket_name = "b"
    settings.slack_signing_secret_path = "o"
    settings.crypto_key_path = "k"

    assert SecretLocation.from_settings(settings) == SecretLocation("b", "o", "k")
