"""
Key manager for generating and checking VAPID (P-256) key pairs.

Keys are exchanged as plain strings so callers can persist them anywhere:

- public key: base64url (no padding) of the 65-byte uncompressed point
  ``0x04 || X || Y``, always 87 characters
- private key: base64url (no padding) of the 32-byte big-endian scalar,
  always 43 characters
"""
import logging
from dataclasses import dataclass

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from vapid_auth.utils import b64url_decode, b64url_encode

from .exceptions import (
    InvalidPrivateKeyEncodingError,
    InvalidPrivateKeyLengthError,
    InvalidPublicKeyEncodingError,
    InvalidPublicKeyLengthError,
    InvalidPrivateScalarError,
    KeyGenerationError,
)

logger = logging.getLogger(__name__)

CURVE = ec.SECP256R1()
SCALAR_SIZE = 32
PUBLIC_KEY_LENGTH = 87
PRIVATE_KEY_LENGTH = 43


@dataclass(frozen=True)
class VAPIDKeyPair:
    """A VAPID key pair in its string encoding."""
    public_key: str
    private_key: str


def generate_vapid() -> VAPIDKeyPair:
    """
    Generate a new P-256 VAPID key pair from the OS secure random source.

    Returns:
        VAPIDKeyPair with 87-char public key and 43-char private key

    Raises:
        KeyGenerationError: If the random source or curve operation fails
    """
    try:
        private_key = ec.generate_private_key(CURVE, default_backend())
        scalar = private_key.private_numbers().private_value
        point = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint,
        )
    except Exception as e:
        logger.error("VAPID key generation failed: %s", e)
        raise KeyGenerationError(f"Failed to generate VAPID key pair: {e}") from e

    keys = VAPIDKeyPair(
        public_key=b64url_encode(point),
        private_key=b64url_encode(scalar.to_bytes(SCALAR_SIZE, "big")),
    )
    logger.info("Generated new VAPID key pair")
    return keys


def validate_keys(keys: VAPIDKeyPair) -> None:
    """
    Check that a stored key pair is syntactically well formed.

    This does not check that the public point belongs to the private scalar.

    Raises:
        InvalidPublicKeyLengthError: Public key is not 87 characters
        InvalidPrivateKeyLengthError: Private key is not 43 characters
        InvalidPublicKeyEncodingError: Public key is not unpadded base64url
        InvalidPrivateKeyEncodingError: Private key is not unpadded base64url
    """
    if len(keys.public_key) != PUBLIC_KEY_LENGTH:
        raise InvalidPublicKeyLengthError(len(keys.public_key))
    if len(keys.private_key) != PRIVATE_KEY_LENGTH:
        raise InvalidPrivateKeyLengthError(len(keys.private_key))

    try:
        b64url_decode(keys.public_key)
    except ValueError as e:
        raise InvalidPublicKeyEncodingError(f"Public key is not valid unpadded base64url: {e}") from e
    try:
        b64url_decode(keys.private_key)
    except ValueError as e:
        raise InvalidPrivateKeyEncodingError(f"Private key is not valid unpadded base64url: {e}") from e


def decode_private_scalar(private_key: str) -> int:
    """
    Decode a private key string into its integer scalar.

    Raises:
        InvalidPrivateKeyEncodingError: If the string is not unpadded base64url
            or does not hold exactly 32 bytes
    """
    try:
        raw = b64url_decode(private_key)
    except ValueError as e:
        raise InvalidPrivateKeyEncodingError(f"Private key is not valid unpadded base64url: {e}") from e
    if len(raw) != SCALAR_SIZE:
        raise InvalidPrivateKeyEncodingError(
            f"Private key must decode to {SCALAR_SIZE} bytes, got {len(raw)}."
        )
    return int.from_bytes(raw, "big")


def load_signing_key(scalar: int) -> ec.EllipticCurvePrivateKey:
    """
    Rebuild a signing key from a raw private scalar.

    Raises:
        InvalidPrivateScalarError: If the scalar is not in [1, n-1] for P-256
    """
    try:
        return ec.derive_private_key(scalar, CURVE, default_backend())
    except ValueError as e:
        raise InvalidPrivateScalarError(f"Private key scalar is not a valid P-256 key: {e}") from e


def derive_public_point(scalar: int) -> bytes:
    """Return the 65-byte uncompressed point scalar * G."""
    return load_signing_key(scalar).public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )


def derive_public_key(private_key: str) -> str:
    """
    Recover the public key string belonging to a stored private key string.

    Args:
        private_key: 43-char base64url private key

    Returns:
        87-char base64url public key
    """
    return b64url_encode(derive_public_point(decode_private_scalar(private_key)))
