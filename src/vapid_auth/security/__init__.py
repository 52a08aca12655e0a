"""
VAPID (RFC 8292) key generation and header signing with ES256.

Example usage:
    import time

    from vapid_auth.security import generate_vapid, generate_vapid_auth

    # Generate once and persist both strings
    keys = generate_vapid()

    # Build the Authorization header for a push request
    header = generate_vapid_auth(keys, {
        "aud": "https://fcm.googleapis.com",
        "exp": int(time.time()) + 12 * 3600,
        "sub": "mailto:admin@example.com",
    })
"""

from .claims import VAPIDClaims, verify_claims
from .exceptions import (
    VAPIDError,
    KeyGenerationError,
    KeyValidationError,
    InvalidPublicKeyLengthError,
    InvalidPrivateKeyLengthError,
    InvalidPublicKeyEncodingError,
    InvalidPrivateKeyEncodingError,
    InvalidPrivateScalarError,
    ClaimsValidationError,
    InvalidSubscriberError,
    InvalidExpiryError,
    ClaimExpiredError,
    ExpiryTooFarError,
    ClaimsEncodingError,
    SigningError,
    MalformedHeaderError,
    InvalidSignatureError,
    InvalidAudienceError,
    TokenExpiredError,
)
from .key_manager import (
    VAPIDKeyPair,
    derive_public_key,
    derive_public_point,
    generate_vapid,
    validate_keys,
)
from .token_operations import (
    JWT_HEADER_SEGMENT,
    VAPIDSigner,
    generate_vapid_auth,
    parse_vapid_header,
    sign,
    verify_vapid_auth,
)

__all__ = [
    "VAPIDError",
    "KeyGenerationError",
    "KeyValidationError",
    "InvalidPublicKeyLengthError",
    "InvalidPrivateKeyLengthError",
    "InvalidPublicKeyEncodingError",
    "InvalidPrivateKeyEncodingError",
    "InvalidPrivateScalarError",
    "ClaimsValidationError",
    "InvalidSubscriberError",
    "InvalidExpiryError",
    "ClaimExpiredError",
    "ExpiryTooFarError",
    "ClaimsEncodingError",
    "SigningError",
    "MalformedHeaderError",
    "InvalidSignatureError",
    "InvalidAudienceError",
    "TokenExpiredError",
    "VAPIDClaims",
    "verify_claims",
    "VAPIDKeyPair",
    "derive_public_key",
    "derive_public_point",
    "generate_vapid",
    "validate_keys",
    "JWT_HEADER_SEGMENT",
    "VAPIDSigner",
    "generate_vapid_auth",
    "parse_vapid_header",
    "sign",
    "verify_vapid_auth",
]
