"""
VAPID (RFC 8292) key generation and Authorization header signing.

The full API, exceptions included, lives in ``vapid_auth.security``.
"""

from vapid_auth.security import (
    VAPIDClaims,
    VAPIDError,
    VAPIDKeyPair,
    VAPIDSigner,
    derive_public_key,
    generate_vapid,
    generate_vapid_auth,
    validate_keys,
    verify_claims,
    verify_vapid_auth,
)

__all__ = [
    "VAPIDClaims",
    "VAPIDError",
    "VAPIDKeyPair",
    "VAPIDSigner",
    "derive_public_key",
    "generate_vapid",
    "generate_vapid_auth",
    "validate_keys",
    "verify_claims",
    "verify_vapid_auth",
]
