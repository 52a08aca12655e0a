"""
VAPID token operations: JWT assembly, ES256 signing and header formatting.
"""
import json
import logging
import re
import time
from typing import Any, Dict, Mapping, Optional, Tuple

import jwt
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.utils import der_to_raw_signature

from vapid_auth.utils import b64url_decode, b64url_encode

from .claims import ClaimsInput, as_claims_dict, verify_claims
from .exceptions import (
    ClaimsEncodingError,
    InvalidAudienceError,
    InvalidSignatureError,
    KeyValidationError,
    MalformedHeaderError,
    SigningError,
    TokenExpiredError,
)
from .key_manager import (
    CURVE,
    VAPIDKeyPair,
    decode_private_scalar,
    load_signing_key,
    validate_keys,
)

logger = logging.getLogger(__name__)

ALGORITHM = "ES256"
SIGNATURE_SIZE = 64

# Byte-exact header; json.dumps would not keep this key order.
JWT_HEADER_SEGMENT = b64url_encode(b'{"typ":"JWT","alg":"ES256"}')

_HEADER_PATTERN = re.compile(
    r"vapid t=([A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+), k=([A-Za-z0-9_-]{87})"
)


def encode_payload(claims: Mapping[str, Any]) -> str:
    """
    Serialize the claims to compact JSON and base64url encode them.

    Raises:
        ClaimsEncodingError: If a claim value is not JSON serializable
    """
    try:
        payload = json.dumps(claims, separators=(",", ":"), sort_keys=True, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ClaimsEncodingError(f"Claims could not be serialized to JSON: {e}") from e
    return b64url_encode(payload.encode("utf-8"))


def build_signing_input(claims: Mapping[str, Any]) -> Tuple[str, str, bytes]:
    """
    Build the header and payload segments and the bytes to sign.

    Returns:
        (header_segment, payload_segment, signing_input)
    """
    payload_segment = encode_payload(claims)
    signing_input = f"{JWT_HEADER_SEGMENT}.{payload_segment}".encode("utf-8")
    return JWT_HEADER_SEGMENT, payload_segment, signing_input


def sign(private_key: str, signing_input: bytes) -> str:
    """
    Sign bytes with ES256 and return the base64url raw signature.

    The signature is the fixed-width 64-byte ``r || s`` form used by JWS,
    not the DER structure returned by ``EllipticCurvePrivateKey.sign``.

    Args:
        private_key: 43-char base64url private scalar
        signing_input: Exact bytes to sign

    Returns:
        Base64url encoded 64-byte signature

    Raises:
        SigningError: If the key is unusable or the signing primitive fails
    """
    try:
        signing_key = load_signing_key(decode_private_scalar(private_key))
    except KeyValidationError as e:
        raise SigningError(f"Cannot sign with malformed private key: {e.message}") from e

    if signing_key.curve.key_size != 256:
        raise SigningError(f"Unexpected curve order size: {signing_key.curve.key_size} bits")

    try:
        der_signature = signing_key.sign(signing_input, ec.ECDSA(hashes.SHA256()))
        # Left-pads r and s to 32 bytes each
        raw_signature = der_to_raw_signature(der_signature, signing_key.curve)
    except Exception as e:
        logger.error("ES256 signing failed: %s", e)
        raise SigningError(f"Failed to sign VAPID token: {e}") from e

    if len(raw_signature) != SIGNATURE_SIZE:
        raise SigningError(f"Signature must be {SIGNATURE_SIZE} bytes, got {len(raw_signature)}")
    return b64url_encode(raw_signature)


def generate_vapid_auth(
    keys: VAPIDKeyPair,
    claims: ClaimsInput,
    now: Optional[int] = None,
) -> str:
    """
    Build the VAPID Authorization header value for a push request.

    The result is ``vapid t=<jwt>, k=<public key>``. The signature covers
    the payload bytes produced here; re-serializing the claims later does
    not give a payload the signature is valid for.

    Args:
        keys: Stored VAPID key pair
        claims: Claims mapping or VAPIDClaims (typically aud, exp, sub)
        now: Current Unix time in seconds, for exp validation

    Returns:
        Header value string

    Raises:
        KeyValidationError: Keys are malformed
        ClaimsValidationError: sub or exp are invalid
        ClaimsEncodingError: A claim is not JSON serializable
        SigningError: Signing failed
    """
    validate_keys(keys)
    claims = as_claims_dict(claims)
    verify_claims(claims, now=now)

    header_segment, payload_segment, signing_input = build_signing_input(claims)
    signature_segment = sign(keys.private_key, signing_input)

    token = f"{header_segment}.{payload_segment}.{signature_segment}"
    logger.debug("Generated VAPID header for audience %s", claims.get("aud"))
    return f"vapid t={token}, k={keys.public_key}"


def parse_vapid_header(value: str) -> Tuple[str, str]:
    """
    Split a VAPID header value into its token and public key.

    Raises:
        MalformedHeaderError: If the value is not 'vapid t=<jwt>, k=<key>'
    """
    match = _HEADER_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise MalformedHeaderError("Header must have the form 'vapid t=<jwt>, k=<public key>'.")
    return match.group(1), match.group(2)


def verify_vapid_auth(
    value: str,
    audience: Optional[str] = None,
    leeway: int = 0,
) -> Dict[str, Any]:
    """
    Verify a VAPID header the way a push service does.

    The token signature is checked against the ``k=`` public key, and
    ``exp`` is enforced when present.

    Args:
        value: Header value produced by generate_vapid_auth
        audience: Expected aud claim; not checked when None
        leeway: Leeway in seconds for clock skew

    Returns:
        Decoded claims

    Raises:
        MalformedHeaderError: Header, token or key cannot be parsed
        InvalidSignatureError: Signature does not verify
        TokenExpiredError: exp is in the past
        InvalidAudienceError: aud does not match the expected audience
    """
    token, public_key = parse_vapid_header(value)
    try:
        point = b64url_decode(public_key)
        verifying_key = ec.EllipticCurvePublicKey.from_encoded_point(CURVE, point)
    except ValueError as e:
        raise MalformedHeaderError(f"Header public key is not a P-256 point: {e}") from e

    try:
        return jwt.decode(
            token,
            verifying_key,
            algorithms=[ALGORITHM],
            audience=audience,
            leeway=leeway,
            options={"verify_aud": audience is not None},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except jwt.InvalidSignatureError as e:
        raise InvalidSignatureError() from e
    except jwt.InvalidAudienceError as e:
        raise InvalidAudienceError() from e
    except jwt.DecodeError as e:
        raise MalformedHeaderError("Token is malformed.") from e
    except jwt.InvalidTokenError as e:
        raise MalformedHeaderError(f"Invalid token: {e}") from e


class VAPIDSigner:
    """
    Generates VAPID headers for a fixed key pair and contact subject.
    """

    DEFAULT_EXPIRES_IN = 12 * 60 * 60

    def __init__(
        self,
        keys: VAPIDKeyPair,
        subject: Optional[str] = None,
        expires_in: int = DEFAULT_EXPIRES_IN,
    ):
        """
        Initialize the signer.

        Args:
            keys: VAPID key pair used for every header
            subject: Optional sub claim (mailto: or https:// contact)
            expires_in: Token lifetime in seconds (at most 24 hours)
        """
        validate_keys(keys)
        self.keys = keys
        self.subject = subject
        self.expires_in = expires_in

    @classmethod
    def from_config(cls) -> "VAPIDSigner":
        """Create a signer from the environment and YAML configuration."""
        from vapid_auth.config.app_config import get_app_config
        from vapid_auth.config.vapid_config import get_vapid_config

        vapid_config = get_vapid_config()
        return cls(
            keys=vapid_config.to_key_pair(),
            subject=vapid_config.subject,
            expires_in=get_app_config().vapid_token_ttl_seconds,
        )

    def build_claims(
        self,
        audience: str,
        expires_in: Optional[int] = None,
        additional_claims: Optional[Dict[str, Any]] = None,
        now: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Build claims for a push service origin.

        Args:
            audience: Push service origin, e.g. https://fcm.googleapis.com
            expires_in: Override of the token lifetime in seconds
            additional_claims: Extra claims copied into the payload
            now: Current Unix time in seconds

        Returns:
            Claims dict
        """
        if now is None:
            now = int(time.time())
        if expires_in is None:
            expires_in = self.expires_in

        claims: Dict[str, Any] = {
            "aud": audience,
            "exp": now + expires_in,
        }
        if self.subject:
            claims["sub"] = self.subject
        if additional_claims:
            claims.update(additional_claims)
        return claims

    def generate_auth_header(
        self,
        audience: str,
        expires_in: Optional[int] = None,
        additional_claims: Optional[Dict[str, Any]] = None,
        now: Optional[int] = None,
    ) -> str:
        """Build claims for ``audience`` and return the signed header value."""
        if now is None:
            now = int(time.time())
        claims = self.build_claims(audience, expires_in, additional_claims, now=now)
        return generate_vapid_auth(self.keys, claims, now=now)
