"""
Custom exceptions for VAPID key handling and header generation.
"""


class VAPIDError(Exception):
    """Base exception for VAPID-related errors."""
    def __init__(self, message: str, error_code: str):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class KeyGenerationError(VAPIDError):
    """Random source or curve operation failed while generating keys."""
    def __init__(self, message: str = "Failed to generate VAPID key pair."):
        super().__init__(message, "KEY_GENERATION_FAILED")


class KeyValidationError(VAPIDError):
    """Stored key pair is malformed."""
    pass


class InvalidPublicKeyLengthError(KeyValidationError):
    def __init__(self, length: int):
        super().__init__(
            f"Public key must be 87 characters, got {length}.",
            "INVALID_PUBLIC_KEY_LENGTH",
        )


class InvalidPrivateKeyLengthError(KeyValidationError):
    def __init__(self, length: int):
        super().__init__(
            f"Private key must be 43 characters, got {length}.",
            "INVALID_PRIVATE_KEY_LENGTH",
        )


class InvalidPublicKeyEncodingError(KeyValidationError):
    def __init__(self, message: str = "Public key is not valid unpadded base64url."):
        super().__init__(message, "INVALID_PUBLIC_KEY_ENCODING")


class InvalidPrivateKeyEncodingError(KeyValidationError):
    def __init__(self, message: str = "Private key is not valid unpadded base64url."):
        super().__init__(message, "INVALID_PRIVATE_KEY_ENCODING")


class InvalidPrivateScalarError(KeyValidationError):
    def __init__(self, message: str = "Private key scalar is not in the range [1, n-1] for P-256."):
        super().__init__(message, "INVALID_PRIVATE_SCALAR")


class ClaimsValidationError(VAPIDError):
    """A recognized claim (sub or exp) violates the VAPID rules."""
    pass


class InvalidSubscriberError(ClaimsValidationError):
    def __init__(
        self,
        message: str = "invalid subscriber claim (sub): it should be a mailto: address or an https:// URL",
    ):
        super().__init__(message, "INVALID_SUBSCRIBER")


class InvalidExpiryError(ClaimsValidationError):
    def __init__(
        self,
        message: str = "expiry claim (exp) must be an integer number of seconds",
    ):
        super().__init__(message, "INVALID_EXPIRY")


class ClaimExpiredError(ClaimsValidationError):
    def __init__(self, message: str = "expiry claim (exp) already expired"):
        super().__init__(message, "CLAIM_EXPIRED")


class ExpiryTooFarError(ClaimsValidationError):
    def __init__(self, message: str = "expiry claim (exp) exceeds 24-hour maximum"):
        super().__init__(message, "EXPIRY_EXCEEDS_MAXIMUM")


class ClaimsEncodingError(VAPIDError):
    """A claim value cannot be serialized to JSON."""
    def __init__(self, message: str = "Claims could not be serialized to JSON."):
        super().__init__(message, "CLAIMS_NOT_SERIALIZABLE")


class SigningError(VAPIDError):
    """Signing primitive or random source failed."""
    def __init__(self, message: str = "Failed to sign VAPID token."):
        super().__init__(message, "SIGNING_FAILED")


class MalformedHeaderError(VAPIDError):
    """VAPID header value does not have the 'vapid t=..., k=...' layout."""
    def __init__(self, message: str = "VAPID header is malformed."):
        super().__init__(message, "MALFORMED_HEADER")


class InvalidSignatureError(VAPIDError):
    """Token signature does not verify against the embedded public key."""
    def __init__(self, message: str = "Invalid token signature."):
        super().__init__(message, "INVALID_SIGNATURE")


class TokenExpiredError(VAPIDError):
    """Token has expired."""
    def __init__(self, message: str = "Token has expired."):
        super().__init__(message, "TOKEN_EXPIRED")


class InvalidAudienceError(VAPIDError):
    """Token audience does not match the expected push service."""
    def __init__(self, message: str = "Invalid token audience."):
        super().__init__(message, "INVALID_AUDIENCE")
