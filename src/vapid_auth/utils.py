"""
Encoding helpers shared by the key and token modules.
"""
import base64
import re

from jwt.utils import base64url_encode

_BASE64URL_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without '=' padding."""
    return base64url_encode(data).decode("ascii")


def b64url_decode(value: str) -> bytes:
    """
    Decode an unpadded base64url string.

    Unlike ``jwt.utils.base64url_decode`` this is strict: padding, whitespace
    and characters outside the URL-safe alphabet are rejected.

    Raises:
        ValueError: If the value is not valid unpadded base64url
    """
    if not isinstance(value, str) or not _BASE64URL_PATTERN.fullmatch(value):
        raise ValueError("value contains characters outside the base64url alphabet")
    # A single leftover character can never encode a whole byte
    if len(value) % 4 == 1:
        raise ValueError("invalid base64url length")
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
