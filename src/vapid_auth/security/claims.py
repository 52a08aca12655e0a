"""
VAPID claims model and validation of the sub/exp claims.
"""
import time
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from .exceptions import (
    ClaimExpiredError,
    ExpiryTooFarError,
    InvalidExpiryError,
    InvalidSubscriberError,
)

MAX_EXPIRY_SECONDS = 24 * 60 * 60
SUBSCRIBER_PREFIXES = ("mailto:", "https://")

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


class VAPIDClaims(BaseModel):
    """
    Typed VAPID claims with pass-through extension claims.

    Any keyword not declared below is kept as-is and ends up in the payload.
    """
    model_config = ConfigDict(extra="allow")

    sub: Optional[StrictStr] = Field(default=None, description="Contact URI (mailto: or https://)")
    exp: Optional[StrictInt] = Field(default=None, description="Expiry as Unix seconds")
    aud: Optional[StrictStr] = Field(default=None, description="Push service origin")

    def to_claims(self) -> Dict[str, Any]:
        """
        Return the claims as a plain dict.

        Declared fields left as None are omitted; extension claims are kept
        exactly as given, None included.
        """
        declared = type(self).model_fields
        return {
            key: value
            for key, value in self.model_dump().items()
            if value is not None or key not in declared
        }


ClaimsInput = Union[Mapping[str, Any], VAPIDClaims]


def as_claims_dict(claims: ClaimsInput) -> Dict[str, Any]:
    if isinstance(claims, VAPIDClaims):
        return claims.to_claims()
    return dict(claims)


def verify_claims(claims: ClaimsInput, now: Optional[int] = None) -> None:
    """
    Validate the claims this library understands.

    Only ``sub`` and ``exp`` are checked, and only when present. Every other
    claim (``aud`` included) is passed through untouched.

    Args:
        claims: Claims mapping or VAPIDClaims instance
        now: Current Unix time in seconds; defaults to the system clock

    Raises:
        InvalidSubscriberError: sub is not a mailto: or https:// string
        InvalidExpiryError: exp is not a 64-bit integer
        ClaimExpiredError: exp is in the past
        ExpiryTooFarError: exp is more than 24 hours ahead
    """
    claims = as_claims_dict(claims)
    if now is None:
        now = int(time.time())

    if "sub" in claims:
        sub = claims["sub"]
        if not isinstance(sub, str) or not sub.startswith(SUBSCRIBER_PREFIXES):
            raise InvalidSubscriberError()

    if "exp" in claims:
        exp = claims["exp"]
        # bool is an int subclass but never a timestamp
        if isinstance(exp, bool) or not isinstance(exp, int):
            raise InvalidExpiryError(
                f"expiry claim (exp) must be an integer number of seconds, got {type(exp).__name__}"
            )
        if not _INT64_MIN <= exp <= _INT64_MAX:
            raise InvalidExpiryError("expiry claim (exp) does not fit in 64 bits")
        if exp < now:
            raise ClaimExpiredError()
        if exp > now + MAX_EXPIRY_SECONDS:
            raise ExpiryTooFarError()
