import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field

from vapid_auth.security.key_manager import VAPIDKeyPair


class VAPIDConfig(BaseModel):
    """
    VAPID key configuration loaded from the environment.
    """
    public_key: str = Field(..., description="87-char base64url public key")
    private_key: str = Field(..., description="43-char base64url private key")
    subject: Optional[str] = Field(default=None, description="Contact for the sub claim")

    @classmethod
    def from_env(cls) -> "VAPIDConfig":
        """
        Load VAPID configuration from environment variables.

        Environment variables:
            VAPID_PUBLIC_KEY: Public key string
            VAPID_PRIVATE_KEY: Private key string
            VAPID_SUBJECT: Optional mailto: or https:// contact

        Returns:
            VAPIDConfig instance
        """
        public_key = os.getenv("VAPID_PUBLIC_KEY", "")
        private_key = os.getenv("VAPID_PRIVATE_KEY", "")
        subject = os.getenv("VAPID_SUBJECT") or None

        if not public_key:
            raise ValueError("VAPID_PUBLIC_KEY environment variable is required")
        if not private_key:
            raise ValueError("VAPID_PRIVATE_KEY environment variable is required")

        return cls(public_key=public_key, private_key=private_key, subject=subject)

    def to_key_pair(self) -> VAPIDKeyPair:
        return VAPIDKeyPair(public_key=self.public_key, private_key=self.private_key)


@lru_cache()
def get_vapid_config() -> VAPIDConfig:
    """
    Get a cached VAPIDConfig loaded from environment variables.
    """
    return VAPIDConfig.from_env()
