"""
Generate a VAPID key pair and print it as .env lines.

Usage:
    python main.py >> .env
"""
import logging

from dotenv import load_dotenv

from vapid_auth.security import derive_public_key, generate_vapid, validate_keys
from vapid_auth.config.vapid_config import VAPIDConfig


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    try:
        existing = VAPIDConfig.from_env()
    except ValueError:
        existing = None

    if existing is not None:
        # Keep the configured pair; only confirm it still matches
        keys = existing.to_key_pair()
        validate_keys(keys)
        if derive_public_key(keys.private_key) != keys.public_key:
            raise SystemExit("VAPID_PUBLIC_KEY does not belong to VAPID_PRIVATE_KEY")
        logging.info("Existing VAPID key pair in environment is valid")
        return

    keys = generate_vapid()
    print(f"VAPID_PUBLIC_KEY={keys.public_key}")
    print(f"VAPID_PRIVATE_KEY={keys.private_key}")
    print("VAPID_SUBJECT=mailto:admin@example.com")


if __name__ == "__main__":
    main()
