"""
Tests for VAPID and application configuration loading.
"""
import pytest
from pydantic import ValidationError

from vapid_auth.config.app_config import AppConfig, get_app_config
from vapid_auth.config.vapid_config import VAPIDConfig, get_vapid_config
from vapid_auth.security import VAPIDKeyPair


class TestVAPIDConfig:
    """Tests for environment based key configuration."""

    def test_from_env(self, vapid_keys, monkeypatch):
        monkeypatch.setenv("VAPID_PUBLIC_KEY", vapid_keys.public_key)
        monkeypatch.setenv("VAPID_PRIVATE_KEY", vapid_keys.private_key)
        monkeypatch.setenv("VAPID_SUBJECT", "mailto:ops@example.com")

        config = VAPIDConfig.from_env()

        assert config.to_key_pair() == vapid_keys
        assert config.subject == "mailto:ops@example.com"

    def test_subject_optional(self, vapid_keys, monkeypatch):
        monkeypatch.setenv("VAPID_PUBLIC_KEY", vapid_keys.public_key)
        monkeypatch.setenv("VAPID_PRIVATE_KEY", vapid_keys.private_key)
        monkeypatch.delenv("VAPID_SUBJECT", raising=False)

        assert VAPIDConfig.from_env().subject is None

    def test_missing_public_key(self, vapid_keys, monkeypatch):
        monkeypatch.delenv("VAPID_PUBLIC_KEY", raising=False)
        monkeypatch.setenv("VAPID_PRIVATE_KEY", vapid_keys.private_key)

        with pytest.raises(ValueError, match="VAPID_PUBLIC_KEY"):
            VAPIDConfig.from_env()

    def test_missing_private_key(self, vapid_keys, monkeypatch):
        monkeypatch.setenv("VAPID_PUBLIC_KEY", vapid_keys.public_key)
        monkeypatch.delenv("VAPID_PRIVATE_KEY", raising=False)

        with pytest.raises(ValueError, match="VAPID_PRIVATE_KEY"):
            VAPIDConfig.from_env()

    def test_get_vapid_config_is_cached(self, vapid_keys, monkeypatch):
        monkeypatch.setenv("VAPID_PUBLIC_KEY", vapid_keys.public_key)
        monkeypatch.setenv("VAPID_PRIVATE_KEY", vapid_keys.private_key)

        assert get_vapid_config() is get_vapid_config()

    def test_persisted_strings_round_trip(self, vapid_keys, monkeypatch):
        """Test that keys reloaded from the environment are byte-identical."""
        monkeypatch.setenv("VAPID_PUBLIC_KEY", vapid_keys.public_key)
        monkeypatch.setenv("VAPID_PRIVATE_KEY", vapid_keys.private_key)

        reloaded = get_vapid_config().to_key_pair()

        assert isinstance(reloaded, VAPIDKeyPair)
        assert reloaded.public_key == vapid_keys.public_key
        assert reloaded.private_key == vapid_keys.private_key


class TestAppConfig:
    """Tests for YAML application configuration."""

    def test_defaults_when_file_missing(self, tmp_path):
        config = AppConfig.from_yaml(str(tmp_path / "missing.yaml"))
        assert config.vapid_token_ttl_seconds == 12 * 3600

    def test_reads_ttl(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("VAPID_TOKEN_TTL_SECONDS: 3600\n")

        assert AppConfig.from_yaml(str(config_file)).vapid_token_ttl_seconds == 3600

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert AppConfig.from_yaml(str(config_file)).vapid_token_ttl_seconds == 12 * 3600

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("VAPID_TOKEN_TTL_SECONDS: [unclosed\n")

        assert AppConfig.from_yaml(str(config_file)).vapid_token_ttl_seconds == 12 * 3600

    def test_ttl_above_24_hours_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("VAPID_TOKEN_TTL_SECONDS: 90000\n")

        with pytest.raises(ValidationError):
            AppConfig.from_yaml(str(config_file))

    def test_get_app_config_uses_config_path(self, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("VAPID_TOKEN_TTL_SECONDS: 120\n")
        monkeypatch.setenv("CONFIG_PATH", str(config_file))

        assert get_app_config().vapid_token_ttl_seconds == 120
