"""
Unit tests for client configuration.
"""

import dataclasses

import pytest

from liana_restclient import ClientConfig, ConfigurationError


class TestClientConfig:
    """Test configuration validation and loading."""

    def test_init(self):
        """Test configuration with valid values."""
        config = ClientConfig(123, "apisecret", "https://api.local", 1, "REALM")

        assert config.user_id == 123
        assert config.secret == "apisecret"
        assert config.api_url == "https://api.local"
        assert config.api_version == 1
        assert config.realm == "REALM"

    def test_trailing_slash_stripped(self):
        """Test api_url loses its trailing slash."""
        config = ClientConfig(123, "apisecret", "https://api.local/", 1, "REALM")

        assert config.api_url == "https://api.local"

    def test_immutable(self):
        """Test configuration cannot be mutated."""
        config = ClientConfig(123, "apisecret", "https://api.local", 1, "REALM")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_version = 2

    def test_secret_not_in_repr(self):
        """Test secret is hidden from repr."""
        config = ClientConfig(123, "apisecret", "https://api.local", 1, "REALM")

        assert "apisecret" not in repr(config)

    @pytest.mark.parametrize("version", [1, 2, 3])
    def test_supported_versions(self, version):
        """Test every supported API version is accepted."""
        config = ClientConfig(123, "apisecret", "https://api.local", version, "REALM")

        assert config.api_version == version

    def test_invalid_config(self):
        """Test configuration with invalid values."""
        with pytest.raises(ConfigurationError):
            ClientConfig(123, "", "https://api.local", 1, "REALM")

        with pytest.raises(ConfigurationError):
            ClientConfig(123, "apisecret", "", 1, "REALM")

        with pytest.raises(ConfigurationError):
            ClientConfig("123", "apisecret", "https://api.local", 1, "REALM")

    @pytest.mark.parametrize("version", [0, 4, 10])
    def test_unsupported_version(self, version):
        """Test unsupported API versions are rejected at construction."""
        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig(123, "apisecret", "https://api.local", version, "REALM")

        assert str(exc_info.value) == f"unexpected api version {version}"

    def test_from_env(self):
        """Test loading configuration from environment variables."""
        environ = {
            'LIANA_USER_ID': '123',
            'LIANA_SECRET': 'apisecret',
            'LIANA_API_URL': 'https://api.local',
            'LIANA_API_VERSION': '3',
            'LIANA_REALM': 'REALM',
        }

        config = ClientConfig.from_env(environ=environ)

        assert config == ClientConfig(123, "apisecret", "https://api.local", 3, "REALM")

    def test_from_env_prefix(self, monkeypatch):
        """Test loading configuration with a custom prefix from os.environ."""
        monkeypatch.setenv('APP_USER_ID', '7')
        monkeypatch.setenv('APP_SECRET', 's')
        monkeypatch.setenv('APP_API_URL', 'https://api.local')
        monkeypatch.setenv('APP_API_VERSION', '2')
        monkeypatch.setenv('APP_REALM', 'R')

        config = ClientConfig.from_env(prefix='APP_')

        assert config.user_id == 7
        assert config.api_version == 2

    def test_from_env_missing(self):
        """Test missing variable raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="LIANA_SECRET"):
            ClientConfig.from_env(environ={'LIANA_USER_ID': '1'})

    def test_from_env_malformed_integer(self):
        """Test non-numeric user id raises ConfigurationError."""
        environ = {
            'LIANA_USER_ID': 'abc',
            'LIANA_SECRET': 'apisecret',
            'LIANA_API_URL': 'https://api.local',
            'LIANA_API_VERSION': '1',
            'LIANA_REALM': 'REALM',
        }

        with pytest.raises(ConfigurationError, match="LIANA_USER_ID"):
            ClientConfig.from_env(environ=environ)
