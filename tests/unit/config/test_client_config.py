"""Tests for client configuration and network presets."""

import json

import httpx
import pytest

from stellar_client import __version__
from stellar_client.config import (
    ClientConfig,
    ConfigManager,
    PUBLIC,
    TESTNET,
    get_network,
)


class TestClientConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.horizon_url == "https://horizon.stellar.org"
        assert config.timeout == 30.0
        assert config.connect_timeout == 10.0
        assert config.client_name == "stellar_client"
        assert config.client_version == __version__

    def test_network_name_sets_horizon_url(self):
        config = ClientConfig(network="testnet")

        assert config.horizon_url == TESTNET.horizon_url

    def test_explicit_url_wins_over_network(self):
        config = ClientConfig(network="testnet", horizon_url="http://localhost:8000")

        assert config.horizon_url == "http://localhost:8000"

    def test_unknown_network(self):
        with pytest.raises(ValueError, match="Unknown network 'moonnet'"):
            get_network("moonnet")

    def test_network_lookup_ignores_case(self):
        assert get_network("PUBLIC") == PUBLIC

    def test_http_client(self):
        config = ClientConfig(timeout=5.0, connect_timeout=2.0)

        with config.create_http_client() as client:
            assert str(client.base_url) == "https://horizon.stellar.org"
            assert client.headers["X-Client-Name"] == "stellar_client"
            assert client.headers["X-Client-Version"] == __version__
            assert client.timeout == httpx.Timeout(5.0, connect=2.0)

    def test_http_client_base_url_override(self):
        with ClientConfig().create_http_client("https://anchor.example.org/sep6") as client:
            assert str(client.base_url) == "https://anchor.example.org/sep6/"


class TestConfigManager:
    """Test loading and saving the JSON config file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")

        assert manager.load() == ClientConfig()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / ".stellar-client" / "config.json"
        manager = ConfigManager(path)

        manager.save(ClientConfig(horizon_url="https://horizon.example.org", timeout=12.5))

        reloaded = ConfigManager(path).load()
        assert reloaded.horizon_url == "https://horizon.example.org"
        assert reloaded.timeout == 12.5

    def test_network_in_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"network": "futurenet"}))

        config = ConfigManager(path).get_config()

        assert config.horizon_url == "https://horizon-futurenet.stellar.org"

    def test_broken_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ValueError, match="Failed to load config from"):
            ConfigManager(path).load()

    def test_save_without_config(self, tmp_path):
        with pytest.raises(ValueError, match="No configuration to save"):
            ConfigManager(tmp_path / "config.json").save()

    def test_get_config_is_cached(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")

        assert manager.get_config() is manager.get_config()
