"""Configuration management for Stellar Client."""

import json
from pathlib import Path
from typing import Dict, Optional

import httpx
from pydantic import BaseModel, Field, model_validator

from . import __version__


class NetworkConfig(BaseModel):
    """Well known Horizon deployment."""

    name: str = Field(..., description="Network name")
    horizon_url: str = Field(..., description="Horizon base URL")


PUBLIC = NetworkConfig(name="public", horizon_url="https://horizon.stellar.org")
TESTNET = NetworkConfig(
    name="testnet", horizon_url="https://horizon-testnet.stellar.org"
)
FUTURENET = NetworkConfig(
    name="futurenet", horizon_url="https://horizon-futurenet.stellar.org"
)

NETWORKS: Dict[str, NetworkConfig] = {
    network.name: network for network in (PUBLIC, TESTNET, FUTURENET)
}


def get_network(name: str) -> NetworkConfig:
    """Look up a network preset by name."""
    try:
        return NETWORKS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown network '{name}'. Expected one of: {', '.join(NETWORKS)}"
        )


class ClientConfig(BaseModel):
    """HTTP client configuration shared by Horizon and anchor services."""

    horizon_url: str = Field(
        default=PUBLIC.horizon_url, description="Horizon server base URL"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    connect_timeout: float = Field(
        default=10.0, description="Connection timeout in seconds"
    )
    client_name: str = Field(
        default="stellar_client",
        description="Value of the X-Client-Name header sent with every request",
    )
    client_version: str = Field(
        default=__version__,
        description="Value of the X-Client-Version header sent with every request",
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_network(cls, data):
        """Accept a network name in place of an explicit horizon_url."""
        if isinstance(data, dict) and "network" in data:
            data = dict(data)
            network = get_network(data.pop("network"))
            data.setdefault("horizon_url", network.horizon_url)
        return data

    def client_headers(self) -> Dict[str, str]:
        return {
            "X-Client-Name": self.client_name,
            "X-Client-Version": self.client_version,
        }

    def create_http_client(self, base_url: Optional[str] = None) -> httpx.Client:
        """Create a synchronous httpx client configured with timeouts and SDK headers.

        Args:
            base_url: Base URL for relative requests, defaults to horizon_url

        Returns:
            Configured httpx.Client owned by the caller
        """
        return httpx.Client(
            base_url=base_url if base_url is not None else self.horizon_url,
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            headers=self.client_headers(),
        )


class ConfigManager:
    """Manages configuration loading and saving."""

    DEFAULT_CONFIG_PATH = Path(".stellar-client/config.json")

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self.DEFAULT_CONFIG_PATH
        self._config: Optional[ClientConfig] = None

    def load(self) -> ClientConfig:
        """Load configuration from file or create default."""
        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                self._config = ClientConfig(**data)
            except Exception as e:
                raise ValueError(f"Failed to load config from {self.config_path}: {e}")
        else:
            self._config = ClientConfig()

        return self._config

    def save(self, config: Optional[ClientConfig] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self._config

        if config is None:
            raise ValueError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

        self._config = config

    def get_config(self) -> ClientConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            return self.load()
        return self._config
