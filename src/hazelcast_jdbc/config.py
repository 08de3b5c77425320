"""
Hazelcast client configuration descriptor.

Pydantic models forming the nested ``ClientConfig`` handed to the cluster
client. Sub-configurations are reached through idempotent accessors so that
several URL properties touching the same section merge instead of replacing
each other.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

CLOUD_DISCOVERY_TOKEN = "hazelcast.client.cloud.discovery.token"
DEFAULT_CLUSTER_NAME = "dev"


class DiscoveryProvider(str, Enum):
    """Infrastructure auto-discovery providers and their URL property prefixes."""

    KUBERNETES = "k8s"
    AWS = "aws"
    GCP = "gcp"

    @property
    def prefix(self) -> str:
        return self.value


class _ConfigModel(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class UsernamePasswordCredentials(_ConfigModel):
    """Username/password pair; either side may be missing."""

    username: str | None = None
    password: SecretStr | None = None


class ClientSecurityConfig(_ConfigModel):
    credentials: UsernamePasswordCredentials | None = None

    def set_credentials(self, username: str | None, password: str | None) -> "ClientSecurityConfig":
        self.credentials = UsernamePasswordCredentials(
            username=username,
            password=SecretStr(password) if password is not None else None,
        )
        return self


class SSLConfig(_ConfigModel):
    """
    Transport security settings.

    Attributes:
        enabled: Whether TLS is used for member connections.
        factory_class_name: Identifier of the SSL context factory.
        properties: Named key/trust material settings (``trustStore``, ``keyFile``...).
    """

    enabled: bool = False
    factory_class_name: str | None = None
    properties: dict[str, str] = Field(default_factory=dict)

    def set_property(self, name: str, value: str) -> "SSLConfig":
        self.properties[name] = value
        return self

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)


class DiscoveryConfig(_ConfigModel):
    """Settings of one auto-discovery provider, disabled until a property enables it."""

    enabled: bool = False
    use_public_ip: bool = False
    properties: dict[str, str] = Field(default_factory=dict)

    def set_property(self, name: str, value: str) -> "DiscoveryConfig":
        self.properties[name] = value
        return self

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)


class ClientNetworkConfig(_ConfigModel):
    addresses: list[str] = Field(default_factory=list)
    ssl_config: SSLConfig | None = None
    aws_config: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    gcp_config: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    kubernetes_config: DiscoveryConfig = Field(default_factory=DiscoveryConfig)

    def add_address(self, *addresses: str) -> "ClientNetworkConfig":
        self.addresses.extend(addresses)
        return self

    def get_or_create_ssl_config(self) -> SSLConfig:
        """Return the SSL section, creating it on first use."""
        if self.ssl_config is None:
            self.ssl_config = SSLConfig()
        return self.ssl_config

    def discovery_config(self, provider: DiscoveryProvider) -> DiscoveryConfig:
        if provider is DiscoveryProvider.AWS:
            return self.aws_config
        if provider is DiscoveryProvider.GCP:
            return self.gcp_config
        return self.kubernetes_config

    def enabled_discovery_providers(self) -> list[DiscoveryProvider]:
        return [p for p in DiscoveryProvider if self.discovery_config(p).enabled]


class ClientConfig(_ConfigModel):
    """
    Top-level Hazelcast client configuration.

    Example:
        config = ClientConfig.load()
        config.network_config.add_address("node1:5701")
        config.network_config.get_or_create_ssl_config().enabled = True
    """

    cluster_name: str = DEFAULT_CLUSTER_NAME
    network_config: ClientNetworkConfig = Field(default_factory=ClientNetworkConfig)
    security_config: ClientSecurityConfig = Field(default_factory=ClientSecurityConfig)
    properties: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def load(cls) -> "ClientConfig":
        """Load the baseline configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Build a configuration from a plain mapping, e.g. a parsed settings file."""
        return cls.model_validate(data)

    def set_property(self, name: str, value: str) -> "ClientConfig":
        self.properties[name] = value
        return self

    def get_property(self, name: str) -> str | None:
        return self.properties.get(name)

    @property
    def cloud_discovery_token(self) -> str | None:
        return self.properties.get(CLOUD_DISCOVERY_TOKEN)


__all__ = [
    "CLOUD_DISCOVERY_TOKEN",
    "ClientConfig",
    "ClientNetworkConfig",
    "ClientSecurityConfig",
    "DiscoveryConfig",
    "DiscoveryProvider",
    "SSLConfig",
    "UsernamePasswordCredentials",
]
