"""
Hazelcast JDBC - connection string resolution for Hazelcast clusters.

Turns ``jdbc:hazelcast://`` URLs into fully populated client configurations:
- Static member addresses
- Managed cloud discovery tokens
- Kubernetes, AWS and GCP auto-discovery
- TLS and credential settings
"""

from .config import (
    ClientConfig,
    ClientNetworkConfig,
    ClientSecurityConfig,
    DiscoveryConfig,
    DiscoveryProvider,
    SSLConfig,
    UsernamePasswordCredentials,
)
from .driver import Driver, DriverPropertyInfo, register_driver
from .exceptions import (
    HazelcastJdbcError,
    NullUrlError,
    UnsupportedUrlError,
    UrlSyntaxError,
)
from .factory import HazelcastConfigFactory, resolve_config
from .mapping import MappingRule, RuleKind, ensure_initialized, get_mapping_table
from .url import URL_PREFIX, JdbcUrl, accepts_url, parse_url, require_url

__version__ = "1.0.0"
__all__ = [
    # URL parsing
    "URL_PREFIX",
    "JdbcUrl",
    "accepts_url",
    "parse_url",
    "require_url",
    # Configuration
    "ClientConfig",
    "ClientNetworkConfig",
    "ClientSecurityConfig",
    "DiscoveryConfig",
    "DiscoveryProvider",
    "SSLConfig",
    "UsernamePasswordCredentials",
    # Resolution
    "HazelcastConfigFactory",
    "MappingRule",
    "RuleKind",
    "ensure_initialized",
    "get_mapping_table",
    "resolve_config",
    # Driver
    "Driver",
    "DriverPropertyInfo",
    "register_driver",
    # Exceptions
    "HazelcastJdbcError",
    "NullUrlError",
    "UnsupportedUrlError",
    "UrlSyntaxError",
]
