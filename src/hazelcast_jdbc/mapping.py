"""
Property mapping table.

Maps URL property names to tagged mutation rules. The table is plain data:
``apply_rule`` is the only place that interprets a rule against a
``ClientConfig``. It is built once, under a lock, and is read-only afterwards.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .config import ClientConfig, DiscoveryProvider

logger = logging.getLogger(__name__)


class RuleKind(str, Enum):
    """What part of the configuration a rule mutates."""

    DIRECT_FIELD = "direct_field"
    SECURITY_PROPERTY = "security_property"
    SECURITY_FLAG = "security_flag"
    SECURITY_FACTORY = "security_factory"
    PROVIDER_PROPERTY = "provider_property"
    PROVIDER_FLAG = "provider_flag"


@dataclass(frozen=True)
class MappingRule:
    """
    A single property mapping.

    Attributes:
        name: URL property name.
        kind: Mutation family.
        target: Field or property name on the target section.
        provider: Auto-discovery provider for provider rules.
    """

    name: str
    kind: RuleKind
    target: str | None = None
    provider: DiscoveryProvider | None = None


SECURITY_PROPERTIES = (
    "trustStore",
    "trustStorePassword",
    "protocol",
    "trustCertCollectionFile",
    "keyFile",
    "keyCertChainFile",
)

PROVIDER_PROPERTIES: dict[DiscoveryProvider, tuple[str, ...]] = {
    DiscoveryProvider.KUBERNETES: ("k8sServiceDns", "k8sServicePort"),
    DiscoveryProvider.AWS: (
        "awsTagKey",
        "awsTagValue",
        "awsAccessKey",
        "awsSecretKey",
        "awsIamRole",
        "awsRegion",
        "awsHostHeader",
        "awsSecurityGroupName",
        "awsConnectionTimeoutSeconds",
        "awsReadTimeoutSeconds",
        "awsConnectionRetries",
        "awsHzPort",
    ),
    DiscoveryProvider.GCP: (
        "gcpPrivateKeyPath",
        "gcpHzPort",
        "gcpProjects",
        "gcpRegion",
        "gcpLabel",
    ),
}

PUBLIC_IP_PROPERTIES: dict[DiscoveryProvider, str] = {
    DiscoveryProvider.AWS: "awsUsePublicIp",
    DiscoveryProvider.GCP: "gcpUsePublicIp",
}

# GCP also carries the public IP intent as a plain discovery property
GCP_PUBLIC_IP_PROPERTY = "use-public-ip"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_table: Mapping[str, MappingRule] | None = None
_table_lock = threading.Lock()


def provider_key(name: str, provider: DiscoveryProvider) -> str:
    """
    Translate a prefixed URL property name to the provider's native key.

    >>> provider_key("awsConnectionTimeoutSeconds", DiscoveryProvider.AWS)
    'connection-timeout-seconds'
    """
    if not name.startswith(provider.prefix):
        raise ValueError(f"{name!r} does not start with {provider.prefix!r}")
    stripped = name[len(provider.prefix) :]
    return _CAMEL_BOUNDARY.sub("-", stripped).lower()


def parse_bool(value: str) -> bool:
    """Only a case-insensitive ``"true"`` is true."""
    return value.lower() == "true"


def _build_table() -> dict[str, MappingRule]:
    rules = [MappingRule("clusterName", RuleKind.DIRECT_FIELD, "cluster_name")]

    rules.append(MappingRule("sslEnabled", RuleKind.SECURITY_FLAG, "enabled"))
    rules.extend(MappingRule(name, RuleKind.SECURITY_PROPERTY, name) for name in SECURITY_PROPERTIES)
    rules.append(MappingRule("factoryClassName", RuleKind.SECURITY_FACTORY, "factory_class_name"))

    for provider, names in PROVIDER_PROPERTIES.items():
        rules.extend(
            MappingRule(name, RuleKind.PROVIDER_PROPERTY, provider_key(name, provider), provider)
            for name in names
        )
    for provider, name in PUBLIC_IP_PROPERTIES.items():
        rules.append(MappingRule(name, RuleKind.PROVIDER_FLAG, "use_public_ip", provider))

    return {rule.name: rule for rule in rules}


def get_mapping_table() -> Mapping[str, MappingRule]:
    """Return the read-only mapping table, building it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = MappingProxyType(_build_table())
                logger.debug(f"Built property mapping table with {len(_table)} entries.")
    return _table


def ensure_initialized() -> Mapping[str, MappingRule]:
    """Build the mapping table if needed. Safe to call any number of times."""
    return get_mapping_table()


def apply_rule(rule: MappingRule, config: ClientConfig, value: str) -> None:
    """Apply one mapping rule with an already decoded value."""
    network = config.network_config

    if rule.kind is RuleKind.DIRECT_FIELD:
        setattr(config, rule.target, value)
    elif rule.kind is RuleKind.SECURITY_PROPERTY:
        network.get_or_create_ssl_config().set_property(rule.target, value)
    elif rule.kind is RuleKind.SECURITY_FLAG:
        network.get_or_create_ssl_config().enabled = parse_bool(value)
    elif rule.kind is RuleKind.SECURITY_FACTORY:
        network.get_or_create_ssl_config().factory_class_name = value
    elif rule.kind is RuleKind.PROVIDER_PROPERTY:
        discovery = network.discovery_config(rule.provider)
        discovery.enabled = True
        discovery.set_property(rule.target, value)
    elif rule.kind is RuleKind.PROVIDER_FLAG:
        discovery = network.discovery_config(rule.provider)
        discovery.enabled = True
        discovery.use_public_ip = parse_bool(value)
        if rule.provider is DiscoveryProvider.GCP:
            discovery.set_property(GCP_PUBLIC_IP_PROPERTY, str(discovery.use_public_ip).lower())
    else:
        raise ValueError(f"Unknown rule kind: {rule.kind}")


def describe_rule(rule: MappingRule) -> str:
    """Human readable summary of what a rule configures."""
    if rule.kind is RuleKind.DIRECT_FIELD:
        return f"client {rule.target}"
    if rule.kind is RuleKind.SECURITY_FLAG:
        return "enable TLS ('true' enables)"
    if rule.kind is RuleKind.SECURITY_FACTORY:
        return "TLS context factory class name"
    if rule.kind is RuleKind.SECURITY_PROPERTY:
        return f"TLS property {rule.target}"
    if rule.kind is RuleKind.PROVIDER_FLAG:
        return f"{rule.provider.name} discovery: use public IP ('true' enables)"
    return f"{rule.provider.name} discovery property {rule.target}"


MAPPING_NAMES: tuple[str, ...] = (
    "clusterName",
    "sslEnabled",
    *SECURITY_PROPERTIES,
    "factoryClassName",
    *(name for names in PROVIDER_PROPERTIES.values() for name in names),
    *PUBLIC_IP_PROPERTIES.values(),
)


__all__ = [
    "MAPPING_NAMES",
    "MappingRule",
    "RuleKind",
    "apply_rule",
    "describe_rule",
    "ensure_initialized",
    "get_mapping_table",
    "parse_bool",
    "provider_key",
]
