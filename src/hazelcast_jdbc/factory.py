"""
Configuration resolver.

Turns a parsed ``JdbcUrl`` into a ready-to-use ``ClientConfig``. Resolution is
best effort: property values are never rejected here, a bad value shows up as
a connection failure in the cluster client instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from urllib.parse import unquote_plus

from .config import CLOUD_DISCOVERY_TOKEN, ClientConfig
from .mapping import apply_rule, get_mapping_table
from .url import JdbcUrl, require_url

logger = logging.getLogger(__name__)

USER = "user"
PASSWORD = "password"
DISCOVER_TOKEN = "discoverToken"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_value(value: str) -> str:
    """
    Percent-decode a property value.

    Malformed escapes or bytes that are not valid UTF-8 leave the value as is.
    """
    if _BAD_ESCAPE.search(value):
        logger.debug("Property value has a malformed escape, using it undecoded.")
        return value
    try:
        return unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        logger.debug("Property value is not valid UTF-8 once decoded, using it undecoded.")
        return value


class HazelcastConfigFactory:
    """
    Builds client configurations from jdbc:hazelcast URLs.

    Args:
        baseline: Callable returning a fresh baseline configuration for every
            resolution. Defaults to ``ClientConfig.load``.
    """

    def __init__(self, baseline: Callable[[], ClientConfig] | None = None):
        self._baseline = baseline or ClientConfig.load

    def client_config(self, url: JdbcUrl) -> ClientConfig:
        """Resolve the URL into a new configuration."""
        config = self._security_config(url, self._baseline())

        discover_token = url.get_property(DISCOVER_TOKEN)
        if discover_token is not None:
            return self._cloud_config(url, config, decode_value(discover_token))

        config.network_config.addresses = [url.authority]

        for name, rule in get_mapping_table().items():
            raw = url.get_property(name)
            if raw is None:
                continue
            apply_rule(rule, config, decode_value(raw))
            logger.debug(f"Applied URL property {name}.")

        providers = config.network_config.enabled_discovery_providers()
        if len(providers) > 1:
            logger.warning(
                f"Several auto-discovery providers enabled ({', '.join(p.name for p in providers)}); "
                "the cluster client may reject this configuration."
            )
        return config

    def _security_config(self, url: JdbcUrl, config: ClientConfig) -> ClientConfig:
        user = url.get_property(USER)
        password = url.get_property(PASSWORD)
        if user is not None or password is not None:
            config.security_config.set_credentials(
                decode_value(user) if user is not None else None,
                decode_value(password) if password is not None else None,
            )
        return config

    def _cloud_config(self, url: JdbcUrl, config: ClientConfig, discover_token: str) -> ClientConfig:
        logger.debug("Discovery token present, skipping address and discovery properties.")
        config.set_property(CLOUD_DISCOVERY_TOKEN, discover_token)
        config.cluster_name = url.authority
        return config


def resolve_config(raw: str | None, info: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Parse a connection string and resolve it in one step.

    Raises:
        NullUrlError: If raw is None.
        UnsupportedUrlError: If raw is not a jdbc:hazelcast URL.
        UrlSyntaxError: If raw is malformed.
    """
    return HazelcastConfigFactory().client_config(require_url(raw, info))


__all__ = ["HazelcastConfigFactory", "decode_value", "resolve_config"]
