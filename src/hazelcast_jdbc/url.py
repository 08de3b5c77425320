"""
jdbc:hazelcast connection URL parsing.

A URL looks like ``jdbc:hazelcast://authority?name=value&...``. The authority
is either ``host[:port]`` or, when a discovery token is given, the cluster name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import unquote, urlsplit

from .exceptions import NullUrlError, UnsupportedUrlError, UrlSyntaxError

logger = logging.getLogger(__name__)

JDBC_URL_PREFIX = "jdbc:"
URL_PREFIX = "jdbc:hazelcast://"

# Whitespace, controls and characters RFC 3986 never allows unescaped.
_ILLEGAL_CHARS = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class JdbcUrl:
    """
    Parsed jdbc:hazelcast URL.

    Attributes:
        authority: ``host[:port]`` or a cluster name.
        properties: Raw (still percent-encoded) property values by name.
        raw: The original connection string.
    """

    authority: str
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    raw: str = ""

    def get_property(self, name: str) -> str | None:
        """Return the raw value of a property or None when absent."""
        return self.properties.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.properties


def _parse_query(query: str) -> dict[str, str]:
    properties: dict[str, str] = {}
    for segment in query.split("&"):
        if not segment:
            continue
        name, _, value = segment.partition("=")
        # Last occurrence wins
        properties[unquote(name)] = value
    return properties


def _decompose(raw: str, info: Mapping[str, str] | None) -> JdbcUrl:
    remainder = raw[len(JDBC_URL_PREFIX) :]

    if _ILLEGAL_CHARS.search(remainder):
        raise UrlSyntaxError(f"Illegal character in URL: {raw}", url=raw)
    if _BAD_ESCAPE.search(remainder):
        raise UrlSyntaxError(f"Malformed escape pair in URL: {raw}", url=raw)

    try:
        parts = urlsplit(remainder)
    except ValueError as e:
        raise UrlSyntaxError(f"Invalid URL {raw}: {e}", url=raw) from e

    if not parts.netloc:
        raise UrlSyntaxError(f"Expected authority in URL: {raw}", url=raw)

    properties: dict[str, str] = {}
    if info:
        properties.update({str(k): str(v) for k, v in info.items()})
    properties.update(_parse_query(parts.query))

    return JdbcUrl(authority=unquote(parts.netloc), properties=MappingProxyType(properties), raw=raw)


def parse_url(raw: str | None, info: Mapping[str, str] | None = None) -> JdbcUrl | None:
    """
    Parse a jdbc:hazelcast connection string.

    Args:
        raw: The connection string.
        info: Optional property bag; URL query properties take precedence.

    Returns:
        The parsed URL, or None when the string is not a jdbc:hazelcast URL.

    Raises:
        NullUrlError: If raw is None.
        UrlSyntaxError: If the URL matches the scheme but is malformed.
    """
    if raw is None:
        raise NullUrlError()
    if not raw.lower().startswith(URL_PREFIX):
        logger.debug("URL does not use the jdbc:hazelcast scheme, ignoring it.")
        return None
    return _decompose(raw, info)


def require_url(raw: str | None, info: Mapping[str, str] | None = None) -> JdbcUrl:
    """Like ``parse_url`` but raise UnsupportedUrlError instead of returning None."""
    url = parse_url(raw, info)
    if url is None:
        raise UnsupportedUrlError(f"URL {raw} is not supported", url=raw)
    return url


def accepts_url(raw: str | None) -> bool:
    """Check whether the string uses the jdbc:hazelcast scheme."""
    if raw is None:
        raise NullUrlError()
    return raw.lower().startswith(URL_PREFIX)


__all__ = ["JdbcUrl", "URL_PREFIX", "parse_url", "require_url", "accepts_url"]
