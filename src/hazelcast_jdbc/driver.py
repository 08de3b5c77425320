"""
Driver entry point.

Exposes URL acceptance, configuration resolution and property metadata
through a single process-wide ``Driver`` instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import ClientConfig
from .factory import DISCOVER_TOKEN, PASSWORD, USER, HazelcastConfigFactory
from .mapping import describe_rule, ensure_initialized
from .exceptions import UrlSyntaxError
from .url import accepts_url, parse_url, require_url

logger = logging.getLogger(__name__)

VER_MAJOR = 1
VER_MINOR = 0


@dataclass(frozen=True)
class DriverPropertyInfo:
    """Description of a connection property the driver understands."""

    name: str
    value: str | None
    description: str
    required: bool = False


class Driver:
    """
    A singleton driver resolving jdbc:hazelcast URLs into client configurations.
    """

    _instance: "Driver | None" = None
    _lock = threading.Lock()
    _registered = False

    major_version = VER_MAJOR
    minor_version = VER_MINOR

    def __new__(cls, *args: Any, **kwargs: Any) -> "Driver":
        """
        Create a new instance if one does not exist, otherwise return the existing instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_factory"):
            self._factory = HazelcastConfigFactory()

    @classmethod
    def instance(cls) -> "Driver":
        return cls()

    def accepts_url(self, url: str | None) -> bool:
        return accepts_url(url)

    def client_config(self, url: str | None, info: Mapping[str, str] | None = None) -> ClientConfig:
        """
        Resolve a connection string into a new client configuration.

        :param url: The jdbc:hazelcast URL.
        :param info: Extra connection properties, overridden by the URL's own.
        :return: The resolved configuration.
        """
        return self._factory.client_config(require_url(url, info))

    def get_property_info(
        self, url: str | None, info: Mapping[str, str] | None = None
    ) -> list[DriverPropertyInfo]:
        """
        List the properties the driver understands with their current values.

        Values come from the URL and ``info``; values of unknown or malformed
        URLs come from ``info`` alone.
        """
        try:
            parsed = parse_url(url, info)
        except UrlSyntaxError:
            logger.debug("Malformed URL, listing properties from info only.")
            parsed = None
        current: Mapping[str, str] = parsed.properties if parsed is not None else (info or {})

        properties = [
            DriverPropertyInfo(USER, current.get(USER), "Cluster user name"),
            DriverPropertyInfo(PASSWORD, current.get(PASSWORD), "Cluster password"),
            DriverPropertyInfo(
                DISCOVER_TOKEN,
                current.get(DISCOVER_TOKEN),
                "Managed cloud discovery token; the URL authority is the cluster name",
            ),
        ]
        for name, rule in ensure_initialized().items():
            properties.append(DriverPropertyInfo(name, current.get(name), describe_rule(rule)))
        return properties

    def jdbc_compliant(self) -> bool:
        return False


def register_driver() -> Driver:
    """Initialize the mapping table and the driver once. Idempotent."""
    driver = Driver.instance()
    if not Driver._registered:
        with Driver._lock:
            if not Driver._registered:
                ensure_initialized()
                Driver._registered = True
                logger.debug(f"Registered hazelcast_jdbc driver {VER_MAJOR}.{VER_MINOR}.")
    return driver


__all__ = ["Driver", "DriverPropertyInfo", "register_driver"]
