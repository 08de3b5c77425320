"""
Pytest configuration for hazelcast_jdbc tests.

Shared connection strings are defined here so every test file can import them
instead of hardcoding URLs.
"""

import pytest

from hazelcast_jdbc.driver import Driver

# ---------------------------------------------------------------------------
# Shared connection strings (import these in test files)
# ---------------------------------------------------------------------------
STATIC_URL = "jdbc:hazelcast://node1:5701?clusterName=dev&user=alice&password=secret"
CLOUD_URL = "jdbc:hazelcast://my-cluster?discoverToken=ABC123"
SSL_URL = "jdbc:hazelcast://node1:5701?sslEnabled=true&trustStore=ts.jks"
FOREIGN_URL = "jdbc:postgresql://localhost:5432/db"


@pytest.fixture
def fresh_driver():
    """Reset the driver singleton around a test."""
    saved = (Driver._instance, Driver._registered)
    Driver._instance = None
    Driver._registered = False
    yield
    Driver._instance, Driver._registered = saved
