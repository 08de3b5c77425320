"""
Unit tests for the driver singleton and registration.
"""

from __future__ import annotations

import threading

import pytest

from hazelcast_jdbc.driver import Driver, DriverPropertyInfo, register_driver
from hazelcast_jdbc.exceptions import NullUrlError, UnsupportedUrlError
from hazelcast_jdbc.mapping import MAPPING_NAMES
from tests.conftest import CLOUD_URL, FOREIGN_URL, STATIC_URL


class TestDriverSingleton:
    def test_same_instance(self, fresh_driver) -> None:
        assert Driver() is Driver()
        assert Driver.instance() is Driver()

    def test_concurrent_creation(self, fresh_driver) -> None:
        barrier = threading.Barrier(8)
        instances = []

        def create() -> None:
            barrier.wait()
            instances.append(Driver.instance())

        threads = [threading.Thread(target=create) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(d is instances[0] for d in instances)

    def test_register_is_idempotent(self, fresh_driver) -> None:
        first = register_driver()
        second = register_driver()
        assert first is second
        assert Driver._registered is True


class TestDriverMetadata:
    def test_versions(self) -> None:
        driver = Driver.instance()
        assert driver.major_version == 1
        assert driver.minor_version == 0

    def test_not_jdbc_compliant(self) -> None:
        assert Driver.instance().jdbc_compliant() is False


class TestAcceptsUrl:
    def test_accepts_own_scheme(self) -> None:
        assert Driver.instance().accepts_url(STATIC_URL) is True

    def test_rejects_foreign_scheme(self) -> None:
        assert Driver.instance().accepts_url(FOREIGN_URL) is False

    def test_none_raises(self) -> None:
        with pytest.raises(NullUrlError):
            Driver.instance().accepts_url(None)


class TestClientConfig:
    def test_resolves(self) -> None:
        config = Driver.instance().client_config(STATIC_URL)
        assert config.network_config.addresses == ["node1:5701"]
        assert config.cluster_name == "dev"

    def test_cloud(self) -> None:
        config = Driver.instance().client_config(CLOUD_URL)
        assert config.cloud_discovery_token == "ABC123"

    def test_info_properties(self) -> None:
        config = Driver.instance().client_config("jdbc:hazelcast://node1", {"clusterName": "qa"})
        assert config.cluster_name == "qa"

    def test_foreign_url(self) -> None:
        with pytest.raises(UnsupportedUrlError, match="is not supported"):
            Driver.instance().client_config(FOREIGN_URL)

    def test_fresh_config_per_call(self) -> None:
        driver = Driver.instance()
        assert driver.client_config(STATIC_URL) is not driver.client_config(STATIC_URL)


class TestPropertyInfo:
    def test_lists_every_property(self) -> None:
        infos = Driver.instance().get_property_info(STATIC_URL)
        names = [info.name for info in infos]
        assert names[:3] == ["user", "password", "discoverToken"]
        assert set(names[3:]) == set(MAPPING_NAMES)
        assert all(isinstance(info, DriverPropertyInfo) for info in infos)
        assert not any(info.required for info in infos)

    def test_current_values(self) -> None:
        infos = {info.name: info for info in Driver.instance().get_property_info(STATIC_URL)}
        assert infos["user"].value == "alice"
        assert infos["clusterName"].value == "dev"
        assert infos["sslEnabled"].value is None

    def test_malformed_url_falls_back_to_info(self) -> None:
        infos = {
            info.name: info
            for info in Driver.instance().get_property_info("jdbc:hazelcast://node 1", {"user": "bob"})
        }
        assert infos["user"].value == "bob"
        assert infos["clusterName"].value is None

    def test_values_from_info_for_foreign_url(self) -> None:
        infos = {info.name: info for info in Driver.instance().get_property_info(FOREIGN_URL, {"user": "bob"})}
        assert infos["user"].value == "bob"

    def test_descriptions(self) -> None:
        infos = {info.name: info for info in Driver.instance().get_property_info("")}
        assert infos["trustStore"].description == "TLS property trustStore"
        assert "discovery" in infos["k8sServiceDns"].description
