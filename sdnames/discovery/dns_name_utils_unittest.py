import logging

import pytest

from sdnames.discovery.dns_name_info import DnsNameKind
from sdnames.discovery.dns_name_utils import (
    InvalidDnsNameError,
    ServiceInstanceName,
    split_full_host_name,
    split_full_service_instance_name,
    split_full_service_name,
)


class TestSplitFullHostName:

    def test_host_name(self):
        assert split_full_host_name("host.example.com") == (
            "host",
            "example.com.",
        )

    def test_service_name_is_rejected(self):
        with pytest.raises(InvalidDnsNameError) as exc_info:
            split_full_host_name("_service._udp.example.com.")

        assert exc_info.value.expected is DnsNameKind.HOST
        assert exc_info.value.actual is DnsNameKind.SERVICE
        assert exc_info.value.full_name == "_service._udp.example.com."

    def test_unrecognized_name_is_rejected(self):
        with pytest.raises(InvalidDnsNameError) as exc_info:
            split_full_host_name(".example.com")

        assert exc_info.value.actual is DnsNameKind.UNRECOGNIZED

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="is not a host name"):
            split_full_host_name("inst._svc._tcp.local.")


class TestSplitFullServiceName:

    def test_service_name(self):
        assert split_full_service_name("_service._udp.example.com.") == (
            "_service._udp",
            "example.com.",
        )

    def test_service_name_with_subtypes(self):
        assert split_full_service_name("_meshcop._udp,_sub1.default.service.arpa") == (
            "_meshcop._udp",
            "default.service.arpa.",
        )

    def test_instance_name_is_rejected(self):
        with pytest.raises(InvalidDnsNameError) as exc_info:
            split_full_service_name("myinstance._service._udp.example.com.")

        assert exc_info.value.expected is DnsNameKind.SERVICE
        assert exc_info.value.actual is DnsNameKind.SERVICE_INSTANCE

    def test_host_name_is_rejected(self):
        with pytest.raises(InvalidDnsNameError):
            split_full_service_name("host.example.com")


class TestSplitFullServiceInstanceName:

    def test_service_instance_name(self):
        result = split_full_service_instance_name(
            "myinstance._service._udp.example.com."
        )

        assert result == ServiceInstanceName(
            instance_name="myinstance",
            service_name="_service._udp",
            subtypes=[],
            domain="example.com.",
        )

    def test_service_instance_name_with_subtypes(self):
        result = split_full_service_instance_name(
            "myinstance,subA,subB._service._udp.example.com."
        )

        assert result.instance_name == "myinstance"
        assert result.service_name == "_service._udp"
        assert result.subtypes == ["subA", "subB"]
        assert result.domain == "example.com."

    def test_service_name_is_rejected(self):
        with pytest.raises(InvalidDnsNameError) as exc_info:
            split_full_service_instance_name("_service._udp.example.com.")

        assert exc_info.value.expected is DnsNameKind.SERVICE_INSTANCE
        assert exc_info.value.actual is DnsNameKind.SERVICE

    def test_mismatch_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sdnames.discovery.dns_name_utils"):
            with pytest.raises(InvalidDnsNameError):
                split_full_service_instance_name("host.example.com")

        assert "Expected SERVICE_INSTANCE name, got HOST" in caplog.text
