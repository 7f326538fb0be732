import dataclasses

import pytest

from sdnames.discovery.dns_name_info import DnsNameInfo, DnsNameKind


def test_host_predicates():
    info = DnsNameInfo(domain="local.", host_name="myhost")

    assert info.is_host()
    assert not info.is_service()
    assert not info.is_service_instance()
    assert info.kind is DnsNameKind.HOST


def test_service_predicates():
    info = DnsNameInfo(domain="local.", service_name="_http._tcp")

    assert not info.is_host()
    assert info.is_service()
    assert not info.is_service_instance()
    assert info.kind is DnsNameKind.SERVICE


def test_service_instance_predicates():
    info = DnsNameInfo(
        domain="local.",
        service_name="_http._tcp",
        instance_name="web",
        subtypes=("_printer",),
    )

    assert not info.is_host()
    assert not info.is_service()
    assert info.is_service_instance()
    assert info.kind is DnsNameKind.SERVICE_INSTANCE


def test_unrecognized_when_nothing_set():
    info = DnsNameInfo(domain=".")

    assert not info.is_host()
    assert not info.is_service()
    assert not info.is_service_instance()
    assert info.kind is DnsNameKind.UNRECOGNIZED


def test_host_and_service_are_exclusive():
    with pytest.raises(ValueError):
        DnsNameInfo(domain="local.", host_name="h", service_name="_s._udp")


def test_instance_requires_service():
    with pytest.raises(ValueError):
        DnsNameInfo(domain="local.", instance_name="inst")


def test_domain_must_be_dot_terminated():
    with pytest.raises(ValueError):
        DnsNameInfo(domain="local", host_name="h")


def test_domain_must_be_str():
    with pytest.raises(TypeError):
        DnsNameInfo(domain=None, host_name="h")  # type: ignore[arg-type]


def test_is_frozen():
    info = DnsNameInfo(domain="local.", host_name="h")
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.host_name = "other"  # type: ignore[misc]


def test_equality_by_value():
    assert DnsNameInfo(domain="a.", host_name="h") == DnsNameInfo(
        domain="a.", host_name="h"
    )
    assert DnsNameInfo(domain="a.", host_name="h") != DnsNameInfo(
        domain="b.", host_name="h"
    )
