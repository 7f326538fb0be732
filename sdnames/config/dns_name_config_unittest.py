import dataclasses

import pytest

from sdnames.config.dns_name_config import DnsNameSplitConfig


def test_defaults():
    config = DnsNameSplitConfig()

    assert config.transport_markers == ("._udp", "._tcp")
    assert config.subtype_separator == ","


def test_is_frozen():
    config = DnsNameSplitConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.subtype_separator = ";"  # type: ignore[misc]


def test_custom_values():
    config = DnsNameSplitConfig(
        transport_markers=("._tcp", "._sctp"), subtype_separator="~"
    )

    assert config.transport_markers == ("._tcp", "._sctp")
    assert config.subtype_separator == "~"


@pytest.mark.parametrize("markers", [(), ("_udp",), (".",)])
def test_invalid_marker_values(markers):
    with pytest.raises(ValueError):
        DnsNameSplitConfig(transport_markers=markers)


@pytest.mark.parametrize("markers", [["._udp"], (5,)])
def test_invalid_marker_types(markers):
    with pytest.raises(TypeError):
        DnsNameSplitConfig(transport_markers=markers)


@pytest.mark.parametrize("separator", ["", ".", ",,"])
def test_invalid_separator_values(separator):
    with pytest.raises(ValueError):
        DnsNameSplitConfig(subtype_separator=separator)


def test_invalid_separator_type():
    with pytest.raises(TypeError):
        DnsNameSplitConfig(subtype_separator=None)  # type: ignore[arg-type]


@pytest.mark.parametrize("separator", ["_", "u", "p"])
def test_separator_inside_default_marker_is_rejected(separator):
    with pytest.raises(ValueError, match="cannot appear in transport marker"):
        DnsNameSplitConfig(subtype_separator=separator)


def test_separator_inside_custom_marker_is_rejected():
    with pytest.raises(ValueError):
        DnsNameSplitConfig(transport_markers=("._s~p",), subtype_separator="~")
