import logging
import socket  # For AF_INET, AF_INET6 constants

from sdnames.util import ip as ip_util
from sdnames.util.ip6_address import Ip6Address


# Helper to create a mock address object
def create_mock_address(mocker, family, address):
    mock_addr = mocker.MagicMock()
    mock_addr.family = family
    mock_addr.address = address
    return mock_addr


class TestGetAllIp6Addresses:

    def test_no_interfaces(self, mocker):
        mock_net_if_addrs = mocker.patch("psutil.net_if_addrs")
        mock_net_if_addrs.return_value = {}

        assert ip_util.get_all_ip6_addresses() == []
        mock_net_if_addrs.assert_called_once()

    def test_no_ipv6(self, mocker):
        mock_net_if_addrs = mocker.patch("psutil.net_if_addrs")
        mock_net_if_addrs.return_value = {
            "eth0": [create_mock_address(mocker, socket.AF_INET, "10.0.0.1")]
        }

        assert ip_util.get_all_ip6_addresses() == []

    def test_strips_zone(self, mocker):
        mock_net_if_addrs = mocker.patch("psutil.net_if_addrs")
        mock_net_if_addrs.return_value = {
            "eth0": [
                create_mock_address(mocker, socket.AF_INET, "10.0.0.1"),
                create_mock_address(mocker, socket.AF_INET6, "fe80::1%eth0"),
            ],
            "lo": [create_mock_address(mocker, socket.AF_INET6, "::1")],
        }

        result = ip_util.get_all_ip6_addresses()

        assert result == [
            Ip6Address.from_string("fe80::1"),
            Ip6Address.from_string("::1"),
        ]

    def test_skips_unparsable(self, mocker, caplog):
        mock_net_if_addrs = mocker.patch("psutil.net_if_addrs")
        mock_net_if_addrs.return_value = {
            "weird0": [
                create_mock_address(mocker, socket.AF_INET6, "garbage"),
                create_mock_address(mocker, socket.AF_INET6, "2001:db8::1"),
            ]
        }

        with caplog.at_level(logging.WARNING, logger="sdnames.util.ip"):
            result = ip_util.get_all_ip6_addresses()

        assert result == [Ip6Address.from_string("2001:db8::1")]
        assert "garbage" in caplog.text

    def test_real_interfaces_do_not_raise(self):
        # Smoke test against the host's actual interfaces.
        assert all(
            isinstance(a, Ip6Address) for a in ip_util.get_all_ip6_addresses()
        )

    def test_exported_from_package(self):
        import sdnames.util

        assert sdnames.util.get_all_ip6_addresses is ip_util.get_all_ip6_addresses
