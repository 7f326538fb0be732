"""Enumerates the IPv6 addresses of local network interfaces."""

import logging
import socket

import psutil  # type: ignore[import-untyped]

from sdnames.util.ip6_address import Ip6Address

_logger = logging.getLogger(__name__)


def get_all_ip6_addresses() -> list[Ip6Address]:
    """Retrieves all IPv6 addresses for all network interfaces.

    Link-local addresses are reported by psutil with a "%<interface>" zone
    suffix, which is dropped. Addresses that fail to parse are skipped.

    Returns:
        A list of `Ip6Address` values, in interface order.
    """
    addresses: list[Ip6Address] = []
    for interface, interface_addresses in psutil.net_if_addrs().items():
        for address in interface_addresses:
            if address.family != socket.AF_INET6:
                continue
            text = address.address.split("%", 1)[0]
            try:
                addresses.append(Ip6Address.from_string(text))
            except ValueError:
                _logger.warning(
                    "Skipping unparsable IPv6 address '%s' on %s.",
                    address.address,
                    interface,
                )
    return addresses
