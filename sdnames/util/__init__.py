"""Utility classes and functions for sdnames."""

from sdnames.util.ip import get_all_ip6_addresses
from sdnames.util.ip6_address import Ip6Address

__all__ = [
    "Ip6Address",
    "get_all_ip6_addresses",
]
