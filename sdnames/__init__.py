"""sdnames package for splitting DNS-SD service discovery names.

This package parses full host, service type and service instance names
into their components, and provides a small IPv6 address value type for
formatting discovered addresses.
"""

from sdnames.config import DnsNameSplitConfig
from sdnames.discovery import (
    DnsNameInfo,
    DnsNameKind,
    DnsNameSplitter,
    InvalidDnsNameError,
    ServiceInstanceName,
    split_full_dns_name,
    split_full_host_name,
    split_full_service_instance_name,
    split_full_service_name,
    split_subtypes,
)
from sdnames.util import Ip6Address

__all__ = [
    "DnsNameInfo",
    "DnsNameKind",
    "DnsNameSplitConfig",
    "DnsNameSplitter",
    "InvalidDnsNameError",
    "Ip6Address",
    "ServiceInstanceName",
    "split_full_dns_name",
    "split_full_host_name",
    "split_full_service_instance_name",
    "split_full_service_name",
    "split_subtypes",
]
