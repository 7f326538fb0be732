"""Parsing of DNS-SD host, service and service instance names.

Full names are split into their components without any network access;
see `DnsNameSplitter` for the recognized shapes.
"""

from sdnames.discovery.dns_name_info import DnsNameInfo, DnsNameKind
from sdnames.discovery.dns_name_splitter import (
    DnsNameSplitter,
    split_full_dns_name,
    split_subtypes,
)
from sdnames.discovery.dns_name_utils import (
    InvalidDnsNameError,
    ServiceInstanceName,
    split_full_host_name,
    split_full_service_instance_name,
    split_full_service_name,
)

__all__ = [
    "DnsNameInfo",
    "DnsNameKind",
    "DnsNameSplitter",
    "InvalidDnsNameError",
    "ServiceInstanceName",
    "split_full_dns_name",
    "split_full_host_name",
    "split_full_service_instance_name",
    "split_full_service_name",
    "split_subtypes",
]
