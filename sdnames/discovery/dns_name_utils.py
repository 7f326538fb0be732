"""Shape-specific helpers for extracting fields from full DNS names."""

import logging
from typing import List, NamedTuple, Tuple

from sdnames.discovery.dns_name_info import DnsNameInfo, DnsNameKind
from sdnames.discovery.dns_name_splitter import split_full_dns_name

_logger = logging.getLogger(__name__)


class InvalidDnsNameError(ValueError):
    """Raised when a full name does not have the requested shape."""

    def __init__(
        self, full_name: str, expected: DnsNameKind, actual: DnsNameKind
    ) -> None:
        super().__init__(
            f"'{full_name}' is not a {expected.name.lower()} name "
            f"(parsed as {actual.name.lower()})."
        )
        self.full_name = full_name
        self.expected = expected
        self.actual = actual


class ServiceInstanceName(NamedTuple):
    """Components of a full service instance name."""

    instance_name: str
    service_name: str
    subtypes: List[str]
    domain: str


def _split_expecting(full_name: str, expected: DnsNameKind) -> DnsNameInfo:
    info = split_full_dns_name(full_name)
    if info.kind is not expected:
        _logger.debug(
            "Expected %s name, got %s for '%s'.",
            expected.name,
            info.kind.name,
            full_name,
        )
        raise InvalidDnsNameError(full_name, expected, info.kind)
    return info


def split_full_host_name(full_name: str) -> Tuple[str, str]:
    """Splits a full host name.

    Args:
        full_name: Name such as "myhost.local." (trailing dot optional).

    Returns:
        A `(host_name, domain)` tuple.

    Raises:
        InvalidDnsNameError: If `full_name` is not a host name.
    """
    info = _split_expecting(full_name, DnsNameKind.HOST)
    assert info.host_name is not None
    return info.host_name, info.domain


def split_full_service_name(full_name: str) -> Tuple[str, str]:
    """Splits a full service type name, e.g. "_http._tcp.local.".

    Returns:
        A `(service_name, domain)` tuple.

    Raises:
        InvalidDnsNameError: If `full_name` is not a service type name.
    """
    info = _split_expecting(full_name, DnsNameKind.SERVICE)
    assert info.service_name is not None
    return info.service_name, info.domain


def split_full_service_instance_name(full_name: str) -> ServiceInstanceName:
    """Splits a full service instance name.

    Raises:
        InvalidDnsNameError: If `full_name` is not a service instance name.
    """
    info = _split_expecting(full_name, DnsNameKind.SERVICE_INSTANCE)
    assert info.instance_name is not None and info.service_name is not None
    return ServiceInstanceName(
        instance_name=info.instance_name,
        service_name=info.service_name,
        subtypes=list(info.subtypes),
        domain=info.domain,
    )
