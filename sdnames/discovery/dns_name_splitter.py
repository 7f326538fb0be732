"""Splits full DNS-SD names into host, service, instance and domain parts.

Three name shapes are distinguished purely from string structure:

                <host> . <domain>
             <service> . <domain>
  <instance> . <service> . <domain>

where `<service>` ends in a transport label (`_udp` or `_tcp`). A subtype
list may follow any label before the domain, introduced by a comma:

  <instance>,<sub1>,<sub2> . <service> . <domain>
             <service>,<sub1> . <domain>

Subtype lists are cut out of their labels; the rest of each label stays,
so "a,b.c._svc._udp.local." is instance "a.c" with subtype "b".
"""

import logging
from typing import List, Optional, Tuple

from sdnames.config.dns_name_config import DnsNameSplitConfig
from sdnames.discovery.dns_name_info import DnsNameInfo, DnsNameKind

_logger = logging.getLogger(__name__)


def split_subtypes(
    subtypes_fragment: str,
    subtypes: Optional[List[str]] = None,
    separator: str = ",",
) -> List[str]:
    """Splits a separator-delimited subtype fragment into its entries.

    Everything before the first separator is skipped; the fragment normally
    starts with it. Exactly `subtypes_fragment.count(separator)` entries are
    appended, empty ones included.

    Args:
        subtypes_fragment: Text such as ",_printer,_color".
        subtypes: List to append to. Existing entries are kept. A new list
            is created if None.
        separator: Subtype separator character.

    Returns:
        The list the entries were appended to.
    """
    if subtypes is None:
        subtypes = []
    subtypes.extend(subtypes_fragment.split(separator)[1:])
    return subtypes


class DnsNameSplitter:
    """Parses full DNS names into `DnsNameInfo` records.

    Splitting never fails on string input; a name that matches no known
    shape yields a `DnsNameInfo` whose `kind` is `UNRECOGNIZED`. Instances
    hold no mutable state and may be shared between threads.
    """

    def __init__(self, config: Optional[DnsNameSplitConfig] = None) -> None:
        if config is None:
            config = DnsNameSplitConfig()
        if not isinstance(config, DnsNameSplitConfig):
            raise TypeError(
                f"config must be DnsNameSplitConfig, got {type(config).__name__}."
            )
        self.__markers: Tuple[str, ...] = config.transport_markers
        self.__separator: str = config.subtype_separator

    def split(self, full_name: str) -> DnsNameInfo:
        """Splits `full_name` into its components.

        Args:
            full_name: A DNS name, with or without the trailing dot.

        Returns:
            The parsed name. `domain` always ends with a dot.

        Raises:
            TypeError: If `full_name` is not a str.
        """
        if not isinstance(full_name, str):
            raise TypeError(
                f"full_name must be str, got {type(full_name).__name__}."
            )

        name = full_name if full_name.endswith(".") else f"{full_name}."
        subtypes: List[str] = []

        # Each pass removes one label's subtype list, so this terminates.
        transport = self.__find_transport(name)
        while transport is not None:
            fragment_range = self.__find_subtypes_range(name, transport[0])
            if fragment_range is None:
                break
            start, end = fragment_range
            split_subtypes(name[start:end], subtypes, self.__separator)
            name = name[:start] + name[end:]
            transport = self.__find_transport(name)

        if transport is None:
            info = self.__split_host_name(name)
        else:
            info = self.__split_service_name(name, transport, tuple(subtypes))

        if info.kind is DnsNameKind.UNRECOGNIZED:
            _logger.debug("Unrecognized DNS name '%s'.", full_name)
        return info

    def __find_transport(self, name: str) -> Optional[Tuple[int, str]]:
        # Marker priority beats position: "._udp" anywhere wins over "._tcp".
        for marker in self.__markers:
            pos = name.rfind(marker)
            if pos != -1:
                return pos, marker
        return None

    def __find_subtypes_range(
        self, name: str, transport_pos: int
    ) -> Optional[Tuple[int, int]]:
        """Returns the [start, end) range of the subtype list, if any.

        The list starts at the first separator and runs to the end of that
        label. A separator inside the domain does not start a list. Lists
        in several labels are found one at a time, left to right.
        """
        domain_pos = name.find(".", transport_pos + 1)
        comma_pos = name.find(self.__separator)
        if comma_pos == -1 or comma_pos >= domain_pos:
            return None
        return comma_pos, name.find(".", comma_pos)

    def __split_host_name(self, name: str) -> DnsNameInfo:
        # `name` is dot-terminated, so a dot is always found.
        dot_pos = name.find(".")
        return DnsNameInfo(
            domain=_with_trailing_dot(name[dot_pos + 1 :]),
            host_name=name[:dot_pos] or None,
        )

    def __split_service_name(
        self,
        name: str,
        transport: Tuple[int, str],
        subtypes: Tuple[str, ...],
    ) -> DnsNameInfo:
        transport_pos, marker = transport
        service_end = transport_pos + len(marker)

        dot_pos = name.rfind(".", 0, transport_pos) if transport_pos > 0 else -1
        domain_pos = name.find(".", transport_pos + 1)
        domain = _with_trailing_dot(name[domain_pos + 1 :])

        if dot_pos == -1:
            return DnsNameInfo(
                domain=domain,
                service_name=name[:service_end],
                subtypes=subtypes,
            )

        return DnsNameInfo(
            domain=domain,
            service_name=name[dot_pos + 1 : service_end],
            instance_name=name[:dot_pos] or None,
            subtypes=subtypes,
        )


def _with_trailing_dot(domain: str) -> str:
    return domain if domain.endswith(".") else f"{domain}."


_default_splitter = DnsNameSplitter()


def split_full_dns_name(full_name: str) -> DnsNameInfo:
    """Splits `full_name` using the default transport markers."""
    return _default_splitter.split(full_name)
