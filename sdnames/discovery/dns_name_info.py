"""Defines DnsNameInfo, the parsed form of a full DNS-SD name."""

import dataclasses
from enum import Enum
from typing import Optional, Tuple


class DnsNameKind(Enum):
    """The shape a full DNS name was recognized as.

    Attributes:
        HOST: `<host>.<domain>`.
        SERVICE: `<service>.<domain>`, e.g. `_http._tcp.local.`.
        SERVICE_INSTANCE: `<instance>.<service>.<domain>`.
        UNRECOGNIZED: None of the above, e.g. a name with an empty leading
            label.
    """

    HOST = 0
    SERVICE = 1
    SERVICE_INSTANCE = 2
    UNRECOGNIZED = 3


@dataclasses.dataclass(frozen=True)
class DnsNameInfo:
    """Components of a full DNS name.

    Only the fields relevant to the recognized shape are set; the others
    are None. `domain` is always present and always ends with a dot.
    """

    domain: str
    host_name: Optional[str] = None
    service_name: Optional[str] = None
    instance_name: Optional[str] = None
    subtypes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validates that the set fields describe a single shape."""
        if not isinstance(self.domain, str):
            raise TypeError(
                f"domain must be str, got {type(self.domain).__name__}."
            )
        if not self.domain.endswith("."):
            raise ValueError(f"domain must end with '.', got '{self.domain}'.")

        if self.host_name is not None and self.service_name is not None:
            raise ValueError(
                "host_name and service_name cannot both be set, got "
                f"'{self.host_name}' and '{self.service_name}'."
            )
        if self.instance_name is not None and self.service_name is None:
            raise ValueError(
                f"instance_name '{self.instance_name}' requires a service_name."
            )

    def is_host(self) -> bool:
        return self.host_name is not None

    def is_service(self) -> bool:
        return self.service_name is not None and self.instance_name is None

    def is_service_instance(self) -> bool:
        return self.service_name is not None and self.instance_name is not None

    @property
    def kind(self) -> DnsNameKind:
        """Returns the shape of this name as a single tag."""
        if self.is_host():
            return DnsNameKind.HOST
        if self.is_service():
            return DnsNameKind.SERVICE
        if self.is_service_instance():
            return DnsNameKind.SERVICE_INSTANCE
        return DnsNameKind.UNRECOGNIZED
