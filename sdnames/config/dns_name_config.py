"""Configuration for splitting full DNS-SD names."""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_TRANSPORT_MARKERS: Tuple[str, ...] = ("._udp", "._tcp")


@dataclass(frozen=True)
class DnsNameSplitConfig:
    """Configuration for creating DnsNameSplitter instances.

    Attributes:
        transport_markers: Transport label markers, in priority order. The
            first marker found anywhere in a name wins, even if a later
            marker occurs further right.
        subtype_separator: Character that introduces a subtype list.
    """

    transport_markers: Tuple[str, ...] = DEFAULT_TRANSPORT_MARKERS
    subtype_separator: str = ","

    def __post_init__(self) -> None:
        if not isinstance(self.transport_markers, tuple):
            raise TypeError(
                f"transport_markers must be tuple, "
                f"got {type(self.transport_markers).__name__}."
            )
        if not self.transport_markers:
            raise ValueError("transport_markers cannot be empty.")
        for marker in self.transport_markers:
            if not isinstance(marker, str):
                raise TypeError(
                    f"transport marker must be str, got {type(marker).__name__}."
                )
            # Markers are whole labels, so they start at a label boundary.
            if len(marker) < 2 or not marker.startswith("."):
                raise ValueError(
                    f"transport marker must start with '.', got '{marker}'."
                )

        if not isinstance(self.subtype_separator, str):
            raise TypeError(
                f"subtype_separator must be str, "
                f"got {type(self.subtype_separator).__name__}."
            )
        if len(self.subtype_separator) != 1 or self.subtype_separator == ".":
            raise ValueError(
                f"subtype_separator must be a single non-dot character, "
                f"got '{self.subtype_separator}'."
            )
        for marker in self.transport_markers:
            if self.subtype_separator in marker:
                raise ValueError(
                    f"subtype_separator '{self.subtype_separator}' cannot "
                    f"appear in transport marker '{marker}'."
                )
