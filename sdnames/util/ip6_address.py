"""Defines Ip6Address, a fixed-size IPv6 address value."""

import socket
import struct
from typing import Tuple

_ADDRESS_SIZE = 16
_WORD_FORMAT = "!4I"
_MAX_WORD = 0xFFFFFFFF


class Ip6Address:
    """An immutable 16-byte IPv6 address.

    The address is stored in network byte order. It can be built from raw
    bytes, from four 32-bit words or from text, and formatted back to the
    standard textual form.
    """

    __slots__ = ("__packed",)

    def __init__(self, packed: bytes) -> None:
        """Initializes from the 16 raw address bytes.

        Raises:
            TypeError: If `packed` is not bytes-like.
            ValueError: If `packed` is not exactly 16 bytes long.
        """
        if not isinstance(packed, (bytes, bytearray, memoryview)):
            raise TypeError(f"packed must be bytes, got {type(packed).__name__}.")
        packed = bytes(packed)
        if len(packed) != _ADDRESS_SIZE:
            raise ValueError(
                f"packed must be {_ADDRESS_SIZE} bytes, got {len(packed)}."
            )
        self.__packed: bytes = packed

    @classmethod
    def from_words(cls, w0: int, w1: int, w2: int, w3: int) -> "Ip6Address":
        """Creates an address from four 32-bit words in network order.

        Raises:
            ValueError: If a word is outside the unsigned 32-bit range.
        """
        words = (w0, w1, w2, w3)
        for word in words:
            if not isinstance(word, int):
                raise TypeError(f"word must be int, got {type(word).__name__}.")
            if not 0 <= word <= _MAX_WORD:
                raise ValueError(f"word must fit in 32 bits, got {word}.")
        return cls(struct.pack(_WORD_FORMAT, *words))

    @classmethod
    def from_string(cls, text: str) -> "Ip6Address":
        """Parses the textual form of an IPv6 address.

        Raises:
            ValueError: If `text` is not a valid IPv6 address.
        """
        try:
            return cls(socket.inet_pton(socket.AF_INET6, text))
        except OSError as e:
            raise ValueError(f"Invalid IPv6 address '{text}'.") from e

    @property
    def packed(self) -> bytes:
        return self.__packed

    @property
    def words(self) -> Tuple[int, int, int, int]:
        w0, w1, w2, w3 = struct.unpack(_WORD_FORMAT, self.__packed)
        return w0, w1, w2, w3

    def to_string(self) -> str:
        """Formats the address, e.g. "fe80::1".

        Raises:
            RuntimeError: If the platform conversion fails.
        """
        try:
            return socket.inet_ntop(socket.AF_INET6, self.__packed)
        except (OSError, ValueError) as e:
            raise RuntimeError("Failed to convert Ip6 address to string") from e

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Ip6Address('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ip6Address):
            return NotImplemented
        return self.__packed == other.__packed

    def __hash__(self) -> int:
        return hash(self.__packed)
