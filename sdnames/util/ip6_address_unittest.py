import socket

import pytest

from sdnames.util.ip6_address import Ip6Address


class TestIp6Address:

    def test_from_words(self):
        address = Ip6Address.from_words(0xFE800000, 0, 0, 1)

        assert address.to_string() == "fe80::1"
        assert address.words == (0xFE800000, 0, 0, 1)

    def test_words_are_network_order(self):
        address = Ip6Address.from_words(0x20010DB8, 0, 0, 0x00000042)

        assert address.packed[:4] == b"\x20\x01\x0d\xb8"
        assert address.packed[-1] == 0x42

    def test_from_string(self):
        address = Ip6Address.from_string("2001:db8::ff00:42:8329")

        assert str(address) == "2001:db8::ff00:42:8329"
        assert address.words == (0x20010DB8, 0, 0x0000FF00, 0x00428329)

    def test_from_packed(self):
        packed = socket.inet_pton(socket.AF_INET6, "::1")
        address = Ip6Address(packed)

        assert address.packed == packed
        assert address.words == (0, 0, 0, 1)
        assert str(address) == "::1"

    def test_accepts_bytearray(self):
        address = Ip6Address(bytearray(16))
        assert str(address) == "::"

    @pytest.mark.parametrize("size", [0, 4, 15, 17])
    def test_wrong_size_raises(self, size):
        with pytest.raises(ValueError):
            Ip6Address(bytes(size))

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError):
            Ip6Address("::1")  # type: ignore[arg-type]

    @pytest.mark.parametrize("word", [-1, 0x100000000])
    def test_word_out_of_range_raises(self, word):
        with pytest.raises(ValueError):
            Ip6Address.from_words(0, word, 0, 0)

    def test_non_int_word_raises(self):
        with pytest.raises(TypeError):
            Ip6Address.from_words(0, 0, 0, "1")  # type: ignore[arg-type]

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            Ip6Address.from_string("not-an-address")

    def test_conversion_failure_raises_runtime_error(self, mocker):
        mocker.patch("socket.inet_ntop", side_effect=OSError("boom"))
        address = Ip6Address.from_words(0, 0, 0, 1)

        with pytest.raises(RuntimeError, match="Failed to convert Ip6 address"):
            address.to_string()

    def test_equality_and_hash(self):
        a = Ip6Address.from_string("fe80::1")
        b = Ip6Address.from_words(0xFE800000, 0, 0, 1)
        c = Ip6Address.from_string("fe80::2")

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2
        assert a != "fe80::1"

    def test_repr(self):
        assert repr(Ip6Address.from_string("::1")) == "Ip6Address('::1')"
