"""Tests for the varint codec and the packet framer"""

import pytest

from minestat_es import varint
from minestat_es.errors import VarIntError
from minestat_es.packet import create_packet


class TestVarInt:
    """Test varint encoding"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, b"\x00"),
            (1, b"\x01"),
            (127, b"\x7f"),
            (128, b"\x80\x01"),
            (255, b"\xff\x01"),
            (300, b"\xac\x02"),
            (757, b"\xf5\x05"),
            (2097151, b"\xff\xff\x7f"),
            (2147483647, b"\xff\xff\xff\xff\x07"),
        ],
    )
    def test_encode(self, value, expected):
        assert varint.encode(value) == expected

    @pytest.mark.parametrize("value", [0, 1, 127, 128, 16383, 16384, 2097151, 2097152, 2**31 - 1])
    def test_encoding_length_matches_encode(self, value):
        assert varint.encoding_length(value) == len(varint.encode(value))

    def test_negative_values_are_rejected(self):
        with pytest.raises(VarIntError):
            varint.encode(-1)
        with pytest.raises(ValueError):
            varint.encoding_length(-5)


class TestCreatePacket:
    """Test packet framing"""

    def test_empty_payload(self):
        assert create_packet(0, b"") == b"\x01\x00"

    def test_length_counts_id_and_payload(self):
        assert create_packet(1, b"abc") == b"\x04\x01abc"

    def test_multi_byte_packet_id(self):
        # id 200 takes two bytes, so the length is 2 + 1
        assert create_packet(200, b"x") == b"\x03\xc8\x01x"

    def test_long_payload_gets_multi_byte_length(self):
        packet = create_packet(0, bytes(200))

        assert packet[:3] == b"\xc9\x01\x00"
        assert len(packet) == 203
