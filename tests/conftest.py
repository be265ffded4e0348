"""Shared helpers for the minestat_es tests."""
import json
import struct

import pytest

from minestat_es import varint
from minestat_es.packet import create_packet

ADDRESS = "1.2.3.4"
PORT = 25565

VALID_STATUS = {
    "version": {"name": "1.18.1", "protocol": 757},
    "players": {
        "max": 100,
        "online": 5,
        "sample": [
            {"name": "thinkofdeath", "id": "4566e69f-c907-48ee-8d71-d7ba5aa00d20"},
            {"name": "Notch", "id": "069a79f4-44e9-4726-a5be-fca90e38aaf5"},
        ],
    },
    "description": {
        "text": "!",
        "extra": [
            {"text": "Hello", "bold": True, "color": "gold"},
            {"text": "World", "extra": [{"text": ", ", "italic": True}]},
        ],
    },
    "favicon": "data:image/png;base64,iVBORw0KGgo=",
}


def pad_data(data: bytes) -> bytes:
    """Prefix `data` with as many zero bytes as the modern parser skips."""
    skip_bytes = varint.encoding_length(len(data)) * 2 + 1
    return bytes(skip_bytes) + data


def status_frame(document) -> bytes:
    """A real status response packet: varint length, packet id 0, varint string length, JSON."""
    raw = json.dumps(document).encode("utf8")
    return create_packet(0, varint.encode(len(raw)) + raw)


def legacy_reply(*fields: str, length: int | None = None, packet_id: int = 0xFF) -> bytes:
    """Build a legacy kick packet carrying NUL delimited `fields`."""
    text = "\x00".join(fields)
    size = len(text) if length is None else length
    return bytes([packet_id]) + struct.pack(">h", size) + text.encode("utf-16-be")


class FakeTransport:
    """Records what the session does with its connection."""

    def __init__(self, session=None, close_notifies=False):
        self.session = session
        self.close_notifies = close_notifies
        self.writes = []
        self.close_count = 0

    def write(self, data):
        self.writes.append(bytes(data))

    def is_closing(self):
        return self.close_count > 0

    def close(self):
        self.close_count += 1
        # a transport reporting the close right away, like a synchronous socket end()
        if self.close_notifies and self.session is not None:
            self.session.connection_lost(None)


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr("minestat_es.session.perf_counter", fake)
    return fake


@pytest.fixture
def legacy_fields():
    return ("§1", "61", "1.4.2", "A Minecraft Server", "3", "20")
