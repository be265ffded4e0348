# minestat_es - A Minecraft server status checker
# Copyright (C) 2016-2023 Lloyd Dilley, Felix Ern (MindSolve)
# http://www.dilley.me/
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
"""
Minecraft 1.4-1.5 SLP query, the server response contains more info than beta SLP.

The request is the two bytes `FE 01`. The server answers with a kick packet:

- `0xFF` packet id
- signed big-endian short: length of the following string in UTF-16 code units
- UTF-16BE string with six fields delimited by a NUL character:
  a fixed prefix '§1', the protocol version, the server version, the MOTD,
  the online player count and the max player count

See https://minecraft.wiki/w/Java_Edition_protocol/Server_List_Ping#1.4_to_1.5
"""
import logging
import re
import struct

from .errors import (
    EmptyReplyError,
    InvalidReplyError,
    PlayerCountParseError,
    ShortReplyError,
)
from .protocol import QueryProtocol
from .types import ServerInfo

logger = logging.getLogger(__name__)

# These two bytes will cause the server to send a reply.
QUERY_BYTES = bytes([0xFE, 0x01])

KICK_PACKET_ID = 0xFF

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(value: str) -> int | None:
    """Parse the leading base-10 integer of `value`, None if there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class LegacyQueryProtocol(QueryProtocol):
    measures_handshake_latency = True

    def handshake_packet(self, address: str | None = None, port: int | None = None) -> bytes:
        return QUERY_BYTES

    def ping_packet(self) -> bytes:
        """
        Never called by the legacy flow: the reply to the handshake already is the round trip.
        Returns the handshake bytes.
        """
        return QUERY_BYTES

    def parse(self, response: bytes | None) -> ServerInfo:
        # empty response can indicate a server that is still starting up
        if not response:
            return ServerInfo.offline(EmptyReplyError())

        # Check packet id (should be "kick packet 0xFF")
        if response[0] != KICK_PACKET_ID:
            logger.warning("Legacy reply starts with 0x%02X, not a kick packet", response[0])
            return ServerInfo.offline(InvalidReplyError())

        # Extract payload length (signed big-endian short; 2 byte)
        try:
            content_len = struct.unpack_from(">h", response, 1)[0]
        except struct.error:
            return ServerInfo.offline(InvalidReplyError())

        if content_len < 0 or content_len > len(response):
            logger.warning("Legacy reply announces %d characters in %d bytes", content_len, len(response))
            return ServerInfo.offline(InvalidReplyError())

        # Copy into a zero filled buffer, a truncated reply leaves NULs behind
        payload_raw = bytearray(content_len * 2)
        chunk = response[3 : 3 + len(payload_raw)]
        payload_raw[: len(chunk)] = chunk

        # According to wiki.vg, legacy uses UTF-16BE as "payload" encoding
        payload_str = payload_raw.decode("utf-16-be", errors="replace")
        payload_list = payload_str.split("\x00")

        # Check for count of string parts, expected is 6 for this protocol version
        if len(payload_list) < 6:
            return ServerInfo.offline(ShortReplyError())

        current_players = _parse_int(payload_list[4])
        max_players = _parse_int(payload_list[5])

        if current_players is None or max_players is None:
            return ServerInfo.offline(PlayerCountParseError())

        # If we got here, everything is in order
        return ServerInfo(
            online=True,
            version=payload_list[2],
            motd=payload_list[3],
            players=current_players,
            max_players=max_players,
        )
