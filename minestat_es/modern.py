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
Modern (MC Java >= 1.7) SLP query.
This protocol is based on encoded JSON, see the documentation at the link below
for a full packet description.

See https://minecraft.wiki/w/Java_Edition_protocol/Server_List_Ping#Current_(1.7+)
"""
import json
import logging
import struct
from time import time

from pydantic import ValidationError

from . import varint
from .errors import EmptyReplyError
from .motd import build_motd
from .packet import create_packet
from .protocol import QueryProtocol
from .types import ModernServerResponse, ServerInfo

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = 757
"""protocol version announced in the handshake (MC 1.18)"""

HANDSHAKE_PACKET_ID = 0x00
STATUS_REQUEST_PACKET_ID = 0x00
PING_PACKET_ID = 0x01

# Next packet state (1 for status, 2 for login)
NEXT_STATE_STATUS = 1


def header_length(response_length: int) -> int:
    """
    Number of bytes skipped in front of the JSON payload of a status response.

    This estimates the packet length, packet id and string length varints from
    the size of the whole response instead of reading them. It holds for
    realistic payload sizes but can misalign when the real varints are of a
    different width.
    """
    return varint.encoding_length(response_length) * 2 + 1


class ModernQueryProtocol(QueryProtocol):
    def handshake_packet(self, address: str, port: int) -> bytes:
        # Server address. Encoded with UTF8, prefixed with its byte length
        raw_address = address.encode("utf8")

        # Construct Handshake packet
        payload = (
            varint.encode(PROTOCOL_VERSION)
            + varint.encode(len(raw_address))
            + raw_address
            + struct.pack(">H", port)
            + varint.encode(NEXT_STATE_STATUS)
        )
        handshake = create_packet(HANDSHAKE_PACKET_ID, payload)

        # followed by an empty "Request" packet
        request = create_packet(STATUS_REQUEST_PACKET_ID, b"")

        return handshake + request

    def ping_packet(self) -> bytes:
        # current unix timestamp in ms as signed long, the server echoes it back unchanged
        return create_packet(PING_PACKET_ID, struct.pack(">q", int(time() * 1000)))

    def parse(self, response: bytes | None) -> ServerInfo:
        if not response:
            return ServerInfo.offline(EmptyReplyError())

        payload_raw = response[header_length(len(response)) :]

        try:
            payload_obj = json.loads(bytes(payload_raw).decode("utf8"))
            result = ModernServerResponse.model_validate(payload_obj)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError, ValidationError) as e:
            logger.warning("Could not parse status response: %s", e)
            return ServerInfo.offline(e)

        return ServerInfo(
            online=True,
            players=result.players.online,
            max_players=result.players.max,
            version=result.version.name,
            motd=build_motd(result.description),
            player_info=None if result.players.sample is None else list(result.players.sample),
            protocol_version=result.version.protocol,
            favicon=result.favicon,
        )
