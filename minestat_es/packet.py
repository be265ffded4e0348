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
"""Framing for modern protocol packets."""
from . import varint


def create_packet(packet_id: int, payload: bytes) -> bytes:
    """
    Wrap a payload as a Minecraft packet.

    The frame is `varint(length) varint(packet_id) payload`, where the length
    counts the encoded packet id plus the raw payload.

    :param packet_id: Packet ID as defined by the protocol
    :param payload: The packet data
    """
    return (
        varint.encode(varint.encoding_length(packet_id) + len(payload))
        + varint.encode(packet_id)
        + bytes(payload)
    )
