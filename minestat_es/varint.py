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
"""VarInt helpers for the modern (Minecraft >= 1.7) protocol."""
import struct

from .errors import VarIntError


def encode(data: int) -> bytes:
    """Pack a non-negative int as a varint (7 bits per byte, least significant group first)."""
    if data < 0:
        raise VarIntError(f"Cannot encode negative value {data} as varint")

    ordinal = b""

    while True:
        byte = data & 0x7F
        data >>= 7
        ordinal += struct.pack("B", byte | (0x80 if data > 0 else 0))

        if data == 0:
            break

    return ordinal


def encoding_length(data: int) -> int:
    """Number of bytes `encode(data)` produces, without encoding."""
    if data < 0:
        raise VarIntError(f"Cannot encode negative value {data} as varint")
    return max(1, (data.bit_length() + 6) // 7)
