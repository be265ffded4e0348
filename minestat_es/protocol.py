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
"""The interface shared by the legacy and modern protocol handlers."""
from abc import ABC, abstractmethod

from .types import ServerInfo


class QueryProtocol(ABC):
    """Represents a generic means of querying a Minecraft server for information."""

    measures_handshake_latency: bool = False
    """
    Whether the latency is the time between writing the handshake and the first reply.
    Handlers that don't need an explicit ping exchange for this set it to True.
    """

    @abstractmethod
    def handshake_packet(self, address: str, port: int) -> bytes:
        """
        Create the bytes to write once the connection is established.

        :param address: Server address (hostname or IP)
        :param port: Port number
        """

    @abstractmethod
    def ping_packet(self) -> bytes:
        """Create a ping packet, to be sent after the server answered the handshake."""

    @abstractmethod
    def parse(self, response: bytes | None) -> ServerInfo:
        """
        Convert a response into a `ServerInfo`.

        Never raises for malformed input, the problem is reported through `ServerInfo.error` instead.

        :param response: Bytes received from the Minecraft server
        """
