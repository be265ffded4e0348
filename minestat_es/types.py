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
"""Records shared by the protocol handlers and the query session."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

DEFAULT_TIMEOUT = 5000
"""default connection timeout in milliseconds"""
DEFAULT_TCP_PORT = 25565
"""default TCP port for SLP queries"""


class QueryProtocols(Enum):
    """
    Contains the supported SLP (Server List Ping) protocols.

    - `LEGACY`: The legacy SLP protocol.

      Used by Minecraft 1.4 and 1.5, a 2 byte request answered by a kick packet
      with NUL delimited UTF-16BE text. Still answered by most modern servers.

    - `MODERN`: The JSON based SLP protocol.

      Length prefixed frames carrying a JSON status document.

      *Available since Minecraft 1.7*
    """

    def __str__(self) -> str:
        return str(self.name)

    LEGACY = "legacy"
    """The legacy SLP protocol (Minecraft 1.4 & 1.5)"""

    MODERN = "modern"
    """The JSON SLP protocol (Minecraft >= 1.7)"""


class PlayerSample(BaseModel):
    """One entry of the `players.sample` list of a modern status response."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Description(BaseModel):
    """
    A rich text (chat component) node of the server MOTD.

    Style and color are parsed but only the plain text survives `build_motd()`.
    """

    text: str = ""
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    color: str | None = None
    extra: list[Description | str] | None = None


class Players(BaseModel):
    online: int
    max: int
    sample: list[PlayerSample] | None = None


class Version(BaseModel):
    protocol: int
    name: str


class ModernServerResponse(BaseModel):
    """The JSON document carried by a modern status response packet."""

    # the description might be a string directly, not a json object
    description: Description | str
    players: Players
    version: Version
    favicon: str | None = None


class ServiceRecord(NamedTuple):
    """A single `_minecraft._tcp` SRV record."""

    name: str
    port: int
    priority: int = 0
    weight: int = 0


@dataclass
class ServerInfo:
    """
    Normalized result of a status query.

    If `online` is False only `error` may be set, and a timeout is reported
    without an error at all.
    """

    online: bool
    """online or offline?"""
    error: BaseException | None = None
    """why the query failed, None on success or timeout"""
    version: str | None = None
    """server version"""
    motd: str | None = None
    """message of the day, stripped of all formatting"""
    players: int | None = None
    """current number of players online"""
    max_players: int | None = None
    """maximum player capacity"""
    ping_ms: float | None = None
    """round trip time in fractional milliseconds, only if it was measured"""
    player_info: list[PlayerSample] | None = None
    """sample of online players, modern protocol only"""
    protocol_version: int | None = None
    """server protocol version, modern protocol only"""
    favicon: str | None = None
    """base64-encoded favicon data URI, modern protocol only"""

    @classmethod
    def offline(cls, error: BaseException | None = None) -> ServerInfo:
        return cls(online=False, error=error)

    def with_ping(self, ping_ms: float) -> ServerInfo:
        """Return a copy of this result carrying the measured latency. Offline results are returned unchanged."""
        if not self.online:
            return self
        return dataclasses.replace(self, ping_ms=ping_ms)


@dataclass
class CommonOptions:
    timeout: int | None = DEFAULT_TIMEOUT
    """connection timeout in milliseconds"""
    protocol: QueryProtocols | None = QueryProtocols.LEGACY
    """protocol to speak, see `QueryProtocols`"""
    ping: bool = False
    """measure round trip latency (the legacy protocol always does)"""


@dataclass
class HostnameOptions(CommonOptions):
    """Query a server published through a `_minecraft._tcp` SRV record."""

    hostname: str = field(kw_only=True)


@dataclass
class AddressOptions(CommonOptions):
    """Query a server at a known address and port."""

    address: str = field(kw_only=True)
    port: int = field(default=DEFAULT_TCP_PORT, kw_only=True)


QueryOptions = HostnameOptions | AddressOptions
