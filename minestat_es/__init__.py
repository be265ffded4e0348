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
minestat_es - Query Minecraft server status using asyncio.

Supports the legacy (Minecraft 1.4/1.5) and the modern JSON (Minecraft >= 1.7)
server list ping, direct addresses as well as `_minecraft._tcp` SRV lookups.
"""
import logging

from .errors import (
    EmptyReplyError,
    InvalidReplyError,
    MinestatError,
    NoRecordsError,
    PlayerCountParseError,
    ReplyError,
    ShortReplyError,
    VarIntError,
)
from .legacy import LegacyQueryProtocol
from .modern import ModernQueryProtocol
from .motd import build_motd
from .protocol import QueryProtocol
from .selector import get_protocol
from .session import QuerySession, fetch_server_info
from .types import (
    AddressOptions,
    Description,
    HostnameOptions,
    ModernServerResponse,
    PlayerSample,
    QueryOptions,
    QueryProtocols,
    ServerInfo,
    ServiceRecord,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AddressOptions",
    "Description",
    "EmptyReplyError",
    "HostnameOptions",
    "InvalidReplyError",
    "LegacyQueryProtocol",
    "MinestatError",
    "ModernQueryProtocol",
    "ModernServerResponse",
    "NoRecordsError",
    "PlayerCountParseError",
    "PlayerSample",
    "QueryOptions",
    "QueryProtocol",
    "QueryProtocols",
    "QuerySession",
    "ReplyError",
    "ServerInfo",
    "ServiceRecord",
    "ShortReplyError",
    "VarIntError",
    "build_motd",
    "fetch_server_info",
    "get_protocol",
]
