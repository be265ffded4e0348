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
"""Maps a `QueryProtocols` value to its protocol handler."""
from .legacy import LegacyQueryProtocol
from .modern import ModernQueryProtocol
from .protocol import QueryProtocol
from .types import QueryProtocols

PROTOCOLS: dict[QueryProtocols, type[QueryProtocol]] = {
    QueryProtocols.LEGACY: LegacyQueryProtocol,
    QueryProtocols.MODERN: ModernQueryProtocol,
}


def get_protocol(kind: QueryProtocols | str | None = None) -> QueryProtocol:
    """
    Instantiate the handler for `kind`, the legacy protocol if it is not given.

    :param kind: A `QueryProtocols` member or its value ("legacy" / "modern")
    :raises ValueError: If `kind` names no known protocol
    """
    if not kind:
        kind = QueryProtocols.LEGACY
    return PROTOCOLS[QueryProtocols(kind)]()
