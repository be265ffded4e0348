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
"""Exceptions used by minestat_es."""


class MinestatError(Exception):
    """Base class for all errors raised or reported by this package."""


class ReplyError(MinestatError):
    """
    The server answered, but the answer could not be understood.

    These are never raised out of a query, they are reported through `ServerInfo.error`.
    """

    default_message = "Got invalid reply from Minecraft server!"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyReplyError(ReplyError):
    """The reply was missing or had no bytes. Usually a server that is still starting up."""

    default_message = "Got empty reply from Minecraft server!"


class InvalidReplyError(ReplyError):
    """The reply did not start with the kick packet id, or its length field is out of range."""


class ShortReplyError(ReplyError):
    """The legacy reply had fewer than six NUL delimited fields."""

    default_message = "Got short reply from Minecraft server!"


class PlayerCountParseError(ReplyError):
    default_message = "Failed to parse player count numbers!"


class NoRecordsError(MinestatError):
    """The SRV lookup succeeded but returned no records."""

    def __init__(self, hostname: str) -> None:
        self.hostname = hostname
        super().__init__(f"No DNS records found for hostname {hostname}")


class VarIntError(MinestatError, ValueError):
    """A value cannot be represented as a varint."""
