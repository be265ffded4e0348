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
"""Flattening of rich text (chat component) MOTDs."""
from __future__ import annotations

from collections.abc import Mapping

from .types import Description


def build_motd(description: Description | Mapping | str, previous: str = "") -> str:
    """
    Flatten a chat component tree into plain text.

    Every node contributes the flattened text of its `extra` children, in
    order, followed by its own `text`. Style and color are dropped.

    :param description: The MOTD, either a `Description`, a dict (from "json.loads()") or a plain string
    :param previous: Text accumulated so far
    """
    if isinstance(description, str):
        return previous + description

    if isinstance(description, Mapping):
        extra = description.get("extra")
        text = description.get("text", "")
    else:
        extra = description.extra
        text = description.text

    if extra:
        previous += "".join(build_motd(inner, "") for inner in extra)

    previous += text

    return previous
