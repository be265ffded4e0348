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
"""Turns a hostname into a concrete address and port using `_minecraft._tcp` SRV records."""
import logging
import random

import dns.asyncresolver
import idna

from .errors import NoRecordsError
from .types import ServiceRecord

logger = logging.getLogger(__name__)

SRV_PREFIX = "_minecraft._tcp."
"""service label Minecraft clients look up"""


def prefix_with(base: str, prefix: str) -> str:
    """Prepend `prefix` to `base` unless it is already there."""
    return base if base.startswith(prefix) else f"{prefix}{base}"


def to_ascii(hostname: str) -> str:
    """Punycode-encode an internationalized hostname, ASCII names pass through unchanged."""
    if hostname.isascii():
        return hostname
    # label by label, so the underscore service labels are left alone
    return ".".join(
        label if label.isascii() else idna.encode(label, uts46=True).decode("ascii")
        for label in hostname.split(".")
    )


async def resolve_srv(fqdn: str) -> list[ServiceRecord]:
    """
    Look up the SRV records of `fqdn`.

    An existing name without SRV records yields an empty list, every other
    resolver failure (NXDOMAIN, timeout, ...) is raised unchanged.
    """
    answer = await dns.asyncresolver.resolve(fqdn, "SRV", raise_on_no_answer=False)
    return [
        ServiceRecord(
            name=str(rdata.target).rstrip("."),
            port=rdata.port,
            priority=rdata.priority,
            weight=rdata.weight,
        )
        for rdata in (answer.rrset or ())
    ]


async def resolve_endpoint(hostname: str) -> tuple[str, int]:
    """
    Resolve `hostname` to the address and port of one of its Minecraft servers.

    If several records are published one of them is picked at random;
    priority and weight are not taken into account.

    :param hostname: The server's domain, with or without the `_minecraft._tcp.` label
    :raises NoRecordsError: If no SRV record exists for the name
    """
    mc_host = prefix_with(to_ascii(hostname), SRV_PREFIX)
    records = await resolve_srv(mc_host)

    if not records:
        raise NoRecordsError(mc_host)

    record = random.choice(records)
    logger.debug("Picked %s:%d out of %d SRV records for %s", record.name, record.port, len(records), mc_host)

    return record.name, record.port
