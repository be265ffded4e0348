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
Drives a single TCP connection through a status query.

The session moves through `SessionState`: it connects, writes the handshake
and waits for the reply. With the modern protocol and `ping` requested it
then writes a ping packet and waits for either the pong or the server
closing the connection, whichever comes first, to measure the latency.
A timeout armed when connecting ends the query as offline at any point.
"""
import asyncio
import logging
from enum import Enum
from time import perf_counter

from .protocol import QueryProtocol
from .resolver import resolve_endpoint
from .selector import get_protocol
from .types import DEFAULT_TIMEOUT, HostnameOptions, QueryOptions, ServerInfo

logger = logging.getLogger(__name__)


class SessionState(Enum):
    def __str__(self) -> str:
        return str(self.name)

    IDLE = 0
    CONNECTING = 1
    HANDSHAKE_SENT = 2
    AWAITING_PING = 3
    DONE = 4


def get_ping_ms(start_time: float) -> float:
    """Milliseconds elapsed since `start_time` (a `perf_counter()` value)."""
    return (perf_counter() - start_time) * 1000


class QuerySession(asyncio.Protocol):
    def __init__(
        self,
        protocol: QueryProtocol,
        address: str,
        port: int,
        timeout: int = DEFAULT_TIMEOUT,
        ping: bool = False,
    ) -> None:
        """
        A single status query against one server.

        :param protocol: Handler building the packets and parsing the replies
        :param address: Hostname or IP address of the Minecraft server
        :param port: Port of the Minecraft server
        :param timeout: Timeout in milliseconds for the whole query
        :param ping: Whether to measure the latency with an explicit ping packet
        """
        self.protocol = protocol
        self.address = address
        self.port = port
        self.timeout = timeout
        self.ping = ping

        self.state = SessionState.IDLE
        self.transport: asyncio.Transport | None = None
        self.result: asyncio.Future[ServerInfo] | None = None

        self._start_time = 0.0
        self._server_info: ServerInfo | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._connector: asyncio.Task | None = None

    async def run(self) -> ServerInfo:
        """Run the query and return its single result."""
        loop = asyncio.get_running_loop()
        self.result = loop.create_future()
        self.state = SessionState.CONNECTING

        self._timer = loop.call_later(self.timeout / 1000, self._on_timeout)
        self._connector = loop.create_task(self._connect())

        try:
            return await self.result
        finally:
            self._timer.cancel()
            if not self._connector.done():
                self._connector.cancel()
            self._close()

    async def open_connection(self) -> None:
        """Open the TCP connection, `connection_made()` is called once it is established."""
        loop = asyncio.get_running_loop()
        await loop.create_connection(lambda: self, self.address, self.port)

    async def _connect(self) -> None:
        try:
            await self.open_connection()
        except OSError as e:
            logger.error("Error connecting to %s:%d: %s", self.address, self.port, e)
            self._finish(ServerInfo.offline(e))
        except Exception as e:
            if not self.result.done():
                self.state = SessionState.DONE
                self.result.set_exception(e)

    def connection_made(self, transport: asyncio.Transport) -> None:
        self.transport = transport

        if self.state is SessionState.DONE:
            # the timeout won the race against the connect
            self._close()
            return

        logger.info("Established connection to %s:%d", self.address, self.port)

        # start timing now if the handshake reply doubles as the ping
        if self.protocol.measures_handshake_latency:
            self._start_time = perf_counter()

        transport.write(self.protocol.handshake_packet(self.address, self.port))
        self.state = SessionState.HANDSHAKE_SENT

    def data_received(self, data: bytes) -> None:
        if self.state is SessionState.DONE:
            return

        logger.debug("Received %d bytes from %s:%d", len(data), self.address, self.port)

        if self.protocol.measures_handshake_latency:
            # we have ping and response already
            ping_ms = get_ping_ms(self._start_time)
            self._finish(self.protocol.parse(data).with_ping(ping_ms))
        elif not self.ping:
            self._finish(self.protocol.parse(data))
        elif self.state is SessionState.AWAITING_PING:
            # we have received the ping response packet
            self._finish(self._server_info.with_ping(get_ping_ms(self._start_time)))
        else:
            self._server_info = self.protocol.parse(data)
            self._start_time = perf_counter()
            self.transport.write(self.protocol.ping_packet())
            self.state = SessionState.AWAITING_PING

    def connection_lost(self, exc: Exception | None) -> None:
        if self.state is SessionState.DONE:
            return

        if exc is not None:
            logger.error("Connection to %s:%d failed: %s", self.address, self.port, exc)
            self._finish(ServerInfo.offline(exc))
        elif self.state is SessionState.AWAITING_PING:
            # servers may hang up instead of answering the ping
            self._finish(self._server_info.with_ping(get_ping_ms(self._start_time)))
        else:
            # closed before we got any reply
            self._finish(self.protocol.parse(None))

    def _on_timeout(self) -> None:
        if self.state is SessionState.DONE:
            return

        logger.info("Query to %s:%d timed out after %dms", self.address, self.port, self.timeout)
        if self._connector is not None and not self._connector.done():
            self._connector.cancel()
        self._finish(ServerInfo.offline())

    def _finish(self, server_info: ServerInfo) -> None:
        self._settle(server_info)
        self._close()

    def _settle(self, server_info: ServerInfo) -> None:
        # the result is settled exactly once, later calls are no-ops
        if self.result is None or self.result.done():
            return
        self.state = SessionState.DONE
        if self._timer is not None:
            self._timer.cancel()
        self.result.set_result(server_info)

    def _close(self) -> None:
        if self.transport is not None and not self.transport.is_closing():
            self.transport.close()


async def fetch_server_info(options: QueryOptions) -> ServerInfo:
    """
    Open a TCP socket to query Minecraft server status.

    Transport failures, timeouts and unreadable replies are reported as an
    offline `ServerInfo`. DNS failures and invalid options are raised.

    :param options: `HostnameOptions` to look the server up through its SRV record, or `AddressOptions`
    :raises NoRecordsError: If the hostname has no `_minecraft._tcp` SRV record
    """
    # obtain address/port from DNS if required
    if isinstance(options, HostnameOptions):
        address, port = await resolve_endpoint(options.hostname)
    else:
        address, port = options.address, options.port

    protocol = get_protocol(options.protocol)
    session = QuerySession(
        protocol,
        address,
        port,
        timeout=options.timeout or DEFAULT_TIMEOUT,
        ping=options.ping,
    )
    return await session.run()
