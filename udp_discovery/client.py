"""The client role: listens for hosts announcing themselves over UDP."""

from __future__ import annotations

import asyncio
import sys
from typing import Any, Sequence, TextIO

from udp_discovery.command import Command
from udp_discovery.discovery import DiscoveryMessage


def _wait_for_quit(stream: TextIO) -> None:
    """Block until a line holding just ``q`` is read or input ends."""
    for line in iter(stream.readline, ""):
        if line == "q\n":
            return


class _Listener(asyncio.DatagramProtocol):
    def __init__(self, client: "Client", failed: asyncio.Future) -> None:
        self._client = client
        self._failed = failed

    def datagram_received(self, data: bytes, addr: Any) -> None:
        self._client.record(addr)

    def error_received(self, exc: Exception) -> None:
        print(f"UDP recv error: {exc}", file=sys.stderr)
        self._stop()

    def connection_lost(self, exc: Exception | None) -> None:
        self._stop()

    def _stop(self) -> None:
        if not self._failed.done():
            self._failed.set_result(None)


class Client:
    """Collects the hosts heard on a UDP port."""

    def __init__(self, input_stream: TextIO | None = None) -> None:
        self.hosts: dict[str, DiscoveryMessage] = {}
        self._input = input_stream

    def record(self, address: Sequence[Any]) -> bool:
        """Remember the sender of a datagram; return True if it is new."""
        message = DiscoveryMessage.from_address(address)
        key = str(message)
        if key in self.hosts:
            return False
        self.hosts[key] = message
        print(f"> found host {key}", flush=True)
        return True

    async def search_for_hosts(self, host: str, port: int) -> None:
        """Listen on ``host:port`` until ``q`` is entered or receiving fails."""
        loop = asyncio.get_running_loop()
        failed = loop.create_future()
        transport, _ = await loop.create_datagram_endpoint(
            lambda: _Listener(self, failed), local_addr=(host, port)
        )
        try:
            stream = self._input if self._input is not None else sys.stdin
            quit_task = asyncio.ensure_future(asyncio.to_thread(_wait_for_quit, stream))
            print("> Enter q then ENTER for exit discovering")
            print("> Searching...", flush=True)
            await asyncio.wait({quit_task, failed}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            transport.close()

    def execute_command(self, command: Command) -> None:
        """Run a command in the client role."""
        print("Executing client cmd")

    def __str__(self) -> str:
        return "Client"