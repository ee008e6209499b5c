"""The host role: announces itself by broadcasting UDP datagrams."""

from __future__ import annotations

import asyncio
import sys
from typing import TextIO

from udp_discovery.command import Command

DISCOVERY_MESSAGE = b"Hello from cli broadcaster!"
BROADCAST_ADDRESS = "255.255.255.255"
EXECUTE_MESSAGE = "Executing host cmd"


def _wait_for_quit(stream: TextIO) -> None:
    """Block until a line holding just ``q`` is read or input ends."""
    for line in iter(stream.readline, ""):
        if line == "q\n":
            return


class _Sender(asyncio.DatagramProtocol):
    def __init__(self, failed: asyncio.Future) -> None:
        self._failed = failed

    def error_received(self, exc: Exception) -> None:
        self.fail(exc)

    def fail(self, exc: Exception) -> None:
        if not self._failed.done():
            print(f"Failed to send: {exc}", file=sys.stderr)
            self._failed.set_result(None)


class Host:
    """Broadcasts a discovery message once per interval."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        broadcast_address: str = BROADCAST_ADDRESS,
        interval: float = 1.0,
    ) -> None:
        self.broadcast_address = broadcast_address
        self.interval = interval
        self._input = input_stream

    async def broadcast_discovery_message(self, host: str, port: int) -> None:
        """Broadcast to ``port`` until ``q`` is entered or sending fails."""
        loop = asyncio.get_running_loop()
        failed = loop.create_future()
        sender = _Sender(failed)
        transport, _ = await loop.create_datagram_endpoint(
            lambda: sender, local_addr=(host, 0), allow_broadcast=True
        )
        target = (self.broadcast_address, port)
        try:
            stream = self._input if self._input is not None else sys.stdin
            quit_task = asyncio.ensure_future(asyncio.to_thread(_wait_for_quit, stream))
            print("> Enter q then ENTER for exit discovering")
            print("> Sending...", flush=True)
            while not quit_task.done() and not failed.done():
                try:
                    transport.sendto(DISCOVERY_MESSAGE, target)
                except OSError as exc:
                    sender.fail(exc)
                    break
                await asyncio.wait(
                    {quit_task, failed},
                    timeout=self.interval,
                    return_when=asyncio.FIRST_COMPLETED,
                )
        finally:
            transport.close()

    def execute_command(self, command: Command) -> str:
        """Run a command in the host role and return the line it reported."""
        if not isinstance(command, Command):
            raise TypeError(f"expected a Command, got {type(command).__name__}")
        print(EXECUTE_MESSAGE)
        return EXECUTE_MESSAGE

    def __str__(self) -> str:
        return "Host"