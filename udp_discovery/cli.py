"""Interactive prompt and command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence, Union

from termcolor import colored

from udp_discovery.client import Client
from udp_discovery.command import CommandError, CommandType, parse_command
from udp_discovery.host import Host

User = Union[Client, Host]


def format_prompt(host: str, port: int, role: str) -> str:
    """Build the prompt shown before each command."""
    return (
        f"{colored(host, 'green', attrs=['bold'])}:"
        f"{colored(str(port), 'green', attrs=['bold'])}[{role}]$ "
    )


def _print_usage() -> None:
    print("Select user type, command")
    print("BECOME")
    print(f"{'HOST':>10} -> for becomming host")
    print(f"{'CLIENT':>10} -> for becomming client")


async def read_commands(host: str, port: int) -> None:
    """Read and run commands from standard input until it ends."""
    user: User | None = None
    prompt = format_prompt(host, port, "Cli")

    while True:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            return

        try:
            command = parse_command(line)
        except CommandError:
            continue

        if command.command_type is CommandType.BECOME_CLIENT:
            client = Client()
            user = client
            prompt = format_prompt(host, port, "Client")
            await client.search_for_hosts(host, port)
            continue
        if command.command_type is CommandType.BECOME_HOST:
            broadcaster = Host()
            user = broadcaster
            prompt = format_prompt(host, port, "Host")
            await broadcaster.broadcast_discovery_message(host, port)
            continue

        if user is None:
            _print_usage()
            continue

        user.execute_command(command)


def _port(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= number <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {number}")
    return number


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the interactive prompt."""
    parser = argparse.ArgumentParser(prog="udp-discovery")
    parser.add_argument("-i", "--ip", dest="host", required=True)
    parser.add_argument("-p", "--port", type=_port, required=True)
    args = parser.parse_args(argv)
    try:
        asyncio.run(read_commands(args.host, args.port))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())