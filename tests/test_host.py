import asyncio
import os
import socket

import pytest

from udp_discovery.command import Command, CommandType
from udp_discovery.host import Host


def _pipe():
    read_fd, write_fd = os.pipe()
    return os.fdopen(read_fd, "r"), os.fdopen(write_fd, "w")


def test_execute_command_reports(capsys):
    Host().execute_command(Command(CommandType.HELP))
    assert capsys.readouterr().out == "Executing host cmd\n"


def test_str():
    assert str(Host()) == "Host"


def test_defaults():
    host = Host()
    assert host.broadcast_address == "255.255.255.255"
    assert host.interval == 1.0


@pytest.mark.asyncio
async def test_broadcast_sends_repeatedly_until_q(capsys):
    reader, writer = _pipe()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as receiver:
        receiver.bind(("127.0.0.1", 0))
        receiver.settimeout(5)
        port = receiver.getsockname()[1]
        host = Host(input_stream=reader, broadcast_address="127.0.0.1", interval=0.05)
        task = asyncio.create_task(host.broadcast_discovery_message("127.0.0.1", port))
        first = await asyncio.to_thread(receiver.recvfrom, 1024)
        second = await asyncio.to_thread(receiver.recvfrom, 1024)
        writer.write("q\n")
        writer.flush()
        await asyncio.wait_for(task, 5)
    writer.close()
    reader.close()
    assert first[0] == b"Hello from cli broadcaster!"
    assert second[0] == first[0]
    assert first[1][0] == "127.0.0.1"
    assert "> Sending..." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_broadcast_stops_when_input_ends():
    reader, writer = _pipe()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as receiver:
        receiver.bind(("127.0.0.1", 0))
        port = receiver.getsockname()[1]
        host = Host(input_stream=reader, broadcast_address="127.0.0.1", interval=0.05)
        task = asyncio.create_task(host.broadcast_discovery_message("127.0.0.1", port))
        writer.close()
        await asyncio.wait_for(task, 5)
    reader.close()
    assert task.done()
    assert task.exception() is None