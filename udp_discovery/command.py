"""Parsing of interactive commands typed at the prompt."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CommandError(ValueError):
    """Raised when a line of input holds no command."""


class CommandType(enum.Enum):
    """Every command the prompt understands."""

    HELP = "help"
    EXIT = "exit"
    CLEAR = "clear"
    BECOME_HOST = "become host"
    BECOME_CLIENT = "become client"
    LIST_HOSTS = "list hosts"
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    SEND = "send"
    RECEIVE = "receive"


@dataclass(frozen=True)
class Command:
    """A parsed command together with the words that followed it."""

    command_type: CommandType
    args: tuple[str, ...] = ()


_SINGLE_WORD = {
    "HELP": CommandType.HELP,
    "EXIT": CommandType.EXIT,
    "CLEAR": CommandType.CLEAR,
    "CONNECT": CommandType.CONNECT,
    "DISCONNECT": CommandType.DISCONNECT,
}

_TWO_WORD = {
    "BECOME": {
        "HOST": CommandType.BECOME_HOST,
        "CLIENT": CommandType.BECOME_CLIENT,
    },
    "LIST": {
        "HOSTS": CommandType.LIST_HOSTS,
    },
    "START": {
        "SENDING": CommandType.SEND,
        "RECIVEING": CommandType.RECEIVE,
    },
}


def parse_command(text: str) -> Command:
    """Parse one line of input; unknown commands become HELP."""
    words = text.split()
    if not words:
        raise CommandError("No command provided")

    head = words[0].upper()
    if head in _SINGLE_WORD:
        return Command(_SINGLE_WORD[head], tuple(words[1:]))

    options = _TWO_WORD.get(head)
    if options is None:
        return Command(CommandType.HELP, tuple(words[1:]))
    if len(words) < 2:
        return Command(CommandType.HELP)
    return Command(options.get(words[1].upper(), CommandType.HELP), tuple(words[2:]))