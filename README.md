# udp-discovery

An interactive command-line tool for finding peers on a local network.
Each participant takes one of two roles:

- **Host**: sends the UDP datagram `Hello from cli broadcaster!` to
  `255.255.255.255` once a second on the chosen port.
- **Client**: binds to the chosen address and port. It records every distinct
  sender it hears from and prints `> found host <ip>:<port>` the first time it
  sees one.

## Installation

```
pip install .
```

## Usage

Start the tool with the address and port to work with. Both options are
required; the port must be between 0 and 65535.

```
udp-discovery --ip 0.0.0.0 --port 9000
```

The short forms are `-i` and `-p`. A prompt of the form
`<ip>:<port>[Cli]$ ` appears, with the address and port in bold green. Commands
are not case sensitive, and blank lines are ignored.

| Command          | Effect                                                      |
|------------------|-------------------------------------------------------------|
| `BECOME HOST`    | Switch to the host role and start broadcasting              |
| `BECOME CLIENT`  | Switch to the client role and start listening               |
| anything else    | Handed to the current role (see below)                      |

While a host is broadcasting or a client is searching, enter `q` and press
ENTER to stop and return to the prompt, which then reads `[Host]` or
`[Client]`. A client also stops if receiving fails, and a host if sending
fails; the error is printed to standard error.

Before a role has been chosen, any other command prints a reminder of the
`BECOME` commands. Once a role is chosen, other commands only print
`Executing host cmd` or `Executing client cmd`.

The prompt ends when standard input ends. Interrupting it with Ctrl-C exits
with status 130.

Start a client on one machine and a host on another, both using the same port.
The client reports the host's address as soon as the first broadcast arrives.

## What it does not do

The words `HELP`, `EXIT`, `CLEAR`, `LIST HOSTS`, `CONNECT`, `DISCONNECT`,
`START SENDING` and `START RECIVEING` are recognised by the parser, but
neither role acts on them: there is no help text, no clearing of the screen,
no listing of discovered hosts at the prompt, and no connections or message
sessions between peers. `EXIT` does not leave the program. Any word the parser
does not know is treated as `HELP`. Choosing a role again starts afresh, so
hosts found by an earlier client are not kept.

## Library use

The pieces behind the tool can also be imported on their own:

```python
from udp_discovery.command import parse_command, CommandType

command = parse_command("become host")
assert command.command_type is CommandType.BECOME_HOST
```

`parse_command` raises `udp_discovery.command.CommandError` (a `ValueError`)
for a line with no words. Words after the command are kept in `Command.args`.

`udp_discovery.client.Client` keeps the hosts it has discovered in its `hosts`
dictionary, keyed by `"<ip>:<port>"`. Each one is held as a
`udp_discovery.discovery.DiscoveryMessage`, which can be built from a socket
address with `DiscoveryMessage.from_address((ip, port))`. `Client.record(address)`
adds a sender and returns whether it was new.

`udp_discovery.host.Host` takes optional `broadcast_address` and `interval`
(seconds) arguments. Both `Client` and `Host` accept an `input_stream` to watch
for `q` instead of standard input. `Client.search_for_hosts(host, port)` and
`Host.broadcast_discovery_message(host, port)` are coroutines.

`udp_discovery.cli.format_prompt(host, port, role)` builds the prompt string,
and `udp_discovery.cli.read_commands(host, port)` is the coroutine that runs it.

## Running the tests

```
pip install ".[test]"
pytest
```