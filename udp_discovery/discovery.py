"""Records of hosts found on the network."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class DiscoveryMessage:
    """The address of a host that announced itself."""

    ip: str
    port: int

    @classmethod
    def from_address(cls, address: Sequence[Any]) -> "DiscoveryMessage":
        """Build from a socket address such as ``(ip, port)``."""
        return cls(ip=str(address[0]), port=int(address[1]))

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"