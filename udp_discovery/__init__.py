"""Interactive UDP broadcast discovery of hosts on a local network."""

__version__ = "0.1.0"
__all__ = ["__version__"]