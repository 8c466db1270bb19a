"""CPU scheduling simulations and a small TCP broadcast chat server and client."""

__version__ = "0.1.0"