"""Markdown reference generator for the IPFS HTTP RPC API."""

__version__ = "0.1.0"
