"""
Hazelcast JDBC Command Line Interface.

Provides developer commands for inspecting connection strings:
- resolve: Print the client configuration a URL resolves to
- properties: List the URL properties the driver understands
"""

from .commands import cli, main

__all__ = ["cli", "main"]
