"""Command-line and MCP bridge for a notes JSON-RPC server."""

__version__ = "0.1.0"
