"""Unified entry point: ``python -m mcp_notes_rpc [serve | CLI args]``."""
import sys

from mcp_notes_rpc.cli.main import cli


def main():
    """Run the MCP server for ``serve``, otherwise the CLI."""
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        from mcp_notes_rpc.notes.__main__ import main as serve

        sys.argv.pop(1)
        serve()
    else:
        cli(prog_name="notes-rpc")


if __name__ == "__main__":
    main()
