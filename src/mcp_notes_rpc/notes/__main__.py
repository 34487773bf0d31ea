"""Entry point for the notes RPC MCP server."""

import logging
import sys

from mcp_notes_rpc.cli.config import load_config
from mcp_notes_rpc.common.config import resolve_settings

from .tool import mcp

logger = logging.getLogger(__name__)


def main():
    """Run the notes MCP server on stdio."""
    try:
        settings = resolve_settings(load_config())
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        sys.exit(1)

    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    logger.info("Notes MCP server running on stdio (RPC endpoint %s)", settings.url)
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Notes MCP server stopped")
    except Exception:
        logger.exception("Fatal error running notes MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
