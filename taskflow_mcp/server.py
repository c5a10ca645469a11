"""FastMCP server initialization for TaskFlow MCP."""

from mcp.server.fastmcp import FastMCP

from taskflow_mcp.config import load_settings
from taskflow_mcp.logging_setup import setup_logging

# Initialize the MCP server
mcp = FastMCP("taskflow_mcp")


def run() -> None:
    """Run the MCP server."""
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_dir=settings.log_dir)

    mcp.run()


if __name__ == "__main__":
    run()
