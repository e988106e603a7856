import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from core.config import ConfigError, EndpointConfig, get_config
from core.logging_config import setup_logging
from core.registry import ToolRegistry
from core.transport import ApiClient

SERVER_NAME = "joeapi"
logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Tools for the JoeAPI construction management API: clients, contacts, proposals, estimates, "
    "action items, project details and schedules, and finances. Every tool returns the API's JSON "
    "response as text; failed calls are flagged as errors and start with 'API Error <status>' or 'Network Error'."
)


def build_server(config: EndpointConfig, registry: Optional[ToolRegistry] = None) -> FastMCP:
    """Create the FastMCP server and register the whole tool catalog on it."""
    if registry is None:
        registry = ToolRegistry(ApiClient(config))
    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)
    registered_tool_names = registry.register_with(mcp)
    logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")
    return mcp


def main() -> None:
    try:
        config = get_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(debug=config.debug)
    logger.info("MCP server bootstrap starting.")
    logger.info(
        f"Target API: {config.base_url}/{config.api_version_prefix} "
        f"(default page limit {config.default_page_limit}, timeout {config.timeout_ms}ms, debug {config.debug})"
    )

    mcp = build_server(config)

    logger.info("Starting MCP server...")
    try:
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/server_<timestamp>.log for details.", file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    main()
