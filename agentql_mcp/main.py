import sys
from typing import List, Optional

from pydantic import ValidationError

from agentql_mcp.app.adapters.http import AgentQLClient
from agentql_mcp.app.tool.init_tools import init_tools
from agentql_mcp.app.tool.registry import Registry
from agentql_mcp.config.settings import Settings, load_settings
from agentql_mcp.enum.transport import Transport
from agentql_mcp.config.logger import logging

logger = logging.getLogger(__name__)


def build_server(
    settings: Settings, client: Optional[AgentQLClient] = None
) -> Registry:
    """Create the registry with the extraction tool bound to its FastMCP server."""
    reg = Registry(settings)
    init_tools(reg, client=client)
    return reg


def main(argv: Optional[List[str]] = None) -> None:
    try:
        settings = load_settings(argv)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    if settings.require_api_key and not settings.agentql_api_key.strip():
        logger.error("Error: AGENTQL_API_KEY is required")
        sys.exit(1)

    if settings.transport is Transport.REST:
        logger.info(
            "Starting agentql-mcp (rest) on %s:%s%s",
            settings.host,
            settings.port,
            settings.endpoint,
        )
    else:
        logger.info("Starting agentql-mcp (stdio)")

    try:
        build_server(settings).run()
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
