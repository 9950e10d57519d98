from typing import Any, Dict, List, Optional

from fastmcp import FastMCP
from mcp.types import TextContent

from agentql_mcp.base.base_tool import BaseTool
from agentql_mcp.base.exceptions import (
    InvalidArgumentError,
    MissingCredentialError,
    UnknownToolError,
)
from agentql_mcp.base.models import ToolDescriptor
from agentql_mcp.config.settings import Settings
from agentql_mcp.enum.transport import Transport
from agentql_mcp.helpers.auth import API_KEY_PARAM, AuthContext, resolve_api_key
from agentql_mcp.config.logger import logging

logger = logging.getLogger(__name__)

SERVER_NAME = "agentql-mcp"
SERVER_VERSION = "1.0.0"


class Registry:
    def __init__(self, settings: Settings, name: str = SERVER_NAME):
        self.settings = settings
        self.mcp = FastMCP(name=name, version=SERVER_VERSION)
        self.tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> BaseTool:
        """Keep `tool` for invoke(); the MCP entry point is bound by init_tools()."""
        if tool.name in self.tools:
            logger.warning("Replacing existing tool registration: %s", tool.name)
        self.tools[tool.name] = tool
        logger.info("Tool registered: %s", tool.name)
        return tool

    def get(self, name: str) -> Optional[BaseTool]:
        return self.tools.get(name)

    def list_tools(self) -> List[ToolDescriptor]:
        return [tool.descriptor() for tool in self.tools.values()]

    async def invoke(
        self,
        tool_name: str,
        arguments: Optional[Dict[str, Any]],
        auth: Optional[AuthContext] = None,
    ) -> List[TextContent]:
        """
        Run one tool call: check the tool exists, resolve the API key, then
        hand the arguments to the tool. Errors propagate to the caller.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            logger.warning("Call for unknown tool '%s'", tool_name)
            raise UnknownToolError(tool_name)

        api_key = resolve_api_key(auth, self.settings)
        if not api_key:
            logger.warning("Call to %s without an AgentQL API key", tool_name)
            raise MissingCredentialError(API_KEY_PARAM)

        try:
            return await tool.run(arguments or {}, api_key)
        except InvalidArgumentError as e:
            logger.warning(
                "Invalid arguments for %s: %s", tool_name, ", ".join(e.fields)
            )
            raise

    def run(self) -> None:
        if self.settings.transport is Transport.REST:
            self.mcp.run(
                transport="http",
                host=self.settings.host,
                port=self.settings.port,
                path=self.settings.endpoint,
            )
        else:
            self.mcp.run(transport="stdio")
