from typing import Annotated, Any, Optional

from fastmcp import Context
from fastmcp.tools import Tool
from pydantic import Field

from agentql_mcp.app.adapters.http import AgentQLClient
from agentql_mcp.app.tool.registry import Registry
from agentql_mcp.app.tool.tools.extract.extract import (
    PROMPT_DESCRIPTION,
    URL_DESCRIPTION,
    ExtractWebDataTool,
)
from agentql_mcp.helpers.auth import auth_context_from_request
from agentql_mcp.config.logger import logging

logger = logging.getLogger(__name__)


def init_tools(reg: Registry, client: Optional[AgentQLClient] = None) -> None:
    extract_tool = reg.register(ExtractWebDataTool(reg.settings, client=client))

    # Arguments stay untyped here so that Registry.invoke does all the checking.
    async def extract_web_data_entry(
        ctx: Context,
        url: Annotated[Any, Field(description=URL_DESCRIPTION)] = None,
        prompt: Annotated[Any, Field(description=PROMPT_DESCRIPTION)] = None,
    ):
        arguments = {
            k: v for k, v in (("url", url), ("prompt", prompt)) if v is not None
        }
        return await reg.invoke(
            extract_tool.name, arguments, auth_context_from_request(ctx)
        )

    entry = Tool.from_function(
        extract_web_data_entry,
        name=extract_tool.name,
        description=extract_tool.description,
    )
    # advertise the tool's own schema, not the one derived from the entry
    entry = entry.model_copy(update={"parameters": extract_tool.input_schema})
    reg.mcp.add_tool(entry)
