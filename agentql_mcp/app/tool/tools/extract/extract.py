import json
from typing import Any, Dict, List, Optional

from mcp.types import TextContent

from agentql_mcp.app.adapters.http import AgentQLClient
from agentql_mcp.base.adapter_base import AdapterBase
from agentql_mcp.config.settings import Settings
from agentql_mcp.config.logger import logging
from .schema import parse_extraction_request

logger = logging.getLogger(__name__)

EXTRACT_TOOL_NAME = "extract-web-data"

URL_DESCRIPTION = "The URL of the public webpage to extract data from"
PROMPT_DESCRIPTION = (
    "Natural Language description of the data to extract from the page"
)


class ExtractWebDataTool(AdapterBase):
    def __init__(self, settings: Settings, client: Optional[AgentQLClient] = None):
        self._client = client or AgentQLClient(settings)

    @property
    def name(self) -> str:
        return EXTRACT_TOOL_NAME

    @property
    def description(self) -> str:
        return (
            "Extracts structured data as JSON from a web page given a URL "
            "using a Natural Language description of the data."
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": URL_DESCRIPTION},
                "prompt": {"type": "string", "description": PROMPT_DESCRIPTION},
            },
            "required": ["url", "prompt"],
        }

    async def run(self, args: Dict[str, Any], api_key: str) -> List[TextContent]:
        request = parse_extraction_request(args)
        data = await self._client.query_data(request, api_key)
        text = json.dumps(data, indent=2, ensure_ascii=False)
        return [TextContent(type="text", text=text)]
