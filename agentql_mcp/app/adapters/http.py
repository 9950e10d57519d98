import asyncio
import json
from typing import Any, Dict

import aiohttp

from agentql_mcp.app.tool.tools.extract.schema import ExtractionRequest, QueryDataBody
from agentql_mcp.base.exceptions import RemoteServiceError
from agentql_mcp.config.settings import Settings
from agentql_mcp.config.logger import logging

logger = logging.getLogger(__name__)

REQUEST_ORIGIN = "mcp-server"


class AgentQLClient:
    """
    Thin client for the AgentQL `query-data` endpoint.
    One session per call; nothing is shared between calls.
    """

    def __init__(self, settings: Settings):
        self._url = settings.query_data_url
        self._timeout = settings.request_timeout

    @property
    def url(self) -> str:
        return self._url

    @staticmethod
    def _headers(api_key: str) -> Dict[str, str]:
        return {
            "X-API-Key": api_key,
            "X-TF-Request-Origin": REQUEST_ORIGIN,
            "Content-Type": "application/json",
        }

    async def query_data(self, request: ExtractionRequest, api_key: str) -> Any:
        """POST the query and return the `data` field of the answer."""
        body = QueryDataBody.from_request(request).model_dump()
        timeout = aiohttp.ClientTimeout(total=self._timeout)

        logger.info("AgentQL query-data for %s", request.url)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as s:
                async with s.post(
                    self._url, json=body, headers=self._headers(api_key)
                ) as resp:
                    text = await resp.text(errors="replace")
                    if not 200 <= resp.status < 300:
                        logger.error(
                            "AgentQL API error for %s: %s %s",
                            request.url,
                            resp.status,
                            text,
                        )
                        raise RemoteServiceError(resp.status, resp.reason or "", text)
                    status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("AgentQL request for %s failed: %r", request.url, e)
            raise

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("AgentQL returned a non-JSON body: %s", text[:200])
            raise RemoteServiceError(status, "Invalid JSON response", text) from e

        if not isinstance(payload, dict) or "data" not in payload:
            logger.warning("AgentQL response for %s has no 'data' field", request.url)
            return None
        return payload["data"]
