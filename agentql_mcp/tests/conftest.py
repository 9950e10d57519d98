import asyncio
import json
from typing import Any, Callable, List, Optional

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from agentql_mcp.config.settings import Settings


class FakeAgentQL:
    """In-process stand-in for the AgentQL query-data endpoint."""

    def __init__(self):
        self.url = ""
        self.requests: List[dict] = []
        self.status = 200
        self.text = json.dumps({"data": {"title": "Example"}})
        self.content_type = "application/json"
        self.raw_body: Optional[bytes] = None
        self.responder: Optional[Callable[[dict], Any]] = None

    async def handle(self, request: web.Request) -> web.Response:
        payload = await request.json()
        self.requests.append({"headers": request.headers.copy(), "json": payload})
        if self.responder is not None:
            delay, data = self.responder(payload)
            await asyncio.sleep(delay)
            return web.json_response({"data": data})
        if self.raw_body is not None:
            return web.Response(
                status=self.status,
                body=self.raw_body,
                content_type=self.content_type,
                charset="utf-8",
            )
        return web.Response(
            status=self.status, text=self.text, content_type=self.content_type
        )


@pytest_asyncio.fixture
async def fake_agentql():
    fake = FakeAgentQL()
    app = web.Application()
    app.router.add_post("/v1/query-data", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.url = str(server.make_url("/v1/query-data"))
    yield fake
    await server.close()


class CountingClient:
    """Records calls instead of touching the network."""

    def __init__(self):
        self.calls = []

    async def query_data(self, request, api_key):
        self.calls.append((request, api_key))
        return {"ok": True}


@pytest.fixture
def counting_client():
    return CountingClient()


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {
            "agentql_api_key": "test-key",
            "mode": "stdio",
            "request_timeout": 5,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
