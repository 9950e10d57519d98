from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from fastmcp import Context
from fastmcp.server.dependencies import get_http_headers
from pydantic import BaseModel

from agentql_mcp.config.settings import Settings
from agentql_mcp.config.logger import logging

logger = logging.getLogger(__name__)

API_KEY_PARAM = "AGENTQL_API_KEY"


@dataclass(frozen=True)
class AuthContext:
    """Credentials-bearing parts of one tool call: HTTP headers and MCP `_meta`."""

    headers: Mapping[str, str] = field(default_factory=dict)
    meta: Mapping[str, Any] = field(default_factory=dict)


def _non_empty(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_auth_value(auth: Optional[AuthContext], key: str) -> Optional[str]:
    """
    Look up a per-call auth value.
    Order: `_meta.auth[key]`, `_meta[key]`, then an HTTP header named `key`
    (case-insensitive, `_` and `-` interchangeable).
    """
    if auth is None:
        return None

    meta_auth = auth.meta.get("auth")
    if isinstance(meta_auth, Mapping):
        value = _non_empty(meta_auth.get(key))
        if value:
            return value

    value = _non_empty(auth.meta.get(key))
    if value:
        return value

    wanted = {key.lower(), key.lower().replace("_", "-")}
    for name, header_value in auth.headers.items():
        if name.lower() in wanted:
            value = _non_empty(header_value)
            if value:
                return value
    return None


def resolve_api_key(auth: Optional[AuthContext], settings: Settings) -> Optional[str]:
    """Per-call key first, then the configured default. Nothing is cached."""
    value = get_auth_value(auth, API_KEY_PARAM)
    if value:
        logger.debug("Using per-call AgentQL API key")
        return value
    return _non_empty(settings.agentql_api_key)


def auth_context_from_request(ctx: Optional[Context] = None) -> AuthContext:
    """Collect `_meta` and HTTP headers of the MCP request being served, if any."""
    meta = {}
    if ctx is not None:
        try:
            request_meta = ctx.request_context.meta
        except (LookupError, ValueError, AttributeError):
            request_meta = None
        if isinstance(request_meta, BaseModel):
            meta = request_meta.model_dump(exclude_none=True)
        elif isinstance(request_meta, Mapping):
            meta = dict(request_meta)

    headers = get_http_headers(include_all=True)
    return AuthContext(headers=headers, meta=meta)
