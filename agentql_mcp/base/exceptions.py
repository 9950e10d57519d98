from typing import Iterable, Tuple

from fastmcp.exceptions import ToolError


class AgentQLToolError(ToolError):
    """
    Base class for failures of a tool call.
    FastMCP turns these into an error result whose text is str(exc).
    """


class UnknownToolError(AgentQLToolError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: '{tool_name}'")


class MissingCredentialError(AgentQLToolError):
    def __init__(self, key_name: str = "AGENTQL_API_KEY"):
        self.key_name = key_name
        super().__init__(f"{key_name} not set")


class InvalidArgumentError(AgentQLToolError):
    def __init__(self, fields: Iterable[str]):
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(
            f"Both 'url' and 'prompt' are required (invalid: {', '.join(self.fields)})"
        )


class RemoteServiceError(AgentQLToolError):
    """Non-2xx answer from the AgentQL API. `body` is the raw response text."""

    def __init__(self, status: int, reason: str, body: str):
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"AgentQL API error: {reason}\n{body}")
