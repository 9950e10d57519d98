from .adapter_base import AdapterBase
from .base_tool import BaseTool
from .exceptions import (
    AgentQLToolError,
    InvalidArgumentError,
    MissingCredentialError,
    RemoteServiceError,
    UnknownToolError,
)
from .models import ToolDescriptor

__all__ = [
    "AdapterBase",
    "BaseTool",
    "ToolDescriptor",
    "AgentQLToolError",
    "InvalidArgumentError",
    "MissingCredentialError",
    "RemoteServiceError",
    "UnknownToolError",
]
