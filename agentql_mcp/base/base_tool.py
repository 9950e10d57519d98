from abc import ABC, abstractmethod
from typing import Any, Dict, List

from mcp.types import TextContent

from .models import ToolDescriptor


class BaseTool(ABC):
    """
    Abstract base class for all tools.
    Every tool must implement `name`, `description`, `input_schema` and `run`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the tool (as advertised over MCP)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this tool does."""
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments."""
        pass

    @abstractmethod
    async def run(self, args: Dict[str, Any], api_key: str) -> List[TextContent]:
        pass

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )

