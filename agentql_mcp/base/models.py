from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """What `tools/list` advertises for one tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")
