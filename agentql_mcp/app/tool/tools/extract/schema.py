from typing import Annotated, Any, Literal, Mapping

from pydantic import AfterValidator, BaseModel, StrictStr, ValidationError

from agentql_mcp.base.exceptions import InvalidArgumentError

REQUIRED_FIELDS = ("url", "prompt")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonEmptyStr = Annotated[StrictStr, AfterValidator(_not_blank)]


class ExtractionRequest(BaseModel):
    url: NonEmptyStr
    prompt: NonEmptyStr


class QueryDataParams(BaseModel):
    """Fixed extraction parameters sent with every query."""

    wait_for: int = 0
    is_scroll_to_bottom_enabled: bool = False
    mode: Literal["fast", "standard"] = "fast"
    is_screenshot_enabled: bool = False


class QueryDataBody(BaseModel):
    url: str
    prompt: str
    params: QueryDataParams = QueryDataParams()

    @classmethod
    def from_request(cls, request: ExtractionRequest) -> "QueryDataBody":
        return cls(url=request.url, prompt=request.prompt)


def parse_extraction_request(args: Any) -> ExtractionRequest:
    """
    Validate raw tool arguments. Absent, empty or non-string `url`/`prompt`
    raise InvalidArgumentError listing every offending field.
    """
    if not isinstance(args, Mapping):
        raise InvalidArgumentError(REQUIRED_FIELDS)
    try:
        return ExtractionRequest.model_validate(dict(args))
    except ValidationError as e:
        bad = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        raise InvalidArgumentError(f for f in REQUIRED_FIELDS if f in bad) from e
