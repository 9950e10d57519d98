import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agentql_mcp.enum.transport import Transport

load_dotenv()

AGENTQL_QUERY_DATA_URL = "https://api.agentql.com/v1/query-data"

# flags accepted on the command line, e.g. `--agentql_api_key=...`
CLI_PARAMS = ("agentql_api_key", "mode", "host", "port", "endpoint", "request_timeout")


class Settings(BaseSettings):
    """
    Process-wide configuration, resolved once at startup and passed around
    explicitly. Instances are frozen.
    """

    model_config = SettingsConfigDict(frozen=True, validate_default=True)

    # credential used when a call carries no key of its own
    agentql_api_key: str = os.getenv("AGENTQL_API_KEY", "")

    # transport
    mode: str = os.getenv("MCP_MODE", Transport.STDIO.value).lower()
    host: str = os.getenv("MCP_HOST", "0.0.0.0")
    port: int = Field(default=os.getenv("MCP_PORT", "9593"), gt=0)
    endpoint: str = os.getenv("MCP_ENDPOINT", "/rest")

    # AgentQL REST API
    query_data_url: str = os.getenv("AGENTQL_QUERY_DATA_URL", AGENTQL_QUERY_DATA_URL)
    request_timeout: float = Field(
        default=os.getenv("AGENTQL_REQUEST_TIMEOUT", "300"), gt=0
    )

    # fail at startup instead of per call when no default key is configured
    require_api_key: bool = os.getenv("AGENTQL_REQUIRE_API_KEY", "false")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # environment is read only through the os.getenv defaults above
        return (init_settings,)

    @field_validator("mode")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        value = value.strip().lower()
        allowed = [t.value for t in Transport]
        if value not in allowed:
            raise ValueError(f"mode must be one of {allowed}, got '{value}'")
        return value

    @field_validator("endpoint")
    @classmethod
    def _check_endpoint(cls, value: str) -> str:
        value = value.strip() or "/rest"
        return value if value.startswith("/") else f"/{value}"

    @property
    def transport(self) -> Transport:
        return Transport(self.mode)


def parse_cli_params(argv: List[str]) -> Dict[str, Any]:
    """Pick known `--key value` / `--key=value` flags out of argv, ignoring the rest."""
    parser = argparse.ArgumentParser(prog="agentql-mcp", add_help=False)
    for param in CLI_PARAMS:
        parser.add_argument(f"--{param}", dest=param, default=None)
    known, _ = parser.parse_known_args(argv)
    return {k: v for k, v in vars(known).items() if v is not None}


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """
    Resolve settings with precedence: command line > environment (.env) > defaults.
    """
    overrides = parse_cli_params(sys.argv[1:] if argv is None else argv)
    return Settings(**overrides)
