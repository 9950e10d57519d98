from .http import AgentQLClient

__all__ = ["AgentQLClient"]
