"""Configuration settings for the LLM agents.

Settings can be overridden via environment variables prefixed with AGENT_.
Example: AGENT_LLM_PROVIDER=openai AGENT_LLM_MODEL=gpt-4o
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgentConfig(BaseSettings):
    """Configuration for the review, builder and import agents."""

    model_config = SettingsConfigDict(
        env_prefix="AGENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    llm_provider: str = Field(
        default="anthropic",
        description="LLM provider (anthropic, openai, azure, etc.)",
    )
    llm_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="LLM model name",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Maximum retry attempts for LLM calls",
    )
    llm_timeout: Annotated[float, Field(gt=0)] = Field(
        default=180.0,
        description="Timeout in seconds for LLM calls",
    )
    llm_max_tokens: Annotated[int, Field(gt=0)] = Field(
        default=4096,
        description="Maximum tokens in a completion",
    )


_agent_config: AgentConfig | None = None


def get_agent_config() -> AgentConfig:
    """Get the agent configuration singleton."""
    global _agent_config
    if _agent_config is None:
        _agent_config = AgentConfig()
    return _agent_config


def reset_agent_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _agent_config
    _agent_config = None
