"""LLM client shared by the agents.

Provides structured (Pydantic) and plain-text completions over LiteLLM with
retry logic and error handling.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

from litellm import Timeout, acompletion
from pydantic import BaseModel, ValidationError

from resume_reviewer.agents.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class LLMError(Exception):
    """Exception raised when LLM operations fail."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class AgentLLM:
    """LLM client for agent operations."""

    def __init__(self, config: AgentConfig | None = None):
        """Initialize the LLM client.

        Args:
            config: Optional AgentConfig. Uses global config if not provided.
        """
        self.config = config or get_agent_config()

    def _get_model_name(self) -> str:
        """Get the model name formatted for LiteLLM.

        Returns:
            Model name with provider prefix if needed.
        """
        if "/" in self.config.llm_model:
            return self.config.llm_model

        # Custom base URLs (local models, proxies) speak the OpenAI protocol
        if self.config.llm_base_url and self.config.llm_provider != "anthropic":
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        return f"{self.config.llm_provider}/{self.config.llm_model}"

    async def generate_structured(
        self,
        prompt: str,
        output_model: type[T],
        system_prompt: str | None = None,
    ) -> T:
        """Generate structured output matching a Pydantic model.

        Args:
            prompt: The user prompt to send to the LLM.
            output_model: Pydantic model class defining the expected output.
            system_prompt: Optional system prompt for context.

        Returns:
            Parsed Pydantic model instance.

        Raises:
            LLMError: If the LLM call fails or the response cannot be parsed.
        """
        messages = _build_messages(prompt, system_prompt)
        response = await self._complete_with_retries(messages, output_model)
        return self._parse_response(response, output_model)

    async def generate_text(
        self,
        prompt: str,
        system_prompt: str | None = None,
    ) -> str:
        """Generate a plain text (markdown) response.

        Raises:
            LLMError: If the LLM call fails or returns no content.
        """
        messages = _build_messages(prompt, system_prompt)
        response = await self._complete_with_retries(messages)

        content = response.choices[0].message.content
        if not content:
            raise LLMError("LLM returned no content.")
        return content.strip()

    async def _complete_with_retries(
        self,
        messages: list[dict],
        response_format: type[BaseModel] | None = None,
    ) -> Any:
        last_error: Exception | None = None
        for attempt in range(self.config.llm_max_retries + 1):
            try:
                return await self._call_completion(messages, response_format)

            except Timeout as e:
                raise LLMError(
                    f"LLM request timed out (timeout={self.config.llm_timeout}s). "
                    "Increase `AGENT_LLM_TIMEOUT` or use a faster model.",
                    e,
                ) from e

            except Exception as e:
                last_error = e
                if attempt < self.config.llm_max_retries:
                    is_rate_limit = "rate_limit" in str(e).lower() or "429" in str(e)
                    base_wait = 8 if is_rate_limit else 2
                    wait_time = base_wait * (attempt + 1)
                    logger.warning(
                        f"LLM call failed (attempt {attempt + 1}), retrying in {wait_time}s: {e}"
                    )
                    await asyncio.sleep(wait_time)
                else:
                    raise LLMError(f"LLM call failed after retries: {e}", e) from e

        raise LLMError(f"LLM call failed: {last_error}", last_error)

    async def _call_completion(
        self,
        messages: list[dict],
        response_format: type[BaseModel] | None = None,
    ):
        """Make the actual LLM API call."""
        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "timeout": self.config.llm_timeout,
            "max_tokens": self.config.llm_max_tokens,
        }

        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key
        if self.config.llm_base_url:
            kwargs["base_url"] = self.config.llm_base_url
        if response_format:
            kwargs["response_format"] = response_format

        return await acompletion(**kwargs)

    def _parse_response(self, response, output_model: type[T]) -> T:
        """Parse and validate an LLM response.

        Raises:
            LLMError: If parsing or validation fails.
        """
        message = response.choices[0].message
        content = getattr(message, "content", None)

        # Some providers return structured output as tool call arguments.
        if content is None:
            tool_calls = getattr(message, "tool_calls", None) or []
            if tool_calls:
                function = getattr(tool_calls[0], "function", None)
                arguments = getattr(function, "arguments", None)
                if isinstance(arguments, str) and arguments.strip():
                    content = arguments

        if content is None:
            raise LLMError("LLM returned no content to parse.")

        content = extract_json(content)

        try:
            return output_model.model_validate_json(content)
        except ValidationError as e:
            raise LLMError(
                f"Failed to parse LLM response - validation error: {e}", e
            ) from e
        except Exception as e:
            raise LLMError(f"Failed to parse LLM response as JSON: {e}", e) from e


def extract_json(content: str) -> str:
    """Extract a JSON document from a response.

    Handles markdown code fences and prose before or after the JSON object.
    """
    content = content.strip()

    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1 :]
        if content.endswith("```"):
            content = content[:-3]
        content = content.strip()

    if content.startswith("{") or content.startswith("["):
        return content

    for open_char, close_char in (("{", "}"), ("[", "]")):
        extracted = _extract_balanced(content, open_char, close_char)
        if extracted is not None:
            return extracted

    return content


def _extract_balanced(text: str, open_char: str, close_char: str) -> str | None:
    start = text.find(open_char)
    if start == -1:
        return None

    depth = 0
    for idx in range(start, len(text)):
        ch = text[idx]
        if ch == open_char:
            depth += 1
        elif ch == close_char:
            depth -= 1
            if depth == 0:
                return text[start : idx + 1].strip()
    return None


def _build_messages(prompt: str, system_prompt: str | None) -> list[dict]:
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})
    return messages
