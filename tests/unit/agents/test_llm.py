"""Unit tests for the agent LLM client.

Tests for AgentLLM including initialization, structured and text output,
error handling, and retry logic.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from litellm import Timeout
from pydantic import BaseModel

from resume_reviewer.agents.config import AgentConfig
from resume_reviewer.agents.llm import AgentLLM, LLMError, extract_json


class SampleOutput(BaseModel):
    """Sample Pydantic model for testing structured output."""

    name: str
    value: int


def _response(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


class TestAgentLLMInitialization:
    """Tests for AgentLLM initialization."""

    def test_init_with_default_config(self):
        llm = AgentLLM()
        assert llm.config.llm_provider == "anthropic"
        assert llm.config.llm_model == "claude-sonnet-4-20250514"

    def test_model_name_formatting(self):
        """Provider prefix is added for LiteLLM."""
        llm = AgentLLM(config=AgentConfig(llm_provider="anthropic", llm_model="claude-3-opus"))
        assert llm._get_model_name() == "anthropic/claude-3-opus"

    def test_model_name_formatting_openai(self):
        """OpenAI model names don't need prefix."""
        llm = AgentLLM(config=AgentConfig(llm_provider="openai", llm_model="gpt-4o"))
        assert llm._get_model_name() == "gpt-4o"

    def test_model_name_with_prefix_is_kept(self):
        llm = AgentLLM(config=AgentConfig(llm_model="openrouter/meta/llama-3"))
        assert llm._get_model_name() == "openrouter/meta/llama-3"

    def test_model_name_for_compatible_endpoint(self):
        llm = AgentLLM(
            config=AgentConfig(
                llm_provider="ollama",
                llm_model="llama3",
                llm_base_url="http://localhost:11434/v1",
            )
        )
        assert llm._get_model_name() == "openai/llama3"


class TestAgentLLMStructuredOutput:
    """Tests for structured output generation."""

    @pytest.mark.asyncio
    async def test_generate_structured_returns_pydantic_model(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response('{"name": "test", "value": 42}')

            result = await AgentLLM().generate_structured(
                prompt="Generate a sample",
                output_model=SampleOutput,
            )

            assert isinstance(result, SampleOutput)
            assert result.value == 42

    @pytest.mark.asyncio
    async def test_generate_structured_passes_settings(self):
        """System prompt, response format and config reach LiteLLM."""
        config = AgentConfig(llm_api_key="sk-test", llm_timeout=30, llm_max_tokens=1000)

        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response('{"name": "result", "value": 1}')

            await AgentLLM(config=config).generate_structured(
                prompt="User prompt",
                output_model=SampleOutput,
                system_prompt="You are a reviewer",
            )

            kwargs = mock_completion.call_args.kwargs
            assert kwargs["messages"] == [
                {"role": "system", "content": "You are a reviewer"},
                {"role": "user", "content": "User prompt"},
            ]
            assert kwargs["response_format"] == SampleOutput
            assert kwargs["api_key"] == "sk-test"
            assert kwargs["timeout"] == 30
            assert kwargs["max_tokens"] == 1000
            assert "base_url" not in kwargs

    @pytest.mark.asyncio
    async def test_fenced_json_is_accepted(self):
        content = 'Here is the review:\n```json\n{"name": "x", "value": 2}\n```'

        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response(content)

            result = await AgentLLM().generate_structured("p", SampleOutput)

            assert result.name == "x"

    @pytest.mark.asyncio
    async def test_tool_call_arguments_are_parsed(self):
        tool_call = MagicMock()
        tool_call.function.arguments = '{"name": "tool", "value": 3}'
        response = MagicMock()
        response.choices = [MagicMock(message=MagicMock(content=None, tool_calls=[tool_call]))]

        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = response

            result = await AgentLLM().generate_structured("p", SampleOutput)

            assert result.name == "tool"


class TestAgentLLMTextOutput:
    @pytest.mark.asyncio
    async def test_generate_text_strips_content(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response("\n# Jane Doe\n\n")

            text = await AgentLLM().generate_text("p")

            assert text == "# Jane Doe"
            assert "response_format" not in mock_completion.call_args.kwargs

    @pytest.mark.asyncio
    async def test_generate_text_empty_raises(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response("")

            with pytest.raises(LLMError):
                await AgentLLM().generate_text("p")


class TestAgentLLMErrorHandling:
    """Tests for error handling and retries."""

    @pytest.mark.asyncio
    async def test_raises_llm_error_on_failure(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.side_effect = Exception("API Error")

            llm = AgentLLM(config=AgentConfig(llm_max_retries=0))
            with pytest.raises(LLMError) as exc_info:
                await llm.generate_structured("p", SampleOutput)

            assert "API Error" in str(exc_info.value)
            assert isinstance(exc_info.value.original_error, Exception)

    @pytest.mark.asyncio
    async def test_raises_llm_error_on_invalid_json(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response("not valid json")

            with pytest.raises(LLMError) as exc_info:
                await AgentLLM().generate_structured("p", SampleOutput)

            assert "Failed to parse" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_raises_llm_error_on_validation_error(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = _response('{"name": "test"}')

            with pytest.raises(LLMError) as exc_info:
                await AgentLLM().generate_structured("p", SampleOutput)

            assert "validation" in str(exc_info.value).lower()

    @pytest.mark.asyncio
    async def test_retries_on_transient_failure(self):
        call_count = 0

        async def side_effect(*args, **kwargs):
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise Exception("Transient error")
            return _response('{"name": "success", "value": 1}')

        with (
            patch(
                "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
            ) as mock_completion,
            patch("resume_reviewer.agents.llm.asyncio.sleep", new_callable=AsyncMock) as sleep,
        ):
            mock_completion.side_effect = side_effect

            llm = AgentLLM(config=AgentConfig(llm_max_retries=3))
            result = await llm.generate_structured("p", SampleOutput)

            assert result.name == "success"
            assert call_count == 3
            assert [c.args[0] for c in sleep.await_args_list] == [2, 4]

    @pytest.mark.asyncio
    async def test_rate_limit_waits_longer(self):
        responses = [Exception("429 rate_limit exceeded"), _response('{"name": "a", "value": 1}')]

        with (
            patch(
                "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
            ) as mock_completion,
            patch("resume_reviewer.agents.llm.asyncio.sleep", new_callable=AsyncMock) as sleep,
        ):
            mock_completion.side_effect = responses

            await AgentLLM(config=AgentConfig(llm_max_retries=1)).generate_structured(
                "p", SampleOutput
            )

            sleep.assert_awaited_once_with(8)

    @pytest.mark.asyncio
    async def test_timeout_is_not_retried(self):
        with patch(
            "resume_reviewer.agents.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.side_effect = Timeout(
                message="timed out", model="claude", llm_provider="anthropic"
            )

            llm = AgentLLM(config=AgentConfig(llm_max_retries=3))
            with pytest.raises(LLMError) as exc_info:
                await llm.generate_structured("p", SampleOutput)

            assert "timed out" in str(exc_info.value)
            assert mock_completion.await_count == 1


class TestExtractJson:
    def test_plain_object(self):
        assert extract_json('  {"a": 1}  ') == '{"a": 1}'

    def test_code_fence(self):
        assert extract_json('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_surrounding_prose(self):
        assert extract_json('Sure! {"a": {"b": 2}} Hope that helps.') == '{"a": {"b": 2}}'

    def test_no_json_returns_input(self):
        assert extract_json("nothing here") == "nothing here"
