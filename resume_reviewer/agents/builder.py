"""Resume builder agent.

Generates a resume tailored to one job from a person's full profile.
"""

from __future__ import annotations

import logging

from resume_reviewer.agents.config import AgentConfig
from resume_reviewer.agents.llm import AgentLLM
from resume_reviewer.agents.prompts import BUILDER_SYSTEM_PROMPT, build_builder_prompt
from resume_reviewer.results.models import BuilderResult

logger = logging.getLogger(__name__)


class ResumeBuilderAgent:
    """Builds a job-specific resume from comprehensive personal information."""

    def __init__(self, llm: AgentLLM | None = None, config: AgentConfig | None = None):
        """Initialize the agent.

        Args:
            llm: Optional LLM client. Built from ``config`` if not provided.
            config: Optional AgentConfig. Uses global config if not provided.
        """
        self.llm = llm or AgentLLM(config=config)

    async def build(self, personal_info: str, job_context: str) -> BuilderResult:
        """Build a tailored resume.

        Args:
            personal_info: The person's profile markdown.
            job_context: Job (and optionally company) description markdown.

        Returns:
            BuilderResult with the resume markdown and tailoring notes.

        Raises:
            ValueError: If either input is empty.
            LLMError: If the LLM call fails or returns an invalid result.
        """
        if not personal_info.strip():
            raise ValueError("Personal information is empty")
        if not job_context.strip():
            raise ValueError("Building a resume requires a job description")

        logger.info("Building tailored resume")
        result = await self.llm.generate_structured(
            prompt=build_builder_prompt(personal_info, job_context),
            output_model=BuilderResult,
            system_prompt=BUILDER_SYSTEM_PROMPT,
        )
        logger.info(
            f"Resume built: {len(result.emphasized_skills)} skills emphasized, "
            f"{len(result.selected_experiences)} experiences selected"
        )
        return result
