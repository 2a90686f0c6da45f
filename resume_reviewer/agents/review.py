"""Resume review agents.

GeneralReviewAgent scores a resume on its own merits; JobFitAgent scores it
against company and/or job context.
"""

from __future__ import annotations

import logging

from resume_reviewer.agents.config import AgentConfig
from resume_reviewer.agents.llm import AgentLLM
from resume_reviewer.agents.prompts import (
    GENERAL_REVIEW_SYSTEM_PROMPT,
    JOB_FIT_SYSTEM_PROMPT,
    build_general_review_prompt,
    build_job_fit_prompt,
)
from resume_reviewer.results.models import JobFitResult, ReviewResult

logger = logging.getLogger(__name__)


class GeneralReviewAgent:
    """Reviews a resume for general best practices."""

    def __init__(self, llm: AgentLLM | None = None, config: AgentConfig | None = None):
        """Initialize the agent.

        Args:
            llm: Optional LLM client. Built from ``config`` if not provided.
            config: Optional AgentConfig. Uses global config if not provided.
        """
        self.llm = llm or AgentLLM(config=config)

    async def review(self, resume: str) -> ReviewResult:
        """Review a resume.

        Raises:
            ValueError: If the resume is empty.
            LLMError: If the LLM call fails or returns an invalid review.
        """
        if not resume.strip():
            raise ValueError("Resume content is empty")

        logger.info("Running general resume review")
        result = await self.llm.generate_structured(
            prompt=build_general_review_prompt(resume),
            output_model=ReviewResult,
            system_prompt=GENERAL_REVIEW_SYSTEM_PROMPT,
        )
        logger.info(f"General review complete: score {result.score}/100")
        return result


class JobFitAgent:
    """Reviews how well a resume fits a company and/or job."""

    def __init__(self, llm: AgentLLM | None = None, config: AgentConfig | None = None):
        """Initialize the agent.

        Args:
            llm: Optional LLM client. Built from ``config`` if not provided.
            config: Optional AgentConfig. Uses global config if not provided.
        """
        self.llm = llm or AgentLLM(config=config)

    async def review(self, resume: str, job_context: str) -> JobFitResult:
        """Review a resume against context.

        Args:
            resume: Resume markdown.
            job_context: Company and/or job description markdown.

        Raises:
            ValueError: If the resume or the context is empty.
            LLMError: If the LLM call fails or returns an invalid review.
        """
        if not resume.strip():
            raise ValueError("Resume content is empty")
        if not job_context.strip():
            raise ValueError("Job-fit review requires company or job context")

        logger.info("Running job-fit review")
        result = await self.llm.generate_structured(
            prompt=build_job_fit_prompt(resume, job_context),
            output_model=JobFitResult,
            system_prompt=JOB_FIT_SYSTEM_PROMPT,
        )
        logger.info(
            f"Job-fit review complete: score {result.score}/100 ({result.fit_rating})"
        )
        return result
