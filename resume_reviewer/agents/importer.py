"""Import agent.

Turns raw resume, job posting and company text into structured markdown for
the project store. All outputs are plain markdown, not JSON.
"""

from __future__ import annotations

import logging

from resume_reviewer.agents.config import AgentConfig
from resume_reviewer.agents.llm import AgentLLM
from resume_reviewer.agents.prompts import (
    COMPANY_INFO_SYSTEM_PROMPT,
    JOB_DESCRIPTION_SYSTEM_PROMPT,
    MERGE_PROFILES_SYSTEM_PROMPT,
    PARSE_RESUME_SYSTEM_PROMPT,
    build_company_info_prompt,
    build_job_description_prompt,
    build_merge_profiles_prompt,
    build_parse_resume_prompt,
)

logger = logging.getLogger(__name__)


class ImportAgent:
    """Structures imported documents into markdown."""

    def __init__(self, llm: AgentLLM | None = None, config: AgentConfig | None = None):
        self.llm = llm or AgentLLM(config=config)

    async def parse_resume(self, resume_text: str) -> str:
        """Convert raw resume text into a person profile."""
        _require_text(resume_text, "Resume text")
        logger.info("Parsing resume into profile markdown")
        return await self.llm.generate_text(
            build_parse_resume_prompt(resume_text),
            system_prompt=PARSE_RESUME_SYSTEM_PROMPT,
        )

    async def merge_profiles(self, existing_profile: str, new_resume: str) -> str:
        """Merge a new resume into an existing profile."""
        _require_text(new_resume, "Resume text")
        if not existing_profile.strip():
            return await self.parse_resume(new_resume)

        logger.info("Merging resume into existing profile")
        return await self.llm.generate_text(
            build_merge_profiles_prompt(existing_profile, new_resume),
            system_prompt=MERGE_PROFILES_SYSTEM_PROMPT,
        )

    async def process_job_description(self, jd_text: str) -> str:
        """Structure a raw job posting."""
        _require_text(jd_text, "Job description")
        logger.info("Structuring job description")
        return await self.llm.generate_text(
            build_job_description_prompt(jd_text),
            system_prompt=JOB_DESCRIPTION_SYSTEM_PROMPT,
        )

    async def process_company_info(self, company_text: str) -> str:
        """Structure raw company information."""
        _require_text(company_text, "Company information")
        logger.info("Structuring company information")
        return await self.llm.generate_text(
            build_company_info_prompt(company_text),
            system_prompt=COMPANY_INFO_SYSTEM_PROMPT,
        )


def _require_text(text: str, label: str) -> None:
    if not text.strip():
        raise ValueError(f"{label} is empty")
