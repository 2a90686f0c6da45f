"""Review and build orchestration.

Connects the project store, the LLM agents and the result log: loads the
company/job context a command names, runs the matching agent and optionally
persists the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from resume_reviewer.agents.builder import ResumeBuilderAgent
from resume_reviewer.agents.review import GeneralReviewAgent, JobFitAgent
from resume_reviewer.project.manager import ProjectManager
from resume_reviewer.results.manager import ResultManager
from resume_reviewer.results.models import (
    BuilderResult,
    ResultMetadata,
    ResultType,
    ReviewResult,
)
from resume_reviewer.utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)


@dataclass
class ReviewContext:
    """Company and job markdown loaded for an operation."""

    company: str | None = None
    job: str | None = None
    company_content: str | None = None
    job_content: str | None = None

    @property
    def has_context(self) -> bool:
        return bool(self.company_content or self.job_content)

    def render(self) -> str:
        """Combine the loaded documents into the agent's context block."""
        sections = []
        if self.company_content:
            sections.append(f"## Company Context\n\n{self.company_content}")
        if self.job_content:
            sections.append(f"## Job Description\n\n{self.job_content}")
        return "\n\n".join(sections)


@dataclass
class ReviewOutcome:
    """Result of a review run."""

    result: ReviewResult
    result_type: ResultType
    markdown: str
    result_path: Path | None = None


@dataclass
class BuildOutcome:
    """Result of a build run."""

    result: BuilderResult
    markdown: str
    resume_path: Path | None = None
    result_path: Path | None = None


class ReviewService:
    """Runs reviews and builds against project documents."""

    def __init__(
        self,
        project: ProjectManager,
        results: ResultManager,
        general_agent: GeneralReviewAgent | None = None,
        job_fit_agent: JobFitAgent | None = None,
        builder_agent: ResumeBuilderAgent | None = None,
    ):
        """Initialize the service.

        Agents are created lazily with the global AgentConfig when not
        injected.
        """
        self.project = project
        self.results = results
        self._general_agent = general_agent
        self._job_fit_agent = job_fit_agent
        self._builder_agent = builder_agent

    @property
    def general_agent(self) -> GeneralReviewAgent:
        if self._general_agent is None:
            self._general_agent = GeneralReviewAgent()
        return self._general_agent

    @property
    def job_fit_agent(self) -> JobFitAgent:
        if self._job_fit_agent is None:
            self._job_fit_agent = JobFitAgent()
        return self._job_fit_agent

    @property
    def builder_agent(self) -> ResumeBuilderAgent:
        if self._builder_agent is None:
            self._builder_agent = ResumeBuilderAgent()
        return self._builder_agent

    @staticmethod
    def resolve_job_ref(job: str, company: str | None = None) -> tuple[str, str]:
        """Split a job reference into ``(company, job)``.

        Accepts ``company/job`` or a bare job slug together with ``company``.

        Raises:
            ValueError: If no company can be determined, or the two disagree.
        """
        if "/" in job:
            ref_company, _, ref_job = job.partition("/")
            if not ref_company or not ref_job:
                raise ValueError(f'Invalid job reference "{job}"')
            if company and company != ref_company:
                raise ValueError(
                    f'Job reference "{job}" does not belong to company "{company}"'
                )
            return ref_company, ref_job

        if not company:
            raise ValueError(
                f'Job "{job}" needs a company: use --company or "company/job"'
            )
        return company, job

    def build_context(
        self, company: str | None = None, job: str | None = None
    ) -> ReviewContext:
        """Load company and job markdown from the project.

        Raises:
            EntityNotFoundError: If a named company or job does not exist.
            ValueError: If a job is given without any company.
        """
        if job:
            company, job = self.resolve_job_ref(job, company)

        context = ReviewContext(company=company, job=job)
        if company:
            context.company_content = self.project.get_company_content(company)
        if job:
            context.job_content = self.project.get_job_content(company, job)
        return context

    async def review(
        self,
        resume_content: str,
        *,
        person: str | None = None,
        company: str | None = None,
        job: str | None = None,
        save: bool = False,
    ) -> ReviewOutcome:
        """Review a resume, against company/job context when given.

        Args:
            resume_content: Resume markdown to review.
            person: Person slug the resume belongs to (recorded on save).
            company: Company slug for context.
            job: Job slug or ``company/job`` reference for context.
            save: Persist the outcome to the result log.
        """
        context = self.build_context(company, job)

        if context.has_context:
            logger.info(
                f"Reviewing resume against {context.company or '-'}/{context.job or '-'}"
            )
            result: ReviewResult = await self.job_fit_agent.review(
                resume_content, context.render()
            )
        else:
            logger.info("Reviewing resume without context")
            result = await self.general_agent.review(resume_content)

        result_type = ResultManager.get_result_type(
            has_company=bool(context.company),
            has_job=bool(context.job),
            is_build=False,
        )
        metadata = self._metadata(result_type, person, context.company, context.job)
        outcome = ReviewOutcome(
            result=result,
            result_type=result_type,
            markdown=self.results.format_result(metadata, result),
        )

        if save:
            outcome.result_path = self.results.save_result(metadata, result)
        return outcome

    async def build(
        self,
        personal_info: str,
        *,
        person: str | None = None,
        company: str | None = None,
        job: str | None = None,
        job_content: str | None = None,
        save: bool = False,
    ) -> BuildOutcome:
        """Build a resume tailored to a job.

        The job comes from the project (``job``, optionally with ``company``)
        or from raw markdown (``job_content``). Saving needs the person,
        company and job to all be known; the resume is stored with the person
        and a ``build`` result is logged.

        Raises:
            ValueError: If no job is given.
        """
        if job:
            context = self.build_context(company, job)
        elif job_content:
            context = ReviewContext(company=company, job_content=job_content)
            if company:
                context.company_content = self.project.get_company_content(company)
        else:
            raise ValueError("Building a resume requires a job (--job or --job-file)")

        logger.info(f"Building resume for {context.company or '-'}/{context.job or '-'}")
        result = await self.builder_agent.build(personal_info, context.render())

        metadata = self._metadata(ResultType.BUILD, person, context.company, context.job)
        outcome = BuildOutcome(
            result=result,
            markdown=self.results.format_result(metadata, result),
        )

        if save:
            if person and context.company and context.job:
                outcome.resume_path = self.project.save_resume(
                    person, context.company, context.job, result.markdown
                )
                outcome.result_path = self.results.save_result(metadata, result)
            else:
                logger.warning(
                    "Not saving build: person, company and job must all be known"
                )
        return outcome

    def _metadata(
        self,
        result_type: ResultType,
        person: str | None,
        company: str | None,
        job: str | None,
    ) -> ResultMetadata:
        return ResultMetadata(
            type=result_type,
            timestamp=utc_timestamp(),
            person=person,
            person_file=f"people/{person}/person.md" if person else None,
            company=company,
            company_file=f"companies/{company}/company.md" if company else None,
            job=job,
            job_file=f"companies/{company}/jobs/{job}.md" if company and job else None,
        )
