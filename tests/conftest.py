"""Pytest configuration and shared fixtures."""

import pytest

from resume_reviewer.agents.config import reset_agent_config
from resume_reviewer.config.resolver import ProjectConfig
from resume_reviewer.config.settings import reset_settings
from resume_reviewer.project.manager import ProjectManager
from resume_reviewer.results.manager import ResultManager
from resume_reviewer.results.models import (
    BuilderResult,
    CategoryScore,
    JobFitResult,
    ReviewResult,
)
from resume_reviewer.utils.logging import reset_logging

ENV_KEYS_TO_REMOVE = [
    "RESUME_REVIEWER_PROJECT_ROOT",
    "RESUME_REVIEWER_DEFAULT_PERSON",
    "RESUME_REVIEWER_LOG_LEVEL",
    "AGENT_LLM_PROVIDER",
    "AGENT_LLM_MODEL",
    "AGENT_LLM_API_KEY",
    "AGENT_LLM_BASE_URL",
    "AGENT_LLM_MAX_RETRIES",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Remove configuration env vars and reset singletons around each test."""
    for key in ENV_KEYS_TO_REMOVE:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_agent_config()
    yield
    reset_settings()
    reset_agent_config()
    reset_logging()


@pytest.fixture
def project_config(tmp_path) -> ProjectConfig:
    """Project configuration rooted in a temporary directory."""
    return ProjectConfig(project_root=tmp_path)


@pytest.fixture
def project(project_config) -> ProjectManager:
    """An initialized project store."""
    manager = ProjectManager(project_config)
    manager.init()
    return manager


@pytest.fixture
def results(project_config) -> ResultManager:
    """A result log for the temporary project."""
    return ResultManager(project_config)


@pytest.fixture
def sample_review() -> ReviewResult:
    """A general review as returned by the review agent."""
    return ReviewResult(
        score=78,
        summary="Solid resume with room for more measurable impact.",
        strengths=["Clear structure", "Relevant experience"],
        improvements=["Quantify achievements"],
        categories=[
            CategoryScore(name="Content Quality", score=72, feedback="Add metrics."),
        ],
    )


@pytest.fixture
def sample_job_fit() -> JobFitResult:
    """A job-fit review as returned by the job-fit agent."""
    return JobFitResult(
        score=84,
        summary="Good match for the platform role.",
        fit_rating="good",
        strengths=["Python depth"],
        improvements=["Mention Kubernetes"],
        missing_keywords=["Kubernetes", "Terraform"],
        transferable_skills=["Incident response"],
        targeted_suggestions=["Lead with the infrastructure migration"],
        categories=[
            CategoryScore(name="Skills Match", score=80, feedback="Strong overlap."),
        ],
    )


@pytest.fixture
def sample_build() -> BuilderResult:
    """A builder result as returned by the builder agent."""
    return BuilderResult(
        markdown="# Jane Doe\n\n## Experience\n\n- Built things",
        summary="Emphasized backend work.",
        emphasized_skills=["Python", "PostgreSQL"],
        selected_experiences=["Senior Engineer @ Initech"],
    )
