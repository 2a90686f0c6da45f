"""Tests for the ReviewService orchestration."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from resume_reviewer.project.exceptions import EntityNotFoundError
from resume_reviewer.results.models import ResultType
from resume_reviewer.service import ReviewContext, ReviewService


@pytest.fixture
def agents(sample_review, sample_job_fit, sample_build):
    """Mocked agents returning the sample results."""
    general = MagicMock()
    general.review = AsyncMock(return_value=sample_review)
    job_fit = MagicMock()
    job_fit.review = AsyncMock(return_value=sample_job_fit)
    builder = MagicMock()
    builder.build = AsyncMock(return_value=sample_build)
    return general, job_fit, builder


@pytest.fixture
def service(project, results, agents):
    general, job_fit, builder = agents
    project.add_person("Jane Doe")
    project.add_company("Acme")
    project.add_job("acme", "Engineer")
    project.update_company_content("acme", "# Acme\nAnvils")
    project.update_job_content("acme", "engineer", "# Engineer\nPython")
    return ReviewService(
        project,
        results,
        general_agent=general,
        job_fit_agent=job_fit,
        builder_agent=builder,
    )


class TestResolveJobRef:
    def test_company_slash_job(self):
        assert ReviewService.resolve_job_ref("acme/engineer") == ("acme", "engineer")

    def test_bare_job_with_company(self):
        assert ReviewService.resolve_job_ref("engineer", "acme") == ("acme", "engineer")

    def test_bare_job_without_company_fails(self):
        with pytest.raises(ValueError):
            ReviewService.resolve_job_ref("engineer")

    def test_conflicting_company_fails(self):
        with pytest.raises(ValueError):
            ReviewService.resolve_job_ref("acme/engineer", "initech")

    def test_incomplete_reference_fails(self):
        with pytest.raises(ValueError):
            ReviewService.resolve_job_ref("acme/")


class TestBuildContext:
    def test_job_implies_company(self, service):
        context = service.build_context(job="acme/engineer")

        assert context.company == "acme"
        assert context.job == "engineer"
        assert context.render() == (
            "## Company Context\n\n# Acme\nAnvils\n\n## Job Description\n\n# Engineer\nPython"
        )

    def test_company_only(self, service):
        context = service.build_context(company="acme")

        assert context.job is None
        assert context.render() == "## Company Context\n\n# Acme\nAnvils"

    def test_no_context(self, service):
        context = service.build_context()

        assert context.has_context is False
        assert context.render() == ""

    def test_missing_job_raises(self, service):
        with pytest.raises(EntityNotFoundError):
            service.build_context(company="acme", job="designer")


class TestReview:
    @pytest.mark.asyncio
    async def test_general_review_without_context(self, service, agents):
        general, job_fit, _ = agents

        outcome = await service.review("# Resume")

        general.review.assert_awaited_once_with("# Resume")
        job_fit.review.assert_not_called()
        assert outcome.result_type is ResultType.GENERAL
        assert outcome.markdown.startswith("---\n")
        assert outcome.result_path is None

    @pytest.mark.asyncio
    async def test_job_fit_review_with_context(self, service, agents):
        general, job_fit, _ = agents

        outcome = await service.review("# Resume", company="acme", job="engineer")

        general.review.assert_not_called()
        resume, context = job_fit.review.call_args.args
        assert resume == "# Resume"
        assert "## Job Description" in context
        assert outcome.result_type is ResultType.REVIEW

    @pytest.mark.asyncio
    async def test_company_review_type(self, service):
        outcome = await service.review("# Resume", company="acme")

        assert outcome.result_type is ResultType.COMPANY

    @pytest.mark.asyncio
    async def test_saved_review_records_file_refs(self, service, results):
        outcome = await service.review(
            "# Resume", person="jane-doe", job="acme/engineer", save=True
        )

        saved = results.list_results()
        assert len(saved) == 1
        assert saved[0].path == outcome.result_path
        metadata = saved[0].metadata
        assert metadata.type is ResultType.REVIEW
        assert metadata.person_file == "people/jane-doe/person.md"
        assert metadata.company_file == "companies/acme/company.md"
        assert metadata.job_file == "companies/acme/jobs/engineer.md"


class TestBuild:
    @pytest.mark.asyncio
    async def test_build_requires_job(self, service):
        with pytest.raises(ValueError):
            await service.build("# Jane")

    @pytest.mark.asyncio
    async def test_build_from_project_job_saves(self, service, project, results, sample_build):
        outcome = await service.build(
            "# Jane", person="jane-doe", job="acme/engineer", save=True
        )

        assert outcome.resume_path is not None
        assert outcome.resume_path.parent == project.paths.people / "jane-doe" / "resumes"
        assert outcome.resume_path.read_text(encoding="utf-8") == sample_build.markdown
        saved = results.list_results(type=ResultType.BUILD)
        assert [s.path for s in saved] == [outcome.result_path]

    @pytest.mark.asyncio
    async def test_build_from_raw_job_is_not_saved(self, service, agents, results):
        _, _, builder = agents

        outcome = await service.build(
            "# Jane", person="jane-doe", job_content="# Designer", save=True
        )

        _, context = builder.build.call_args.args
        assert context == "## Job Description\n\n# Designer"
        assert outcome.resume_path is None
        assert outcome.result_path is None
        assert results.list_results() == []

    @pytest.mark.asyncio
    async def test_build_without_save(self, service, results):
        outcome = await service.build("# Jane", person="jane-doe", job="acme/engineer")

        assert outcome.markdown.startswith("---\n")
        assert outcome.resume_path is None
        assert results.list_results() == []


class TestReviewContext:
    def test_job_only_render(self):
        assert ReviewContext(job_content="JD").render() == "## Job Description\n\nJD"
