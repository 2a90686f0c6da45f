"""Tests for result markdown formatting."""

from resume_reviewer.results.formatter import format_build_result, format_review_result
from resume_reviewer.results.models import ResultType


class TestFormatReviewResult:
    def test_general_review(self, sample_review):
        markdown = format_review_result(sample_review, ResultType.GENERAL)

        assert markdown.startswith("# General Review Results")
        assert "**Overall Score:** 78/100" in markdown
        assert "Fit Rating" not in markdown
        assert "- Clear structure" in markdown
        assert "## Suggested Improvements\n- Quantify achievements" in markdown
        assert "### Content Quality: 72/100\nAdd metrics." in markdown

    def test_job_fit_review(self, sample_job_fit):
        markdown = format_review_result(sample_job_fit, ResultType.REVIEW)

        assert markdown.startswith("# Job Fit Review Results")
        assert "**Fit Rating:** GOOD" in markdown
        assert "## Missing Keywords\n`Kubernetes`, `Terraform`" in markdown
        assert "## Transferable Skills\n- Incident response" in markdown
        assert "## Targeted Suggestions" in markdown

    def test_company_review_title(self, sample_job_fit):
        markdown = format_review_result(sample_job_fit, ResultType.COMPANY)

        assert markdown.startswith("# Company Fit Review Results")

    def test_empty_optional_sections_are_omitted(self, sample_job_fit):
        sample_job_fit.missing_keywords = []
        sample_job_fit.transferable_skills = []

        markdown = format_review_result(sample_job_fit, ResultType.JOB)

        assert "Missing Keywords" not in markdown
        assert "Transferable Skills" not in markdown


class TestFormatBuildResult:
    def test_build_result_ends_with_resume(self, sample_build):
        markdown = format_build_result(sample_build)

        assert markdown.startswith("# Generated Resume")
        assert "`Python`, `PostgreSQL`" in markdown
        assert "- Senior Engineer @ Initech" in markdown
        assert markdown.endswith("## Resume Content\n\n" + sample_build.markdown)
