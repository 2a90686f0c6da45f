"""Markdown bodies for saved results."""

from __future__ import annotations

from resume_reviewer.results.models import (
    BuilderResult,
    JobFitResult,
    ResultType,
    ReviewResult,
)

REVIEW_TITLES = {
    ResultType.GENERAL: "General Review",
    ResultType.COMPANY: "Company Fit Review",
    ResultType.JOB: "Job Fit Review",
    ResultType.REVIEW: "Job Fit Review",
}


def format_review_result(result: ReviewResult, result_type: ResultType) -> str:
    """Render a general or job-fit review as markdown."""
    title = REVIEW_TITLES.get(result_type, "Review")
    lines = [f"# {title} Results", ""]
    lines += [f"**Overall Score:** {result.score}/100", ""]

    if isinstance(result, JobFitResult):
        lines += [f"**Fit Rating:** {result.fit_rating.upper()}", ""]

    lines += ["## Summary", result.summary, ""]

    lines.append("## Strengths")
    lines += _bullets(result.strengths)
    lines.append("")

    lines.append("## Suggested Improvements")
    lines += _bullets(result.improvements)
    lines.append("")

    if isinstance(result, JobFitResult):
        if result.missing_keywords:
            lines += ["## Missing Keywords", _code_spans(result.missing_keywords), ""]
        if result.transferable_skills:
            lines.append("## Transferable Skills")
            lines += _bullets(result.transferable_skills)
            lines.append("")
        if result.targeted_suggestions:
            lines.append("## Targeted Suggestions")
            lines += _bullets(result.targeted_suggestions)
            lines.append("")

    lines += ["## Category Breakdown", ""]
    for category in result.categories:
        lines.append(f"### {category.name}: {category.score}/100")
        lines += [category.feedback, ""]

    return "\n".join(lines)


def format_build_result(result: BuilderResult) -> str:
    """Render a builder result, ending with the resume markdown verbatim."""
    lines = ["# Generated Resume", ""]
    lines += ["## Tailoring Summary", result.summary, ""]
    lines += ["## Emphasized Skills", _code_spans(result.emphasized_skills), ""]

    lines.append("## Selected Experiences")
    lines += _bullets(result.selected_experiences)
    lines.append("")

    lines += ["---", "", "## Resume Content", "", result.markdown]
    return "\n".join(lines)


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items]


def _code_spans(items: list[str]) -> str:
    return ", ".join(f"`{item}`" for item in items)
