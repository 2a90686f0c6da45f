"""Data models for analysis/build results.

Contains Pydantic models for:
- Agent outputs: ReviewResult, JobFitResult, BuilderResult
- ResultMetadata: Frontmatter persisted with every saved result
- SavedResult / LoadedResult: Listing and loading views of saved files

Agent outputs use camelCase aliases (``fitRating``, ``missingKeywords``) on
the wire and accept snake_case field names too.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultType(str, Enum):
    """Kind of saved result, derived from the context an analysis used."""

    GENERAL = "general"
    COMPANY = "company"
    JOB = "job"
    REVIEW = "review"
    BUILD = "build"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class CategoryScore(_CamelModel):
    """Score and feedback for one review category."""

    name: str = Field(..., description="Category name")
    score: int = Field(..., ge=0, le=100, description="Category score (0-100)")
    feedback: str = Field(default="", description="Specific feedback")


class ReviewResult(_CamelModel):
    """General resume review."""

    score: int = Field(..., ge=0, le=100, description="Overall score (0-100)")
    summary: str = Field(..., description="Brief overall assessment")
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    categories: list[CategoryScore] = Field(default_factory=list)


class JobFitResult(ReviewResult):
    """Review of a resume against company and/or job context."""

    fit_rating: Literal["excellent", "good", "moderate", "poor"] = Field(
        ..., description="Overall fit bucket"
    )
    missing_keywords: list[str] = Field(default_factory=list)
    transferable_skills: list[str] = Field(default_factory=list)
    targeted_suggestions: list[str] = Field(default_factory=list)


class BuilderResult(_CamelModel):
    """Tailored resume produced by the builder agent."""

    markdown: str = Field(..., description="Complete resume in markdown")
    summary: str = Field(..., description="Explanation of tailoring decisions")
    emphasized_skills: list[str] = Field(default_factory=list)
    selected_experiences: list[str] = Field(default_factory=list)


AgentResult = ReviewResult | JobFitResult | BuilderResult


class ResultMetadata(_CamelModel):
    """Metadata written as the frontmatter of a result file.

    File references are project-relative paths of the inputs
    (e.g. ``people/jane-doe/person.md``).
    """

    type: ResultType
    timestamp: str = Field(..., min_length=1)
    person: str | None = None
    person_file: str | None = None
    company: str | None = None
    company_file: str | None = None
    job: str | None = None
    job_file: str | None = None

    def frontmatter_fields(self) -> dict[str, str]:
        """Present fields in file order, keyed by their snake_case names."""
        return {
            key: value
            for key, value in self.model_dump(mode="json").items()
            if value is not None
        }


@dataclass
class SavedResult:
    """A result file found by :meth:`ResultManager.list_results`."""

    filename: str
    path: Path
    metadata: ResultMetadata

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary."""
        return {
            "filename": self.filename,
            "path": str(self.path),
            "metadata": self.metadata.to_dict(),
        }


@dataclass
class LoadedResult(SavedResult):
    """A result file with its content.

    ``content`` is the whole file; ``body`` is the markdown after the
    frontmatter. The markdown is the persisted source of truth; agent
    output is not reconstructed from it.
    """

    content: str = ""
    body: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary."""
        data = super().to_dict()
        data["content"] = self.content
        data["body"] = self.body
        return data
