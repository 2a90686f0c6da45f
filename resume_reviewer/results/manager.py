"""Timestamped result log stored under ``resume-data/results``.

Each analysis or build outcome is written once as a markdown file with YAML
frontmatter. Results are never updated or deleted here. Files whose
frontmatter is missing or incomplete are treated as absent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from resume_reviewer.config.resolver import ProjectConfig, get_project_paths
from resume_reviewer.results.formatter import format_build_result, format_review_result
from resume_reviewer.results.frontmatter import (
    parse_metadata,
    render_frontmatter,
    split_frontmatter,
)
from resume_reviewer.results.models import (
    AgentResult,
    BuilderResult,
    JobFitResult,
    LoadedResult,
    ResultMetadata,
    ResultType,
    ReviewResult,
    SavedResult,
)
from resume_reviewer.utils.timestamps import filename_timestamp, next_available_path

logger = logging.getLogger(__name__)

RESULT_SUFFIX = ".md"


class ResultManager:
    """Save, list and load analysis/build results."""

    def __init__(self, config: ProjectConfig):
        """Initialize the result manager.

        Args:
            config: Resolved project configuration.
        """
        self.results_path = get_project_paths(config).results

    @staticmethod
    def get_result_type(has_company: bool, has_job: bool, is_build: bool) -> ResultType:
        """Decide the result type from the context an operation used."""
        if is_build:
            return ResultType.BUILD
        if has_company and has_job:
            return ResultType.REVIEW
        if has_job:
            return ResultType.JOB
        if has_company:
            return ResultType.COMPANY
        return ResultType.GENERAL

    @staticmethod
    def generate_filename(metadata: ResultMetadata) -> str:
        """Build ``{timestamp}_{type}[_{person}][_{company}][_{job}].md``."""
        parts = [filename_timestamp(metadata.timestamp), metadata.type.value]
        parts += [
            value
            for value in (metadata.person, metadata.company, metadata.job)
            if value
        ]
        return "_".join(parts) + RESULT_SUFFIX

    def save_result(
        self,
        metadata: ResultMetadata | Mapping[str, Any],
        result: AgentResult | Mapping[str, Any],
    ) -> Path:
        """Write a result file and return its path.

        A second result with the same filename (same identity within the
        same second) gets a ``-2`` (``-3``, ...) suffix instead of
        overwriting the first.

        Args:
            metadata: Result metadata; mappings are validated.
            result: Agent output; mappings are validated into the model
                matching ``metadata.type``.

        Raises:
            ValueError: If the result shape does not match the result type.
        """
        if not isinstance(metadata, ResultMetadata):
            metadata = ResultMetadata.model_validate(metadata)
        result = _coerce_result(metadata.type, result)

        self.results_path.mkdir(parents=True, exist_ok=True)
        result_path = next_available_path(
            self.results_path / self.generate_filename(metadata)
        )

        result_path.write_text(self.format_result(metadata, result), encoding="utf-8")
        logger.info(f"Saved {metadata.type.value} result: {result_path.name}")
        return result_path

    def format_result(self, metadata: ResultMetadata, result: AgentResult) -> str:
        """Render the full result document (frontmatter plus body)."""
        if metadata.type is ResultType.BUILD:
            body = format_build_result(result)
        else:
            body = format_review_result(result, metadata.type)
        return render_frontmatter(metadata) + body

    def list_results(
        self,
        type: ResultType | str | None = None,
        person: str | None = None,
        company: str | None = None,
        job: str | None = None,
    ) -> list[SavedResult]:
        """List saved results, newest first.

        Args:
            type: Only results of this type.
            person: Only results for this person slug.
            company: Only results for this company slug.
            job: Only results for this job slug.

        Returns:
            Matching results sorted by timestamp, descending.
        """
        if not self.results_path.is_dir():
            return []

        type_filter = ResultType(type) if type else None
        results: list[SavedResult] = []

        for path in sorted(self.results_path.glob(f"*{RESULT_SUFFIX}")):
            content = _read_text(path)
            if content is None:
                continue

            metadata = parse_metadata(content)
            if metadata is None:
                logger.debug(f"Skipping result without valid frontmatter: {path.name}")
                continue

            if type_filter and metadata.type is not type_filter:
                continue
            if person and metadata.person != person:
                continue
            if company and metadata.company != company:
                continue
            if job and metadata.job != job:
                continue

            results.append(SavedResult(filename=path.name, path=path, metadata=metadata))

        results.sort(key=lambda r: r.metadata.timestamp, reverse=True)
        return results

    def load_result(self, filename: str) -> LoadedResult | None:
        """Load a result by filename.

        Returns:
            The result with its content, or None if the file does not exist
            or its frontmatter is invalid.
        """
        name = Path(filename).name
        if not name.endswith(RESULT_SUFFIX):
            name += RESULT_SUFFIX
        path = self.results_path / name

        if not path.is_file():
            return None

        content = _read_text(path)
        if content is None:
            return None

        metadata = parse_metadata(content)
        if metadata is None:
            return None

        _, body = split_frontmatter(content)
        return LoadedResult(
            filename=name,
            path=path,
            metadata=metadata,
            content=content,
            body=body,
        )


def _coerce_result(
    result_type: ResultType, result: AgentResult | Mapping[str, Any]
) -> AgentResult:
    if isinstance(result, Mapping):
        if result_type is ResultType.BUILD:
            return BuilderResult.model_validate(result)
        if "fitRating" in result or "fit_rating" in result:
            return JobFitResult.model_validate(result)
        return ReviewResult.model_validate(result)

    if result_type is ResultType.BUILD and not isinstance(result, BuilderResult):
        raise ValueError("build results require a BuilderResult")
    if result_type is not ResultType.BUILD and not isinstance(result, ReviewResult):
        raise ValueError(f"{result_type.value} results require a ReviewResult")
    return result


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read result file {path.name}: {e}")
        return None
