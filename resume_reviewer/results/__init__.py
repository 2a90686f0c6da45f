"""Result log for review and build outcomes.

Public API:
- ResultManager: Save, list and load result files
- ResultType / ResultMetadata: Result classification and frontmatter
- ReviewResult / JobFitResult / BuilderResult: Agent output shapes
"""

from resume_reviewer.results.manager import ResultManager
from resume_reviewer.results.models import (
    AgentResult,
    BuilderResult,
    CategoryScore,
    JobFitResult,
    LoadedResult,
    ResultMetadata,
    ResultType,
    ReviewResult,
    SavedResult,
)

__all__ = [
    "ResultManager",
    "ResultType",
    "ResultMetadata",
    "SavedResult",
    "LoadedResult",
    "AgentResult",
    "CategoryScore",
    "ReviewResult",
    "JobFitResult",
    "BuilderResult",
]
