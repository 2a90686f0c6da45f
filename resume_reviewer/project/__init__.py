"""Local project document store.

Public API:
- ProjectManager: CRUD over people, companies, jobs and generated resumes
- slugify: Name to identifier conversion
- EntityNotFoundError / EntityExistsError: Structured store failures
"""

from resume_reviewer.project.exceptions import (
    EntityExistsError,
    EntityNotFoundError,
    InvalidNameError,
    ProjectError,
)
from resume_reviewer.project.manager import ProjectManager
from resume_reviewer.project.models import CompanyInfo, InitResult, JobInfo, PersonInfo
from resume_reviewer.project.slug import slugify

__all__ = [
    "ProjectManager",
    "PersonInfo",
    "CompanyInfo",
    "JobInfo",
    "InitResult",
    "ProjectError",
    "EntityNotFoundError",
    "EntityExistsError",
    "InvalidNameError",
    "slugify",
]
