"""Data models for project entities."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PersonInfo:
    """A person in the project.

    Attributes:
        name: Person slug.
        path: Person directory.
        profile_path: The ``person.md`` career record.
        resumes_path: Directory of generated resumes.
    """

    name: str
    path: Path
    profile_path: Path
    resumes_path: Path

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "name": self.name,
            "path": str(self.path),
            "profile_path": str(self.profile_path),
            "resumes_path": str(self.resumes_path),
        }


@dataclass
class CompanyInfo:
    """A company in the project.

    Attributes:
        name: Company slug.
        path: Company directory.
        profile_path: The ``company.md`` profile.
        jobs_path: Directory of job postings.
        jobs: Job slugs under this company.
    """

    name: str
    path: Path
    profile_path: Path
    jobs_path: Path
    jobs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "name": self.name,
            "path": str(self.path),
            "profile_path": str(self.profile_path),
            "jobs_path": str(self.jobs_path),
            "jobs": list(self.jobs),
        }


@dataclass
class JobInfo:
    """A job posting, identified by (company, name)."""

    company: str
    name: str
    path: Path

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {"company": self.company, "name": self.name, "path": str(self.path)}


@dataclass
class InitResult:
    """Paths touched by :meth:`ProjectManager.init`."""

    created: list[Path] = field(default_factory=list)
    existed: list[Path] = field(default_factory=list)
