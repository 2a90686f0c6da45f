"""File-tree project store for people, companies, jobs and resumes.

Layout under ``<project_root>/resume-data``::

    templates/{person,company,job}.md
    people/<slug>/person.md
    people/<slug>/resumes/<company>_<job>_<timestamp>.md
    companies/<slug>/company.md
    companies/<slug>/jobs/<job-slug>.md

Every entity is a markdown file whose location is derived from its slug.
Reads and updates of missing entities raise :class:`EntityNotFoundError`;
updates never create missing files or directories.
"""

from __future__ import annotations

import logging
from pathlib import Path

from resume_reviewer.config.resolver import (
    CONFIG_FILENAME,
    ProjectConfig,
    get_project_paths,
    save_config,
)
from resume_reviewer.project.exceptions import (
    EntityExistsError,
    EntityNotFoundError,
    InvalidNameError,
)
from resume_reviewer.project.models import CompanyInfo, InitResult, JobInfo, PersonInfo
from resume_reviewer.project.slug import slugify
from resume_reviewer.project.templates import (
    COMPANY_PLACEHOLDER,
    JOB_PLACEHOLDER,
    PERSON_PLACEHOLDER,
    TEMPLATE_FILES,
    fill_template,
)
from resume_reviewer.utils.timestamps import (
    filename_timestamp,
    next_available_path,
    utc_timestamp,
)

logger = logging.getLogger(__name__)

PERSON_FILENAME = "person.md"
COMPANY_FILENAME = "company.md"
RESUMES_DIRNAME = "resumes"
JOBS_DIRNAME = "jobs"
MARKDOWN_SUFFIX = ".md"


class ProjectManager:
    """CRUD operations over the project's markdown entities."""

    def __init__(self, config: ProjectConfig):
        """Initialize the manager.

        Args:
            config: Resolved project configuration.
        """
        self.config = config
        self.paths = get_project_paths(config)

    # ------------------------------------------------------------------
    # Project setup
    # ------------------------------------------------------------------

    def init(self) -> InitResult:
        """Create the project directory structure, templates and config file.

        Safe to run repeatedly: existing directories and files are reported
        in ``existed`` (directories) or skipped (files), never overwritten.
        """
        result = InitResult()

        for directory in (
            self.paths.people,
            self.paths.companies,
            self.paths.results,
            self.paths.templates,
        ):
            if directory.exists():
                result.existed.append(directory)
            else:
                directory.mkdir(parents=True, exist_ok=True)
                result.created.append(directory)

        for filename, content in TEMPLATE_FILES.items():
            template_path = self.paths.templates / filename
            if not template_path.exists():
                template_path.write_text(content, encoding="utf-8")
                result.created.append(template_path)

        config_path = Path(self.config.project_root) / CONFIG_FILENAME
        if not config_path.exists():
            save_config(ProjectConfig(project_root=Path(".")), self.config.project_root)
            result.created.append(config_path)

        logger.info(
            f"Initialized project at {self.config.project_root} "
            f"({len(result.created)} created, {len(result.existed)} existed)"
        )
        return result

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def list_people(self) -> list[PersonInfo]:
        """List people that have a profile file, sorted by slug."""
        return [
            person
            for person in (
                self._person_info(d.name) for d in _subdirectories(self.paths.people)
            )
            if person.profile_path.exists()
        ]

    def add_person(self, name: str) -> PersonInfo:
        """Create a person from the person template.

        Raises:
            InvalidNameError: If the name has no letters or digits.
            EntityExistsError: If a person with the same slug exists.
        """
        slug = _require_slug(name, "person")
        person = self._person_info(slug)
        if person.path.exists():
            raise EntityExistsError(f'Person "{name}" already exists', "person", name)

        person.resumes_path.mkdir(parents=True, exist_ok=True)
        template = self._load_template("person.md")
        person.profile_path.write_text(
            fill_template(template, PERSON_PLACEHOLDER, name), encoding="utf-8"
        )

        logger.info(f"Added person {slug}")
        return person

    def person_exists(self, name: str) -> bool:
        """Return True if the person's directory exists."""
        return self._person_info(name).path.is_dir()

    def get_person_content(self, name: str) -> str:
        """Read a person's profile markdown."""
        profile_path = self._person_info(name).profile_path
        if not profile_path.exists():
            raise EntityNotFoundError(f'Person "{name}" not found', "person", name)
        return profile_path.read_text(encoding="utf-8")

    def update_person_content(self, name: str, content: str) -> None:
        """Overwrite a person's profile markdown."""
        person = self._person_info(name)
        if not person.path.is_dir():
            raise EntityNotFoundError(f'Person "{name}" not found', "person", name)
        person.profile_path.write_text(content, encoding="utf-8")

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    def list_companies(self) -> list[CompanyInfo]:
        """List all companies with their job slugs, sorted by slug."""
        companies = []
        for directory in _subdirectories(self.paths.companies):
            company = self._company_info(directory.name)
            company.jobs = [p.stem for p in _markdown_files(company.jobs_path)]
            companies.append(company)
        return companies

    def add_company(self, name: str) -> CompanyInfo:
        """Create a company from the company template.

        Raises:
            InvalidNameError: If the name has no letters or digits.
            EntityExistsError: If a company with the same slug exists.
        """
        slug = _require_slug(name, "company")
        company = self._company_info(slug)
        if company.path.exists():
            raise EntityExistsError(
                f'Company "{name}" already exists', "company", name
            )

        company.jobs_path.mkdir(parents=True, exist_ok=True)
        template = self._load_template("company.md")
        company.profile_path.write_text(
            fill_template(template, COMPANY_PLACEHOLDER, name), encoding="utf-8"
        )

        logger.info(f"Added company {slug}")
        return company

    def company_exists(self, name: str) -> bool:
        """Return True if the company's directory exists."""
        return self._company_info(name).path.is_dir()

    def get_company_content(self, name: str) -> str:
        """Read a company's profile markdown."""
        profile_path = self._company_info(name).profile_path
        if not profile_path.exists():
            raise EntityNotFoundError(f'Company "{name}" not found', "company", name)
        return profile_path.read_text(encoding="utf-8")

    def update_company_content(self, name: str, content: str) -> None:
        """Overwrite a company's profile markdown."""
        company = self._company_info(name)
        if not company.path.is_dir():
            raise EntityNotFoundError(f'Company "{name}" not found', "company", name)
        company.profile_path.write_text(content, encoding="utf-8")

    # ------------------------------------------------------------------
    # Jobs
    # ------------------------------------------------------------------

    def list_jobs(self, company_name: str) -> list[JobInfo]:
        """List a company's jobs. Empty if the company does not exist."""
        jobs_path = self._company_info(company_name).jobs_path
        return [
            JobInfo(company=company_name, name=path.stem, path=path)
            for path in _markdown_files(jobs_path)
        ]

    def add_job(self, company_name: str, job_title: str) -> JobInfo:
        """Create a job posting under an existing company.

        Raises:
            InvalidNameError: If either name has no letters or digits.
            EntityNotFoundError: If the company does not exist.
            EntityExistsError: If the company already has a job with this slug.
        """
        company_slug = _require_slug(company_name, "company")
        job_slug = _require_slug(job_title, "job")
        company = self._company_info(company_slug)

        if not company.path.exists():
            raise EntityNotFoundError(
                f'Company "{company_name}" does not exist. Create it first.',
                "company",
                company_name,
            )

        company.jobs_path.mkdir(parents=True, exist_ok=True)

        job_path = self._job_path(company_slug, job_slug)
        if job_path.exists():
            raise EntityExistsError(
                f'Job "{job_title}" already exists for company "{company_name}"',
                "job",
                job_title,
            )

        template = self._load_template("job.md")
        job_path.write_text(
            fill_template(template, JOB_PLACEHOLDER, job_title), encoding="utf-8"
        )

        logger.info(f"Added job {company_slug}/{job_slug}")
        return JobInfo(company=company_slug, name=job_slug, path=job_path)

    def job_exists(self, company: str, job: str) -> bool:
        """Return True if the job file exists."""
        return self._job_path(company, job).is_file()

    def get_job_content(self, company: str, job: str) -> str:
        """Read a job description."""
        job_path = self._job_path(company, job)
        if not job_path.exists():
            raise EntityNotFoundError(
                f'Job "{job}" not found for company "{company}"', "job", job
            )
        return job_path.read_text(encoding="utf-8")

    def update_job_content(self, company: str, job: str, content: str) -> None:
        """Overwrite a job description."""
        job_path = self._job_path(company, job)
        if not job_path.exists():
            raise EntityNotFoundError(
                f'Job "{job}" not found for company "{company}"', "job", job
            )
        job_path.write_text(content, encoding="utf-8")

    # ------------------------------------------------------------------
    # Resumes
    # ------------------------------------------------------------------

    def save_resume(self, person: str, company: str, job: str, content: str) -> Path:
        """Save a generated resume into the person's resumes directory.

        The filename is ``{company}_{job}_{timestamp}.md``. A second save for
        the same company/job within the same second gets a ``-2`` (``-3``, ...)
        suffix rather than replacing the first.

        Returns:
            Path of the written resume.

        Raises:
            EntityNotFoundError: If the person does not exist.
        """
        info = self._person_info(person)
        if not info.path.is_dir():
            raise EntityNotFoundError(f'Person "{person}" not found', "person", person)

        info.resumes_path.mkdir(parents=True, exist_ok=True)

        timestamp = filename_timestamp(utc_timestamp())
        resume_path = next_available_path(
            info.resumes_path / f"{company}_{job}_{timestamp}{MARKDOWN_SUFFIX}"
        )
        resume_path.write_text(content, encoding="utf-8")

        logger.info(f"Saved resume for {person}: {resume_path.name}")
        return resume_path

    def list_resumes(self, person: str) -> list[str]:
        """List a person's resume names (filename stems), sorted."""
        return [p.stem for p in _markdown_files(self._person_info(person).resumes_path)]

    def get_resume_content(self, person: str, resume_name: str) -> str:
        """Read a saved resume by its name."""
        resume_path = self._resume_path(person, resume_name)
        if not resume_path.exists():
            raise EntityNotFoundError(
                f'Resume "{resume_name}" not found for person "{person}"',
                "resume",
                resume_name,
            )
        return resume_path.read_text(encoding="utf-8")

    def update_resume_content(self, person: str, resume_name: str, content: str) -> None:
        """Overwrite a saved resume."""
        resume_path = self._resume_path(person, resume_name)
        if not resume_path.exists():
            raise EntityNotFoundError(
                f'Resume "{resume_name}" not found for person "{person}"',
                "resume",
                resume_name,
            )
        resume_path.write_text(content, encoding="utf-8")

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------

    def _person_info(self, name: str) -> PersonInfo:
        path = self.paths.people / name
        return PersonInfo(
            name=name,
            path=path,
            profile_path=path / PERSON_FILENAME,
            resumes_path=path / RESUMES_DIRNAME,
        )

    def _company_info(self, name: str) -> CompanyInfo:
        path = self.paths.companies / name
        return CompanyInfo(
            name=name,
            path=path,
            profile_path=path / COMPANY_FILENAME,
            jobs_path=path / JOBS_DIRNAME,
        )

    def _job_path(self, company: str, job: str) -> Path:
        return self.paths.companies / company / JOBS_DIRNAME / f"{job}{MARKDOWN_SUFFIX}"

    def _resume_path(self, person: str, resume_name: str) -> Path:
        return self._person_info(person).resumes_path / f"{resume_name}{MARKDOWN_SUFFIX}"

    def _load_template(self, filename: str) -> str:
        """Prefer the project's (possibly customized) template over the default."""
        template_path = self.paths.templates / filename
        if template_path.is_file():
            return template_path.read_text(encoding="utf-8")
        return TEMPLATE_FILES[filename]


def _require_slug(name: str, entity: str) -> str:
    slug = slugify(name)
    if not slug:
        raise InvalidNameError(
            f'{entity.capitalize()} name "{name}" has no letters or digits', entity, name
        )
    return slug


def _subdirectories(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)


def _markdown_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix == MARKDOWN_SUFFIX),
        key=lambda p: p.name,
    )
