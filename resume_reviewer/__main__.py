"""Main entry point for Resume Reviewer."""

import argparse
import asyncio
import sys
from pathlib import Path

from resume_reviewer import __version__
from resume_reviewer.agents.llm import LLMError
from resume_reviewer.config.resolver import ConfigResolver, ProjectConfig
from resume_reviewer.config.settings import Settings
from resume_reviewer.project.exceptions import ProjectError
from resume_reviewer.project.manager import ProjectManager
from resume_reviewer.project.slug import slugify
from resume_reviewer.results.manager import ResultManager
from resume_reviewer.results.models import ResultType
from resume_reviewer.utils.logging import configure_logging

IMPORTABLE_SUFFIXES = {".md", ".markdown", ".txt"}


def _read_input(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_import_file(path: Path) -> str:
    if path.suffix.lower() not in IMPORTABLE_SUFFIXES:
        supported = ", ".join(sorted(IMPORTABLE_SUFFIXES))
        raise ValueError(f"Unsupported file type {path.suffix!r} (supported: {supported})")
    return _read_input(path)


def _require_person(person: str | None, config: ProjectConfig) -> str:
    person = person or config.default_person
    if not person:
        raise ValueError(
            "No person given: use --person or set defaultPerson in the project config"
        )
    return person


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-review",
        description="Resume Reviewer: review and tailor resumes against job postings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resume-review init
  resume-review add person "Jane Doe"
  resume-review add job acme "Senior Engineer"
  resume-review review --person jane-doe --job acme/senior-engineer --save
  resume-review build --person jane-doe --job acme/senior-engineer --save
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    # init
    init_parser = subparsers.add_parser(
        "init",
        help="Create the project structure, templates and config file",
    )
    init_parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Project root to initialize (default: resolved project root)",
    )

    # list
    list_parser = subparsers.add_parser("list", help="List project entities")
    list_sub = list_parser.add_subparsers(dest="entity", required=True)
    list_sub.add_parser("people", help="List people")
    list_sub.add_parser("companies", help="List companies and their jobs")
    list_jobs = list_sub.add_parser("jobs", help="List a company's jobs")
    list_jobs.add_argument("company", help="Company slug")
    list_resumes = list_sub.add_parser("resumes", help="List a person's resumes")
    list_resumes.add_argument("person", help="Person slug")

    # add
    add_parser = subparsers.add_parser("add", help="Create an entity from its template")
    add_sub = add_parser.add_subparsers(dest="entity", required=True)
    add_person = add_sub.add_parser("person", help="Add a person")
    add_person.add_argument("name", help="Person name")
    add_company = add_sub.add_parser("company", help="Add a company")
    add_company.add_argument("name", help="Company name")
    add_job = add_sub.add_parser("job", help="Add a job to an existing company")
    add_job.add_argument("company", help="Company slug")
    add_job.add_argument("title", help="Job title")

    # show
    show_parser = subparsers.add_parser("show", help="Print an entity's markdown")
    show_sub = show_parser.add_subparsers(dest="entity", required=True)
    show_person = show_sub.add_parser("person", help="Show a person profile")
    show_person.add_argument("name", help="Person slug")
    show_company = show_sub.add_parser("company", help="Show a company profile")
    show_company.add_argument("name", help="Company slug")
    show_job = show_sub.add_parser("job", help="Show a job description")
    show_job.add_argument("company", help="Company slug")
    show_job.add_argument("job", help="Job slug")
    show_resume = show_sub.add_parser("resume", help="Show a saved resume")
    show_resume.add_argument("person", help="Person slug")
    show_resume.add_argument("name", help="Resume name (filename without .md)")
    show_result = show_sub.add_parser("result", help="Show a saved result")
    show_result.add_argument("filename", help="Result filename")

    # update
    update_parser = subparsers.add_parser(
        "update", help="Replace an entity's markdown with a file's content"
    )
    update_sub = update_parser.add_subparsers(dest="entity", required=True)
    update_person = update_sub.add_parser("person", help="Update a person profile")
    update_person.add_argument("name", help="Person slug")
    update_person.add_argument("file", type=Path, help="Markdown file")
    update_company = update_sub.add_parser("company", help="Update a company profile")
    update_company.add_argument("name", help="Company slug")
    update_company.add_argument("file", type=Path, help="Markdown file")
    update_job = update_sub.add_parser("job", help="Update a job description")
    update_job.add_argument("company", help="Company slug")
    update_job.add_argument("job", help="Job slug")
    update_job.add_argument("file", type=Path, help="Markdown file")
    update_resume = update_sub.add_parser("resume", help="Update a saved resume")
    update_resume.add_argument("person", help="Person slug")
    update_resume.add_argument("name", help="Resume name")
    update_resume.add_argument("file", type=Path, help="Markdown file")

    # results
    results_parser = subparsers.add_parser("results", help="List saved results")
    results_parser.add_argument("--person", help="Filter by person slug")
    results_parser.add_argument("--company", help="Filter by company slug")
    results_parser.add_argument("--job", help="Filter by job slug")
    results_parser.add_argument(
        "--type",
        choices=[t.value for t in ResultType],
        help="Filter by result type",
    )

    # review
    review_parser = subparsers.add_parser(
        "review", help="Review a resume, optionally against a company/job"
    )
    review_parser.add_argument(
        "--person", help="Person slug (default: config defaultPerson)"
    )
    review_parser.add_argument(
        "--file", type=Path, help="Resume file to review instead of the person profile"
    )
    review_parser.add_argument("--company", help="Company slug for context")
    review_parser.add_argument("--job", help="Job slug or company/job")
    review_parser.add_argument(
        "--save", action="store_true", help="Save the review to the results log"
    )

    # build
    build_parser = subparsers.add_parser(
        "build", help="Build a resume tailored to a job"
    )
    build_parser.add_argument(
        "--person", help="Person slug (default: config defaultPerson)"
    )
    build_parser.add_argument(
        "--file", type=Path, help="Personal information file instead of the person profile"
    )
    build_parser.add_argument("--company", help="Company slug")
    job_group = build_parser.add_mutually_exclusive_group(required=True)
    job_group.add_argument("--job", help="Job slug or company/job")
    job_group.add_argument(
        "--job-file", type=Path, help="Job description file outside the project"
    )
    build_parser.add_argument(
        "--output", type=Path, help="Write the generated resume markdown to this file"
    )
    build_parser.add_argument(
        "--save",
        action="store_true",
        help="Save the resume with the person and log a build result",
    )

    # import
    import_parser = subparsers.add_parser(
        "import", help="Structure a raw document into project markdown"
    )
    import_parser.add_argument(
        "file", type=Path, help="Document to import (.md, .markdown or .txt)"
    )
    target_group = import_parser.add_mutually_exclusive_group(required=True)
    target_group.add_argument("--person", help="Import a resume as this person's profile")
    target_group.add_argument(
        "--company", help="Import company information (with --job: a job posting)"
    )
    import_parser.add_argument("--job", help="Job title when importing a job posting")
    import_parser.add_argument(
        "--merge",
        action="store_true",
        help="Merge the resume into the existing person profile",
    )

    return parser


def _cmd_init(parsed: argparse.Namespace, config: ProjectConfig) -> int:
    if parsed.path is not None:
        config = ProjectConfig(project_root=parsed.path.resolve())

    result = ProjectManager(config).init()
    for path in result.created:
        print(f"Created: {path}")
    for path in result.existed:
        print(f"Exists:  {path}")
    if not result.created:
        print("Project already initialized.")
    return 0


def _cmd_list(parsed: argparse.Namespace, project: ProjectManager) -> int:
    if parsed.entity == "people":
        names = [p.name for p in project.list_people()]
    elif parsed.entity == "companies":
        names = []
        for company in project.list_companies():
            jobs = ", ".join(company.jobs) if company.jobs else "no jobs"
            names.append(f"{company.name} ({jobs})")
    elif parsed.entity == "jobs":
        names = [j.name for j in project.list_jobs(parsed.company)]
    else:
        names = project.list_resumes(parsed.person)

    if not names:
        print(f"No {parsed.entity} found.")
    for name in names:
        print(name)
    return 0


def _cmd_add(parsed: argparse.Namespace, project: ProjectManager) -> int:
    if parsed.entity == "person":
        path = project.add_person(parsed.name).profile_path
    elif parsed.entity == "company":
        path = project.add_company(parsed.name).profile_path
    else:
        path = project.add_job(parsed.company, parsed.title).path
    print(f"Created: {path}")
    return 0


def _cmd_show(
    parsed: argparse.Namespace, project: ProjectManager, results: ResultManager
) -> int:
    if parsed.entity == "person":
        content = project.get_person_content(parsed.name)
    elif parsed.entity == "company":
        content = project.get_company_content(parsed.name)
    elif parsed.entity == "job":
        content = project.get_job_content(parsed.company, parsed.job)
    elif parsed.entity == "resume":
        content = project.get_resume_content(parsed.person, parsed.name)
    else:
        loaded = results.load_result(parsed.filename)
        if loaded is None:
            print(f"Error: Result \"{parsed.filename}\" not found", file=sys.stderr)
            return 1
        content = loaded.content

    print(content)
    return 0


def _cmd_update(parsed: argparse.Namespace, project: ProjectManager) -> int:
    content = _read_input(parsed.file)
    if parsed.entity == "person":
        project.update_person_content(parsed.name, content)
    elif parsed.entity == "company":
        project.update_company_content(parsed.name, content)
    elif parsed.entity == "job":
        project.update_job_content(parsed.company, parsed.job, content)
    else:
        project.update_resume_content(parsed.person, parsed.name, content)
    print(f"Updated {parsed.entity}.")
    return 0


def _cmd_results(parsed: argparse.Namespace, results: ResultManager) -> int:
    saved = results.list_results(
        type=parsed.type,
        person=parsed.person,
        company=parsed.company,
        job=parsed.job,
    )
    if not saved:
        print("No results found.")
        return 0

    for item in saved:
        meta = item.metadata
        context = "/".join(v for v in (meta.person, meta.company, meta.job) if v)
        print(f"{item.filename}\t{meta.type.value}\t{meta.timestamp}\t{context}")
    return 0


def _cmd_review(
    parsed: argparse.Namespace, config: ProjectConfig, service
) -> int:
    person = parsed.person or config.default_person
    if parsed.file is not None:
        resume = _read_input(parsed.file)
    else:
        resume = service.project.get_person_content(_require_person(person, config))

    outcome = asyncio.run(
        service.review(
            resume,
            person=person,
            company=parsed.company,
            job=parsed.job,
            save=parsed.save,
        )
    )

    print(outcome.markdown)
    if outcome.result_path is not None:
        print(f"\nSaved result: {outcome.result_path}")
    return 0


def _cmd_build(
    parsed: argparse.Namespace, config: ProjectConfig, service
) -> int:
    person = parsed.person or config.default_person
    if parsed.file is not None:
        personal_info = _read_input(parsed.file)
    else:
        personal_info = service.project.get_person_content(
            _require_person(person, config)
        )

    job_content = _read_input(parsed.job_file) if parsed.job_file else None

    outcome = asyncio.run(
        service.build(
            personal_info,
            person=person,
            company=parsed.company,
            job=parsed.job,
            job_content=job_content,
            save=parsed.save,
        )
    )

    if parsed.output is not None:
        parsed.output.parent.mkdir(parents=True, exist_ok=True)
        parsed.output.write_text(outcome.result.markdown, encoding="utf-8")
        print(f"Wrote: {parsed.output}")
    else:
        print(outcome.markdown)

    if outcome.resume_path is not None:
        print(f"Saved resume: {outcome.resume_path}")
    if outcome.result_path is not None:
        print(f"Saved result: {outcome.result_path}")
    return 0


def _cmd_import(parsed: argparse.Namespace, project: ProjectManager) -> int:
    from resume_reviewer.agents.importer import ImportAgent

    text = _read_import_file(parsed.file)
    agent = ImportAgent()

    if parsed.person:
        slug = slugify(parsed.person)
        if project.person_exists(slug):
            if parsed.merge:
                existing = project.get_person_content(slug)
                markdown = asyncio.run(agent.merge_profiles(existing, text))
            else:
                markdown = asyncio.run(agent.parse_resume(text))
        else:
            markdown = asyncio.run(agent.parse_resume(text))
            project.add_person(parsed.person)
        project.update_person_content(slug, markdown)
        print(f"Imported profile for person: {slug}")
        return 0

    if parsed.merge:
        raise ValueError("--merge only applies to --person imports")

    company_slug = slugify(parsed.company)
    if parsed.job:
        job_slug = slugify(parsed.job)
        markdown = asyncio.run(agent.process_job_description(text))
        if not project.company_exists(company_slug):
            project.add_company(parsed.company)
        if not project.job_exists(company_slug, job_slug):
            project.add_job(company_slug, parsed.job)
        project.update_job_content(company_slug, job_slug, markdown)
        print(f"Imported job: {company_slug}/{job_slug}")
        return 0

    markdown = asyncio.run(agent.process_company_info(text))
    if not project.company_exists(company_slug):
        project.add_company(parsed.company)
    project.update_company_content(company_slug, markdown)
    print(f"Imported company: {company_slug}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no command specified, show help
    if parsed.command is None:
        parser.print_help()
        return 0

    config = ConfigResolver(settings).resolve()
    logger.debug(f"Resume Reviewer v{__version__}: {parsed.command} in {config.project_root}")

    project = ProjectManager(config)
    results = ResultManager(config)

    try:
        if parsed.command == "init":
            return _cmd_init(parsed, config)
        if parsed.command == "list":
            return _cmd_list(parsed, project)
        if parsed.command == "add":
            return _cmd_add(parsed, project)
        if parsed.command == "show":
            return _cmd_show(parsed, project, results)
        if parsed.command == "update":
            return _cmd_update(parsed, project)
        if parsed.command == "results":
            return _cmd_results(parsed, results)
        if parsed.command == "import":
            return _cmd_import(parsed, project)

        from resume_reviewer.service import ReviewService

        service = ReviewService(project, results)
        if parsed.command == "review":
            return _cmd_review(parsed, config, service)
        if parsed.command == "build":
            return _cmd_build(parsed, config, service)

    except (ProjectError, LLMError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
