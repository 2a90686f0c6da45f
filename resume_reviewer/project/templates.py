"""Markdown scaffolds for new project entities."""

PERSON_PLACEHOLDER = "[Name]"
COMPANY_PLACEHOLDER = "[Company Name]"
JOB_PLACEHOLDER = "[Job Title]"

PERSON_TEMPLATE = """# [Name]
email@example.com | (555) 000-0000 | City, State
linkedin.com/in/profile | github.com/username

## Summary


## Experience

### Job Title @ Company (YYYY - Present)
Location

-
-
-

### Previous Title @ Company (YYYY - YYYY)
Location

-
-

## Education

### Degree - Major
**University** | YYYY

## Skills

### Technical
- **Languages**:
- **Frameworks**:
- **Tools**:

### Soft Skills
-

## Projects

### Project Name
**Technologies**:
-
"""

COMPANY_TEMPLATE = """# [Company Name]

## About
<!-- Industry, size, stage, mission -->


## Tech Stack
<!-- Known technologies, frameworks, tools -->


## Culture & Values
<!-- What they emphasize, work environment -->


## Interview Process
<!-- Known stages, question types -->


## Notes
<!-- Recent news, team info, anything relevant -->

"""

JOB_TEMPLATE = """# [Job Title]

## Overview
<!-- Role summary, team context -->


## Responsibilities
-
-
-

## Requirements
-
-
-

## Nice to Have
-
-

## Compensation
<!-- Salary range, equity, benefits if known -->


## Notes
<!-- Remote policy, team size, hiring manager, deadline -->

"""

# Files written to resume-data/templates/ by ProjectManager.init()
TEMPLATE_FILES = {
    "person.md": PERSON_TEMPLATE,
    "company.md": COMPANY_TEMPLATE,
    "job.md": JOB_TEMPLATE,
}


def fill_template(template: str, placeholder: str, value: str) -> str:
    """Substitute the first occurrence of ``placeholder`` with ``value``."""
    return template.replace(placeholder, value, 1)
