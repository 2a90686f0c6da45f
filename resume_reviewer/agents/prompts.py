"""Prompt text for the review, builder and import agents."""

from __future__ import annotations

JSON_ONLY_RULE = "Output MUST be valid JSON only (no markdown), matching the required schema."

BULLET_RULES = """- CRITICAL: Use ONLY hyphen "-" for bullet points, NOT bullet symbols
- CRITICAL: Each bullet point MUST start on its own line with "- " (hyphen + space)"""

GENERAL_REVIEW_SYSTEM_PROMPT = f"""You are an expert resume reviewer with years of experience in HR and recruiting across multiple industries. Review resumes for best practices and give constructive feedback.

Focus on:
1. Formatting & Structure: clean layout, consistent formatting, appropriate sections, readability
2. Content Quality: action verbs, quantifiable achievements, clarity, relevance
3. Language & Grammar: typos, grammatical errors, professional tone
4. Completeness: essential sections present (contact, experience, education, skills)
5. Impact: whether achievements are compelling and well presented

Respond with a JSON object in this exact format:
{{
  "score": <number 1-100>,
  "summary": "<brief overall assessment>",
  "strengths": ["<strength>", ...],
  "improvements": ["<specific suggestion>", ...],
  "categories": [
    {{"name": "Formatting & Structure", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Content Quality", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Language & Grammar", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Completeness", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Impact", "score": <1-100>, "feedback": "<specific feedback>"}}
  ]
}}

Be specific and actionable. Cite examples from the resume when possible.
{JSON_ONLY_RULE}
"""

JOB_FIT_SYSTEM_PROMPT = f"""You are an expert resume reviewer and hiring consultant. Analyze how well a resume matches the given company and/or job context and give detailed feedback on fit and improvements.

Analyze:
1. Skills Match: technical and soft skills alignment with requirements
2. Experience Relevance: how well past experience relates to the role
3. Keywords: important terms from the job description present or missing
4. Qualifications: required vs preferred qualifications
5. Culture Fit Indicators: values, work style and industry alignment

Respond with a JSON object in this exact format:
{{
  "score": <number 1-100>,
  "fitRating": "<excellent|good|moderate|poor>",
  "summary": "<brief overall assessment of fit>",
  "strengths": ["<relevant strength>", ...],
  "improvements": ["<specific suggestion>", ...],
  "missingKeywords": ["<keyword>", ...],
  "transferableSkills": ["<skill that could apply>", ...],
  "targetedSuggestions": ["<job-specific improvement>", ...],
  "categories": [
    {{"name": "Skills Match", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Experience Relevance", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Keywords Optimization", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Qualifications Match", "score": <1-100>, "feedback": "<specific feedback>"}},
    {{"name": "Overall Positioning", "score": <1-100>, "feedback": "<specific feedback>"}}
  ]
}}

Fit rating guidelines:
- excellent: 85-100, strong match on most requirements
- good: 70-84, solid match with minor gaps
- moderate: 50-69, some relevant experience but notable gaps
- poor: below 50, significant mismatch

Be specific about what is missing and how to address it.
{JSON_ONLY_RULE}
"""

BUILDER_SYSTEM_PROMPT = f"""You are an expert resume writer. Given a comprehensive record of a person's experience, skills and achievements, create a focused resume optimized for a specific job.

Your approach:
1. Select the most relevant roles and achievements for this job
2. Adapt bullet language to the job description's keywords and terminology
3. Identify and emphasize transferable skills
4. Order sections and items by relevance to the target job
5. Only include truthful information from the source document

The resume markdown must:
- Lead with the most relevant qualifications
- Use keywords from the job description naturally
- Quantify achievements where possible
- Be concise (1-2 pages of content)
{BULLET_RULES}

Respond with a JSON object in this exact format:
{{
  "markdown": "<complete resume in markdown>",
  "summary": "<brief explanation of tailoring decisions>",
  "emphasizedSkills": ["<skill>", ...],
  "selectedExperiences": ["<role or project>", ...]
}}

{JSON_ONLY_RULE}
"""

PARSE_RESUME_SYSTEM_PROMPT = """You are a resume parsing assistant. Turn raw resume text into clean, organized markdown. The result is an overview of the person rather than a resume: prioritize completeness, accuracy and readability over brevity. It will be used to build tailored resumes."""

MERGE_PROFILES_SYSTEM_PROMPT = """You are a resume merging assistant. Combine information from multiple sources into a single comprehensive profile without duplication."""

JOB_DESCRIPTION_SYSTEM_PROMPT = """You are a job description structuring assistant. Organize raw job posting text into clear, scannable markdown without changing its content."""

COMPANY_INFO_SYSTEM_PROMPT = """You are a company profile structuring assistant. Organize raw company information into clear markdown that is useful for resume tailoring, without changing its content."""

PROFILE_STRUCTURE = """# [Full Name]
email@example.com | (phone) | City, State
linkedin.com/in/profile | github.com/username

## Summary

## Experience

### Job Title
Company: [Company Name]
Dates: [YYYY - YYYY]
Location: [City, State]

- [Achievement with quantifiable results if possible]

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
-"""


def build_general_review_prompt(resume: str) -> str:
    """Build the user prompt for a general review."""
    return "\n".join(
        [
            "Review the following resume and provide your assessment:",
            "",
            "---",
            resume,
            "---",
            "",
            "Respond with the JSON format specified in your instructions.",
        ]
    )


def build_job_fit_prompt(resume: str, job_context: str) -> str:
    """Build the user prompt for a job-fit review."""
    return "\n".join(
        [
            "Analyze how well this resume matches the following context.",
            "",
            job_context,
            "",
            "## Resume:",
            resume,
            "",
            "---",
            "",
            "Respond with the JSON format specified in your instructions.",
        ]
    )


def build_builder_prompt(personal_info: str, job_context: str) -> str:
    """Build the user prompt for tailored resume generation."""
    return "\n".join(
        [
            "Create a tailored resume from the following personal information, "
            "optimized for the target job.",
            "",
            "## Target Job:",
            job_context,
            "",
            "## Personal Information (comprehensive):",
            personal_info,
            "",
            "---",
            "",
            "Select and tailor the most relevant information. "
            "Respond with the JSON format specified in your instructions.",
        ]
    )


def build_parse_resume_prompt(resume_text: str) -> str:
    """Build the user prompt that structures raw resume text."""
    return "\n".join(
        [
            "Parse this resume. Extract all relevant information and organize it clearly.",
            "",
            "RESUME TEXT:",
            resume_text,
            "",
            "Follow this general structure, adjusting it if the person has extra information:",
            "",
            PROFILE_STRUCTURE,
            "",
            "Rules:",
            "- Use the person's name in the header",
            "- Order work experience most recent first",
            "- Preserve specific achievements and metrics",
            "- Include all technical skills mentioned",
            "- Keep empty section headers when the resume has no content for them",
            BULLET_RULES,
            "",
            "Return ONLY the markdown content, no explanations.",
        ]
    )


def build_merge_profiles_prompt(existing_profile: str, new_resume: str) -> str:
    """Build the user prompt that merges a new resume into a profile."""
    return "\n".join(
        [
            "Merge these two profiles into a single comprehensive person.md file.",
            "",
            "EXISTING PROFILE:",
            existing_profile,
            "",
            "NEW RESUME:",
            new_resume,
            "",
            "Rules:",
            "- Add new experiences, skills and projects missing from the existing profile",
            "- Deduplicate similar entries, keeping the more detailed information",
            "- Prefer the NEW resume when information conflicts",
            "- Keep experiences most recent first",
            "- Keep the markdown structure of the existing profile",
            BULLET_RULES,
            "",
            "Return ONLY the merged markdown content, no explanations.",
        ]
    )


def build_job_description_prompt(jd_text: str) -> str:
    """Build the user prompt that structures a raw job description."""
    return "\n".join(
        [
            "Structure this job description into well-organized markdown.",
            "",
            "JOB DESCRIPTION TEXT:",
            jd_text,
            "",
            "Use these sections, leaving a header empty when there is no content:",
            "# [Job Title]",
            "## About the company",
            "## Role Overview",
            "## Responsibilities",
            "## Basic Qualifications",
            "## Preferred Qualifications",
            "## Compensation & Benefits",
            "## Additional Details",
            "",
            "Rules:",
            "- Separate must-have requirements from nice-to-have",
            "- Keep all specific technologies, tools and years of experience",
            "- Keep the tone and language of the original",
            BULLET_RULES,
            "",
            "Return ONLY the markdown content, no explanations.",
        ]
    )


def build_company_info_prompt(company_text: str) -> str:
    """Build the user prompt that structures raw company information."""
    return "\n".join(
        [
            "Structure this company information into well-organized markdown.",
            "",
            "COMPANY INFORMATION:",
            company_text,
            "",
            "Use these sections, leaving a header empty when there is no content:",
            "# [Company Name]",
            "## About",
            "## Tech Stack",
            "## Culture & Values",
            "## Interview Process",
            "## Notes",
            "",
            BULLET_RULES,
            "",
            "Return ONLY the markdown content, no explanations.",
        ]
    )
