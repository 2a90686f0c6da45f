"""Resume Reviewer: LLM-assisted resume review and tailoring over a local project store."""

__version__ = "0.1.0"
