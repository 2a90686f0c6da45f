"""LLM agents for reviewing, building and importing resumes.

Public API:
- GeneralReviewAgent / JobFitAgent: Score a resume
- ResumeBuilderAgent: Generate a job-specific resume
- ImportAgent: Structure raw documents into markdown
- AgentLLM / LLMError: LiteLLM-backed client
"""

from resume_reviewer.agents.builder import ResumeBuilderAgent
from resume_reviewer.agents.config import AgentConfig, get_agent_config, reset_agent_config
from resume_reviewer.agents.importer import ImportAgent
from resume_reviewer.agents.llm import AgentLLM, LLMError
from resume_reviewer.agents.review import GeneralReviewAgent, JobFitAgent

__all__ = [
    "AgentConfig",
    "get_agent_config",
    "reset_agent_config",
    "AgentLLM",
    "LLMError",
    "GeneralReviewAgent",
    "JobFitAgent",
    "ResumeBuilderAgent",
    "ImportAgent",
]
