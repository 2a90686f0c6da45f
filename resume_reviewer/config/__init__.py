"""Settings and project root resolution."""

from resume_reviewer.config.resolver import (
    CONFIG_FILENAME,
    ConfigResolver,
    ProjectConfig,
    ProjectPaths,
    get_project_paths,
    load_config,
    save_config,
)
from resume_reviewer.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "CONFIG_FILENAME",
    "ConfigResolver",
    "ProjectConfig",
    "ProjectPaths",
    "Settings",
    "get_project_paths",
    "get_settings",
    "load_config",
    "reset_settings",
    "save_config",
]
