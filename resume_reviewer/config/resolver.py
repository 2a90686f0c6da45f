"""Project root resolution and the fixed project directory layout.

Resolution order (first match wins):

1. ``RESUME_REVIEWER_PROJECT_ROOT`` (via :class:`Settings`)
2. The nearest ``resume-reviewer.config.json`` walking up from the working
   directory
3. A built-in default root
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from resume_reviewer.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "resume-reviewer.config.json"
DATA_DIRNAME = "resume-data"


class ProjectConfig(BaseModel):
    """Resolved project configuration.

    Serialized with camelCase keys (``projectRoot``, ``defaultPerson``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_root: Path
    default_person: str | None = None


@dataclass(frozen=True)
class ProjectPaths:
    """Fixed directory layout under a project root."""

    data: Path
    people: Path
    companies: Path
    results: Path
    templates: Path


def get_project_paths(config: ProjectConfig) -> ProjectPaths:
    """Derive the data directory layout from a config. Performs no I/O."""
    data = Path(config.project_root) / DATA_DIRNAME
    return ProjectPaths(
        data=data,
        people=data / "people",
        companies=data / "companies",
        results=data / "results",
        templates=data / "templates",
    )


class ConfigResolver:
    """Resolves the project root once per run.

    The working directory and default root are injected rather than read
    from process state on every call, so a resolver can be pointed at any
    directory tree.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        cwd: Path | str | None = None,
        default_root: Path | str | None = None,
    ):
        """Initialize the resolver.

        Args:
            settings: Optional Settings. Uses global settings if not provided.
            cwd: Directory the config file search starts from.
                Defaults to the process working directory.
            default_root: Root used when neither the environment nor a
                config file names one. Defaults to ``cwd``.
        """
        self.settings = settings or get_settings()
        self.cwd = Path(cwd).resolve() if cwd is not None else Path.cwd()
        self.default_root = (
            Path(default_root).resolve() if default_root is not None else self.cwd
        )

    def resolve(self) -> ProjectConfig:
        """Resolve the project configuration."""
        if self.settings.project_root is not None:
            root = (self.cwd / self.settings.project_root).resolve()
            logger.debug(f"Project root from environment: {root}")
            return ProjectConfig(
                project_root=root,
                default_person=self.settings.default_person,
            )

        config_path = self.find_config_file()
        if config_path is not None:
            config = self._load_config_file(config_path)
            if config is not None:
                logger.debug(f"Project root from {config_path}: {config.project_root}")
                return config

        logger.debug(f"Using default project root: {self.default_root}")
        return ProjectConfig(project_root=self.default_root)

    def find_config_file(self) -> Path | None:
        """Find the nearest config file from ``cwd`` upward."""
        for directory in (self.cwd, *self.cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return candidate
        return None

    def _load_config_file(self, path: Path) -> ProjectConfig | None:
        """Parse a config file, returning None if it is unusable."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {path}: expected a JSON object")
            return None

        base = path.parent
        root = data.get("projectRoot")
        if root is not None and not isinstance(root, str):
            logger.warning(f"Ignoring config file {path}: projectRoot must be a string")
            return None

        default_person = data.get("defaultPerson")
        return ProjectConfig(
            project_root=(base / root).resolve() if root else base.resolve(),
            default_person=default_person if isinstance(default_person, str) else None,
        )


def load_config(cwd: Path | str | None = None) -> ProjectConfig:
    """Resolve the project configuration with global settings."""
    return ConfigResolver(cwd=cwd).resolve()


def save_config(config: ProjectConfig, target_dir: Path | str | None = None) -> Path:
    """Write a config file into ``target_dir`` (default: working directory).

    Returns:
        Path of the written config file.
    """
    directory = Path(target_dir) if target_dir is not None else Path.cwd()
    directory.mkdir(parents=True, exist_ok=True)
    config_path = directory / CONFIG_FILENAME

    payload = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return config_path
