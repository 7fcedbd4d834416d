"""Configuration models for the website generator.

Two Pydantic v2 models live here:

* ``ProjectConfig`` -- the configuration record produced by the input
  collector and threaded through every generation step.  It is frozen once
  built and round-trips through ``project-config.json`` using the camelCase
  keys of the established file format.
* ``Settings`` -- tool settings (working directory, configuration file name,
  git options) that can be overridden from the environment.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sitegen.catalog import (
    TAG_CMS,
    TAG_MULTILANGUAGE,
    Locale,
    ResourceType,
    resolve_locales,
    resolve_resource_types,
    tags_for_project_type,
)

CONFIG_FILENAME = "project-config.json"


class ProjectConfig(BaseModel):
    """The user's choices, as collected by step 1."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    project_name: str = Field(..., alias="projectName", min_length=1)
    project_type: list[str] = Field(default_factory=list, alias="projectType")
    languages: list[str] | None = Field(default=None)
    dynamic_resources: list[str] | None = Field(default=None, alias="dynamicResources")

    @field_validator("project_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name is required")
        return value

    @field_validator("project_type", mode="before")
    @classmethod
    def _decode_project_type(cls, value: Any) -> Any:
        # Older configuration files stored the chosen label verbatim.
        if isinstance(value, str):
            return tags_for_project_type(value)
        return value

    @field_validator("dynamic_resources")
    @classmethod
    def _non_empty_resources(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and len(value) == 0:
            raise ValueError("Select at least one dynamic resource")
        return value

    @model_validator(mode="after")
    def _cms_needs_resources(self) -> "ProjectConfig":
        # Unknown resource names are dropped, so check what actually resolves.
        if self.is_cms and not self.resource_types:
            raise ValueError("Select at least one dynamic resource")
        return self

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def has_tag(self, tag: str) -> bool:
        return tag in self.project_type

    @property
    def is_multilanguage(self) -> bool:
        return self.has_tag(TAG_MULTILANGUAGE)

    @property
    def is_cms(self) -> bool:
        return self.has_tag(TAG_CMS)

    @property
    def locales(self) -> list[Locale]:
        """Locales of the site; only the default one outside multilanguage mode."""
        if not self.is_multilanguage:
            return resolve_locales(None)
        return resolve_locales(self.languages)

    @property
    def additional_locales(self) -> list[Locale]:
        return [locale for locale in self.locales if not locale.is_default]

    @property
    def resource_types(self) -> list[ResourceType]:
        if not self.is_cms:
            return []
        return resolve_resource_types(self.dynamic_resources)

    @property
    def package_name(self) -> str:
        """npm package name derived from the project name."""
        return re.sub(r"\s+", "-", self.project_name.lower())

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    def save(self, path: Path) -> Path:
        """Persist the record as JSON and return the written path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_json() + "\n", encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ProjectConfig":
        """Load a previously saved record from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)


class Settings(BaseModel):
    """Tool settings.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to the pipeline.
    """

    work_dir: Path = Field(default_factory=Path.cwd)
    config_filename: str = Field(default=CONFIG_FILENAME)
    git_branch: str = Field(default="main", min_length=1)
    commit_message: str = Field(default="Initial commit", min_length=1)

    @property
    def config_path(self) -> Path:
        """Where the configuration record is persisted."""
        return self.work_dir / self.config_filename

    def project_path(self, project_name: str) -> Path:
        """Root of the generated project for *project_name*."""
        return self.work_dir / project_name

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SITEGEN_WORK_DIR, SITEGEN_CONFIG_FILE, SITEGEN_GIT_BRANCH,
            SITEGEN_COMMIT_MESSAGE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SITEGEN_WORK_DIR"):
            kwargs["work_dir"] = Path(os.environ["SITEGEN_WORK_DIR"])
        if os.environ.get("SITEGEN_CONFIG_FILE"):
            kwargs["config_filename"] = os.environ["SITEGEN_CONFIG_FILE"]
        if os.environ.get("SITEGEN_GIT_BRANCH"):
            kwargs["git_branch"] = os.environ["SITEGEN_GIT_BRANCH"]
        if os.environ.get("SITEGEN_COMMIT_MESSAGE"):
            kwargs["commit_message"] = os.environ["SITEGEN_COMMIT_MESSAGE"]
        return cls(**kwargs)
