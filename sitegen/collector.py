"""Interactive collection of the project configuration (step 1)."""

from __future__ import annotations

from pathlib import Path

from sitegen.catalog import (
    ADDITIONAL_LANGUAGES,
    DEFAULT_LANGUAGE,
    PROJECT_TYPES,
    RESOURCE_TYPES,
    TAG_CMS,
    TAG_MULTILANGUAGE,
)
from sitegen.config import ProjectConfig, Settings
from sitegen.prompts import Prompter
from sitegen.utils import print_error, print_success


def validate_project_name(value: str, work_dir: Path) -> bool | str:
    """Return ``True`` for a usable project name, otherwise the reason it is not."""
    name = value.strip()
    if not name:
        return "Project name is required"
    if (Path(work_dir) / name).exists():
        return "Directory already exists. Please choose another name."
    return True


def validate_resources(selected: list[str]) -> bool | str:
    return True if selected else "Select at least one dynamic resource"


def collect_user_input(prompter: Prompter, settings: Settings) -> ProjectConfig:
    """Ask for the project choices, persist them and return the record.

    Follow-up questions depend on the chosen project type: CMS types ask for
    dynamic resources, multilanguage types for the additional languages
    (English is always first).
    """
    try:
        name = prompter.ask_text(
            "Project name",
            validate=lambda value: validate_project_name(str(value), settings.work_dir),
        )
        project_type = prompter.ask_choice("Select project type:", list(PROJECT_TYPES))
        tags = PROJECT_TYPES[project_type]

        data: dict = {"projectName": name.strip(), "projectType": list(tags)}
        if TAG_CMS in tags:
            data["dynamicResources"] = prompter.ask_multi_choice(
                "Select dynamic resources to include:",
                list(RESOURCE_TYPES),
                validate=validate_resources,
            )
        if TAG_MULTILANGUAGE in tags:
            languages = prompter.ask_multi_choice(
                "Select languages to include (English is default):",
                ADDITIONAL_LANGUAGES,
                default=["Spanish"],
            )
            data["languages"] = [DEFAULT_LANGUAGE, *languages]

        config = ProjectConfig.model_validate(data)
        config.save(settings.config_path)
    except Exception as exc:
        print_error(f"Error collecting user input: {exc}")
        raise

    print_success(f"Project configuration saved to {settings.config_path}")
    return config
