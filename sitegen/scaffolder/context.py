"""Template context shared by the generation steps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sitegen.catalog import ResourceType
from sitegen.config import ProjectConfig
from sitegen.errors import PROJECT_MISSING, PreconditionError

SITE_DESCRIPTION = "Website created with 11ty Website Generator"


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 context for templates that depend on the configuration."""
    locales = config.locales
    return {
        "project_name": config.project_name,
        "site_description": SITE_DESCRIPTION,
        "is_multilanguage": config.is_multilanguage,
        "is_cms": config.is_cms,
        "locales": locales,
        "default_locale": locales[0],
        "additional_locales": config.additional_locales,
        "resources": [enrich_resource(resource) for resource in config.resource_types],
    }


def enrich_resource(resource: ResourceType) -> dict[str, Any]:
    """Flatten a resource type into template-friendly values.

    Field samples may reference ``{label}`` and ``{label_lower}``; they are
    expanded here so templates receive final values.
    """
    fields = []
    body_sample = ""
    for field in resource.fields:
        sample = field.sample
        if isinstance(sample, str):
            sample = sample.format(
                label=resource.label_singular,
                label_lower=resource.label_singular.lower(),
            )
        if field.name == "body":
            body_sample = sample or ""
            continue
        fields.append({**field.model_dump(), "sample": sample})

    return {
        "name": resource.name,
        "collection": resource.collection,
        "label": resource.label,
        "label_singular": resource.label_singular,
        "folder": resource.folder,
        "slug": resource.slug,
        "layout": resource.layout,
        "sample_slug": resource.sample_slug,
        "fields": fields,
        "has_body": any(field.name == "body" for field in resource.fields),
        "body_sample": body_sample,
    }


def require_project_root(config: ProjectConfig, work_dir: Path, step: str) -> Path:
    """Return the generated project root, which must already exist.

    Raises:
        PreconditionError: If the base project step has not run yet.
    """
    root = Path(work_dir) / config.project_name
    if not root.is_dir():
        raise PreconditionError(step, PROJECT_MISSING)
    return root
