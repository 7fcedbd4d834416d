"""Exception hierarchy shared by the generation steps and the pipeline."""

from __future__ import annotations


class SitegenError(Exception):
    """Base class for every error raised by the generator."""


class PipelineError(SitegenError):
    """Raised when a pipeline step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        self.message = message
        super().__init__(f"{step}: {message}")


class PreconditionError(PipelineError):
    """A step was invoked before the step that produces its input."""


class VersionControlError(PipelineError):
    """A git command that must succeed returned a non-zero status."""


class DocumentValidationError(PipelineError):
    """A generated document could not be parsed back."""


# Prerequisite messages, naming the step that has to run first.
CONFIG_MISSING = "Project configuration not found. Please run step 1 (collect input) first."
PROJECT_MISSING = "Project directory not found. Please run step 2 (base project) first."
