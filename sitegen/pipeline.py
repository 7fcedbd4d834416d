"""Website generator pipeline orchestrator.

Runs the generation steps in order:

Step 1: input      -- Ask for the project choices and save project-config.json.
Step 2: base       -- Base Eleventy project (package.json, configs, layout, README).
Step 3: git        -- Initialise the repository and record the initial commit.
Step 4: pages      -- Header, footer and the Home/About/Services/Contact pages.
Step 5: i18n       -- Translations, locale filters, language switcher (multilanguage only).
Step 6: cms        -- Decap CMS admin, collections, sample content (CMS only).
Step 7: resources  -- Seed JSON data and the dynamicResources collection.
Step 8: deploy     -- Netlify deployment configuration.

Usage::

    sitegen                              # interactive run in the current directory
    sitegen --config project-config.json # non-interactive run
    sitegen --step cms                   # run one step against the saved configuration
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from rich.panel import Panel

from sitegen.collector import collect_user_input, validate_project_name
from sitegen.config import ProjectConfig, Settings
from sitegen.errors import CONFIG_MISSING, PipelineError, PreconditionError, SitegenError
from sitegen.prompts import Prompter, RichPrompter
from sitegen.scaffolder import (
    BaseProjectGenerator,
    CmsGenerator,
    DynamicResourceGenerator,
    GitInitializer,
    MultilanguageGenerator,
    NetlifyGenerator,
    StaticPagesGenerator,
    TemplateRenderer,
)
from sitegen.utils import (
    console,
    format_duration,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Step table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineStep:
    """One entry of the step table.

    ``predicate`` decides from the configuration whether the step applies;
    steps without one always run.
    """

    key: str
    title: str
    predicate: Callable[[ProjectConfig], bool] | None = None

    def is_active(self, config: ProjectConfig | None) -> bool:
        if self.predicate is None or config is None:
            return True
        return self.predicate(config)


STEPS: tuple[PipelineStep, ...] = (
    PipelineStep("input", "Collect user input"),
    PipelineStep("base", BaseProjectGenerator.title),
    PipelineStep("git", GitInitializer.title),
    PipelineStep("pages", StaticPagesGenerator.title),
    PipelineStep("i18n", MultilanguageGenerator.title, lambda config: config.is_multilanguage),
    PipelineStep("cms", CmsGenerator.title, lambda config: config.is_cms),
    PipelineStep("resources", DynamicResourceGenerator.title),
    PipelineStep("deploy", NetlifyGenerator.title),
)

STEP_KEYS: tuple[str, ...] = tuple(step.key for step in STEPS)


def report_stage(number: int, step: PipelineStep) -> None:
    """Announce the start of a step."""
    print_stage_header(number, step.title)


def load_project_config(settings: Settings) -> ProjectConfig:
    """Load the configuration saved by step 1.

    Raises:
        PreconditionError: If the configuration file does not exist.
    """
    if not settings.config_path.exists():
        raise PreconditionError(STEPS[0].title, CONFIG_MISSING)
    return ProjectConfig.load(settings.config_path)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives the generation steps strictly in sequence.

    The first failing step stops the run; files written by earlier steps are
    left in place.

    Attributes:
        settings: Tool settings (working directory, git options).
        config: The project configuration once step 1 ran or one was given.
        state: Completed, skipped and failed step keys plus per-step timings.
    """

    def __init__(
        self,
        settings: Settings,
        prompter: Prompter | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.settings = settings
        self.prompter = prompter or RichPrompter()
        renderer = renderer or TemplateRenderer()
        self.generators: dict[str, Any] = {
            "base": BaseProjectGenerator(renderer),
            "git": GitInitializer(settings.git_branch, settings.commit_message),
            "pages": StaticPagesGenerator(renderer),
            "i18n": MultilanguageGenerator(renderer),
            "cms": CmsGenerator(renderer, branch=settings.git_branch),
            "resources": DynamicResourceGenerator(renderer),
            "deploy": NetlifyGenerator(renderer),
        }
        self.config: ProjectConfig | None = None
        self.state: dict[str, Any] = {
            "steps_completed": [],
            "steps_skipped": [],
            "steps_failed": [],
            "timings": {},
            "success": False,
        }

    async def run(self, config: ProjectConfig | None = None) -> dict[str, Any]:
        """Execute every applicable step.

        Args:
            config: A preloaded configuration.  When given, input collection
                is skipped.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean.
        """
        pipeline_start = time.monotonic()
        self.config = config
        all_success = True

        for number, step in enumerate(STEPS, start=1):
            if step.key == "input" and self.config is not None:
                self.state["steps_skipped"].append(step.key)
                continue
            if not step.is_active(self.config):
                print_warning(f"Step {number} ({step.title}) does not apply to this project -- skipping.")
                self.state["steps_skipped"].append(step.key)
                continue

            report_stage(number, step)
            step_start = time.monotonic()
            try:
                await self.execute(step)

                elapsed = time.monotonic() - step_start
                self.state["timings"][step.key] = elapsed
                self.state["steps_completed"].append(step.key)
                print_success(f"Step {number} ({step.title}) completed in {format_duration(elapsed)}")

            except PipelineError as exc:
                elapsed = time.monotonic() - step_start
                all_success = False
                self.state["steps_failed"].append(step.key)
                self.state[f"{step.key}_error"] = str(exc)
                print_error(
                    f"Step {number} ({step.title}) FAILED after {format_duration(elapsed)}: {exc.message}"
                )
                break

            except Exception as exc:
                elapsed = time.monotonic() - step_start
                all_success = False
                self.state["steps_failed"].append(step.key)
                tb = traceback.format_exc()
                self.state[f"{step.key}_error"] = tb
                print_error(f"Step {number} ({step.title}) FAILED after {format_duration(elapsed)}: {exc}")
                console.print(f"[dim]{tb}[/dim]")
                break

        total_elapsed = time.monotonic() - pipeline_start
        self.state["success"] = all_success
        self.state["total_duration"] = format_duration(total_elapsed)
        self._print_final_summary(total_elapsed)
        return self.state

    async def execute(self, step: PipelineStep) -> Path | ProjectConfig | None:
        """Run a single step against the current configuration."""
        if step.key == "input":
            self.config = collect_user_input(self.prompter, self.settings)
            return self.config
        if self.config is None:
            self.config = load_project_config(self.settings)
        return await self.generators[step.key].generate(self.config, self.settings.work_dir)

    def next_commands(self) -> list[str]:
        """Commands the user runs next in the generated project."""
        if self.config is None:
            return []
        commands = [f"cd {self.config.project_name}", "npm install", "npm start"]
        if self.config.is_cms:
            commands.append("npm run dev:cms   # then open http://localhost:8080/admin/")
        return commands

    def _print_final_summary(self, total_elapsed: float) -> None:
        """Print the final pipeline summary panel."""
        completed = self.state["steps_completed"]
        skipped = self.state["steps_skipped"]
        failed = self.state["steps_failed"]

        if self.state["success"]:
            border_style = "bold green"
            status_text = "[bold green]WEBSITE GENERATED[/bold green]"
        else:
            border_style = "bold red"
            status_text = "[bold red]GENERATION FAILED[/bold red]"

        detail_lines = [
            status_text,
            "",
            f"Duration  : {format_duration(total_elapsed)}",
            f"Completed : {', '.join(completed) or 'none'}",
        ]
        if skipped:
            detail_lines.append(f"Skipped   : {', '.join(skipped)}")
        if failed:
            detail_lines.append(f"Failed    : {', '.join(failed)}")
        if self.config is not None:
            detail_lines.extend([
                "",
                f"Project   : {self.settings.project_path(self.config.project_name)}",
                f"Config    : {self.settings.config_path}",
            ])
        if self.state["success"]:
            detail_lines.extend(["", "Next steps:"])
            detail_lines.extend(f"  {command}" for command in self.next_commands())

        if self.state["timings"]:
            print_summary_table(
                {key: format_duration(value) for key, value in self.state["timings"].items()},
                title="Step timings",
            )
        console.print()
        console.print(
            Panel(
                "\n".join(detail_lines),
                title="[bold]11ty Website Generator[/bold]",
                border_style=border_style,
            )
        )


async def run_step(
    key: str, settings: Settings, prompter: Prompter | None = None
) -> Path | ProjectConfig | None:
    """Run one step on its own, loading the saved configuration first.

    Raises:
        PreconditionError: If the configuration (or, for later steps, the
            project directory) is missing.
    """
    step = next((step for step in STEPS if step.key == key), None)
    if step is None:
        raise ValueError(f"Unknown step: {key}")
    pipeline = Pipeline(settings, prompter)
    if key != "input":
        pipeline.config = load_project_config(settings)
    return await pipeline.execute(step)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``sitegen``."""
    parser = argparse.ArgumentParser(
        prog="sitegen",
        description="11ty Website Generator -- scaffold an Eleventy site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  sitegen\n"
            "  sitegen --work-dir ./sites\n"
            "  sitegen --config project-config.json\n"
            "  sitegen --step cms\n"
        ),
    )
    parser.add_argument(
        "--work-dir", "-w",
        default=None,
        help="Directory in which the project is created (default: current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Run non-interactively from an existing configuration file",
    )
    parser.add_argument(
        "--step",
        choices=STEP_KEYS,
        default=None,
        help="Run a single step against the saved configuration",
    )
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.work_dir:
        settings = settings.model_copy(update={"work_dir": Path(args.work_dir)})

    if args.step:
        try:
            asyncio.run(run_step(args.step, settings))
        except SitegenError as exc:
            print_error(str(exc))
            sys.exit(1)
        except (OSError, ValueError) as exc:
            print_error(f"Step '{args.step}' failed: {exc}")
            sys.exit(1)
        return

    config = None
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print_error(f"Configuration file not found: {config_path}")
            sys.exit(1)
        try:
            config = ProjectConfig.load(config_path)
        except ValueError as exc:
            print_error(f"Invalid configuration file {config_path}: {exc}")
            sys.exit(1)
        outcome = validate_project_name(config.project_name, settings.work_dir)
        if outcome is not True:
            print_error(f"{outcome} ({settings.project_path(config.project_name)})")
            sys.exit(1)
        if config_path.resolve() != settings.config_path.resolve():
            config.save(settings.config_path)

    pipeline = Pipeline(settings)
    result = asyncio.run(pipeline.run(config=config))
    if not result["success"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
