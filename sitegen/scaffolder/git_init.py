"""Git repository initialisation for the generated project.

All commands run with the project root as their working directory; the
generator's own working directory is never changed.
"""

from __future__ import annotations

from pathlib import Path

from sitegen.config import ProjectConfig
from sitegen.errors import VersionControlError
from sitegen.utils import print_info, print_success, print_warning, run_command

from .context import require_project_root


class GitInitializer:
    """Initialises a repository on a named branch and records an initial commit."""

    title = "Initialize git repository"

    def __init__(self, branch: str = "main", commit_message: str = "Initial commit") -> None:
        self.branch = branch
        self.commit_message = commit_message

    async def generate(self, config: ProjectConfig, work_dir: Path) -> Path:
        project_dir = require_project_root(config, work_dir, self.title)

        print_info("Initializing Git repository...")
        rc, _, _ = await run_command(["git", "init", "-b", self.branch], cwd=project_dir)
        if rc != 0:
            # git < 2.28 has no -b option
            await self._git("init", cwd=project_dir)
            rc, _, stderr = await run_command(
                ["git", "checkout", "-b", self.branch], cwd=project_dir
            )
            if rc != 0:
                print_warning(f"Using existing branch configuration ({stderr})")

        print_info("Adding files to Git...")
        await self._git("add", ".", cwd=project_dir)

        print_info("Creating initial commit...")
        await self._git("commit", "-m", self.commit_message, cwd=project_dir)

        print_success(f"Git repository initialized with branch '{self.branch}' and initial commit.")
        return project_dir

    async def _git(self, *args: str, cwd: Path) -> str:
        """Run a git command that must succeed.

        Raises:
            VersionControlError: On a non-zero exit status, with git's stderr.
        """
        cmd = ["git", *args]
        rc, stdout, stderr = await run_command(cmd, cwd=cwd)
        if rc != 0:
            raise VersionControlError(
                self.title,
                f"Git command failed (exit {rc}): {' '.join(cmd)}\n{stderr}",
            )
        return stdout
