"""YAML validation of generated documents.

Usable as a library (``load_yaml_file``, ``validate_yaml_file``) and as the
``sitegen-validate`` command::

    sitegen-validate my-site/src/admin/config.yml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml

from sitegen.errors import DocumentValidationError
from sitegen.utils import print_error, print_success


def load_yaml_file(path: str | Path, step: str = "Validate YAML") -> Any:
    """Parse a YAML file and return its data.

    Raises:
        DocumentValidationError: If the file is not valid YAML.  The message
            carries the 1-based line and column when the parser reports them.
    """
    file_path = Path(path)
    try:
        return yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        message = f"{file_path} has YAML syntax errors: {exc}"
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            message += f" (line {mark.line + 1}, column {mark.column + 1})"
        raise DocumentValidationError(step, message) from exc


def validate_yaml_file(path: str | Path) -> bool:
    """Report whether *path* holds valid YAML."""
    try:
        load_yaml_file(path)
    except DocumentValidationError as exc:
        print_error(exc.message)
        return False
    except OSError as exc:
        print_error(f"Cannot read {path}: {exc}")
        return False
    print_success(f"{path} is valid YAML")
    return True


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="sitegen-validate",
        description="Check that generated YAML documents parse.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="YAML files to check")
    args = parser.parse_args(argv)

    results = [validate_yaml_file(path) for path in args.files]
    if not all(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
