"""Terminal prompts used by the input collector.

The collector only talks to the small ``Prompter`` protocol so that tests
(or another front end) can supply answers without a terminal.
``RichPrompter`` implements it on top of ``rich.prompt``: invalid answers
raise ``InvalidResponse`` and rich asks the question again.
"""

from __future__ import annotations

from typing import Callable, Protocol

from rich.console import Console
from rich.prompt import InvalidResponse, Prompt, PromptBase

from sitegen.utils import console as default_console

# Returns True when the answer is acceptable, otherwise the message to show.
Validator = Callable[[object], "bool | str"]


class Prompter(Protocol):
    def ask_text(self, prompt: str, validate: Validator | None = None) -> str: ...

    def ask_choice(self, prompt: str, options: list[str]) -> str: ...

    def ask_multi_choice(
        self,
        prompt: str,
        options: list[str],
        validate: Validator | None = None,
        default: list[str] | None = None,
    ) -> list[str]: ...


def _check(validate: Validator | None, value: object) -> None:
    if validate is None:
        return
    outcome = validate(value)
    if outcome is not True:
        raise InvalidResponse(f"[prompt.invalid]{outcome}")


class _TextPrompt(Prompt):
    validate: Validator | None = None

    def process_response(self, value: str) -> str:
        answer = super().process_response(value).strip()
        _check(self.validate, answer)
        return answer


class _MultiChoicePrompt(PromptBase[list]):
    """Comma-separated option numbers; an empty answer selects the defaults."""

    def __init__(
        self,
        prompt: str,
        *,
        options: list[str],
        defaults: list[str] | None = None,
        validate: Validator | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.options = list(options)
        self.defaults = list(defaults or [])
        self.validate = validate

    def process_response(self, value: str) -> list[str]:
        if not value.strip():
            selected = list(self.defaults)
        else:
            selected = []
            for part in value.split(","):
                part = part.strip()
                if not part:
                    continue
                if not part.isdigit() or not 1 <= int(part) <= len(self.options):
                    raise InvalidResponse(
                        f"[prompt.invalid]Enter numbers between 1 and {len(self.options)}"
                    )
                option = self.options[int(part) - 1]
                if option not in selected:
                    selected.append(option)
        _check(self.validate, selected)
        return selected


class RichPrompter:
    """Interactive ``Prompter`` backed by ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_text(self, prompt: str, validate: Validator | None = None) -> str:
        question = _TextPrompt(prompt, console=self.console)
        question.validate = validate
        return question()

    def ask_choice(self, prompt: str, options: list[str]) -> str:
        self._print_options(prompt, options)
        numbers = [str(index) for index in range(1, len(options) + 1)]
        answer = Prompt.ask(
            "Choice", console=self.console, choices=numbers, default="1"
        )
        return options[int(answer) - 1]

    def ask_multi_choice(
        self,
        prompt: str,
        options: list[str],
        validate: Validator | None = None,
        default: list[str] | None = None,
    ) -> list[str]:
        self._print_options(prompt, options)
        defaults = [option for option in default or [] if option in options]
        hint = ", ".join(str(options.index(option) + 1) for option in defaults)
        label = "Choices (comma separated)"
        if hint:
            label += f" [dim]\\[default: {hint}][/dim]"
        question = _MultiChoicePrompt(
            label, options=options, defaults=defaults, validate=validate, console=self.console
        )
        return question()

    def _print_options(self, prompt: str, options: list[str]) -> None:
        self.console.print(f"[bold]{prompt}[/bold]")
        for index, option in enumerate(options, start=1):
            self.console.print(f"  {index}. {option}")
