"""Interactive question/answer providers.

The generator only ever asks two kinds of question: pick one of a fixed list of
options, or confirm yes/no. ``Prompter`` is the seam the rest of the package
talks to; ``RichPrompter`` implements it on top of ``rich.prompt``.
"""

import string
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from encore_init.utils import console as default_console

__all__ = ("Choice", "Prompter", "RichPrompter")

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A labeled option of a single-choice question.

    Attributes:
        name: Label displayed to the user.
        value: Token returned when the option is picked.
    """

    name: str
    value: T


class Prompter(Protocol):
    """Asks the user questions."""

    def select(self, message: str, choices: "Sequence[Choice[T]]") -> T:
        """Ask a single-choice question and return the value of the picked option."""
        ...

    def confirm(self, message: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...


class RichPrompter:
    """Terminal prompts rendered with rich.

    Options are listed with their labels and picked by their position letter
    (``a``, ``b``, ...). Input outside the option set is rejected and re-asked by
    rich, so callers always receive one of the declared values.
    """

    def __init__(self, console: "Console | None" = None) -> None:
        self.console = console or default_console

    def select(self, message: str, choices: "Sequence[Choice[T]]") -> T:
        if not choices:
            msg = "A single-choice question needs at least one option"
            raise ValueError(msg)
        keys = list(string.ascii_lowercase[: len(choices)])
        self.console.print(f"[bold]{message}[/]")
        for choice in choices:
            self.console.print(f"  {choice.name}")
        answer = Prompt.ask(
            "Your choice",
            console=self.console,
            choices=keys,
            default=keys[0],
            case_sensitive=False,
        )
        return choices[keys.index(answer.lower())].value

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return Confirm.ask(message, console=self.console, default=default)
