from collections.abc import Callable, Generator, Sequence
from pathlib import Path
from typing import Any, TypeVar

import pytest

from encore_init.prompts import Choice
from encore_init.writer import FileWriter

T = TypeVar("T")

# Environment variables that may affect test behavior - clear before each test
_ENCORE_ENV_VARS = ["ENCORE_INIT_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_encore_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear generator environment variables before each test for isolation."""
    for var in _ENCORE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class ScriptedPrompter:
    """Prompter that answers from a queue and records every question.

    An exception in the queue (or passed as ``confirm``) is raised instead of
    answering, like a terminal that is interrupted or closed.
    """

    def __init__(
        self, answers: "Sequence[Any] | None" = None, *, confirm: "bool | BaseException" = False
    ) -> None:
        self.answers = list(answers or [])
        self.confirm_answer = confirm
        self.questions: list[str] = []
        self.confirmations: list[tuple[str, bool]] = []

    def select(self, message: str, choices: "Sequence[Choice[T]]") -> T:
        self.questions.append(message)
        if not self.answers:
            msg = f"No scripted answer for {message!r}"
            raise AssertionError(msg)
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        values = [choice.value for choice in choices]
        assert answer in values, f"{answer!r} is not one of {values!r}"
        return answer

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self.confirmations.append((message, default))
        if isinstance(self.confirm_answer, BaseException):
            raise self.confirm_answer
        return self.confirm_answer


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def writer(tmp_path: Path, prompter: ScriptedPrompter) -> FileWriter:
    return FileWriter(tmp_path, prompter)


@pytest.fixture
def package_json(tmp_path: Path) -> Path:
    path = tmp_path / "package.json"
    path.write_text('{\n  "name": "my-app",\n  "version": "1.0.0",\n  "private": true\n}\n', encoding="utf-8")
    return path


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    return ScriptedPrompter
