import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from encore_init.commands import run
from encore_init.config import AppType, CssType, JsType, LoggingConfig, RuntimeConfig
from encore_init.exceptions import UnknownCommandError


def test_init_multi_page_plain_css(
    tmp_path: Path, package_json: Path, make_prompter: Callable[..., Any], capsys: pytest.CaptureFixture[str]
) -> None:
    prompter = make_prompter([AppType.MULTI, CssType.CSS])

    assert run(RuntimeConfig(command="init", root_dir=tmp_path), prompter) is True

    webpack = (tmp_path / "webpack.config.js").read_text(encoding="utf-8")
    for directive in (".enableReactPreset()", ".enableVueLoader()", ".enableSassLoader()", ".enableLessLoader()"):
        assert directive not in webpack
    scripts = json.loads(package_json.read_text(encoding="utf-8"))["scripts"]
    assert set(scripts) == {"encore:dev", "encore:watch", "encore:production"}
    assert "What type of JavaScript app do you want?" not in prompter.questions
    assert "Success!" in capsys.readouterr().out


def test_init_single_page_vue_less(tmp_path: Path, package_json: Path, make_prompter: Callable[..., Any]) -> None:
    prompter = make_prompter([AppType.SPA, JsType.VUE, CssType.LESS])

    assert run(RuntimeConfig(command="init", root_dir=tmp_path), prompter) is True

    webpack = (tmp_path / "webpack.config.js").read_text(encoding="utf-8")
    assert ".enableVueLoader()" in webpack
    assert ".enableLessLoader()" in webpack


def test_init_reports_failure(tmp_path: Path, make_prompter: Callable[..., Any]) -> None:
    prompter = make_prompter([AppType.MULTI, CssType.SASS])
    assert run(RuntimeConfig(command="init", root_dir=tmp_path), prompter) is False


@pytest.mark.parametrize("interruption", [KeyboardInterrupt, EOFError])
def test_init_cancelled_writes_nothing(
    tmp_path: Path, package_json: Path, make_prompter: Callable[..., Any], interruption: type[BaseException]
) -> None:
    prompter = make_prompter([AppType.SPA, interruption()])

    with pytest.raises(interruption):
        run(RuntimeConfig(command="init", root_dir=tmp_path), prompter)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["package.json"]


def test_unknown_command(tmp_path: Path, make_prompter: Callable[..., Any]) -> None:
    prompter = make_prompter()

    with pytest.raises(UnknownCommandError, match="build-something-else") as exc_info:
        run(RuntimeConfig(command="build-something-else", root_dir=tmp_path), prompter)

    assert exc_info.value.command == "build-something-else"
    assert prompter.questions == []
    assert list(tmp_path.iterdir()) == []


def test_run_uses_rich_prompter_by_default(tmp_path: Path) -> None:
    with patch("encore_init.commands.init", return_value=True) as init:
        assert run(RuntimeConfig(command="init", root_dir=tmp_path)) is True

    _, prompter = init.call_args.args
    assert type(prompter).__name__ == "RichPrompter"


def test_run_applies_log_level(tmp_path: Path) -> None:
    with (
        patch("encore_init.commands.init", return_value=True),
        patch("encore_init.commands.apply_log_level") as apply_log_level,
    ):
        run(RuntimeConfig(command="init", root_dir=tmp_path, logging=LoggingConfig(level="quiet")))

    apply_log_level.assert_called_once_with("quiet")


def test_init_quiet_prints_nothing_on_success(
    tmp_path: Path, package_json: Path, make_prompter: Callable[..., Any], capsys: pytest.CaptureFixture[str]
) -> None:
    prompter = make_prompter([AppType.SPA, JsType.REACT, CssType.SASS])
    config = RuntimeConfig(command="init", root_dir=tmp_path, logging=LoggingConfig(level="quiet"))

    assert run(config, prompter) is True

    assert (tmp_path / "webpack.config.js").exists()
    assert capsys.readouterr().out == ""


def test_init_quiet_still_reports_failure(
    tmp_path: Path, make_prompter: Callable[..., Any], capsys: pytest.CaptureFixture[str]
) -> None:
    prompter = make_prompter([AppType.MULTI, CssType.CSS])
    config = RuntimeConfig(command="init", root_dir=tmp_path, logging=LoggingConfig(level="quiet"))

    assert run(config, prompter) is False

    output = capsys.readouterr().out
    assert "ManifestNotFoundError" in output
    assert "Created" not in output
    assert "Initializing" not in output
