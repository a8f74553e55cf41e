"""The interactive questions asked by ``encore-init init``."""

import logging
from typing import TYPE_CHECKING

from encore_init.config import AppConfig, AppType, CssType, JsType, ResolvedAppConfig
from encore_init.prompts import Choice

if TYPE_CHECKING:
    from encore_init.prompts import Prompter

__all__ = (
    "APP_TYPE_CHOICES",
    "CSS_TYPE_CHOICES",
    "JS_TYPE_CHOICES",
    "ask_css_type",
    "ask_is_spa",
    "ask_js_type",
    "run_init",
)

logger = logging.getLogger("encore_init")

APP_TYPE_CHOICES: tuple[Choice[AppType], ...] = (
    Choice("A) Single Page Application (SPA)", AppType.SPA),
    Choice("B) Traditional multi-page app", AppType.MULTI),
)
JS_TYPE_CHOICES: tuple[Choice[JsType], ...] = (
    Choice("A) Vanilla JavaScript", JsType.VANILLA),
    Choice("B) React", JsType.REACT),
    Choice("C) Vue.js", JsType.VUE),
)
CSS_TYPE_CHOICES: tuple[Choice[CssType], ...] = (
    Choice("A) Sass", CssType.SASS),
    Choice("B) LESS", CssType.LESS),
    Choice("C) Vanilla CSS", CssType.CSS),
)


def ask_is_spa(prompter: "Prompter") -> bool:
    return prompter.select("What type of app are you creating?", APP_TYPE_CHOICES) == AppType.SPA


def ask_js_type(prompter: "Prompter") -> JsType:
    return prompter.select("What type of JavaScript app do you want?", JS_TYPE_CHOICES)


def ask_css_type(prompter: "Prompter") -> CssType:
    return prompter.select("What type of CSS do you like?", CSS_TYPE_CHOICES)


def run_init(prompter: "Prompter") -> ResolvedAppConfig:
    """Walk the user through the questions.

    The JavaScript question is only asked for single page apps; the shared
    entry of a multi-page app is always vanilla JavaScript.

    Args:
        prompter: Source of the answers.

    Returns:
        The answered configuration.
    """
    app_config = AppConfig()
    app_config.is_spa = ask_is_spa(prompter)
    app_config.js_type = ask_js_type(prompter) if app_config.is_spa else JsType.VANILLA
    app_config.css_type = ask_css_type(prompter)
    logger.debug("Collected answers: %s", app_config)
    return app_config.resolved()
