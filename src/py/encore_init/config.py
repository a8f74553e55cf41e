"""Configuration for the Encore project generator.

Holds the answer tokens for the interactive questions, the ``AppConfig`` record
that accumulates them, and the runtime settings for a single CLI invocation.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, NamedTuple

from encore_init.exceptions import IncompleteAppConfigError, InvalidAppConfigError

__all__ = (
    "ENCORE_SCRIPTS",
    "GITIGNORE_FILE",
    "OUTPUT_PATH",
    "PACKAGE_JSON_FILE",
    "POSTCSS_CONFIG_FILE",
    "PUBLIC_PATH",
    "WEBPACK_CONFIG_FILE",
    "AppConfig",
    "AppType",
    "CssType",
    "JsType",
    "LoggingConfig",
    "PackageSet",
    "ResolvedAppConfig",
    "RuntimeConfig",
    "apply_log_level",
    "get_default_log_level",
)

logger = logging.getLogger("encore_init")

OUTPUT_PATH = "build/"
PUBLIC_PATH = "/"
WEBPACK_CONFIG_FILE = "webpack.config.js"
POSTCSS_CONFIG_FILE = "postcss.config.js"
PACKAGE_JSON_FILE = "package.json"
GITIGNORE_FILE = ".gitignore"
ENCORE_SCRIPTS: dict[str, str] = {
    "encore:dev": "yarn run encore dev",
    "encore:watch": "yarn run encore dev-server",
    "encore:production": "yarn run encore production",
}

LogLevel = Literal["quiet", "normal", "verbose"]

_LOG_LEVELS: dict[str, int] = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


class AppType(str, Enum):
    """Answer tokens for the app architecture question."""

    SPA = "TYPE_SPA"
    MULTI = "TYPE_MULTI"


class JsType(str, Enum):
    """Supported JavaScript flavors."""

    VANILLA = "JS_TYPE_VANILLA"
    REACT = "JS_TYPE_REACT"
    VUE = "JS_TYPE_VUE"


class CssType(str, Enum):
    """Supported stylesheet flavors."""

    CSS = "CSS_TYPE_CSS"
    SASS = "CSS_TYPE_SASS"
    LESS = "CSS_TYPE_LESS"


class PackageSet(NamedTuple):
    """npm packages implied by a set of answers."""

    dependencies: frozenset[str]
    dev_dependencies: frozenset[str]


@dataclass(frozen=True)
class ResolvedAppConfig:
    """Fully answered app configuration, handed to the generators."""

    is_spa: bool
    js_type: JsType
    css_type: CssType


@dataclass
class AppConfig:
    """Answers collected while the user walks through the questions.

    Every field starts unset and is filled exactly once, in declaration order.

    Attributes:
        is_spa: Whether the user is building a single page application.
        js_type: The JavaScript flavor. Always ``JsType.VANILLA`` for multi-page apps.
        css_type: The stylesheet flavor.
    """

    is_spa: "bool | None" = None
    js_type: "JsType | None" = None
    css_type: "CssType | None" = None

    def resolved(self) -> ResolvedAppConfig:
        """Freeze the answers.

        Raises:
            IncompleteAppConfigError: If a question has not been answered yet.
            InvalidAppConfigError: If a multi-page app is paired with a JavaScript framework.

        Returns:
            The immutable configuration.
        """
        missing = [name for name in ("is_spa", "js_type", "css_type") if getattr(self, name) is None]
        if missing:
            raise IncompleteAppConfigError(missing)
        if not self.is_spa and self.js_type != JsType.VANILLA:
            msg = f"Multi-page apps always use vanilla JavaScript, got {self.js_type}"
            raise InvalidAppConfigError(msg)
        return ResolvedAppConfig(
            is_spa=bool(self.is_spa),
            js_type=JsType(self.js_type),
            css_type=CssType(self.css_type),
        )


def get_default_log_level() -> LogLevel:
    """Get default log level from environment variable.

    Checks ENCORE_INIT_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("ENCORE_INIT_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


def apply_log_level(level: LogLevel) -> None:
    """Set the package logger to the level matching the console verbosity."""
    logger.setLevel(_LOG_LEVELS[level])


@dataclass
class LoggingConfig:
    """Console verbosity.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Errors and warnings only
            - "normal": Standard operational messages (default)
            - "verbose": Detailed debugging information, including tracebacks
            Can also be set via ENCORE_INIT_LOG_LEVEL environment variable.
    """

    level: LogLevel = field(default_factory=get_default_log_level)

    @property
    def quiet(self) -> bool:
        return self.level == "quiet"

    @property
    def verbose(self) -> bool:
        return self.level == "verbose"


@dataclass
class RuntimeConfig:
    """Settings for a single generator invocation.

    Attributes:
        command: The generator command to run (only ``init`` is known).
        root_dir: Project directory that holds ``package.json``.
        logging: Console verbosity settings.
    """

    command: str
    root_dir: Path = field(default_factory=Path.cwd)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir)
