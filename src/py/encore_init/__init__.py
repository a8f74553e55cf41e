"""encore-init: interactive Webpack Encore project setup.

Asks which kind of app you are building and writes a matching
``webpack.config.js`` and ``postcss.config.js``, then adds the ``encore:*``
scripts to ``package.json``.

Basic usage::

    $ encore-init init

Programmatic usage:
    from encore_init import RuntimeConfig, run

    run(RuntimeConfig(command="init"))
"""

from encore_init.commands import run
from encore_init.config import AppConfig, CssType, JsType, LoggingConfig, RuntimeConfig
from encore_init.exceptions import EncoreInitError, UnknownCommandError

__all__ = (
    "AppConfig",
    "CssType",
    "EncoreInitError",
    "JsType",
    "LoggingConfig",
    "RuntimeConfig",
    "UnknownCommandError",
    "run",
)
