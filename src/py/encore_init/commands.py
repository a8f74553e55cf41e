"""Generator command dispatch.

``run`` is the programmatic entry point behind the ``encore-init`` CLI.
"""

from typing import TYPE_CHECKING

from encore_init.config import apply_log_level
from encore_init.exceptions import UnknownCommandError
from encore_init.pipeline import generate_app
from encore_init.prompts import RichPrompter
from encore_init.questions import run_init
from encore_init.utils import console
from encore_init.writer import FileWriter

if TYPE_CHECKING:
    from encore_init.config import RuntimeConfig
    from encore_init.prompts import Prompter

__all__ = ("init", "run")


def init(runtime_config: "RuntimeConfig", prompter: "Prompter") -> bool:
    """Ask the questions and generate the Encore configuration files.

    Returns:
        True if every file was generated.
    """
    logging_config = runtime_config.logging
    if not logging_config.quiet:
        console.rule("[yellow]Initializing Webpack Encore[/]", align="left")
    app_config = run_init(prompter)
    writer = FileWriter(runtime_config.root_dir, prompter, quiet=logging_config.quiet)
    return generate_app(app_config, writer, logging_config=logging_config)


def run(runtime_config: "RuntimeConfig", prompter: "Prompter | None" = None) -> bool:
    """Run a generator command.

    Args:
        runtime_config: The command to run and its settings.
        prompter: Source of answers. Defaults to terminal prompts.

    Raises:
        UnknownCommandError: If the command is not known.

    Returns:
        True if the command succeeded.
    """
    apply_log_level(runtime_config.logging.level)
    match runtime_config.command:
        case "init":
            return init(runtime_config, prompter or RichPrompter())
        case _:
            raise UnknownCommandError(runtime_config.command)
