"""Runs the generators for an answered configuration."""

import logging
from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.text import Text

from encore_init.generators import (
    add_packages,
    create_postcss_config,
    create_webpack_config,
    install_commands,
    update_gitignore,
    update_package_json,
)
from encore_init.utils import console, format_command

if TYPE_CHECKING:
    from encore_init.config import LoggingConfig, PackageSet, ResolvedAppConfig
    from encore_init.writer import FileWriter

__all__ = ("generate_app", "print_next_steps", "render_error")

logger = logging.getLogger("encore_init")


def render_error(exc: BaseException, *, verbose: bool = False) -> None:
    """Print a failure, including the chain of underlying causes.

    Args:
        exc: The exception that stopped generation.
        verbose: Also print the traceback.
    """
    body = Text(str(exc) or type(exc).__name__)
    cause = exc.__cause__
    while cause is not None:
        body.append(f"\nCaused by {type(cause).__name__}: {cause}", style="dim")
        cause = cause.__cause__
    console.print(Panel(body, title=f"[bold red]{type(exc).__name__}[/]", title_align="left", border_style="red"))
    if verbose:
        console.print_exception(show_locals=False)


def print_next_steps(packages: "PackageSet") -> None:
    console.rule("[yellow]Next steps[/]", align="left")
    console.print("Install the packages used by the generated configuration:")
    for command in install_commands(packages):
        console.print(f"  [bold]{format_command(command)}[/]")
    console.print("Then compile your assets with:")
    console.print("  [bold]yarn run encore dev[/]")


def generate_app(
    app_config: "ResolvedAppConfig",
    writer: "FileWriter",
    *,
    logging_config: "LoggingConfig | None" = None,
) -> bool:
    """Generate the project files, one step after another.

    Steps run in a fixed order: ``webpack.config.js``, package selection,
    ``package.json`` scripts, ``postcss.config.js``, ``.gitignore``. The first
    failure stops the run and is rendered; files written by earlier steps are
    kept. Interrupts (``KeyboardInterrupt``) are not caught.

    Args:
        app_config: The answered configuration.
        writer: File access rooted at the project directory.
        logging_config: Console verbosity. Quiet mode prints failures only,
            verbose mode adds their tracebacks.

    Returns:
        True if every step succeeded.
    """
    quiet = logging_config.quiet if logging_config else False
    verbose = logging_config.verbose if logging_config else False
    logger.debug("Generating app for %s", app_config)
    try:
        create_webpack_config(app_config, writer)
        packages = add_packages(app_config)
        update_package_json(writer)
        if not quiet:
            console.print("[green]Updated package.json scripts[/]")
        create_postcss_config(writer)
        if update_gitignore(writer) and not quiet:
            console.print("[green]Added node_modules/ to .gitignore[/]")
    except Exception as e:  # noqa: BLE001
        logger.debug("Generation failed", exc_info=True)
        render_error(e, verbose=verbose)
        return False

    if not quiet:
        console.print("[bold green]Success![/]")
        print_next_steps(packages)
    return True
