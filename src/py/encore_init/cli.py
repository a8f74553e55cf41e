import logging
from pathlib import Path
from typing import Optional

from click import ClickException, argument, command, option, version_option
from click import Path as ClickPath

from encore_init.__metadata__ import __version__


@command(name="encore-init", help="Generate a Webpack Encore configuration for your project.")
@argument("command_name", metavar="COMMAND", default="init", required=False)
@option(
    "--root-path",
    type=ClickPath(dir_okay=True, file_okay=False, exists=True, path_type=Path),
    help="The project directory holding package.json. Defaults to the current directory.",
    default=None,
    required=False,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(__version__, prog_name="encore-init")
def main(command_name: str, root_path: "Optional[Path]", verbose: "bool") -> None:
    """Run a generator command."""
    import sys

    from encore_init.commands import run
    from encore_init.config import LoggingConfig, RuntimeConfig
    from encore_init.exceptions import EncoreInitError

    logging_config = LoggingConfig(level="verbose") if verbose else LoggingConfig()
    if logging_config.verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")

    runtime_config = RuntimeConfig(
        command=command_name,
        root_dir=root_path or Path.cwd(),
        logging=logging_config,
    )
    try:
        succeeded = run(runtime_config)
    except EncoreInitError as e:
        raise ClickException(str(e)) from e
    if not succeeded:
        sys.exit(1)
