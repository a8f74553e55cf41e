"""File access for generated project files."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from encore_init.exceptions import FileReadError, FileWriteError
from encore_init.utils import console

if TYPE_CHECKING:
    from encore_init.prompts import Prompter

__all__ = ("FileWriter",)

logger = logging.getLogger("encore_init")


class FileWriter:
    """Reads and writes files relative to a project root.

    ``write`` always replaces the target. ``write_safe`` asks before replacing a
    file that already exists and skips the write when the user declines. With
    ``quiet`` set, the per-file status lines are not printed.
    """

    def __init__(self, root: Path, prompter: "Prompter", *, quiet: bool = False) -> None:
        self.root = Path(root)
        self.prompter = prompter
        self.quiet = quiet

    def resolve(self, path: "str | Path") -> Path:
        return self.root / path

    def exists(self, path: "str | Path") -> bool:
        return self.resolve(path).exists()

    def read(self, path: "str | Path") -> bytes:
        """Read a file's raw bytes.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return self.resolve(path).read_bytes()

    def read_text(self, path: "str | Path") -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If the file does not exist.
            FileReadError: If the file is not valid UTF-8.
        """
        try:
            return self.read(path).decode("utf-8")
        except UnicodeDecodeError as e:
            raise FileReadError(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e

    def write(self, path: "str | Path", content: "str | bytes") -> None:
        """Write ``content`` to ``path``, replacing any existing content.

        Args:
            path: Target path, relative to the project root.
            content: Text (written as UTF-8) or raw bytes.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        target = self.resolve(path)
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            target.write_bytes(data)
        except OSError as e:
            raise FileWriteError(str(path), e.strerror or str(e)) from e
        logger.debug("Wrote %d bytes to %s", len(data), target)

    def write_safe(self, path: "str | Path", content: "str | bytes") -> bool:
        """Write ``content`` to ``path``, asking first if the file already exists.

        Args:
            path: Target path, relative to the project root.
            content: Text (written as UTF-8) or raw bytes.

        Returns:
            True if the file was written, False if the user kept the existing file.
        """
        if self.exists(path) and not self.prompter.confirm(
            f'The file "{path}" already exists, do you want to overwrite it?',
            default=False,
        ):
            if not self.quiet:
                console.print(f"[yellow]Skipping {path} (exists)[/]")
            return False
        self.write(path, content)
        if not self.quiet:
            console.print(f"[green]Created {path}[/]")
        return True
