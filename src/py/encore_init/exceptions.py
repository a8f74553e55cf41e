"""Encore generator exception classes."""

__all__ = [
    "EncoreInitError",
    "FileReadError",
    "FileWriteError",
    "IncompleteAppConfigError",
    "InvalidAppConfigError",
    "ManifestDecodeError",
    "ManifestNotFoundError",
    "UnknownCommandError",
]


class EncoreInitError(Exception):
    """Base exception for Encore generator errors."""


class UnknownCommandError(EncoreInitError):
    """Raised when the generator is asked to run a command it does not know."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown generator command {command}.")
        self.command = command


class IncompleteAppConfigError(EncoreInitError):
    """Raised when generation starts before every question was answered."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"App configuration is incomplete, missing: {', '.join(missing)}")
        self.missing = missing


class ManifestNotFoundError(EncoreInitError):
    """Raised when the package.json manifest is not found."""

    def __init__(self, manifest_path: str) -> None:
        super().__init__(f"Manifest file not found at {manifest_path!r}. Run 'yarn init' first.")


class ManifestDecodeError(EncoreInitError):
    """Raised when the package.json manifest is not a valid JSON object."""

    def __init__(self, manifest_path: str, reason: str) -> None:
        super().__init__(f"Manifest file at {manifest_path!r} could not be parsed: {reason}")


class FileWriteError(EncoreInitError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path!r}: {reason}")
        self.path = path


class FileReadError(EncoreInitError):
    """Raised when an existing project file cannot be read as text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read {path!r}: {reason}")
        self.path = path


class InvalidAppConfigError(EncoreInitError):
    """Raised when the collected answers contradict each other."""
