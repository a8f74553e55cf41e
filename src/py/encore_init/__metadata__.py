"""Installed version of encore-init, shown by ``encore-init --version``."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ("__version__",)


def _installed_version(distribution: str = "encore-init") -> str:
    try:
        return version(distribution)
    except PackageNotFoundError:  # pragma: no cover
        # running from a source checkout without `pip install -e .`
        return "0.0.0"


__version__ = _installed_version()
