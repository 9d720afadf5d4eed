"""Installed version of guardspec."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version


def get_version() -> str:
    """Version from the installed distribution metadata, or ``0.0.0`` when not installed."""
    try:
        return _metadata_version("guardspec")
    except PackageNotFoundError:
        return "0.0.0"
