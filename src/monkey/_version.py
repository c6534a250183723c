"""Installed version of the monkey interpreter."""

from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "monkey-interpreter"


def get_version() -> str:
    """Version recorded in the installed distribution's metadata."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
