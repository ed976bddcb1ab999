"""Installed distribution version."""
from importlib import metadata

DISTRIBUTION = "transkit"
# Keep in sync with ``version`` in pyproject.toml.
FALLBACK_VERSION = "0.1.0"


def installed_version(distribution: str = DISTRIBUTION) -> str:
    """Return the installed version, or the fallback when running from a checkout."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION


__version__ = installed_version()
