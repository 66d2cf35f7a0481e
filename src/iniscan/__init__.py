"""iniscan: audit runtime configuration against security policy rules."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("iniscan")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
