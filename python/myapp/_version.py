"""Build version, rewritten by the release build."""

__version__ = "dev"
