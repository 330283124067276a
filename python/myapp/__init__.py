"""
My Go App - a tiny HTTP service with a welcome page, health probe and info API.
"""

from myapp._version import __version__

__all__ = ["__version__"]
