"""textcal command-line interface."""

from textcal import __version__

__all__ = ["__version__"]
