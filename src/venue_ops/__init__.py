"""Venue operations core: attendance tallying, lost & found, incidents."""

__version__ = "0.1.0"
