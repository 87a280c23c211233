"""Techblog: static technical blog generator with an active-section table of contents."""

__version__ = "0.1.0"
