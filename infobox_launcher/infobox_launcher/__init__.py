"""
infobox_launcher package.

Runtime support for the ``infobox`` command: logging configuration shared by
the core launcher and presenters.
"""

__all__ = [
    "logger",
]
