"""Exceptions raised while loading dictionaries and configurations."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class of every error raised by this package."""


class InvalidFormat(ConversionError):
    """A dictionary or configuration does not have the expected format."""


class FileNotFound(ConversionError):
    """A required file could not be found or opened."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{path} not found or not accessible.")