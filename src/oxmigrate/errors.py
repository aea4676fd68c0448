"""Exceptions raised by oxmigrate."""

from pathlib import Path


class OxmigrateError(Exception):
    """Base class for oxmigrate errors."""


class SourceReadError(OxmigrateError):
    """A source file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class SourceWriteError(OxmigrateError):
    """A fixed source file could not be written back."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason
