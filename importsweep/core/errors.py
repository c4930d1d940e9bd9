"""Exceptions surfaced to the command line."""

from __future__ import annotations

from pathlib import Path


class ImportSweepError(Exception):
    """Base class for errors that abort a whole invocation."""


class ProjectRootNotFoundError(ImportSweepError):
    """No enclosing project root could be identified for a target."""

    def __init__(self, target: Path):
        self.target = target
        super().__init__(f"Project root not found for target: {target}")


class TargetNotFoundError(ImportSweepError):
    """The target is neither a file nor a directory."""

    def __init__(self, target: Path):
        self.target = target
        super().__init__(f"Target does not exist: {target}")


__all__ = [
    "ImportSweepError",
    "ProjectRootNotFoundError",
    "TargetNotFoundError",
]
