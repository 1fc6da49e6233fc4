"""Error taxonomy for the optimizer.

Per-file errors (ReadError, MalformedInputError, WriteError) are caught by the
orchestrator and logged. OutputDirError aborts the run.
"""

from __future__ import annotations

from pathlib import Path


class OptimizerError(Exception):
    """Base class for all optimizer errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class ReadError(OptimizerError):
    """Input file is missing, unreadable or not valid UTF-8."""


class MalformedInputError(OptimizerError):
    """Content cannot be parsed as markup."""


class WriteError(OptimizerError):
    """Output file could not be written."""


class OutputDirError(OptimizerError):
    """Output directory could not be created."""
