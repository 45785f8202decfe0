"""Plan loading error types."""

from __future__ import annotations

from pathlib import Path


class CommenterError(Exception):
    """Base exception for tfplan-commenter errors."""


class DecodeError(CommenterError):
    """Raised when a plan cannot be turned into a ``Plan``."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class UnreadablePlanError(DecodeError):
    """Raised when the plan bytes cannot be read from their source."""


class MalformedPlanError(DecodeError):
    """Raised when the bytes are not a plan-shaped JSON document."""


class TraversalError(CommenterError):
    """Raised when a plan directory cannot be walked."""

    def __init__(self, root: Path | str, message: str) -> None:
        super().__init__(f"Error walking directory {root}: {message}")
        self.root = Path(root)


class NoPlansFoundError(CommenterError):
    """Raised when a directory holds no plan with changes."""

    def __init__(self, root: Path | str, filename: str = "tfplan.json") -> None:
        super().__init__(f"No {filename} files found in directory: {root}")
        self.root = Path(root)
        self.filename = filename
