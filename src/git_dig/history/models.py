"""Data models for parsed git history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class FileChange:
    path: str  # as reported by git, no normalization
    added: int = 0  # 0 for binary files
    deleted: int = 0  # 0 for binary files
    binary: bool = False  # git reported "-" instead of line counts

    @property
    def churn(self) -> int:
        return self.added + self.deleted


@dataclass(frozen=True)
class Commit:
    hash: str
    author: str  # display name, compared by exact string
    date: str  # ISO-8601 author date, e.g. 2026-02-10T10:00:00+09:00
    message: str = ""
    files: tuple[FileChange, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of changes but store an immutable tuple
        if not isinstance(self.files, tuple):
            object.__setattr__(self, "files", tuple(self.files))

    @property
    def timestamp(self) -> datetime:
        return parse_timestamp(self.date)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    A trailing ``Z`` is accepted, and timestamps without an offset are
    read as UTC so that they compare cleanly against aware values.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
