"""History retrieval exceptions: repository detection and git invocation."""

from pathlib import Path
from typing import Union

from .base import GitDigError


class HistoryError(GitDigError):
    """Base class for errors raised while reading git history."""

    pass


class NotAGitRepositoryError(HistoryError):
    """Raised when the target directory is not inside a git work tree."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Not a git repository: {path}", details={"path": str(path)})
        self.path = path


class GitCommandError(HistoryError):
    """Raised when git is missing, times out, or exits with an error."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            f"git command failed: {command}",
            details={"command": command, "reason": reason},
        )
        self.command = command
        self.reason = reason
