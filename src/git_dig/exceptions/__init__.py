"""Exception hierarchy for git-dig."""

from .base import GitDigError
from .config import ConfigurationError, InvalidConfigError
from .history import GitCommandError, HistoryError, NotAGitRepositoryError

__all__ = [
    "GitDigError",
    "HistoryError",
    "NotAGitRepositoryError",
    "GitCommandError",
    "ConfigurationError",
    "InvalidConfigError",
]
