"""Git history retrieval and parsing."""

from .git_extractor import GitExtractor
from .models import Commit, FileChange, parse_timestamp
from .parser import LOG_FORMAT, SEPARATOR, parse_raw_log

__all__ = [
    "Commit",
    "FileChange",
    "GitExtractor",
    "LOG_FORMAT",
    "SEPARATOR",
    "parse_raw_log",
    "parse_timestamp",
]
