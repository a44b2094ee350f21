"""Parse raw ``git log --numstat`` output into Commit records."""

from __future__ import annotations

from ..logging_config import get_logger
from .models import Commit, FileChange

logger = get_logger(__name__)

SEPARATOR = "---GIT-DIG-SEP---"

# One header per commit: separator, hash, author name, strict ISO author date, subject.
# --numstat lines ("added<TAB>deleted<TAB>path") follow the subject.
LOG_FORMAT = f"{SEPARATOR}%n%H%n%an%n%aI%n%s"

# git prints "-" for both counts when it considers a file binary
_BINARY_MARKER = "-"


def parse_raw_log(raw: str) -> list[Commit]:
    """Parse raw git log output into Commit objects, newest first.

    Blocks with fewer than four header lines are skipped. Numstat lines that
    do not split into exactly three tab-separated fields are ignored, so
    blank lines and stray output never produce phantom file changes.
    """
    commits: list[Commit] = []

    for block in raw.split(SEPARATOR):
        if not block.strip():
            continue

        lines = block.strip().split("\n")
        if len(lines) < 4:
            logger.debug("Skipping truncated log block: %r", block[:80])
            continue

        commit_hash, author, date, message = lines[:4]
        files = [change for change in map(_parse_numstat, lines[4:]) if change is not None]

        commits.append(
            Commit(
                hash=commit_hash,
                author=author,
                date=date,
                message=message,
                files=tuple(files),
            )
        )

    return commits


def _parse_numstat(line: str) -> FileChange | None:
    line = line.strip()
    if not line:
        return None

    parts = line.split("\t")
    if len(parts) != 3:
        return None

    added, deleted, path = parts
    if added == _BINARY_MARKER or deleted == _BINARY_MARKER:
        return FileChange(path=path, added=0, deleted=0, binary=True)

    try:
        return FileChange(path=path, added=int(added), deleted=int(deleted))
    except ValueError:
        logger.debug("Ignoring malformed numstat line: %r", line)
        return None
