"""Author contribution analysis."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from ..history.models import Commit
from .models import AuthorEntry

DEFAULT_TOP = 15


@dataclass
class _AuthorStats:
    commits: int = 0
    added: int = 0
    deleted: int = 0
    files: set[str] = field(default_factory=set)


def authors(commits: Sequence[Commit], top: int = DEFAULT_TOP) -> list[AuthorEntry]:
    """Rank authors by commit count.

    Authors are grouped by exact name string; line counts are summed over
    every file change in their commits.
    """
    by_author: dict[str, _AuthorStats] = defaultdict(_AuthorStats)

    for commit in commits:
        stats = by_author[commit.author]
        stats.commits += 1
        for change in commit.files:
            stats.added += change.added
            stats.deleted += change.deleted
            stats.files.add(change.path)

    entries = [
        AuthorEntry(
            name=name,
            commits=stats.commits,
            added=stats.added,
            deleted=stats.deleted,
            files_changed=len(stats.files),
        )
        for name, stats in by_author.items()
    ]
    entries.sort(key=lambda a: -a.commits)
    return entries[:top]
