"""Hotspot analysis: files that change most often and accumulate the most churn."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from ..history.models import Commit
from .models import HotspotEntry

DEFAULT_TOP = 20


@dataclass
class _FileStats:
    commits: int = 0
    added: int = 0
    deleted: int = 0
    authors: set[str] = field(default_factory=set)


def hotspots(commits: Sequence[Commit], top: int = DEFAULT_TOP) -> list[HotspotEntry]:
    """Rank files by commit count, breaking ties by churn.

    Every (commit, file) pair counts once toward the file's commit total.
    Binary changes carry zero line counts, so they add commits and authors
    but no churn.
    """
    files: dict[str, _FileStats] = defaultdict(_FileStats)

    for commit in commits:
        for change in commit.files:
            stats = files[change.path]
            stats.commits += 1
            stats.added += change.added
            stats.deleted += change.deleted
            stats.authors.add(commit.author)

    entries = [
        HotspotEntry(
            path=path,
            commits=stats.commits,
            churn=stats.added + stats.deleted,
            added=stats.added,
            deleted=stats.deleted,
            authors=len(stats.authors),
        )
        for path, stats in files.items()
    ]
    # Stable sort: equal keys keep first-seen order
    entries.sort(key=lambda e: (-e.commits, -e.churn))
    return entries[:top]
