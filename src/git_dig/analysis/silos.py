"""Knowledge silos: files only one author has ever touched.

If that person leaves, nobody else knows the code.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from ..history.models import Commit
from .models import SiloEntry

DEFAULT_MIN_COMMITS = 2

# The list highlights the riskiest files rather than every single-author file
SILO_LIMIT = 30


@dataclass
class _PathAuthorship:
    commits: int = 0
    authors: set[str] = field(default_factory=set)


def knowledge_silos(
    commits: Sequence[Commit], min_commits: int = DEFAULT_MIN_COMMITS
) -> list[SiloEntry]:
    paths: dict[str, _PathAuthorship] = defaultdict(_PathAuthorship)

    for commit in commits:
        for change in commit.files:
            entry = paths[change.path]
            entry.authors.add(commit.author)
            entry.commits += 1

    silos = [
        SiloEntry(path=path, author=next(iter(entry.authors)), commits=entry.commits)
        for path, entry in paths.items()
        if len(entry.authors) == 1 and entry.commits >= min_commits
    ]
    silos.sort(key=lambda s: -s.commits)
    return silos[:SILO_LIMIT]
