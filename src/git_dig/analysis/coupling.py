"""Temporal coupling: files that change together in the same commit."""

from __future__ import annotations

import math
from collections import defaultdict
from itertools import combinations
from typing import Sequence

from ..history.models import Commit
from ..logging_config import get_logger
from .models import CouplingPair

logger = get_logger(__name__)

DEFAULT_TOP = 20
DEFAULT_MIN_COMMITS = 3
DEFAULT_MAX_FILES_PER_COMMIT = 30


def coupling(
    commits: Sequence[Commit],
    top: int = DEFAULT_TOP,
    min_commits: int = DEFAULT_MIN_COMMITS,
    max_files_per_commit: int = DEFAULT_MAX_FILES_PER_COMMIT,
) -> list[CouplingPair]:
    """Find file pairs that are repeatedly modified in the same commit.

    Only commits touching between 2 and ``max_files_per_commit`` distinct
    files count. Larger commits (mass renames, vendoring, reformats) would
    connect nearly every file to every other and are skipped entirely,
    including from the per-file totals.

    Degree normalizes the co-change count by the less frequently changed
    file of the pair:

        degree = coupled / min(total_a, total_b)

    so a rarely touched file that always moves with a busy one still scores
    close to 1.0.

    Args:
        commits: Commit history
        top: Maximum number of pairs to return
        min_commits: Minimum co-change count for a pair to be reported
        max_files_per_commit: Commits touching more files are ignored

    Returns:
        Pairs sorted by co-change count, then degree, both descending.
    """
    file_counts: dict[str, int] = defaultdict(int)
    pair_counts: dict[tuple[str, str], int] = defaultdict(int)
    skipped_large = 0

    for commit in commits:
        paths = sorted({change.path for change in commit.files})
        if len(paths) < 2:
            continue
        if len(paths) > max_files_per_commit:
            skipped_large += 1
            continue

        for path in paths:
            file_counts[path] += 1

        # paths is sorted, so every pair comes out as (smaller, larger)
        for pair in combinations(paths, 2):
            pair_counts[pair] += 1

    if skipped_large:
        logger.debug(
            "Ignored %d commits touching more than %d files", skipped_large, max_files_per_commit
        )

    pairs = []
    for (file_a, file_b), count in pair_counts.items():
        if count < min_commits:
            continue
        degree = count / min(file_counts[file_a], file_counts[file_b])
        pairs.append(
            CouplingPair(
                file_a=file_a,
                file_b=file_b,
                coupled=count,
                degree=_round_half_up(degree),
            )
        )

    pairs.sort(key=lambda p: (-p.coupled, -p.degree))
    return pairs[:top]


def _round_half_up(value: float, places: int = 2) -> float:
    """Round like a percentage display does: 0.125 -> 0.13, not 0.12."""
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale
