"""Full analysis: run every analyzer over one history and combine the results."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..config import AnalysisConfig
from ..history.models import Commit
from ..logging_config import get_logger
from .authors import authors
from .code_age import code_age
from .coupling import coupling
from .hotspots import hotspots
from .models import AnalysisReport, DateRange, Summary
from .silos import knowledge_silos

logger = get_logger(__name__)


def summarize(commits: Sequence[Commit]) -> Summary:
    """Count commits and authors and take the date range from the ends of the list.

    Commits are newest first, so the last element is the oldest.
    """
    date_range = None
    if commits:
        date_range = DateRange(start=commits[-1].date, end=commits[0].date)

    return Summary(
        total_commits=len(commits),
        total_authors=len({c.author for c in commits}),
        date_range=date_range,
    )


def analyze_all(
    commits: Sequence[Commit],
    config: Optional[AnalysisConfig] = None,
    now: Optional[datetime] = None,
) -> AnalysisReport:
    """Run all five analyses over the same commits.

    Each analyzer builds its own maps from scratch; nothing is shared
    between them. An empty history is valid and yields empty lists and
    all-zero age buckets.
    """
    if config is None:
        config = AnalysisConfig()

    summary = summarize(commits)
    logger.debug(
        "Analyzing %d commits by %d authors", summary.total_commits, summary.total_authors
    )

    return AnalysisReport(
        summary=summary,
        hotspots=hotspots(commits, top=config.hotspot_top),
        coupling=coupling(
            commits,
            top=config.coupling_top,
            min_commits=config.coupling_min_commits,
            max_files_per_commit=config.max_files_per_commit,
        ),
        code_age=code_age(commits, now=now),
        authors=authors(commits, top=config.author_top),
        knowledge_silos=knowledge_silos(commits, min_commits=config.silo_min_commits),
    )
