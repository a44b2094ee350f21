"""Code age: how long ago each file was last modified."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from ..history.models import Commit, parse_timestamp
from .models import AgeBuckets, AgedFile, CodeAgeReport

# Inclusive upper bounds in days, checked in order; anything older is "ancient"
AGE_BUCKETS = (
    ("fresh", 7),
    ("recent", 30),
    ("aging", 90),
    ("stale", 365),
)
ANCIENT = "ancient"

AGE_LIST_SIZE = 15

_ONE_DAY = timedelta(days=1)


def classify_age(age_days: int) -> str:
    for name, limit in AGE_BUCKETS:
        if age_days <= limit:
            return name
    return ANCIENT


def code_age(commits: Sequence[Commit], now: Optional[datetime] = None) -> CodeAgeReport:
    """Bucket every touched file by days since its most recent change.

    Commits must be ordered newest first: the first time a path appears in
    the walk fixes its last-modified date, the last time fixes its
    first-seen date. The ordering is trusted, not checked.

    Args:
        commits: Commit history, newest first
        now: Reference time (default: current UTC time)
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    last_modified: dict[str, str] = {}
    first_seen: dict[str, str] = {}

    for commit in commits:
        for change in commit.files:
            last_modified.setdefault(change.path, commit.date)
            first_seen[change.path] = commit.date

    files = [
        AgedFile(
            path=path,
            last_modified=date,
            first_seen=first_seen[path],
            age_days=(now - parse_timestamp(date)) // _ONE_DAY,
        )
        for path, date in last_modified.items()
    ]

    counts = Counter(classify_age(f.age_days) for f in files)
    buckets = AgeBuckets(**{name: counts[name] for name, _ in AGE_BUCKETS}, ancient=counts[ANCIENT])

    return CodeAgeReport(
        buckets=buckets,
        oldest=sorted(files, key=lambda f: -f.age_days)[:AGE_LIST_SIZE],
        freshest=sorted(files, key=lambda f: f.age_days)[:AGE_LIST_SIZE],
        total_files=len(files),
    )
