"""Performance checks for the analyzers on a large synthetic history.

Marked with @pytest.mark.slow to skip in normal test runs.
Run with: pytest tests/analysis/test_performance.py -v --run-slow
"""

import random
import time
from datetime import datetime, timedelta, timezone

import pytest

from git_dig.analysis import analyze_all, coupling
from git_dig.history import Commit, FileChange


def generate_commits(n: int, files_per_commit: int = 5) -> list[Commit]:
    """Generate n synthetic commits, newest first, one hour apart."""
    authors = ["Alice", "Bob", "Charlie"]
    files = [f"src/file_{i}.py" for i in range(200)]
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)

    commits = []
    for i in range(n):
        rng = random.Random(i)  # Reproducible
        touched = rng.sample(files, files_per_commit)
        commits.append(
            Commit(
                hash=f"{i:040d}",
                author=authors[i % len(authors)],
                date=(start - timedelta(hours=i)).isoformat(),
                files=tuple(FileChange(path=p, added=i % 7, deleted=i % 3) for p in touched),
            )
        )
    return commits


@pytest.mark.slow
class TestAnalysisPerformance:
    def test_full_analysis_5000_commits(self):
        commits = generate_commits(5000)
        t0 = time.perf_counter()
        report = analyze_all(commits)
        elapsed = time.perf_counter() - t0
        assert report.summary.total_commits == 5000
        assert elapsed < 5.0, f"analysis took {elapsed:.2f}s"

    def test_coupling_with_max_size_commits(self):
        commits = generate_commits(1000, files_per_commit=30)
        t0 = time.perf_counter()
        coupling(commits, min_commits=1)
        elapsed = time.perf_counter() - t0
        assert elapsed < 10.0, f"coupling took {elapsed:.2f}s"
