"""Tests for knowledge silo detection."""

from git_dig.analysis import knowledge_silos
from git_dig.analysis.silos import SILO_LIMIT
from git_dig.history import Commit, FileChange


def make_commit(sha, author, paths):
    return Commit(
        hash=sha,
        author=author,
        date="2026-01-01T00:00:00+00:00",
        files=tuple(FileChange(path=p, added=1) for p in paths),
    )


class TestKnowledgeSilos:
    """Test knowledge_silos function."""

    def test_finds_single_author_files(self, commits):
        result = knowledge_silos(commits, min_commits=1)
        config = next((s for s in result if s.path == "config.json"), None)
        assert config is not None
        assert config.author == "Alice"
        assert config.commits == 2

    def test_skips_multi_author_files(self, commits):
        result = knowledge_silos(commits, min_commits=1)
        assert all(s.path != "src/app.js" for s in result)
        assert all(s.path != "README.md" for s in result)

    def test_respects_min_commits(self, commits):
        result = knowledge_silos(commits, min_commits=3)
        assert [s.path for s in result] == ["src/utils.js"]

    def test_default_threshold(self, commits):
        assert [s.path for s in knowledge_silos(commits)] == ["src/utils.js", "config.json"]

    def test_raising_threshold_never_grows(self, commits):
        previous = {s.path for s in knowledge_silos(commits, min_commits=1)}
        for threshold in range(2, 8):
            current = {s.path for s in knowledge_silos(commits, min_commits=threshold)}
            assert current <= previous
            previous = current

    def test_sorted_by_commits(self, commits):
        result = knowledge_silos(commits, min_commits=1)
        assert [s.commits for s in result] == sorted((s.commits for s in result), reverse=True)

    def test_capped_at_limit(self):
        commits = [make_commit(f"c{i}", "Alice", [f"f{i}.py"]) for i in range(50)]
        assert len(knowledge_silos(commits, min_commits=1)) == SILO_LIMIT == 30

    def test_empty(self):
        assert knowledge_silos([]) == []

    def test_to_dict(self, commits):
        result = knowledge_silos(commits)
        assert result[-1].to_dict() == {"path": "config.json", "author": "Alice", "commits": 2}
