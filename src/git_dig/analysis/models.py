"""Result records produced by the history analyzers.

Every record exposes ``to_dict()`` with the camelCase keys of the JSON
report, so renderers and ``json.dumps`` never need to know field names.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

SECTIONS = ("hotspots", "coupling", "code_age", "authors", "knowledge_silos")


@dataclass(frozen=True)
class HotspotEntry:
    path: str
    commits: int  # commits touching the path
    churn: int  # added + deleted
    added: int
    deleted: int
    authors: int  # distinct author names

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "commits": self.commits,
            "churn": self.churn,
            "added": self.added,
            "deleted": self.deleted,
            "authors": self.authors,
        }


@dataclass(frozen=True)
class CouplingPair:
    file_a: str  # lexicographically smaller path
    file_b: str
    coupled: int  # qualifying commits containing both
    degree: float  # coupled / min(total_a, total_b), 2 decimals

    def to_dict(self) -> dict[str, Any]:
        return {
            "fileA": self.file_a,
            "fileB": self.file_b,
            "coupled": self.coupled,
            "degree": self.degree,
        }


@dataclass(frozen=True)
class AgedFile:
    path: str
    last_modified: str  # date of most recent touch
    first_seen: str  # date of earliest touch
    age_days: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "lastModified": self.last_modified,
            "firstSeen": self.first_seen,
            "ageDays": self.age_days,
        }


@dataclass(frozen=True)
class AgeBuckets:
    fresh: int = 0  # <= 7 days
    recent: int = 0  # <= 30 days
    aging: int = 0  # <= 90 days
    stale: int = 0  # <= 365 days
    ancient: int = 0  # > 365 days

    @property
    def total(self) -> int:
        return self.fresh + self.recent + self.aging + self.stale + self.ancient

    def to_dict(self) -> dict[str, int]:
        return {
            "fresh": self.fresh,
            "recent": self.recent,
            "aging": self.aging,
            "stale": self.stale,
            "ancient": self.ancient,
        }


@dataclass(frozen=True)
class CodeAgeReport:
    buckets: AgeBuckets = field(default_factory=AgeBuckets)
    oldest: list[AgedFile] = field(default_factory=list)
    freshest: list[AgedFile] = field(default_factory=list)
    total_files: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "buckets": self.buckets.to_dict(),
            "oldest": [f.to_dict() for f in self.oldest],
            "freshest": [f.to_dict() for f in self.freshest],
            "totalFiles": self.total_files,
        }


@dataclass(frozen=True)
class AuthorEntry:
    name: str
    commits: int
    added: int
    deleted: int
    files_changed: int  # distinct paths

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "commits": self.commits,
            "added": self.added,
            "deleted": self.deleted,
            "filesChanged": self.files_changed,
        }


@dataclass(frozen=True)
class SiloEntry:
    path: str
    author: str  # the only author who ever touched the path
    commits: int

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "author": self.author, "commits": self.commits}


@dataclass(frozen=True)
class DateRange:
    start: str  # date of the oldest commit
    end: str  # date of the newest commit

    def to_dict(self) -> dict[str, str]:
        return {"from": self.start, "to": self.end}


@dataclass(frozen=True)
class Summary:
    total_commits: int
    total_authors: int
    date_range: Optional[DateRange] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCommits": self.total_commits,
            "totalAuthors": self.total_authors,
            "dateRange": self.date_range.to_dict() if self.date_range else None,
        }


@dataclass(frozen=True)
class AnalysisReport:
    summary: Summary
    hotspots: list[HotspotEntry] = field(default_factory=list)
    coupling: list[CouplingPair] = field(default_factory=list)
    code_age: Optional[CodeAgeReport] = None  # None when the section was left out
    authors: list[AuthorEntry] = field(default_factory=list)
    knowledge_silos: list[SiloEntry] = field(default_factory=list)

    def only(self, section: str) -> AnalysisReport:
        """Return a copy keeping the summary and a single section.

        The other list sections become empty and ``code_age`` becomes None,
        so renderers skip them.
        """
        if section not in SECTIONS:
            raise ValueError(
                f"Unknown section: {section!r}. Choose from: {', '.join(SECTIONS)}"
            )
        cleared: dict[str, Any] = {
            name: (None if name == "code_age" else []) for name in SECTIONS if name != section
        }
        return replace(self, **cleared)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "hotspots": [h.to_dict() for h in self.hotspots],
            "coupling": [c.to_dict() for c in self.coupling],
            "codeAge": self.code_age.to_dict() if self.code_age else None,
            "authors": [a.to_dict() for a in self.authors],
            "knowledgeSilos": [s.to_dict() for s in self.knowledge_silos],
        }
