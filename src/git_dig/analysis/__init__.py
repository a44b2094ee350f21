"""History analyses: hotspots, temporal coupling, code age, authors, knowledge silos."""

from .aggregate import analyze_all, summarize
from .authors import authors
from .code_age import classify_age, code_age
from .coupling import coupling
from .hotspots import hotspots
from .models import (
    AgeBuckets,
    AgedFile,
    AnalysisReport,
    AuthorEntry,
    CodeAgeReport,
    CouplingPair,
    DateRange,
    HotspotEntry,
    SiloEntry,
    Summary,
)
from .silos import knowledge_silos

__all__ = [
    "analyze_all",
    "summarize",
    "hotspots",
    "coupling",
    "code_age",
    "classify_age",
    "authors",
    "knowledge_silos",
    "AnalysisReport",
    "Summary",
    "DateRange",
    "HotspotEntry",
    "CouplingPair",
    "CodeAgeReport",
    "AgeBuckets",
    "AgedFile",
    "AuthorEntry",
    "SiloEntry",
]
