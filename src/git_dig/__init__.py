"""
git-dig - repository archaeology from git history

Mines commit history for engineering-risk signals: hotspots, temporal
coupling, code age, authorship, and knowledge silos.
"""

__version__ = "0.1.0"

from .analysis import (
    AnalysisReport,
    analyze_all,
    authors,
    code_age,
    coupling,
    hotspots,
    knowledge_silos,
)
from .config import AnalysisConfig, load_config
from .history import Commit, FileChange, GitExtractor, parse_raw_log

__all__ = [
    "analyze_all",  # Main entry point
    "hotspots",
    "coupling",
    "code_age",
    "authors",
    "knowledge_silos",
    "AnalysisReport",
    "AnalysisConfig",
    "load_config",
    "Commit",
    "FileChange",
    "GitExtractor",
    "parse_raw_log",
]
