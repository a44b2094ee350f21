"""Base formatter interface for git-dig output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import AnalysisReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: AnalysisReport) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, report: AnalysisReport) -> str:
        """Return formatted string representation of the report."""


def truncate_path(path: str, max_len: int = 50) -> str:
    """Shorten long paths from the left, keeping the file name visible."""
    if len(path) <= max_len:
        return path
    return "..." + path[-(max_len - 3):]


def percent(degree: float) -> int:
    return int(degree * 100 + 0.5)
