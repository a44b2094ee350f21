"""Output formatters for git-dig."""

from .base import BaseFormatter
from .graph_formatter import GraphFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .text_formatter import TextFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "text", "markdown", "json", "graph"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "text": TextFormatter,
        "markdown": MarkdownFormatter,
        "json": JsonFormatter,
        "graph": GraphFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "MarkdownFormatter",
    "JsonFormatter",
    "GraphFormatter",
    "get_formatter",
]
