"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)

# CLI section flag -> AnalysisReport field
SECTION_FLAGS = {
    "hotspots": "hotspots",
    "coupling": "coupling",
    "age": "code_age",
    "authors": "authors",
    "silos": "knowledge_silos",
}


def resolve_config(
    config: Optional[Path] = None,
    since: Optional[str] = None,
    until: Optional[str] = None,
    max_commits: Optional[int] = None,
    verbose: bool = False,
) -> AnalysisConfig:
    """Build config from CLI options."""
    return load_config(
        config_file=config,
        since=since,
        until=until,
        git_max_commits=max_commits,
        verbose=verbose,
    )


def pick_format(markdown: bool, json_output: bool, graph: bool) -> str:
    if json_output:
        return "json"
    if markdown:
        return "markdown"
    if graph:
        return "graph"
    return "text"


def pick_section(**flags: bool) -> Optional[str]:
    """Return the report field for the first section flag set, if any."""
    for flag, section in SECTION_FLAGS.items():
        if flags.get(flag):
            return section
    return None
