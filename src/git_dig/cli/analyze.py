"""Main command: read history, run every analysis, render the report."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import analyze_all
from ..exceptions import GitDigError, NotAGitRepositoryError
from ..formatters import get_formatter
from ..history import GitExtractor
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, pick_format, pick_section, resolve_config


@app.command()
def dig(
    path: Path = typer.Argument(
        Path("."),
        help="Repository to analyze (default: current directory)",
    ),
    since: Optional[str] = typer.Option(
        None,
        "-s",
        "--since",
        help='Only commits after this date (e.g. "6 months ago", "2024-01-01")',
    ),
    until: Optional[str] = typer.Option(
        None,
        "-u",
        "--until",
        help="Only commits before this date",
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "-n",
        "--max",
        help="Max commits to analyze (default: 5000)",
        min=1,
    ),
    markdown: bool = typer.Option(False, "-m", "--markdown", help="Output as Markdown"),
    json_output: bool = typer.Option(False, "-j", "--json", help="Output as JSON"),
    graph: bool = typer.Option(
        False, "-g", "--graph", help="Output temporal coupling as a Mermaid graph"
    ),
    hotspots: bool = typer.Option(False, "--hotspots", help="Show only hotspots"),
    coupling: bool = typer.Option(False, "--coupling", help="Show only temporal coupling"),
    age: bool = typer.Option(False, "--age", help="Show only code age"),
    authors: bool = typer.Option(False, "--authors", help="Show only author stats"),
    silos: bool = typer.Option(False, "--silos", help="Show only knowledge silos"),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Dig into a repository's git history.

    Reports hotspots, temporal coupling, code age, authorship, and
    knowledge silos.

    [bold cyan]Examples:[/bold cyan]

      git-dig

      git-dig ./my-project

      git-dig -s "6 months ago"

      git-dig --hotspots

      git-dig -m > report.md
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]git-dig[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            config=config,
            since=since,
            until=until,
            max_commits=max_commits,
            verbose=verbose,
        )
        logger = setup_logging(settings.verbosity)
        extractor = GitExtractor(
            str(path),
            max_commits=settings.git_max_commits,
            since=settings.since,
            until=settings.until,
        )
        commits = extractor.extract()
    except NotAGitRepositoryError:
        err_console.print(
            "[red]Error:[/red] not a git repository. "
            "Run git-dig inside a git repo or pass a path."
        )
        raise typer.Exit(1)
    except GitDigError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not commits:
        err_console.print("No commits found in the specified range.")
        raise typer.Exit(1)

    report = analyze_all(commits, config=settings)
    logger.debug("Analysis complete for %s", path)

    section = pick_section(
        hotspots=hotspots, coupling=coupling, age=age, authors=authors, silos=silos
    )
    if section is not None:
        report = report.only(section)

    get_formatter(pick_format(markdown, json_output, graph)).render(report)
