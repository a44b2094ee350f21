"""Rich terminal formatter for git-dig."""

import io

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.models import AnalysisReport
from .base import BaseFormatter, percent, truncate_path

console = Console()

HOTSPOT_ROWS = 15
COUPLING_ROWS = 10
AUTHOR_ROWS = 10
SILO_ROWS = 10

# (bucket field, label) in display order
AGE_LABELS = (
    ("fresh", "fresh (≤7d)"),
    ("recent", "recent (≤30d)"),
    ("aging", "aging (≤90d)"),
    ("stale", "stale (≤1y)"),
    ("ancient", "ancient (>1y)"),
)


def bar(value: int, max_value: int, width: int = 20) -> str:
    """Horizontal bar proportional to value/max_value, at least one cell when non-zero max."""
    if max_value == 0:
        return "░" * width
    filled = max(1, int(value / max_value * width + 0.5))
    return "█" * filled + "░" * (width - filled)


def _section_table() -> Table:
    return Table(show_header=False, box=None, pad_edge=False, padding=(0, 1, 0, 2))


class TextFormatter(BaseFormatter):
    """Human-readable terminal report with bars per section."""

    def render(self, report: AnalysisReport) -> None:
        self._print_report(console, report)

    def format(self, report: AnalysisReport) -> str:
        buffer = Console(file=io.StringIO(), record=True, width=120, color_system=None)
        self._print_report(buffer, report)
        return buffer.export_text()

    def _print_report(self, out: Console, report: AnalysisReport) -> None:
        self._print_header(out, report)
        self._print_hotspots(out, report)
        self._print_coupling(out, report)
        self._print_code_age(out, report)
        self._print_authors(out, report)
        self._print_silos(out, report)

    def _print_header(self, out: Console, report: AnalysisReport) -> None:
        summary = report.summary
        out.print("[bold]git-dig[/bold] — repository archaeology")
        out.print()
        out.print(f"  {summary.total_commits} commits by {summary.total_authors} authors")
        if summary.date_range:
            start = summary.date_range.start[:10]
            end = summary.date_range.end[:10]
            out.print(f"  {start} → {end}")
        out.print()

    def _print_hotspots(self, out: Console, report: AnalysisReport) -> None:
        if not report.hotspots:
            return
        max_commits = report.hotspots[0].commits
        out.print("[bold]🔥 Hotspots[/bold] (most frequently changed files)")
        out.print()
        table = _section_table()
        table.add_column(style="red")
        table.add_column(justify="right")
        table.add_column(justify="right", style="dim")
        table.add_column(no_wrap=True)
        for h in report.hotspots[:HOTSPOT_ROWS]:
            table.add_row(
                bar(h.commits, max_commits, 15),
                f"{h.commits} commits",
                f"{h.churn} churn",
                escape(truncate_path(h.path)),
            )
        out.print(table)
        out.print()

    def _print_coupling(self, out: Console, report: AnalysisReport) -> None:
        if not report.coupling:
            return
        out.print("[bold]🔗 Temporal Coupling[/bold] (files that change together)")
        out.print()
        table = _section_table()
        table.add_column(justify="right")
        table.add_column(justify="right", style="cyan")
        table.add_column(no_wrap=True)
        for c in report.coupling[:COUPLING_ROWS]:
            table.add_row(
                f"{c.coupled}×",
                f"({percent(c.degree)}%)",
                escape(f"{truncate_path(c.file_a, 35)} ↔ {truncate_path(c.file_b, 35)}"),
            )
        out.print(table)
        out.print()

    def _print_code_age(self, out: Console, report: AnalysisReport) -> None:
        if report.code_age is None:
            return
        buckets = report.code_age.buckets
        total = report.code_age.total_files
        out.print("[bold]📅 Code Age[/bold]")
        out.print()
        table = _section_table()
        table.add_column()
        table.add_column(justify="right")
        table.add_column(style="green")
        for name, label in AGE_LABELS:
            count = getattr(buckets, name)
            table.add_row(f"{label}:", str(count), bar(count, total, 15))
        out.print(table)
        out.print()

    def _print_authors(self, out: Console, report: AnalysisReport) -> None:
        if not report.authors:
            return
        max_commits = report.authors[0].commits
        out.print("[bold]👤 Authors[/bold]")
        out.print()
        table = _section_table()
        table.add_column(style="blue")
        table.add_column(justify="right")
        table.add_column(justify="right", style="dim")
        table.add_column(no_wrap=True)
        for a in report.authors[:AUTHOR_ROWS]:
            table.add_row(
                bar(a.commits, max_commits, 12),
                f"{a.commits} commits",
                f"{a.files_changed} files",
                escape(a.name),
            )
        out.print(table)
        out.print()

    def _print_silos(self, out: Console, report: AnalysisReport) -> None:
        if not report.knowledge_silos:
            return
        out.print("[bold yellow]⚠ Knowledge Silos[/bold yellow] (files with only one author)")
        out.print()
        table = _section_table()
        table.add_column(justify="right")
        table.add_column(style="yellow")
        table.add_column(no_wrap=True)
        for s in report.knowledge_silos[:SILO_ROWS]:
            table.add_row(f"{s.commits} commits", escape(s.author), escape(truncate_path(s.path)))
        out.print(table)
        out.print()
