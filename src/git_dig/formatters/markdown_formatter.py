"""Markdown formatter for git-dig."""

from datetime import datetime, timezone

from ..analysis.models import AnalysisReport
from .base import BaseFormatter, percent

AGE_ROWS = (
    ("fresh", "Fresh (≤7 days)"),
    ("recent", "Recent (≤30 days)"),
    ("aging", "Aging (≤90 days)"),
    ("stale", "Stale (≤1 year)"),
    ("ancient", "Ancient (>1 year)"),
)


def _cell(value: object) -> str:
    # A bare pipe would split the table cell
    return str(value).replace("|", "\\|")


class MarkdownFormatter(BaseFormatter):
    """Render the report as Markdown with one table per section."""

    def render(self, report: AnalysisReport) -> None:
        print(self.format(report))

    def format(self, report: AnalysisReport) -> str:
        lines: list[str] = []
        summary = report.summary

        lines.append("# git-dig — Repository Archaeology")
        lines.append("")
        lines.append(f"{summary.total_commits} commits by {summary.total_authors} authors")
        if summary.date_range:
            lines.append(
                f"{summary.date_range.start[:10]} to {summary.date_range.end[:10]}"
            )
        lines.append("")

        if report.hotspots:
            lines.extend(["## Hotspots", ""])
            lines.append("| File | Commits | Churn | Authors |")
            lines.append("| --- | ---: | ---: | ---: |")
            for h in report.hotspots:
                lines.append(f"| {_cell(h.path)} | {h.commits} | {h.churn} | {h.authors} |")
            lines.append("")

        if report.coupling:
            lines.extend(["## Temporal Coupling", ""])
            lines.append("| File A | File B | Co-changes | Degree |")
            lines.append("| --- | --- | ---: | ---: |")
            for c in report.coupling:
                lines.append(
                    f"| {_cell(c.file_a)} | {_cell(c.file_b)} | {c.coupled} | {percent(c.degree)}% |"
                )
            lines.append("")

        if report.code_age is not None:
            buckets = report.code_age.buckets
            lines.extend(["## Code Age Distribution", ""])
            lines.append("| Age | Files |")
            lines.append("| --- | ---: |")
            for name, label in AGE_ROWS:
                lines.append(f"| {label} | {getattr(buckets, name)} |")
            lines.append("")

        if report.authors:
            lines.extend(["## Authors", ""])
            lines.append("| Author | Commits | Added | Deleted | Files |")
            lines.append("| --- | ---: | ---: | ---: | ---: |")
            for a in report.authors:
                lines.append(
                    f"| {_cell(a.name)} | {a.commits} | +{a.added} | -{a.deleted} | {a.files_changed} |"
                )
            lines.append("")

        if report.knowledge_silos:
            lines.extend(["## Knowledge Silos", ""])
            lines.append("| File | Author | Commits |")
            lines.append("| --- | --- | ---: |")
            for s in report.knowledge_silos:
                lines.append(f"| {_cell(s.path)} | {_cell(s.author)} | {s.commits} |")
            lines.append("")

        generated = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M")
        lines.append("---")
        lines.append(f"*Generated by git-dig at {generated}*")

        return "\n".join(lines)
