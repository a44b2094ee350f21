"""Mermaid graph formatter: temporal coupling as an undirected diagram."""

from ..analysis.models import AnalysisReport
from .base import BaseFormatter, percent


def _label(text: str) -> str:
    # Mermaid labels are quoted; a raw quote would end the label early
    return text.replace('"', "#quot;")


class GraphFormatter(BaseFormatter):
    """Render coupled file pairs as a Mermaid ``graph LR`` block.

    Each file becomes one node; each pair becomes an edge labelled with its
    co-change count and degree.
    """

    def render(self, report: AnalysisReport) -> None:
        print(self.format(report))

    def format(self, report: AnalysisReport) -> str:
        lines = ["```mermaid", "graph LR"]

        node_ids: dict[str, str] = {}

        def node(path: str) -> str:
            if path not in node_ids:
                node_ids[path] = f"f{len(node_ids)}"
                return f'{node_ids[path]}["{_label(path)}"]'
            return node_ids[path]

        if not report.coupling:
            lines.append("    %% no temporal coupling found")

        for c in report.coupling:
            edge = f"{c.coupled}× {percent(c.degree)}%"
            lines.append(f'    {node(c.file_a)} ---|"{edge}"| {node(c.file_b)}')

        lines.append("```")
        return "\n".join(lines)
