"""Parser registry: dispatch diagram text to the parser for its kind."""

from __future__ import annotations

from mermaid_scene.ir.model import DiagramModel
from mermaid_scene.parsers.base import Parser
from mermaid_scene.parsers.class_diagram import ClassDiagramParser
from mermaid_scene.parsers.er import ErParser
from mermaid_scene.parsers.flowchart import FlowchartParser
from mermaid_scene.parsers.gantt import GanttParser
from mermaid_scene.parsers.mindmap import MindmapParser
from mermaid_scene.parsers.pie import PieParser
from mermaid_scene.parsers.sequence import SequenceParser
from mermaid_scene.parsers.state import StateParser
from mermaid_scene.parsers.timeline import TimelineParser
from mermaid_scene.types import DiagramKind

PARSERS: dict[DiagramKind, type[Parser]] = {
    DiagramKind.Flowchart: FlowchartParser,
    DiagramKind.Sequence: SequenceParser,
    DiagramKind.StateDiagram: StateParser,
    DiagramKind.ErDiagram: ErParser,
    DiagramKind.ClassDiagram: ClassDiagramParser,
    DiagramKind.Pie: PieParser,
    DiagramKind.Gantt: GanttParser,
    DiagramKind.Mindmap: MindmapParser,
    DiagramKind.Timeline: TimelineParser,
}


def parse_diagram(src: str, kind: DiagramKind) -> DiagramModel:
    """Parse ``src`` as a diagram of ``kind``.

    Raises:
        ValueError: If ``kind`` has no parser (``DiagramKind.Unknown``).
    """
    parser_cls = PARSERS.get(kind)
    if parser_cls is None:
        raise ValueError(f"Unsupported diagram kind: {kind.name}")
    return parser_cls().parse(src)


__all__ = ["PARSERS", "Parser", "parse_diagram"]
