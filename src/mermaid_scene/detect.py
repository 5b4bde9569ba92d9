"""Type detector: classify diagram text by its header keyword."""

from __future__ import annotations

from mermaid_scene.syntax.lines import split_header
from mermaid_scene.types import DiagramKind

# Prefix table, checked in order.
_KEYWORDS: tuple[tuple[str, DiagramKind], ...] = (
    ("graph", DiagramKind.Flowchart),
    ("flowchart", DiagramKind.Flowchart),
    ("sequencediagram", DiagramKind.Sequence),
    ("sequence", DiagramKind.Sequence),
    ("pie", DiagramKind.Pie),
    ("gantt", DiagramKind.Gantt),
    ("classdiagram", DiagramKind.ClassDiagram),
    ("class", DiagramKind.ClassDiagram),
    ("statediagram", DiagramKind.StateDiagram),
    ("state", DiagramKind.StateDiagram),
    ("erdiagram", DiagramKind.ErDiagram),
    ("er", DiagramKind.ErDiagram),
    ("mindmap", DiagramKind.Mindmap),
    ("timeline", DiagramKind.Timeline),
)


def detect_type(src: str) -> DiagramKind:
    """Detect the diagram kind from the first meaningful line. Never raises."""
    header, _ = split_header(src)
    if header is None:
        return DiagramKind.Unknown
    lower = header.text.lower()
    for keyword, kind in _KEYWORDS:
        if lower.startswith(keyword):
            return kind
    return DiagramKind.Unknown


def first_line(src: str) -> str | None:
    """The header line text, or None when the input has no content."""
    header, _ = split_header(src)
    return header.text if header is not None else None


# Whole header words per kind, lowercased.
_HEADER_WORDS: dict[DiagramKind, frozenset[str]] = {
    DiagramKind.Flowchart: frozenset({"graph", "flowchart", "flowchart-elk"}),
    DiagramKind.Sequence: frozenset({"sequencediagram"}),
    DiagramKind.Pie: frozenset({"pie"}),
    DiagramKind.Gantt: frozenset({"gantt"}),
    DiagramKind.ClassDiagram: frozenset({"classdiagram", "classdiagram-v2"}),
    DiagramKind.StateDiagram: frozenset({"statediagram", "statediagram-v2"}),
    DiagramKind.ErDiagram: frozenset({"erdiagram"}),
    DiagramKind.Mindmap: frozenset({"mindmap"}),
    DiagramKind.Timeline: frozenset({"timeline"}),
}


def has_header(src: str, kind: DiagramKind) -> bool:
    """True when the first meaningful line is a header line for ``kind``.

    The first word must equal one of the kind's header keywords, so a body
    line such as ``class Animal {`` or ``state Idle`` is not taken for a
    header the way prefix detection would take it.
    """
    header, _ = split_header(src)
    if header is None:
        return False
    word = header.text.split(maxsplit=1)[0].lower()
    return word in _HEADER_WORDS.get(kind, frozenset())
