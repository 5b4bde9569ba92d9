"""Layout engine: one placement strategy per diagram model, one dispatch point."""

from __future__ import annotations

from collections.abc import Callable

from mermaid_scene.config import DEFAULT_CONFIG, LayoutConfig
from mermaid_scene.ir import model as m
from mermaid_scene.layout.axis import layout_timeline
from mermaid_scene.layout.charts import layout_gantt, layout_pie
from mermaid_scene.layout.grid import layout_class, layout_er, layout_flowchart, layout_state
from mermaid_scene.layout.lanes import layout_sequence
from mermaid_scene.layout.radial import layout_mindmap
from mermaid_scene.layout.types import LayoutResult, Link, Point, PositionedElement, PositionMap

LAYOUTS: dict[type, Callable[..., LayoutResult]] = {
    m.FlowchartModel: layout_flowchart,
    m.SequenceModel: layout_sequence,
    m.StateModel: layout_state,
    m.ErModel: layout_er,
    m.ClassModel: layout_class,
    m.PieModel: layout_pie,
    m.GanttModel: layout_gantt,
    m.MindmapModel: layout_mindmap,
    m.TimelineModel: layout_timeline,
}


def layout_diagram(model: m.DiagramModel, config: LayoutConfig = DEFAULT_CONFIG) -> LayoutResult:
    """Place every entity of ``model``.

    Raises:
        ValueError: If ``model`` is not one of the diagram models.
    """
    strategy = LAYOUTS.get(type(model))
    if strategy is None:
        raise ValueError(f"No layout for {type(model).__name__}")
    return strategy(model, config)


__all__ = [
    "LAYOUTS",
    "LayoutResult",
    "Link",
    "Point",
    "PositionMap",
    "PositionedElement",
    "layout_diagram",
]
