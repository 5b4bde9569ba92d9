"""Scene assembler: output records and final id assignment.

Shapes are emitted background first, then nodes, then labels, keeping
layout order within a layer. Ids start at ``ID_BASE`` and ascend across the
shapes and then the connectors, so they never collide with the ids a host
reserves for its own title and body placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mermaid_scene.config import LayoutConfig
from mermaid_scene.layout.types import LayoutResult, PositionedElement
from mermaid_scene.router import Route
from mermaid_scene.types import ArrowHead, Dash, Routing, ShapeKind, Side

ID_BASE = 10
FALLBACK_TEXT = "Unknown"


@dataclass(frozen=True)
class Shape:
    id: int
    kind: ShapeKind
    x: int
    y: int
    width: int
    height: int
    fill_color: str | None = None
    line_color: str | None = None
    line_width: int | None = None
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "fillColor": self.fill_color,
            "lineColor": self.line_color,
            "lineWidth": self.line_width,
            "text": self.text,
        }


@dataclass(frozen=True)
class Anchor:
    shape_id: int
    side: Side

    def to_dict(self) -> dict[str, Any]:
        return {"shapeId": self.shape_id, "side": self.side.value}


@dataclass(frozen=True)
class Connector:
    id: int | None
    routing: Routing
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    line_color: str
    line_width: int
    dash: Dash = Dash.Solid
    start_anchor: Anchor | None = None
    end_anchor: Anchor | None = None
    start_arrow: ArrowHead | None = None
    end_arrow: ArrowHead | None = None
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "routing": self.routing.value,
            "startX": self.start_x,
            "startY": self.start_y,
            "endX": self.end_x,
            "endY": self.end_y,
            "startAnchor": self.start_anchor.to_dict() if self.start_anchor else None,
            "endAnchor": self.end_anchor.to_dict() if self.end_anchor else None,
            "lineColor": self.line_color,
            "lineWidth": self.line_width,
            "dash": self.dash.value,
            "startArrow": self.start_arrow.value if self.start_arrow else None,
            "endArrow": self.end_arrow.value if self.end_arrow else None,
            "label": self.label,
        }


@dataclass(frozen=True)
class Scene:
    """Final output: ordered shapes and connectors ready for a renderer."""

    shapes: list[Shape] = field(default_factory=list)
    connectors: list[Connector] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.shapes and not self.connectors

    def to_dict(self) -> dict[str, Any]:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "connectors": [c.to_dict() for c in self.connectors],
        }


def _shape(element: PositionedElement, shape_id: int) -> Shape:
    return Shape(
        id=shape_id,
        kind=element.kind,
        x=element.x,
        y=element.y,
        width=element.width,
        height=element.height,
        fill_color=element.fill,
        line_color=element.line_color,
        line_width=element.line_width,
        text=element.text,
    )


def assemble_scene(
    result: LayoutResult,
    routes: list[Route],
    labels: list[PositionedElement] | None = None,
) -> Scene:
    """Merge placed elements, label elements and routes into a Scene."""
    elements = sorted([*result.elements, *(labels or [])], key=lambda e: e.layer)
    shapes: list[Shape] = []
    key_ids: dict[str, int] = {}
    for offset, element in enumerate(elements):
        shape_id = ID_BASE + offset
        shapes.append(_shape(element, shape_id))
        if element.key is not None and result.positions.get(element.key) is element:
            key_ids[element.key] = shape_id

    connectors: list[Connector] = []
    next_id = ID_BASE + len(shapes)
    for route in routes:
        start_id = key_ids.get(route.from_key)
        end_id = key_ids.get(route.to_key)
        anchored = start_id is not None and end_id is not None
        connectors.append(
            Connector(
                id=next_id,
                routing=route.routing,
                start_x=route.start.x,
                start_y=route.start.y,
                end_x=route.end.x,
                end_y=route.end.y,
                line_color=route.decoration.color,
                line_width=route.decoration.width,
                dash=route.decoration.dash,
                start_anchor=Anchor(start_id, route.start_side) if anchored else None,
                end_anchor=Anchor(end_id, route.end_side) if anchored else None,
                start_arrow=route.decoration.start_arrow,
                end_arrow=route.decoration.end_arrow,
                label=route.label,
            )
        )
        next_id += 1
    return Scene(shapes=shapes, connectors=connectors)


def fallback_scene(first_line: str | None, config: LayoutConfig) -> Scene:
    """A single placeholder box naming the diagram, and no connectors."""
    cfg = config.fallback
    placeholder = Shape(
        id=ID_BASE,
        kind=ShapeKind.Rectangle,
        x=cfg.x,
        y=cfg.y,
        width=cfg.width,
        height=cfg.height,
        fill_color=cfg.fill,
        line_color=cfg.line,
        line_width=config.thin_outline_width,
        text=f"Diagram: {first_line or FALLBACK_TEXT}",
    )
    return Scene(shapes=[placeholder])
