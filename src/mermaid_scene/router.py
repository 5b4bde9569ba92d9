"""Connector router: anchor sides, routing style and decoration for each link.

A link is routed only when both of its endpoints were placed; anything else
is dropped. Anchor sides come from comparing the two element centres: the
dominant axis picks left/right or top/bottom faces, and the connector runs
between the midpoints of those faces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mermaid_scene.config import LayoutConfig
from mermaid_scene.layout.types import LayoutResult, Link, Point, PositionedElement
from mermaid_scene.types import ArrowHead, ArrowStyle, Dash, DiagramKind, Layer, RelationKind, Routing, ShapeKind, Side

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoration:
    """Line and arrowhead style of a routed connector."""

    color: str
    width: int
    dash: Dash = Dash.Solid
    start_arrow: ArrowHead | None = None
    end_arrow: ArrowHead | None = ArrowHead.Triangle


@dataclass
class Route:
    """A routed connector whose anchors still refer to element keys."""

    from_key: str
    to_key: str
    routing: Routing
    start: Point
    end: Point
    start_side: Side
    end_side: Side
    decoration: Decoration
    label: str | None = None


# ─── Geometry ────────────────────────────────────────────────────────────────


def anchor_sides(source: PositionedElement, target: PositionedElement) -> tuple[Side, Side]:
    """Faces a connector leaves ``source`` from and enters ``target`` at."""
    if source is target:
        return Side.Right, Side.Top
    dx = target.center_x - source.center_x
    dy = target.center_y - source.center_y
    if abs(dx) >= abs(dy):
        return (Side.Right, Side.Left) if dx >= 0 else (Side.Left, Side.Right)
    return (Side.Bottom, Side.Top) if dy >= 0 else (Side.Top, Side.Bottom)


def routing_for(start: Point, end: Point, tolerance: int) -> Routing:
    """Straight when the endpoints (nearly) share an x or a y, elbow otherwise."""
    if abs(start.x - end.x) < tolerance or abs(start.y - end.y) < tolerance:
        return Routing.Straight
    return Routing.Elbow


# ─── Decoration ──────────────────────────────────────────────────────────────


def _flowchart_decoration(style: object, config: LayoutConfig) -> Decoration:
    cfg, router = config.flowchart, config.router
    if style == ArrowStyle.Thick:
        return Decoration(color=cfg.thick_color, width=router.thick_line_width)
    if style == ArrowStyle.Dotted:
        return Decoration(color=cfg.dotted_color, width=router.line_width, dash=Dash.Dash)
    if style == ArrowStyle.Open:
        return Decoration(color=cfg.arrow_color, width=router.line_width, end_arrow=None)
    return Decoration(color=cfg.arrow_color, width=router.line_width)


def _state_decoration(style: object, config: LayoutConfig) -> Decoration:
    return Decoration(color=config.state.line, width=config.router.line_width)


def _er_decoration(style: object, config: LayoutConfig) -> Decoration:
    return Decoration(color=config.er.line, width=config.router.line_width, end_arrow=ArrowHead.Diamond)


def _class_decoration(style: object, config: LayoutConfig) -> Decoration:
    color, width = config.class_diagram.line, config.router.line_width
    if style == RelationKind.Extends:
        # Triangle on the parent, which is the left-hand class of ``Parent <|-- Child``.
        return Decoration(color=color, width=width, start_arrow=ArrowHead.Triangle, end_arrow=None)
    if style == RelationKind.Uses:
        return Decoration(color=color, width=width)
    return Decoration(color=color, width=width, end_arrow=None)


def _mindmap_decoration(style: object, config: LayoutConfig) -> Decoration:
    return Decoration(color=config.mindmap.link_color, width=config.router.line_width, end_arrow=None)


_DECORATIONS = {
    DiagramKind.Flowchart: _flowchart_decoration,
    DiagramKind.StateDiagram: _state_decoration,
    DiagramKind.ErDiagram: _er_decoration,
    DiagramKind.ClassDiagram: _class_decoration,
    DiagramKind.Mindmap: _mindmap_decoration,
}


def decorate(kind: DiagramKind, style: object, config: LayoutConfig) -> Decoration:
    """Line colour, width, dash and arrowheads for a link of a ``kind`` diagram."""
    return _DECORATIONS.get(kind, _flowchart_decoration)(style, config)


# ─── Labels ──────────────────────────────────────────────────────────────────


def _label_box(kind: DiagramKind, config: LayoutConfig) -> tuple[int, int, str]:
    if kind == DiagramKind.StateDiagram:
        cfg = config.state
    elif kind == DiagramKind.ErDiagram:
        cfg = config.er
    elif kind == DiagramKind.ClassDiagram:
        cfg = config.class_diagram
    else:
        cfg = config.flowchart
    return cfg.label_width, cfg.label_height, cfg.label_fill


def label_element(route: Route, kind: DiagramKind, config: LayoutConfig) -> PositionedElement:
    """A standalone label box centred on the connector span."""
    width, height, fill = _label_box(kind, config)
    mid_x = (route.start.x + route.end.x) // 2
    mid_y = (route.start.y + route.end.y) // 2
    return PositionedElement(
        key=None,
        kind=ShapeKind.Rectangle,
        x=mid_x - width // 2,
        y=mid_y - height // 2,
        width=width,
        height=height,
        text=route.label,
        fill=fill,
        line_color=route.decoration.color,
        line_width=config.router.label_line_width,
        layer=Layer.Label,
    )


# ─── Public API ──────────────────────────────────────────────────────────────


def route_link(link: Link, result: LayoutResult, config: LayoutConfig) -> Route | None:
    """Route one link, or return None when an endpoint was never placed."""
    source = result.positions.get(link.from_id)
    target = result.positions.get(link.to_id)
    if source is None or target is None:
        log.debug("connector %s -> %s dropped: endpoint not placed", link.from_id, link.to_id)
        return None
    start_side, end_side = anchor_sides(source, target)
    start = source.side_point(start_side)
    end = target.side_point(end_side)
    return Route(
        from_key=link.from_id,
        to_key=link.to_id,
        routing=routing_for(start, end, config.router.straight_tolerance),
        start=start,
        end=end,
        start_side=start_side,
        end_side=end_side,
        decoration=decorate(result.kind, link.style, config),
        label=link.label or None,
    )


def route_links(result: LayoutResult, config: LayoutConfig) -> tuple[list[Route], list[PositionedElement]]:
    """Route every link of a layout.

    Returns the routes in link order and, when ``config.label_shapes`` is
    set, one label element per labelled route. Those routes then carry no
    label of their own.
    """
    routes: list[Route] = []
    labels: list[PositionedElement] = []
    for link in result.links:
        route = route_link(link, result, config)
        if route is None:
            continue
        if route.label and config.label_shapes:
            labels.append(label_element(route, result.kind, config))
            route.label = None
        routes.append(route)
    return routes, labels
