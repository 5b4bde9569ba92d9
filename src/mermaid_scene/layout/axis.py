"""Linear-axis placement for timelines."""

from __future__ import annotations

from mermaid_scene.config import LayoutConfig
from mermaid_scene.ir.model import TimelineModel
from mermaid_scene.layout.types import LayoutResult, PositionedElement
from mermaid_scene.types import Layer, ShapeKind


def layout_timeline(model: TimelineModel, config: LayoutConfig) -> LayoutResult:
    """Events left to right along a baseline.

    Each event gets a marker on the baseline, a date label above it and a
    block listing its items below it.
    """
    cfg = config.timeline
    result = LayoutResult(kind=model.kind)
    if model.title:
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=cfg.origin_x,
                y=cfg.origin_y,
                width=cfg.title_width,
                height=cfg.title_height,
                text=model.title,
                layer=Layer.Label,
            )
        )
    result.place(
        PositionedElement(
            key=None,
            kind=ShapeKind.Rectangle,
            x=cfg.origin_x,
            y=cfg.axis_y,
            width=len(model.events) * cfg.event_spacing + cfg.axis_tail,
            height=cfg.axis_thickness,
            fill=cfg.accent,
            layer=Layer.Background,
        )
    )
    for i, event in enumerate(model.events):
        x = cfg.origin_x + i * cfg.event_spacing
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Ellipse,
                x=x + cfg.event_width // 2 - cfg.marker_size // 2,
                y=cfg.axis_y - cfg.marker_rise,
                width=cfg.marker_size,
                height=cfg.marker_size,
                fill=cfg.accent,
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=x,
                y=cfg.axis_y - cfg.date_height - cfg.date_gap,
                width=cfg.event_width,
                height=cfg.date_height,
                text=event.date,
                fill=cfg.accent,
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.RoundedRectangle,
                x=x,
                y=cfg.axis_y + cfg.items_gap,
                width=cfg.event_width,
                height=max(len(event.items), 1) * cfg.item_height,
                text="\n".join(event.items),
                fill=cfg.palette[i % len(cfg.palette)],
                line_color=cfg.accent,
                line_width=config.thin_outline_width,
            )
        )
    return result
