"""Radial placement for mindmaps.

Root at a fixed centre, level-1 nodes evenly spaced on an inner circle
starting at twelve o'clock, level-2 nodes on an outer circle fanned out
around their parent's angle.
"""

from __future__ import annotations

import math

from mermaid_scene.config import LayoutConfig
from mermaid_scene.ir.graph import GraphIR
from mermaid_scene.ir.model import MindmapModel
from mermaid_scene.layout.types import LayoutResult, Link, PositionedElement
from mermaid_scene.types import ShapeKind


def level1_angle(index: int, count: int) -> float:
    return index * (2 * math.pi / count) - math.pi / 2


def fan_angle(parent_angle: float, index: int, count: int, step: float) -> float:
    """Angle of the ``index``-th of ``count`` siblings, centred on the parent's angle."""
    return parent_angle + (index - (count - 1) / 2) * step


def _polar(cx: int, cy: int, radius: int, angle: float, width: int, height: int) -> tuple[int, int]:
    return cx + int(radius * math.cos(angle)) - width // 2, cy + int(radius * math.sin(angle)) - height // 2


def layout_mindmap(model: MindmapModel, config: LayoutConfig) -> LayoutResult:
    cfg = config.mindmap
    result = LayoutResult(kind=model.kind)
    root = model.root
    if root is None:
        return result

    result.place(
        PositionedElement(
            key=root.id,
            kind=ShapeKind.Ellipse,
            x=cfg.center_x - cfg.root_width // 2,
            y=cfg.center_y - cfg.root_height // 2,
            width=cfg.root_width,
            height=cfg.root_height,
            text=root.label,
            fill=cfg.root_fill,
            line_color=cfg.root_line,
            line_width=config.outline_width,
        )
    )

    level1 = model.level(1)
    angles: dict[str, float] = {}
    for i, node in enumerate(level1):
        angles[node.id] = level1_angle(i, len(level1))
        x, y = _polar(cfg.center_x, cfg.center_y, cfg.radius1, angles[node.id], cfg.node_width, cfg.node_height)
        result.place(
            PositionedElement(
                key=node.id,
                kind=ShapeKind.RoundedRectangle,
                x=x,
                y=y,
                width=cfg.node_width,
                height=cfg.node_height,
                text=node.label,
                fill=cfg.level1_palette[i % len(cfg.level1_palette)],
            )
        )

    for parent in level1:
        children = [n for n in model.level(2) if n.parent == parent.id]
        for k, node in enumerate(children):
            angle = fan_angle(angles[parent.id], k, len(children), cfg.fan_step)
            x, y = _polar(cfg.center_x, cfg.center_y, cfg.radius2, angle, cfg.node_width, cfg.node_height)
            result.place(
                PositionedElement(
                    key=node.id,
                    kind=ShapeKind.RoundedRectangle,
                    x=x,
                    y=y,
                    width=cfg.node_width,
                    height=cfg.node_height,
                    text=node.label,
                    fill=cfg.level2_fill,
                    line_color=cfg.level2_line,
                    line_width=config.thin_outline_width,
                )
            )

    gir = GraphIR.from_model(model)
    result.links = [Link(from_id=src, to_id=tgt) for src, tgt, _ in gir.ordered_edges()]
    return result
