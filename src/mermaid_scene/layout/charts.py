"""Chart placement: pie and Gantt."""

from __future__ import annotations

from mermaid_scene.config import LayoutConfig
from mermaid_scene.ir.model import GanttModel, PieModel
from mermaid_scene.layout.types import LayoutResult, PositionedElement
from mermaid_scene.types import Layer, ShapeKind


def legend_text(label: str, percentage: float) -> str:
    return f"{label} ({percentage:.1f}%)"


def layout_pie(model: PieModel, config: LayoutConfig) -> LayoutResult:
    """One circle in the first palette colour plus a legend row per slice."""
    cfg = config.pie
    result = LayoutResult(kind=model.kind)
    if model.title:
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=cfg.title_x,
                y=cfg.title_y,
                width=cfg.title_width,
                height=cfg.title_height,
                text=model.title,
                layer=Layer.Label,
            )
        )
    result.place(
        PositionedElement(
            key=None,
            kind=ShapeKind.Ellipse,
            x=cfg.center_x - cfg.radius,
            y=cfg.center_y - cfg.radius,
            width=2 * cfg.radius,
            height=2 * cfg.radius,
            fill=cfg.palette[0],
            line_color=cfg.outline,
            line_width=config.outline_width,
        )
    )
    for i, (piece, pct) in enumerate(zip(model.slices, model.percentages())):
        y = cfg.legend_y + i * cfg.legend_row_height
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=cfg.legend_x,
                y=y,
                width=cfg.legend_box_size,
                height=cfg.legend_box_size,
                fill=cfg.palette[i % len(cfg.palette)],
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=cfg.legend_x + cfg.legend_text_offset,
                y=y,
                width=cfg.legend_text_width,
                height=cfg.legend_box_size,
                text=legend_text(piece.label, pct),
            )
        )
    return result


def layout_gantt(model: GanttModel, config: LayoutConfig) -> LayoutResult:
    """Stacked rows: a header bar per named section, then a label and bar per task.

    Bar length is ``duration * unit_width``; bars shift right by task index.
    Critical tasks get a red outline and milestones a diamond.
    """
    cfg = config.gantt
    result = LayoutResult(kind=model.kind)
    if model.title:
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=cfg.origin_x,
                y=cfg.origin_y,
                width=cfg.width,
                height=cfg.title_height,
                text=model.title,
                layer=Layer.Label,
            )
        )
    y = cfg.origin_y + cfg.title_gap
    for section_idx, section in enumerate(model.sections):
        if section.name:
            result.place(
                PositionedElement(
                    key=None,
                    kind=ShapeKind.Rectangle,
                    x=cfg.origin_x,
                    y=y,
                    width=cfg.width,
                    height=cfg.section_height,
                    text=section.name,
                    fill=cfg.section_fill,
                )
            )
            y += cfg.section_height + cfg.section_gap
        for task_idx, task in enumerate(section.tasks):
            result.place(
                PositionedElement(
                    key=None,
                    kind=ShapeKind.Rectangle,
                    x=cfg.origin_x,
                    y=y,
                    width=cfg.label_width,
                    height=cfg.task_height,
                    text=task.name,
                )
            )
            milestone = "milestone" in task.status
            critical = "crit" in task.status
            result.place(
                PositionedElement(
                    key=None,
                    kind=ShapeKind.Diamond if milestone else ShapeKind.RoundedRectangle,
                    x=cfg.origin_x + cfg.label_width + cfg.bar_gap + task_idx * cfg.bar_stagger,
                    y=y,
                    width=cfg.task_height if milestone else task.duration * cfg.unit_width,
                    height=cfg.task_height,
                    fill=cfg.palette[(section_idx + task_idx) % len(cfg.palette)],
                    line_color=cfg.crit_line if critical else None,
                    line_width=config.outline_width if critical else None,
                )
            )
            y += cfg.task_spacing
    return result
