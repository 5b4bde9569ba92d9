"""Lane placement for sequence diagrams."""

from __future__ import annotations

from mermaid_scene.config import LayoutConfig
from mermaid_scene.ir.model import SequenceModel
from mermaid_scene.layout.types import LayoutResult, PositionedElement
from mermaid_scene.types import Layer, ShapeKind


def lifeline_height(message_count: int, config: LayoutConfig) -> int:
    """Lifeline length: tall enough for every message, never below the minimum."""
    cfg = config.sequence
    needed = 2 * cfg.message_offset + message_count * cfg.message_spacing
    return max(cfg.min_lifeline_height, needed)


def layout_sequence(model: SequenceModel, config: LayoutConfig) -> LayoutResult:
    """One lane per participant: top box, lifeline bar, bottom box.

    Message ``i`` sits at ``first_y + i * message_spacing`` as a left or
    right arrow spanning the two lane centres, with its text above it.
    """
    cfg = config.sequence
    result = LayoutResult(kind=model.kind)
    lane_height = lifeline_height(len(model.messages), config)
    centers: dict[str, int] = {}

    for i, participant in enumerate(model.participants.values()):
        x = cfg.origin_x + i * cfg.h_spacing
        centers[participant.id] = x + cfg.participant_width // 2
        for key, y in (
            (participant.id, cfg.origin_y),
            (None, cfg.origin_y + cfg.participant_height + lane_height),
        ):
            result.place(
                PositionedElement(
                    key=key,
                    kind=ShapeKind.Rectangle,
                    x=x,
                    y=y,
                    width=cfg.participant_width,
                    height=cfg.participant_height,
                    text=participant.display_name,
                    fill=cfg.box_fill,
                    line_color=cfg.box_line,
                    line_width=config.outline_width,
                )
            )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=centers[participant.id] - cfg.lifeline_width // 2,
                y=cfg.origin_y + cfg.participant_height,
                width=cfg.lifeline_width,
                height=lane_height,
                fill=cfg.lifeline_fill,
            )
        )

    first_y = cfg.origin_y + cfg.participant_height + cfg.message_offset
    for i, message in enumerate(model.messages):
        from_center = centers[message.from_id]
        to_center = centers[message.to_id]
        y = first_y + i * cfg.message_spacing
        if message.from_id == message.to_id:
            # Self message: a short arrow out of the lane.
            kind, x, width = ShapeKind.RightArrow, from_center, cfg.self_message_width
        elif from_center < to_center:
            kind, x, width = ShapeKind.RightArrow, from_center, to_center - from_center
        else:
            kind, x, width = ShapeKind.LeftArrow, to_center, from_center - to_center
        result.place(
            PositionedElement(
                key=None,
                kind=kind,
                x=x,
                y=y,
                width=width,
                height=cfg.arrow_height,
                fill=cfg.reply_fill if message.dashed else cfg.message_fill,
            )
        )
        if message.text:
            result.place(
                PositionedElement(
                    key=None,
                    kind=ShapeKind.Rectangle,
                    x=x,
                    y=y - cfg.text_offset,
                    width=width,
                    height=cfg.text_height,
                    text=message.text,
                    layer=Layer.Label,
                )
            )
    return result
