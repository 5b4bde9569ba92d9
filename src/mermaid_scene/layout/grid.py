"""Grid placement: flowchart, state, class and ER diagrams.

Every box has a fixed size. The i-th box goes to column ``i % cols`` and
row ``i // cols``; a flowchart with subgraphs instead gets one column per
subgraph plus a trailing column for nodes no subgraph claimed.
"""

from __future__ import annotations

from mermaid_scene.config import LayoutConfig
from mermaid_scene.ir.graph import GraphIR
from mermaid_scene.ir.model import ClassModel, ErModel, FlowchartModel, Node, StateModel
from mermaid_scene.layout.types import LayoutResult, Link, PositionedElement
from mermaid_scene.types import Direction, Layer, NodeShape, ShapeKind

_NODE_SHAPE_KINDS: dict[NodeShape, ShapeKind] = {
    NodeShape.Rectangle: ShapeKind.Rectangle,
    NodeShape.RoundedRect: ShapeKind.RoundedRectangle,
    NodeShape.Stadium: ShapeKind.RoundedRectangle,
    NodeShape.Diamond: ShapeKind.Diamond,
    NodeShape.Circle: ShapeKind.Ellipse,
    NodeShape.Hexagon: ShapeKind.Hexagon,
}


def grid_cell(index: int, columns: int) -> tuple[int, int]:
    """(column, row) of the ``index``-th item in a grid of ``columns`` columns."""
    return index % columns, index // columns


def _links(gir: GraphIR) -> list[Link]:
    return [Link(from_id=src, to_id=tgt, label=data.label, style=data.style) for src, tgt, data in gir.ordered_edges()]


# ─── Flowchart ───────────────────────────────────────────────────────────────


def _flowchart_node(node: Node, x: int, y: int, config: LayoutConfig) -> PositionedElement:
    cfg = config.flowchart
    if node.shape == NodeShape.Diamond:
        fill = cfg.diamond_fill
    elif node.shape == NodeShape.Circle:
        fill = cfg.circle_fill
    else:
        fill = cfg.node_fill
    return PositionedElement(
        key=node.id,
        kind=_NODE_SHAPE_KINDS[node.shape],
        x=x,
        y=y,
        width=cfg.node_width,
        height=cfg.node_height,
        text=node.label,
        fill=fill,
        line_color=cfg.node_line,
        line_width=config.outline_width,
    )


def _flowchart_grid(result: LayoutResult, model: FlowchartModel, gir: GraphIR, config: LayoutConfig) -> None:
    cfg = config.flowchart
    node_ids = gir.node_ids()
    columns = min(cfg.max_columns, len(node_ids)) if model.direction.is_horizontal else 1
    rows = (len(node_ids) + columns - 1) // columns
    for i, node_id in enumerate(node_ids):
        col, row = grid_cell(i, columns)
        if model.direction == Direction.RL:
            col = columns - 1 - col
        elif model.direction == Direction.BT:
            row = rows - 1 - row
        x = cfg.origin_x + col * cfg.h_spacing
        y = cfg.origin_y + row * cfg.v_spacing
        result.place(_flowchart_node(model.nodes[node_id], x, y, config))


def _flowchart_subgraphs(result: LayoutResult, model: FlowchartModel, gir: GraphIR, config: LayoutConfig) -> None:
    cfg = config.flowchart
    column_x = cfg.subgraph_origin_x
    top = cfg.subgraph_origin_y
    for index, (name, members) in enumerate(gir.groups):
        width = cfg.node_width + cfg.subgraph_extra_width
        height = len(members) * cfg.v_spacing + cfg.subgraph_extra_height
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.RoundedRectangle,
                x=column_x,
                y=top,
                width=width,
                height=height,
                text=name,
                fill=cfg.subgraph_fills[index % len(cfg.subgraph_fills)],
                line_color=cfg.subgraph_line,
                line_width=config.thin_outline_width,
                layer=Layer.Background,
            )
        )
        for row, node_id in enumerate(members):
            x = column_x + cfg.subgraph_pad_x
            y = top + cfg.subgraph_pad_top + row * cfg.v_spacing
            result.place(_flowchart_node(model.nodes[node_id], x, y, config))
        column_x += width + cfg.subgraph_gap

    for row, node_id in enumerate(gir.ungrouped()):
        result.place(_flowchart_node(model.nodes[node_id], column_x, top + row * cfg.v_spacing, config))


def layout_flowchart(model: FlowchartModel, config: LayoutConfig) -> LayoutResult:
    """Grid layout, or subgraph columns when the flowchart declares subgraphs."""
    gir = GraphIR.from_model(model)
    result = LayoutResult(kind=model.kind)
    if gir.groups:
        _flowchart_subgraphs(result, model, gir, config)
    else:
        _flowchart_grid(result, model, gir, config)
    result.links = _links(gir)
    return result


# ─── State ───────────────────────────────────────────────────────────────────


def layout_state(model: StateModel, config: LayoutConfig) -> LayoutResult:
    """Three-column grid; Start/End sentinels are filled ellipses."""
    cfg = config.state
    gir = GraphIR.from_model(model)
    result = LayoutResult(kind=model.kind)
    for i, name in enumerate(gir.node_ids()):
        state = model.states[name]
        col, row = grid_cell(i, cfg.columns)
        result.place(
            PositionedElement(
                key=name,
                kind=ShapeKind.Ellipse if state.is_sentinel else ShapeKind.RoundedRectangle,
                x=cfg.origin_x + col * cfg.h_spacing,
                y=cfg.origin_y + row * cfg.v_spacing,
                width=cfg.width,
                height=cfg.height,
                text=state.label,
                fill=cfg.sentinel_fill if state.is_sentinel else cfg.fill,
                line_color=cfg.line,
                line_width=config.outline_width,
            )
        )
    result.links = _links(gir)
    return result


# ─── Class ───────────────────────────────────────────────────────────────────


def layout_class(model: ClassModel, config: LayoutConfig) -> LayoutResult:
    """Three-column grid of header / attributes / methods stacks.

    Connectors attach to the header box, which carries the class name as key.
    """
    cfg = config.class_diagram
    gir = GraphIR.from_model(model)
    result = LayoutResult(kind=model.kind)
    for i, name in enumerate(gir.node_ids()):
        cls = model.classes[name]
        col, row = grid_cell(i, cfg.columns)
        x = cfg.origin_x + col * cfg.h_spacing
        y = cfg.origin_y + row * cfg.v_spacing
        attrs_height = max(len(cls.attributes), 1) * cfg.member_height
        methods_height = max(len(cls.methods), 1) * cfg.member_height
        result.place(
            PositionedElement(
                key=name,
                kind=ShapeKind.Rectangle,
                x=x,
                y=y,
                width=cfg.width,
                height=cfg.header_height,
                text=name,
                fill=cfg.header_fill,
                line_color=cfg.line,
                line_width=config.outline_width,
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=x,
                y=y + cfg.header_height,
                width=cfg.width,
                height=attrs_height,
                text="\n".join(cls.attributes),
                fill=cfg.attribute_fill,
                line_color=cfg.line,
                line_width=config.thin_outline_width,
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=x,
                y=y + cfg.header_height + attrs_height,
                width=cfg.width,
                height=methods_height,
                text="\n".join(cls.methods),
                fill=cfg.method_fill,
                line_color=cfg.line,
                line_width=config.thin_outline_width,
            )
        )
    result.links = _links(gir)
    return result


# ─── ER ──────────────────────────────────────────────────────────────────────


def layout_er(model: ErModel, config: LayoutConfig) -> LayoutResult:
    """Three-column grid of entity header plus attribute box."""
    cfg = config.er
    gir = GraphIR.from_model(model)
    result = LayoutResult(kind=model.kind)
    for i, name in enumerate(gir.node_ids()):
        entity = model.entities[name]
        col, row = grid_cell(i, cfg.columns)
        x = cfg.origin_x + col * cfg.h_spacing
        y = cfg.origin_y + row * cfg.v_spacing
        result.place(
            PositionedElement(
                key=name,
                kind=ShapeKind.Rectangle,
                x=x,
                y=y,
                width=cfg.width,
                height=cfg.header_height,
                text=name,
                fill=cfg.header_fill,
                line_color=cfg.line,
                line_width=config.outline_width,
            )
        )
        result.place(
            PositionedElement(
                key=None,
                kind=ShapeKind.Rectangle,
                x=x,
                y=y + cfg.header_height,
                width=cfg.width,
                height=max(len(entity.attributes), 1) * cfg.attribute_height,
                text="\n".join(entity.attributes),
                fill=cfg.body_fill,
                line_color=cfg.line,
                line_width=config.thin_outline_width,
            )
        )
    result.links = _links(gir)
    return result
