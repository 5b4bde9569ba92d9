"""Tests for mermaid_scene.router."""

import dataclasses
import logging

import pytest

from mermaid_scene.config import DEFAULT_CONFIG
from mermaid_scene.layout.types import LayoutResult, Link, Point, PositionedElement
from mermaid_scene.router import anchor_sides, decorate, route_links, routing_for
from mermaid_scene.types import ArrowHead, ArrowStyle, Dash, DiagramKind, Layer, RelationKind, Routing, ShapeKind, Side


def box(key: str, x: int, y: int, width: int = 1_000_000, height: int = 500_000) -> PositionedElement:
    return PositionedElement(key=key, kind=ShapeKind.Rectangle, x=x, y=y, width=width, height=height)


def two_box_layout(link: Link, kind: DiagramKind = DiagramKind.Flowchart) -> LayoutResult:
    result = LayoutResult(kind=kind)
    result.place(box("A", 1_000_000, 1_000_000))
    result.place(box("B", 3_000_000, 1_000_000))
    result.links.append(link)
    return result


class TestAnchorSides:
    @pytest.mark.parametrize(
        "target,sides",
        [
            (box("B", 3_000_000, 1_000_000), (Side.Right, Side.Left)),
            (box("B", -2_000_000, 1_000_000), (Side.Left, Side.Right)),
            (box("B", 1_000_000, 3_000_000), (Side.Bottom, Side.Top)),
            (box("B", 1_000_000, -2_000_000), (Side.Top, Side.Bottom)),
            (box("B", 2_000_000, 2_000_000), (Side.Right, Side.Left)),
        ],
    )
    def test_dominant_axis_picks_faces(self, target, sides):
        assert anchor_sides(box("A", 1_000_000, 1_000_000), target) == sides

    def test_self_link(self):
        a = box("A", 0, 0)
        assert anchor_sides(a, a) == (Side.Right, Side.Top)


class TestRouting:
    def test_shared_axis_is_straight(self):
        assert routing_for(Point(0, 0), Point(2_000_000, 0), 100_000) == Routing.Straight
        assert routing_for(Point(0, 0), Point(99_999, 2_000_000), 100_000) == Routing.Straight

    def test_offset_is_elbow(self):
        assert routing_for(Point(0, 0), Point(500_000, 500_000), 100_000) == Routing.Elbow

    def test_route_endpoints_sit_on_faces(self):
        (route,), _ = route_links(two_box_layout(Link("A", "B")), DEFAULT_CONFIG)
        assert (route.start, route.end) == (Point(2_000_000, 1_250_000), Point(3_000_000, 1_250_000))
        assert route.routing == Routing.Straight
        assert (route.from_key, route.to_key) == ("A", "B")

    def test_self_link_is_elbow(self):
        result = LayoutResult(kind=DiagramKind.Flowchart)
        result.place(box("A", 0, 0))
        result.links.append(Link("A", "A"))
        (route,), _ = route_links(result, DEFAULT_CONFIG)
        assert (route.start_side, route.end_side) == (Side.Right, Side.Top)
        assert route.routing == Routing.Elbow

    def test_missing_endpoint_is_dropped(self, caplog):
        result = LayoutResult(kind=DiagramKind.Flowchart)
        result.place(box("A", 0, 0))
        result.links.append(Link("A", "Ghost"))
        with caplog.at_level(logging.DEBUG, logger="mermaid_scene.router"):
            routes, labels = route_links(result, DEFAULT_CONFIG)
        assert routes == []
        assert labels == []
        assert "Ghost" in caplog.text


class TestDecoration:
    def test_flowchart_styles(self):
        normal = decorate(DiagramKind.Flowchart, ArrowStyle.Arrow, DEFAULT_CONFIG)
        assert (normal.color, normal.width, normal.end_arrow) == ("1565C0", 19_050, ArrowHead.Triangle)
        thick = decorate(DiagramKind.Flowchart, ArrowStyle.Thick, DEFAULT_CONFIG)
        assert (thick.color, thick.width) == ("E65100", 38_100)
        dotted = decorate(DiagramKind.Flowchart, ArrowStyle.Dotted, DEFAULT_CONFIG)
        assert (dotted.color, dotted.dash) == ("757575", Dash.Dash)
        assert decorate(DiagramKind.Flowchart, ArrowStyle.Open, DEFAULT_CONFIG).end_arrow is None

    def test_er_ends_in_diamond(self):
        assert decorate(DiagramKind.ErDiagram, "||--o{", DEFAULT_CONFIG).end_arrow == ArrowHead.Diamond

    def test_class_relation_heads(self):
        extends = decorate(DiagramKind.ClassDiagram, RelationKind.Extends, DEFAULT_CONFIG)
        assert (extends.start_arrow, extends.end_arrow) == (ArrowHead.Triangle, None)
        uses = decorate(DiagramKind.ClassDiagram, RelationKind.Uses, DEFAULT_CONFIG)
        assert (uses.start_arrow, uses.end_arrow) == (None, ArrowHead.Triangle)
        assoc = decorate(DiagramKind.ClassDiagram, RelationKind.Associates, DEFAULT_CONFIG)
        assert (assoc.start_arrow, assoc.end_arrow) == (None, None)

    def test_state_and_mindmap(self):
        assert decorate(DiagramKind.StateDiagram, None, DEFAULT_CONFIG).color == "00838F"
        assert decorate(DiagramKind.Mindmap, None, DEFAULT_CONFIG).end_arrow is None


class TestLabels:
    def test_label_becomes_a_shape(self):
        (route,), (label,) = route_links(two_box_layout(Link("A", "B", label="go")), DEFAULT_CONFIG)
        assert route.label is None
        assert label.text == "go"
        assert label.layer == Layer.Label
        assert (label.x, label.y, label.width, label.height) == (2_050_000, 1_125_000, 900_000, 250_000)
        assert label.line_color == route.decoration.color

    def test_label_stays_on_connector(self):
        config = dataclasses.replace(DEFAULT_CONFIG, label_shapes=False)
        (route,), labels = route_links(two_box_layout(Link("A", "B", label="go")), config)
        assert route.label == "go"
        assert labels == []

    def test_state_label_box(self):
        _, (label,) = route_links(two_box_layout(Link("A", "B", label="t"), DiagramKind.StateDiagram), DEFAULT_CONFIG)
        assert (label.width, label.fill) == (800_000, "FFFDE7")
