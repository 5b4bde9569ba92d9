"""Tests for mermaid_scene.layout: placement strategies and the dispatch table."""

import dataclasses

import pytest

from mermaid_scene.config import DEFAULT_CONFIG, FlowchartConfig, LayoutConfig, PieConfig, TimelineConfig
from mermaid_scene.detect import detect_type
from mermaid_scene.ir.model import FlowchartModel, PieModel
from mermaid_scene.layout import LAYOUTS, layout_diagram
from mermaid_scene.layout.types import Point, PositionedElement
from mermaid_scene.parsers import parse_diagram
from mermaid_scene.types import Layer, ShapeKind, Side


def layout(src: str, config: LayoutConfig = DEFAULT_CONFIG):
    return layout_diagram(parse_diagram(src, detect_type(src)), config)


def xy(result, key: str) -> tuple[int, int]:
    el = result.positions[key]
    return el.x, el.y


class TestPositionedElement:
    def test_faces(self):
        el = PositionedElement(key="A", kind=ShapeKind.Rectangle, x=100, y=200, width=40, height=20)
        assert (el.center_x, el.center_y, el.right, el.bottom) == (120, 210, 140, 220)
        assert el.side_point(Side.Left) == Point(100, 210)
        assert el.side_point(Side.Top) == Point(120, 200)
        assert el.side_point(Side.Bottom) == Point(120, 220)
        assert el.side_point(Side.Right) == Point(140, 210)


class TestFlowchartGrid:
    def test_horizontal_row(self):
        result = layout("flowchart LR\n  A --> B --> C\n")
        assert [xy(result, k) for k in "ABC"] == [(1_000_000, 1_800_000), (2_800_000, 1_800_000), (4_600_000, 1_800_000)]

    def test_vertical_column(self):
        result = layout("graph TD\n  A --> B --> C\n")
        assert [xy(result, k) for k in "ABC"] == [(1_000_000, 1_800_000), (1_000_000, 2_700_000), (1_000_000, 3_600_000)]

    def test_wraps_after_five_columns(self):
        result = layout("flowchart LR\n  A --> B --> C --> D --> E --> F\n")
        assert xy(result, "E") == (1_000_000 + 4 * 1_800_000, 1_800_000)
        assert xy(result, "F") == (1_000_000, 2_700_000)

    def test_right_to_left_mirrors_columns(self):
        result = layout("flowchart RL\n  A --> B --> C\n")
        assert xy(result, "A") == (4_600_000, 1_800_000)
        assert xy(result, "C") == (1_000_000, 1_800_000)

    def test_bottom_to_top_mirrors_rows(self):
        result = layout("flowchart BT\n  A --> B --> C\n")
        assert xy(result, "A") == (1_000_000, 3_600_000)
        assert xy(result, "C") == (1_000_000, 1_800_000)

    def test_node_shapes_and_fills(self):
        result = layout("graph TD\n  A[Box] --> B{Choice} --> C((Ring)) --> D([Pill])\n")
        kinds = [(el.kind, el.fill) for el in result.elements]
        assert kinds == [
            (ShapeKind.Rectangle, "FFFFFF"),
            (ShapeKind.Diamond, "FFF3E0"),
            (ShapeKind.Ellipse, "E3F2FD"),
            (ShapeKind.RoundedRectangle, "FFFFFF"),
        ]
        assert all(el.line_width == 25_400 for el in result.elements)

    def test_links_in_source_order(self):
        result = layout("graph TD\n  B --> C\n  A -->|go| B\n")
        assert [(link.from_id, link.to_id, link.label) for link in result.links] == [("B", "C", None), ("A", "B", "go")]


class TestFlowchartSubgraphs:
    def test_columns_and_orphans(self):
        result = layout("graph TD\n  subgraph G\n    A --> B\n  end\n  C\n")
        background = result.elements[0]
        assert background.layer == Layer.Background
        assert background.kind == ShapeKind.RoundedRectangle
        assert (background.x, background.y, background.width, background.height) == (500_000, 1_600_000, 1_800_000, 2_200_000)
        assert background.text == "G"
        assert background.fill == "E3F2FD"
        assert xy(result, "A") == (700_000, 1_900_000)
        assert xy(result, "B") == (700_000, 2_800_000)
        assert xy(result, "C") == (2_900_000, 1_600_000)

    def test_second_subgraph_uses_next_colour_and_column(self):
        result = layout("graph TD\n  subgraph One\n    A\n  end\n  subgraph Two\n    B\n  end\n")
        backgrounds = [el for el in result.elements if el.layer == Layer.Background]
        assert [el.fill for el in backgrounds] == ["E3F2FD", "F3E5F5"]
        assert backgrounds[1].x == 500_000 + 1_800_000 + 600_000


class TestGrids:
    def test_state_grid_and_sentinels(self):
        result = layout("stateDiagram\n  [*] --> A\n  A --> B\n  B --> C\n  C --> [*]\n")
        start = result.positions["Start"]
        assert start.kind == ShapeKind.Ellipse
        assert start.fill == "000000"
        assert result.positions["A"].kind == ShapeKind.RoundedRectangle
        assert xy(result, "C") == (1_000_000, 3_000_000)
        assert xy(result, "End") == (1_000_000 + 2_200_000, 3_000_000)

    def test_class_stack(self):
        result = layout("classDiagram\n  class Animal {\n    +name\n    +age\n    +eat()\n  }\n  Animal <|-- Duck\n")
        header, attrs, methods = result.elements[:3]
        assert (header.x, header.y, header.height, header.text) == (500_000, 1_600_000, 350_000, "Animal")
        assert (attrs.y, attrs.height, attrs.text) == (1_950_000, 500_000, "+name\n+age")
        assert (methods.y, methods.height, methods.text) == (2_450_000, 250_000, "+eat()")
        assert result.positions["Animal"] is header
        assert xy(result, "Duck") == (3_000_000, 1_600_000)

    def test_er_entity(self):
        result = layout("erDiagram\n  A {\n    int id\n  }\n  A ||--o{ B : has\n")
        header, body = result.elements[:2]
        assert (header.width, header.height, header.fill) == (2_200_000, 400_000, "C2185B")
        assert (body.y, body.height, body.text) == (2_000_000, 280_000, "int id")
        assert xy(result, "B") == (3_300_000, 1_600_000)
        assert result.links[0].style == "||--o{"


class TestSequenceLanes:
    def test_lanes_and_message(self):
        result = layout("sequenceDiagram\n  Alice->>Bob: Hi\n")
        boxes = [el for el in result.elements if el.text in ("Alice", "Bob")]
        assert [(el.x, el.y) for el in boxes] == [
            (500_000, 1_600_000),
            (500_000, 5_000_000),
            (2_300_000, 1_600_000),
            (2_300_000, 5_000_000),
        ]
        lifelines = [el for el in result.elements if el.fill == "757575"]
        assert [(el.x, el.y, el.width, el.height) for el in lifelines] == [
            (1_190_000, 2_000_000, 20_000, 3_000_000),
            (2_990_000, 2_000_000, 20_000, 3_000_000),
        ]
        (arrow,) = [el for el in result.elements if el.kind == ShapeKind.RightArrow]
        assert (arrow.x, arrow.y, arrow.width, arrow.height) == (1_200_000, 2_200_000, 1_800_000, 120_000)
        (text,) = [el for el in result.elements if el.text == "Hi"]
        assert (text.y, text.layer) == (2_020_000, Layer.Label)

    def test_right_to_left_message(self):
        result = layout("sequenceDiagram\n  participant Alice\n  participant Bob\n  Bob-->>Alice: back\n")
        (arrow,) = [el for el in result.elements if el.kind == ShapeKind.LeftArrow]
        assert (arrow.x, arrow.width) == (1_200_000, 1_800_000)
        assert arrow.fill == "64B5F6"

    def test_self_message(self):
        result = layout("sequenceDiagram\n  A->>A: think\n")
        (arrow,) = [el for el in result.elements if el.kind == ShapeKind.RightArrow]
        assert (arrow.x, arrow.width) == (1_200_000, 600_000)

    def test_message_without_text_has_no_label(self):
        result = layout("sequenceDiagram\n  A->>B\n")
        assert [el.kind for el in result.elements].count(ShapeKind.RightArrow) == 1
        assert not [el for el in result.elements if el.layer == Layer.Label]

    def test_lifeline_grows_with_messages(self):
        src = "sequenceDiagram\n" + "".join(f"  A->>B: m{i}\n" for i in range(10))
        result = layout(src)
        lifeline = next(el for el in result.elements if el.fill == "757575")
        assert lifeline.height == 2 * 200_000 + 10 * 450_000


class TestMindmap:
    def test_root_and_first_ring(self):
        result = layout("mindmap\n  Root\n    A\n    B\n")
        root, a, b = result.elements
        assert (root.kind, root.x, root.y) == (ShapeKind.Ellipse, 3_000_000, 2_700_000)
        assert (a.x, a.y) == (3_250_000, 800_000)
        assert (b.x, b.y) == (3_250_000, 4_800_000)
        assert a.fill == "4472C4"
        assert b.fill == "ED7D31"

    def test_single_child_sits_on_parent_angle(self):
        result = layout("mindmap\n  Root\n    A\n      A1\n")
        child = result.elements[-1]
        assert (child.x, child.y) == (3_250_000, 3_000_000 - 3_200_000 - 200_000)
        assert child.fill == "E8EAF6"

    def test_siblings_fan_out_symmetrically(self):
        result = layout("mindmap\n  Root\n    A\n      A1\n      A2\n")
        left, right = result.elements[-2:]
        assert abs((left.x - 3_250_000) + (right.x - 3_250_000)) <= 1
        assert left.x != right.x

    def test_parent_links(self):
        result = layout("mindmap\n  Root\n    A\n      A1\n")
        assert [(link.from_id, link.to_id) for link in result.links] == [("node0", "node1"), ("node1", "node2")]


class TestTimelineAndCharts:
    def test_timeline_axis(self):
        result = layout("timeline\n  title T\n  2001 : a\n  2002 : b : c\n")
        title, axis = result.elements[:2]
        assert (title.text, title.layer) == ("T", Layer.Label)
        assert (axis.width, axis.layer) == (2 * 1_600_000 + 500_000, Layer.Background)
        marker, date, items = result.elements[2:5]
        assert (marker.kind, marker.x, marker.y) == (ShapeKind.Ellipse, 1_125_000, 2_440_000)
        assert (date.text, date.y) == ("2001", 2_100_000)
        assert (items.y, items.height) == (2_650_000, 250_000)
        assert result.elements[-1].text == "b\nc"
        assert result.elements[-1].height == 500_000

    def test_pie_circle_and_legend(self):
        result = layout('pie\n  "Dogs" : 30\n  "Cats" : 70\n')
        circle = result.elements[0]
        assert (circle.kind, circle.x, circle.y, circle.width) == (ShapeKind.Ellipse, 1_000_000, 1_500_000, 3_000_000)
        assert circle.fill == "4472C4"
        legend = [el.text for el in result.elements if el.text]
        assert legend == ["Dogs (30.0%)", "Cats (70.0%)"]
        boxes = [el for el in result.elements[1:] if el.text is None]
        assert [(b.y, b.fill) for b in boxes] == [(2_000_000, "4472C4"), (2_350_000, "ED7D31")]

    def test_gantt_rows(self):
        src = "gantt\n  title Plan\n  section Build\n  Code : done, 1d\n  Test : crit, 2d\n  Ship : milestone, 0d\n"
        result = layout(src)
        header = next(el for el in result.elements if el.text == "Build")
        assert (header.y, header.width, header.fill) == (2_100_000, 7_000_000, "E0E0E0")
        bars = [el for el in result.elements if el.text is None]
        assert [(b.x, b.y, b.width) for b in bars] == [
            (2_600_000, 2_450_000, 1_800_000),
            (2_800_000, 2_730_000, 1_800_000),
            (3_000_000, 3_010_000, 250_000),
        ]
        assert bars[1].line_color == "C62828"
        assert bars[2].kind == ShapeKind.Diamond
        assert [b.fill for b in bars] == ["4472C4", "ED7D31", "70AD47"]

    def test_gantt_unnamed_section_has_no_header(self):
        result = layout("gantt\n  Only : 1d\n")
        assert [el.text for el in result.elements] == ["Only", None]
        assert result.elements[0].y == 2_100_000


class TestDispatchAndConfig:
    def test_every_model_has_a_layout(self):
        assert len(LAYOUTS) == 9

    def test_unknown_model_raises(self):
        with pytest.raises(ValueError):
            layout_diagram(object())

    def test_config_swaps_constants(self):
        config = dataclasses.replace(DEFAULT_CONFIG, flowchart=FlowchartConfig(h_spacing=2_000_000))
        result = layout("flowchart LR\n  A --> B\n", config)
        assert xy(result, "B") == (3_000_000, 1_800_000)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"flowchart": FlowchartConfig(max_columns=0)},
            {"flowchart": FlowchartConfig(node_width=0)},
            {"flowchart": FlowchartConfig(subgraph_fills=())},
            {"timeline": TimelineConfig(palette=())},
            {"pie": PieConfig(palette=())},
        ],
    )
    def test_invalid_config_raises(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    def test_empty_models_place_nothing(self):
        assert layout_diagram(FlowchartModel()).elements == []
        assert [el.kind for el in layout_diagram(PieModel()).elements] == [ShapeKind.Ellipse]
