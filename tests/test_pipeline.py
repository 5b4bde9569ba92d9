"""Tests for the public build_scene pipeline and the scene assembler."""

import json
import logging

import pytest

from mermaid_scene import ID_BASE, DiagramKind, Scene, build_scene, resolve_kind
from mermaid_scene.config import DEFAULT_CONFIG
from mermaid_scene.layout.types import LayoutResult, PositionedElement
from mermaid_scene.router import route_links
from mermaid_scene.scene import assemble_scene, fallback_scene
from mermaid_scene.types import ArrowHead, Layer, Routing, ShapeKind, Side

JUNK_INPUTS = [
    "",
    "x",
    "%%",
    "---\n---",
    "\x00\x01",
    "graph TD\n-->",
    "graph TD\nA[unterminated",
    "graph TD\nsubgraph\n",
    "flowchart LR\nA-->A",
    'pie\n"a": b',
    'pie\n"a" : 0\n"b" : 0',
    "sequenceDiagram\n->>: ",
    "sequenceDiagram\nA->>A: self",
    "mindmap\n   \n  ((",
    "erDiagram\n }|..|{ ",
    "erDiagram\nA {",
    "classDiagram\n class {",
    "classDiagram\nA <|-- A",
    "stateDiagram\n [*] --> [*]",
    "timeline\n : : :",
    "gantt\n :",
]


def shape_ids(scene: Scene) -> set[int]:
    return {s.id for s in scene.shapes}


class TestScenarios:
    def test_two_node_flowchart(self):
        scene = build_scene("flowchart LR\n  A[Start] --> B[End]")
        assert [(s.kind, s.text) for s in scene.shapes] == [
            (ShapeKind.Rectangle, "Start"),
            (ShapeKind.Rectangle, "End"),
        ]
        (conn,) = scene.connectors
        assert conn.routing == Routing.Straight
        assert (conn.start_anchor.shape_id, conn.start_anchor.side) == (10, Side.Right)
        assert (conn.end_anchor.shape_id, conn.end_anchor.side) == (11, Side.Left)
        assert conn.end_arrow == ArrowHead.Triangle
        assert conn.id == 12
        assert (conn.start_x, conn.start_y, conn.end_x, conn.end_y) == (2_400_000, 2_050_000, 2_800_000, 2_050_000)

    def test_pie(self):
        scene = build_scene('pie\n  "Dogs" : 30\n  "Cats" : 70')
        assert [s.kind for s in scene.shapes].count(ShapeKind.Ellipse) == 1
        texts = [s.text for s in scene.shapes if s.text]
        assert texts == ["Dogs (30.0%)", "Cats (70.0%)"]
        assert scene.connectors == []

    def test_sequence(self):
        scene = build_scene("sequenceDiagram\n  Alice->>Bob: Hi")
        names = [s.text for s in scene.shapes if s.text in ("Alice", "Bob")]
        assert sorted(names) == ["Alice", "Alice", "Bob", "Bob"]
        lifelines = [s for s in scene.shapes if s.kind == ShapeKind.Rectangle and s.text is None]
        assert len(lifelines) == 2
        assert [s.kind for s in scene.shapes].count(ShapeKind.RightArrow) == 1
        assert [s.text for s in scene.shapes].count("Hi") == 1
        assert scene.connectors == []

    def test_unknown_kind(self):
        scene = build_scene("unknownDiagramType\nfoo bar")
        (shape,) = scene.shapes
        assert shape.text == "Diagram: unknownDiagramType"
        assert shape.id == ID_BASE
        assert scene.connectors == []

    def test_empty_input(self):
        (shape,) = build_scene("").shapes
        assert shape.text == "Diagram: Unknown"
        assert (shape.x, shape.y, shape.width, shape.height) == (1_000_000, 2_000_000, 7_000_000, 3_000_000)
        assert (shape.fill_color, shape.line_color) == ("F5F5F5", "757575")

    def test_unknown_kind_logs(self, caplog):
        with caplog.at_level(logging.INFO, logger="mermaid_scene.api"):
            build_scene("plantuml")
        assert "plantuml" in caplog.text


class TestHintsAndEmptyDiagrams:
    def test_hint_parses_headerless_body(self):
        scene = build_scene('"A" : 1\n"B" : 3', "pie")
        assert [s.text for s in scene.shapes if s.text] == ["A (25.0%)", "B (75.0%)"]

    def test_hint_keeps_class_block_body(self):
        scene = build_scene("class Animal {\n  +name\n  +eat()\n}", "class")
        texts = [s.text for s in scene.shapes]
        assert texts == ["Animal", "+name", "+eat()"]

    @pytest.mark.parametrize(
        "body,hint,names",
        [
            ("ERRAND ||--o{ TASK : has", "er", ["ERRAND", "TASK"]),
            ("state Busy\nIdle --> Busy", "state", ["Busy", "Idle"]),
            ("graphics --> layout", "flowchart", ["graphics", "layout"]),
        ],
    )
    def test_hint_with_keyword_like_first_line(self, body: str, hint: str, names: list[str]):
        texts = [s.text for s in build_scene(body, hint).shapes]
        assert all(name in texts for name in names)

    def test_hint_with_matching_header_is_not_doubled(self):
        scene = build_scene("stateDiagram-v2\n  A --> B", "state")
        assert [s.text for s in scene.shapes] == ["A", "B"]

    def test_hint_overrides_detection(self):
        assert resolve_kind("graph TD\nA-->B", "sequence") == DiagramKind.Sequence
        assert resolve_kind("graph TD\nA-->B", "nonsense") == DiagramKind.Flowchart

    def test_header_only_diagram_is_empty(self):
        assert build_scene("flowchart TD").is_empty()

    def test_fallback_on_empty(self):
        (shape,) = build_scene("flowchart TD", fallback_on_empty=True).shapes
        assert shape.text == "Diagram: flowchart TD"


class TestAssembly:
    def test_layers_sort_background_first(self):
        scene = build_scene("graph TD\n  subgraph G\n    A -->|x| B\n  end\n")
        assert scene.shapes[0].text == "G"
        assert scene.shapes[-1].text == "x"
        assert [s.id for s in scene.shapes] == list(range(ID_BASE, ID_BASE + len(scene.shapes)))

    def test_connector_ids_follow_shapes(self):
        scene = build_scene("graph TD\n  A --> B --> C")
        assert [c.id for c in scene.connectors] == [13, 14]

    def test_duplicate_key_anchors_to_first_element(self):
        result = LayoutResult(kind=DiagramKind.Flowchart)
        first = result.place(PositionedElement(key="A", kind=ShapeKind.Rectangle, x=0, y=0, width=10, height=10))
        result.place(PositionedElement(key="A", kind=ShapeKind.Rectangle, x=0, y=100, width=10, height=10))
        result.place(PositionedElement(key="B", kind=ShapeKind.Rectangle, x=100, y=0, width=10, height=10))
        assert result.positions["A"] is first
        result.links = []
        scene = assemble_scene(result, [], [])
        assert [s.id for s in scene.shapes] == [10, 11, 12]

    def test_label_shape_sits_on_label_layer(self):
        result = LayoutResult(kind=DiagramKind.Flowchart)
        result.place(PositionedElement(key=None, kind=ShapeKind.Rectangle, x=0, y=0, width=1, height=1, layer=Layer.Label))
        result.place(PositionedElement(key=None, kind=ShapeKind.Rectangle, x=5, y=0, width=1, height=1))
        scene = assemble_scene(result, *route_links(result, DEFAULT_CONFIG))
        assert [s.x for s in scene.shapes] == [5, 0]

    def test_fallback_scene(self):
        scene = fallback_scene(None, DEFAULT_CONFIG)
        assert scene.shapes[0].text == "Diagram: Unknown"
        assert scene.shapes[0].line_width == 12_700

    def test_to_dict_is_json(self):
        data = json.loads(json.dumps(build_scene("flowchart LR\n  A --> B").to_dict()))
        assert set(data) == {"shapes", "connectors"}
        assert data["shapes"][0]["kind"] == "rect"
        conn = data["connectors"][0]
        assert conn["startAnchor"] == {"shapeId": 10, "side": "right"}
        assert conn["endArrow"] == "triangle"
        assert conn["dash"] == "solid"


class TestProperties:
    @pytest.mark.parametrize("src", JUNK_INPUTS)
    def test_never_raises(self, src: str):
        assert isinstance(build_scene(src), Scene)

    @pytest.mark.parametrize("hint", ["flowchart", "sequence", "pie", "gantt", "class", "state", "er", "mindmap", "timeline"])
    @pytest.mark.parametrize("src", ["", "A --> B", ": :", "}{", "title"])
    def test_never_raises_with_hints(self, src: str, hint: str):
        assert isinstance(build_scene(src, hint), Scene)

    @pytest.mark.parametrize("src", JUNK_INPUTS)
    def test_ids_unique_and_anchors_valid(self, src: str):
        scene = build_scene(src)
        ids = [s.id for s in scene.shapes] + [c.id for c in scene.connectors]
        assert len(ids) == len(set(ids))
        assert all(i >= ID_BASE for i in ids)
        known = shape_ids(scene)
        for conn in scene.connectors:
            assert (conn.start_anchor is None) == (conn.end_anchor is None)
            if conn.start_anchor is not None:
                assert conn.start_anchor.shape_id in known
                assert conn.end_anchor.shape_id in known

    def test_deterministic(self):
        src = "graph LR\n  A{Go?} -->|yes| B((Done))\n  A -.-> C\n"
        assert build_scene(src).to_dict() == build_scene(src).to_dict()
