"""Shared type definitions for mermaid-scene.

Enums used across the detector, parsers, layout, router and scene assembler.
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class DiagramKind(Enum):
    Flowchart = auto()
    Sequence = auto()
    Pie = auto()
    Gantt = auto()
    ClassDiagram = auto()
    StateDiagram = auto()
    ErDiagram = auto()
    Mindmap = auto()
    Timeline = auto()
    Unknown = auto()

    @classmethod
    def from_hint(cls, hint: str | None) -> DiagramKind:
        """Map an upstream kind hint such as ``"sequence"`` or ``"erDiagram"`` to a kind."""
        if not hint:
            return cls.Unknown
        return _HINTS.get(hint.strip().lower(), cls.Unknown)


_HINTS: dict[str, DiagramKind] = {
    "graph": DiagramKind.Flowchart,
    "flowchart": DiagramKind.Flowchart,
    "sequence": DiagramKind.Sequence,
    "sequencediagram": DiagramKind.Sequence,
    "pie": DiagramKind.Pie,
    "gantt": DiagramKind.Gantt,
    "class": DiagramKind.ClassDiagram,
    "classdiagram": DiagramKind.ClassDiagram,
    "state": DiagramKind.StateDiagram,
    "statediagram": DiagramKind.StateDiagram,
    "er": DiagramKind.ErDiagram,
    "erdiagram": DiagramKind.ErDiagram,
    "mindmap": DiagramKind.Mindmap,
    "timeline": DiagramKind.Timeline,
}


class Direction(Enum):
    LR = auto()
    RL = auto()
    TB = auto()
    BT = auto()

    @classmethod
    def default(cls) -> Direction:
        return cls.TB

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LR, Direction.RL)


class NodeShape(Enum):
    Rectangle = auto()  # id[Label]
    RoundedRect = auto()  # id(Label)
    Stadium = auto()  # id([Label])
    Diamond = auto()  # id{Label}
    Circle = auto()  # id((Label))
    Hexagon = auto()  # id{{Label}}

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Rectangle


class ArrowStyle(Enum):
    Arrow = auto()  # -->
    Open = auto()  # ---
    Dotted = auto()  # -.->
    Thick = auto()  # ==>


class RelationKind(Enum):
    Extends = "extends"  # <|--
    Uses = "uses"  # -->
    Associates = "associates"


# ─── Output vocabulary ───────────────────────────────────────────────────────


class ShapeKind(Enum):
    Rectangle = "rect"
    RoundedRectangle = "roundRect"
    Ellipse = "ellipse"
    Diamond = "diamond"
    Hexagon = "hexagon"
    LeftArrow = "leftArrow"
    RightArrow = "rightArrow"


class Side(Enum):
    Left = "left"
    Right = "right"
    Top = "top"
    Bottom = "bottom"


class Routing(Enum):
    Straight = "straight"
    Elbow = "elbow"


class Dash(Enum):
    Solid = "solid"
    Dash = "dash"


class ArrowHead(Enum):
    Triangle = "triangle"
    Diamond = "diamond"


class Layer(IntEnum):
    """Emission order of positioned elements in the final scene."""

    Background = 0
    Node = 1
    Label = 2
