"""Layout types shared by the layout strategies, the router and the assembler."""

from __future__ import annotations

from dataclasses import dataclass, field

from mermaid_scene.types import DiagramKind, Layer, ShapeKind, Side


@dataclass(frozen=True)
class Point:
    """A 2D point in EMU."""

    x: int
    y: int


@dataclass
class PositionedElement:
    """A shape bound to an absolute position and size.

    ``key`` names the entity the element stands for (node id, state name,
    class name) when connectors may attach to it; decoration elements such
    as lifelines, legend boxes and label text have no key.
    """

    key: str | None
    kind: ShapeKind
    x: int
    y: int
    width: int
    height: int
    text: str | None = None
    fill: str | None = None
    line_color: str | None = None
    line_width: int | None = None
    layer: Layer = Layer.Node

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    @property
    def center_y(self) -> int:
        return self.y + self.height // 2

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def side_point(self, side: Side) -> Point:
        """Midpoint of the given face."""
        if side == Side.Left:
            return Point(self.x, self.center_y)
        if side == Side.Right:
            return Point(self.right, self.center_y)
        if side == Side.Top:
            return Point(self.center_x, self.y)
        return Point(self.center_x, self.bottom)


PositionMap = dict[str, PositionedElement]


@dataclass
class Link:
    """A relationship between two keyed elements, waiting to be routed.

    ``style`` is whatever the model attached to the relationship: an
    ArrowStyle for flowcharts, a RelationKind for class diagrams, the
    cardinality operator text for ER diagrams, or None.
    """

    from_id: str
    to_id: str
    label: str | None = None
    style: object = None


@dataclass
class LayoutResult:
    """Self-contained layout output: everything the router and assembler need."""

    kind: DiagramKind
    elements: list[PositionedElement] = field(default_factory=list)
    positions: PositionMap = field(default_factory=dict)
    links: list[Link] = field(default_factory=list)

    def place(self, element: PositionedElement) -> PositionedElement:
        """Append an element; keyed elements become connector targets (first wins)."""
        self.elements.append(element)
        if element.key is not None:
            self.positions.setdefault(element.key, element)
        return element
