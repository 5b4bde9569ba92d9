"""Structured diagram models produced by the per-kind parsers.

One dataclass per diagram kind; ``DiagramModel`` is their tagged union.
Every collection is an insertion-ordered list or dict so downstream stages
never depend on hash order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from mermaid_scene.types import ArrowStyle, DiagramKind, Direction, NodeShape, RelationKind

START_STATE = "Start"
END_STATE = "End"


# ─── Flowchart ───────────────────────────────────────────────────────────────


@dataclass
class Node:
    id: str
    label: str
    shape: NodeShape = field(default_factory=NodeShape.default)

    @classmethod
    def bare(cls, id: str) -> Node:
        """Create a bare node (id = label, default Rectangle shape)."""
        return cls(id=id, label=id, shape=NodeShape.Rectangle)


@dataclass
class Edge:
    from_id: str
    to_id: str
    arrow_style: ArrowStyle = ArrowStyle.Arrow
    label: str | None = None


@dataclass
class Subgraph:
    name: str
    members: list[str] = field(default_factory=list)


@dataclass
class FlowchartModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Flowchart

    direction: Direction = field(default_factory=Direction.default)
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    subgraphs: list[Subgraph] = field(default_factory=list)

    def add_node(self, node: Node) -> Node:
        """First-definition-wins: return the stored node for ``node.id``."""
        return self.nodes.setdefault(node.id, node)

    def is_empty(self) -> bool:
        return not self.nodes


# ─── Sequence ────────────────────────────────────────────────────────────────


@dataclass
class Participant:
    id: str
    display_name: str


@dataclass
class Message:
    from_id: str
    to_id: str
    text: str
    dashed: bool = False


@dataclass
class SequenceModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Sequence

    participants: dict[str, Participant] = field(default_factory=dict)
    messages: list[Message] = field(default_factory=list)

    def ensure_participant(self, id: str, display_name: str | None = None) -> Participant:
        if id not in self.participants:
            self.participants[id] = Participant(id=id, display_name=display_name or id)
        return self.participants[id]

    def is_empty(self) -> bool:
        return not self.participants


# ─── State ───────────────────────────────────────────────────────────────────


@dataclass
class State:
    name: str
    label: str

    @property
    def is_sentinel(self) -> bool:
        return self.name in (START_STATE, END_STATE)


@dataclass
class Transition:
    from_id: str
    to_id: str
    label: str = ""


@dataclass
class StateModel:
    kind: ClassVar[DiagramKind] = DiagramKind.StateDiagram

    states: dict[str, State] = field(default_factory=dict)
    transitions: list[Transition] = field(default_factory=list)

    def ensure_state(self, name: str, label: str | None = None) -> State:
        if name not in self.states:
            self.states[name] = State(name=name, label=label or name)
        elif label:
            self.states[name].label = label
        return self.states[name]

    def is_empty(self) -> bool:
        return not self.states


# ─── ER ──────────────────────────────────────────────────────────────────────


@dataclass
class Entity:
    name: str
    attributes: list[str] = field(default_factory=list)


@dataclass
class Relationship:
    entity_a: str
    entity_b: str
    label: str = ""
    cardinality: str = ""


@dataclass
class ErModel:
    kind: ClassVar[DiagramKind] = DiagramKind.ErDiagram

    entities: dict[str, Entity] = field(default_factory=dict)
    relationships: list[Relationship] = field(default_factory=list)

    def ensure_entity(self, name: str) -> Entity:
        return self.entities.setdefault(name, Entity(name=name))

    def is_empty(self) -> bool:
        return not self.entities


# ─── Class ───────────────────────────────────────────────────────────────────


@dataclass
class ClassDef:
    name: str
    attributes: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)

    def add_member(self, line: str) -> None:
        """A member containing ``(`` is a method, anything else an attribute."""
        if "(" in line:
            self.methods.append(line)
        else:
            self.attributes.append(line)


@dataclass
class ClassRelationship:
    from_id: str
    to_id: str
    kind: RelationKind
    label: str = ""


@dataclass
class ClassModel:
    kind: ClassVar[DiagramKind] = DiagramKind.ClassDiagram

    classes: dict[str, ClassDef] = field(default_factory=dict)
    relationships: list[ClassRelationship] = field(default_factory=list)

    def ensure_class(self, name: str) -> ClassDef:
        return self.classes.setdefault(name, ClassDef(name=name))

    def is_empty(self) -> bool:
        return not self.classes


# ─── Pie ─────────────────────────────────────────────────────────────────────


@dataclass
class Slice:
    label: str
    value: float


@dataclass
class PieModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Pie

    title: str = ""
    slices: list[Slice] = field(default_factory=list)

    def total(self) -> float:
        return sum(s.value for s in self.slices)

    def percentages(self) -> list[float]:
        """Share of each slice in percent; all zero when the total is zero."""
        total = self.total()
        if total <= 0:
            return [0.0 for _ in self.slices]
        return [s.value * 100.0 / total for s in self.slices]

    def is_empty(self) -> bool:
        return not self.slices


# ─── Gantt ───────────────────────────────────────────────────────────────────


@dataclass
class Task:
    name: str
    duration: int
    status: list[str] = field(default_factory=list)


@dataclass
class Section:
    name: str
    tasks: list[Task] = field(default_factory=list)


@dataclass
class GanttModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Gantt

    title: str = ""
    sections: list[Section] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.sections


# ─── Mindmap ─────────────────────────────────────────────────────────────────


@dataclass
class MindmapNode:
    id: str
    label: str
    level: int
    parent: str | None = None


@dataclass
class MindmapModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Mindmap

    nodes: list[MindmapNode] = field(default_factory=list)

    @property
    def root(self) -> MindmapNode | None:
        return self.nodes[0] if self.nodes else None

    def level(self, level: int) -> list[MindmapNode]:
        return [n for n in self.nodes if n.level == level]

    def is_empty(self) -> bool:
        return not self.nodes


# ─── Timeline ────────────────────────────────────────────────────────────────


@dataclass
class TimelineEvent:
    date: str
    items: list[str] = field(default_factory=list)


@dataclass
class TimelineModel:
    kind: ClassVar[DiagramKind] = DiagramKind.Timeline

    title: str = ""
    events: list[TimelineEvent] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.events


DiagramModel = Union[
    FlowchartModel,
    SequenceModel,
    StateModel,
    ErModel,
    ClassModel,
    PieModel,
    GanttModel,
    MindmapModel,
    TimelineModel,
]
