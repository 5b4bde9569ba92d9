"""Graph IR: converts relationship-bearing models into a networkx graph.

Flowchart, state, ER, class and mindmap models all reduce to "labelled
nodes plus ordered links". This module owns that reduction so the layout
engine can place nodes and hand links to the router without knowing which
diagram kind produced them. Parallel links are kept (``MultiDiGraph``), and
discovery order is stored on every edge because adjacency iteration order is
per-node, not global.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from mermaid_scene.ir import model as m


@dataclass
class NodeData:
    id: str
    label: str
    group: str | None = None


@dataclass
class EdgeData:
    order: int
    label: str | None
    style: object = None  # ArrowStyle, RelationKind, cardinality text, or None


class GraphIR:
    """Ordered relationship graph wrapping a networkx MultiDiGraph."""

    def __init__(self, digraph: nx.MultiDiGraph, groups: list[tuple[str, list[str]]]) -> None:
        self.digraph = digraph
        self.groups = groups

    @classmethod
    def from_model(cls, model: m.DiagramModel) -> GraphIR:
        """Build a GraphIR from any model that has nodes and links."""
        builder = _BUILDERS.get(type(model))
        if builder is None:
            raise ValueError(f"{type(model).__name__} has no relationship graph")
        gir = cls(digraph=nx.MultiDiGraph(), groups=[])
        builder(gir, model)
        return gir

    # ── construction ──────────────────────────────────────────────────────────

    def add_node(self, node_id: str, label: str, group: str | None = None) -> None:
        if node_id not in self.digraph:
            self.digraph.add_node(node_id, data=NodeData(id=node_id, label=label, group=group))

    def add_edge(self, from_id: str, to_id: str, label: str | None = None, style: object = None) -> None:
        self.add_node(from_id, from_id)
        self.add_node(to_id, to_id)
        data = EdgeData(order=self.digraph.number_of_edges(), label=label or None, style=style)
        self.digraph.add_edge(from_id, to_id, data=data)

    # ── queries ───────────────────────────────────────────────────────────────

    def node_ids(self) -> list[str]:
        return list(self.digraph.nodes)

    def ordered_edges(self) -> list[tuple[str, str, EdgeData]]:
        """All edges in the order they were discovered in the source text."""
        edges = [(src, tgt, attrs["data"]) for src, tgt, attrs in self.digraph.edges(data=True)]
        edges.sort(key=lambda e: e[2].order)
        return edges

    def ungrouped(self) -> list[str]:
        """Node ids that belong to no group, in insertion order."""
        return [n for n in self.digraph.nodes if self.digraph.nodes[n]["data"].group is None]


# ─── Per-model builders ──────────────────────────────────────────────────────


def _build_flowchart(gir: GraphIR, model: m.FlowchartModel) -> None:
    owner: dict[str, str] = {}
    for sg in model.subgraphs:
        for member in sg.members:
            owner.setdefault(member, sg.name)
    for node in model.nodes.values():
        gir.add_node(node.id, node.label, group=owner.get(node.id))
    for sg in model.subgraphs:
        gir.groups.append((sg.name, [nid for nid in sg.members if owner.get(nid) == sg.name]))
    for edge in model.edges:
        gir.add_edge(edge.from_id, edge.to_id, edge.label, edge.arrow_style)


def _build_state(gir: GraphIR, model: m.StateModel) -> None:
    for state in model.states.values():
        gir.add_node(state.name, state.label)
    for t in model.transitions:
        gir.add_edge(t.from_id, t.to_id, t.label)


def _build_er(gir: GraphIR, model: m.ErModel) -> None:
    for entity in model.entities.values():
        gir.add_node(entity.name, entity.name)
    for rel in model.relationships:
        gir.add_edge(rel.entity_a, rel.entity_b, rel.label, rel.cardinality)


def _build_class(gir: GraphIR, model: m.ClassModel) -> None:
    for cls in model.classes.values():
        gir.add_node(cls.name, cls.name)
    for rel in model.relationships:
        gir.add_edge(rel.from_id, rel.to_id, rel.label, rel.kind)


def _build_mindmap(gir: GraphIR, model: m.MindmapModel) -> None:
    for node in model.nodes:
        gir.add_node(node.id, node.label)
    for node in model.nodes:
        if node.parent is not None:
            gir.add_edge(node.parent, node.id)


_BUILDERS = {
    m.FlowchartModel: _build_flowchart,
    m.StateModel: _build_state,
    m.ErModel: _build_er,
    m.ClassModel: _build_class,
    m.MindmapModel: _build_mindmap,
}
