"""Intermediate representation: per-kind models and the relationship GraphIR."""

from mermaid_scene.ir.graph import EdgeData, GraphIR, NodeData
from mermaid_scene.ir.model import (
    ClassDef,
    ClassModel,
    ClassRelationship,
    DiagramModel,
    Edge,
    Entity,
    ErModel,
    FlowchartModel,
    GanttModel,
    MindmapModel,
    MindmapNode,
    Message,
    Node,
    Participant,
    PieModel,
    Relationship,
    Section,
    SequenceModel,
    Slice,
    State,
    StateModel,
    Subgraph,
    Task,
    TimelineEvent,
    TimelineModel,
    Transition,
)

__all__ = [
    "ClassDef",
    "ClassModel",
    "ClassRelationship",
    "DiagramModel",
    "Edge",
    "EdgeData",
    "Entity",
    "ErModel",
    "FlowchartModel",
    "GanttModel",
    "GraphIR",
    "Message",
    "MindmapModel",
    "MindmapNode",
    "Node",
    "NodeData",
    "Participant",
    "PieModel",
    "Relationship",
    "Section",
    "SequenceModel",
    "Slice",
    "State",
    "StateModel",
    "Subgraph",
    "Task",
    "TimelineEvent",
    "TimelineModel",
    "Transition",
]
