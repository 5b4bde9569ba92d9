"""mermaid-scene: Mermaid-style diagram text to positioned slide shapes and connectors."""

from mermaid_scene.api import build_scene, resolve_kind
from mermaid_scene.config import DEFAULT_CONFIG, LayoutConfig
from mermaid_scene.detect import detect_type
from mermaid_scene.layout import layout_diagram
from mermaid_scene.parsers import parse_diagram
from mermaid_scene.router import route_links
from mermaid_scene.scene import ID_BASE, Anchor, Connector, Scene, Shape, assemble_scene
from mermaid_scene.types import DiagramKind

__all__ = [
    "DEFAULT_CONFIG",
    "ID_BASE",
    "Anchor",
    "Connector",
    "DiagramKind",
    "LayoutConfig",
    "Scene",
    "Shape",
    "assemble_scene",
    "build_scene",
    "detect_type",
    "layout_diagram",
    "parse_diagram",
    "resolve_kind",
    "route_links",
]
