"""Public pipeline: diagram text in, positioned scene out."""

from __future__ import annotations

import logging

from mermaid_scene.config import DEFAULT_CONFIG, LayoutConfig
from mermaid_scene.detect import detect_type, first_line, has_header
from mermaid_scene.layout import layout_diagram
from mermaid_scene.parsers import parse_diagram
from mermaid_scene.router import route_links
from mermaid_scene.scene import Scene, assemble_scene, fallback_scene
from mermaid_scene.types import DiagramKind

log = logging.getLogger(__name__)


def resolve_kind(text: str, kind_hint: str | None = None) -> DiagramKind:
    """The hinted kind when the hint is recognised, else the detected one."""
    kind = DiagramKind.from_hint(kind_hint)
    if kind is DiagramKind.Unknown:
        return detect_type(text)
    return kind


def build_scene(
    text: str,
    kind_hint: str | None = None,
    *,
    config: LayoutConfig | None = None,
    fallback_on_empty: bool = False,
) -> Scene:
    """Convert Mermaid-style diagram text into a Scene of shapes and connectors.

    Args:
        text: Verbatim diagram source, header line included.
        kind_hint: Optional kind tag from the host, e.g. ``"sequence"``. When it
            names a known kind it overrides detection; a body without a
            header line is then parsed as that kind.
        config: Layout constants; ``DEFAULT_CONFIG`` when omitted.
        fallback_on_empty: Emit the placeholder shape instead of an empty
            scene when a recognised diagram has no entities.

    Returns:
        The assembled Scene. Unrecognised diagram kinds yield a single
        placeholder shape; this function does not raise for any input text.
    """
    config = config or DEFAULT_CONFIG
    kind = resolve_kind(text, kind_hint)
    if kind is DiagramKind.Unknown:
        log.info("unrecognised diagram kind, emitting placeholder for %r", first_line(text))
        return fallback_scene(first_line(text), config)

    if kind_hint and not has_header(text, kind):
        # Headerless body: give the parser the header line it skips.
        text = f"{kind_hint}\n{text}"

    model = parse_diagram(text, kind)
    if model.is_empty():
        log.debug("%s diagram has no entities", kind.name)
        return fallback_scene(first_line(text), config) if fallback_on_empty else Scene()

    result = layout_diagram(model, config)
    routes, labels = route_links(result, config)
    scene = assemble_scene(result, routes, labels)
    log.debug("%s scene: %d shapes, %d connectors", kind.name, len(scene.shapes), len(scene.connectors))
    return scene
