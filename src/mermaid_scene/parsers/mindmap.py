"""Mindmap parser: hierarchy from indentation.

The first node is the root. A line indented deeper than the node above it
opens a child; a shallower line closes back to the matching ancestor.
Levels past 2 are clamped to 2 and hang off their level-1 ancestor.
"""

from __future__ import annotations

from mermaid_scene.ir.model import MindmapModel, MindmapNode
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import TokenKind, tokenize
from mermaid_scene.syntax.lines import body_lines

MAX_LEVEL = 2
_BULLETS = "-+*"
_BRACKET_CHARS = "()[]{}"


def node_label(text: str) -> str:
    """Display text of a mindmap line: ``id((text))`` -> ``text``, ``- text`` -> ``text``."""
    text = text.lstrip(_BULLETS).strip()
    tokens = tokenize(text)
    if tokens and tokens[0].kind == TokenKind.BRACKET and tokens[0].end == len(text):
        return tokens[0].value
    if (
        len(tokens) >= 2
        and tokens[0].kind == TokenKind.IDENT
        and tokens[1].kind == TokenKind.BRACKET
        and tokens[1].start == tokens[0].end
        and tokens[1].end == len(text)
    ):
        return tokens[1].value
    return text.strip(_BRACKET_CHARS).strip()


class MindmapParser:
    """Mindmap parser producing root / level-1 / level-2 nodes."""

    def parse(self, src: str) -> MindmapModel:
        model = MindmapModel()
        stack: list[tuple[int, MindmapNode]] = []  # (indent, node), root at the bottom
        for line in body_lines(src):
            if line.text.startswith("::icon") or line.text.startswith(":::"):
                skip(line, "decoration")
                continue
            label = node_label(line.text)
            if not label:
                skip(line, "empty node")
                continue
            node_id = f"node{len(model.nodes)}"
            if not stack:
                node = MindmapNode(id=node_id, label=label, level=0)
                model.nodes.append(node)
                stack.append((line.indent, node))
                continue
            while len(stack) > 1 and stack[-1][0] >= line.indent:
                stack.pop()
            depth = len(stack)
            parent = stack[min(depth, MAX_LEVEL) - 1][1]
            node = MindmapNode(id=node_id, label=label, level=min(depth, MAX_LEVEL), parent=parent.id)
            model.nodes.append(node)
            stack.append((line.indent, node))
        return model
