"""Entity-relationship diagram parser."""

from __future__ import annotations

import re

from mermaid_scene.ir.model import ErModel, Relationship
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import TokenKind, split_at_colon, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines

# Cardinality markers that make a line a relationship.
_RELATIONSHIP_MARKERS = ("||", "}|", "|{", "o{", "}o", "|o", "o|")
_ENTITY_NAME_RE = re.compile(r"[A-Z][\w-]*$")


def _is_relationship(text: str) -> bool:
    return any(marker in text for marker in _RELATIONSHIP_MARKERS)


def _parse_relationship(model: ErModel, line: SourceLine) -> None:
    head, label = split_at_colon(tokenize(line.text))
    arrow_at = next((i for i, t in enumerate(head) if t.kind == TokenKind.ARROW), None)
    if arrow_at is None:
        skip(line, "relationship without cardinality operator")
        return
    arrow = head[arrow_at]
    tail_end = head[-1].end if len(head) > arrow_at + 1 else arrow.end
    left = line.text[: arrow.start].split()
    right = line.text[arrow.end : tail_end].split()
    if not left or not right:
        skip(line, "relationship endpoints")
        return
    entity_a, entity_b = left[-1].strip("\"'"), right[0].strip("\"'")
    if not _ENTITY_NAME_RE.match(entity_a) or not _ENTITY_NAME_RE.match(entity_b):
        skip(line, "entity names must start with an uppercase letter")
        return
    model.ensure_entity(entity_a)
    model.ensure_entity(entity_b)
    model.relationships.append(
        Relationship(entity_a=entity_a, entity_b=entity_b, label=label.strip("\"'"), cardinality=arrow.value)
    )


class ErParser:
    """ER diagram parser: ``NAME { ... }`` blocks and cardinality relationships."""

    def parse(self, src: str) -> ErModel:
        model = ErModel()
        current: str | None = None
        for line in body_lines(src):
            if current is not None:
                if line.text == "}":
                    current = None
                else:
                    model.entities[current].attributes.append(line.text)
                continue
            if _is_relationship(line.text):
                _parse_relationship(model, line)
            elif line.text.endswith("{"):
                name = line.text[:-1].strip()
                if not name:
                    skip(line, "entity without name")
                    continue
                model.ensure_entity(name)
                current = name
            elif line.text.endswith("}") and "{" in line.text:
                # NAME { attr }
                name, _, body = line.text[:-1].partition("{")
                if not name.strip():
                    skip(line, "entity without name")
                    continue
                entity = model.ensure_entity(name.strip())
                if body.strip():
                    entity.attributes.append(body.strip())
            else:
                skip(line)
        return model
