"""Class diagram parser."""

from __future__ import annotations

from mermaid_scene.ir.model import ClassModel, ClassRelationship
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import TokenKind, split_at_colon, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines
from mermaid_scene.types import RelationKind

_RELATION_KINDS: dict[str, RelationKind] = {
    "<|--": RelationKind.Extends,
    "-->": RelationKind.Uses,
}


def _class_name(text: str) -> str:
    """``class Name {`` / ``class Name~T~`` -> ``Name``."""
    name = text[len("class") :].split("{", 1)[0].strip()
    return name.split("~", 1)[0].split(":::", 1)[0].strip()


def _parse_relationship(model: ClassModel, line: SourceLine) -> bool:
    head, label = split_at_colon(tokenize(line.text))
    arrow = next((t for t in head if t.kind == TokenKind.ARROW), None)
    if arrow is None:
        return False
    idents = [t.value for t in head if t.kind == TokenKind.IDENT]
    if len(idents) < 2:
        skip(line, "relationship endpoints")
        return True
    from_id, to_id = idents[0], idents[-1]
    model.ensure_class(from_id)
    model.ensure_class(to_id)
    kind = _RELATION_KINDS.get(arrow.value, RelationKind.Associates)
    model.relationships.append(ClassRelationship(from_id=from_id, to_id=to_id, kind=kind, label=label))
    return True


class ClassDiagramParser:
    """Class diagram parser.

    Handles ``class Name { ... }`` blocks (multi-line, or one line with
    ``;`` between members), bare ``class Name`` declarations,
    one-line ``Name : member`` definitions and relationship lines. A member
    is a method when it contains ``(``.
    """

    def parse(self, src: str) -> ClassModel:
        model = ClassModel()
        current: str | None = None
        for line in body_lines(src):
            if current is not None:
                if line.text == "}":
                    current = None
                elif line.text.startswith("<<"):
                    skip(line, "annotation")
                else:
                    model.classes[current].add_member(line.text)
                continue
            if line.text.startswith("class "):
                name = _class_name(line.text)
                if not name:
                    skip(line, "class without name")
                    continue
                cls = model.ensure_class(name)
                _, brace, rest = line.text.partition("{")
                if not brace:
                    continue
                if "}" in rest:
                    # One-line body: class Name { +a; +b() }
                    rest = rest.rsplit("}", 1)[0]
                else:
                    current = name
                for member in filter(None, (m.strip() for m in rest.split(";"))):
                    if not member.startswith("<<"):
                        cls.add_member(member)
            elif _parse_relationship(model, line):
                continue
            elif ":" in line.text:
                name, _, member = line.text.partition(":")
                if not name.strip() or not member.strip():
                    skip(line, "member")
                    continue
                model.ensure_class(name.strip()).add_member(member.strip())
            else:
                skip(line)
        return model
