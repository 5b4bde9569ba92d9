"""Sequence diagram parser."""

from __future__ import annotations

from mermaid_scene.ir.model import Message, SequenceModel
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import TokenKind, split_at_colon, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines

_MESSAGE_ARROWS = frozenset({"->>", "-->>", "->", "-->", "-x", "--x", "-)", "--)"})
_DECLARATIONS = ("participant", "actor")
_IGNORED_KEYWORDS = frozenset(
    {
        "autonumber",
        "activate",
        "deactivate",
        "note",
        "loop",
        "alt",
        "else",
        "opt",
        "par",
        "and",
        "end",
        "rect",
        "critical",
        "break",
        "title",
        "box",
        "create",
        "destroy",
    }
)


def _parse_declaration(model: SequenceModel, keyword: str, line: SourceLine) -> None:
    rest = line.text[len(keyword) :].strip()
    if " as " in rest:
        id, alias = rest.split(" as ", 1)
        id, display = id.strip(), alias.strip()
    else:
        id = rest.split()[0] if rest else ""
        display = id
    if not id:
        skip(line, "participant without id")
        return
    model.ensure_participant(id, display)


def _parse_message(model: SequenceModel, line: SourceLine) -> None:
    head, text = split_at_colon(tokenize(line.text))
    head = [t for t in head if not (t.kind == TokenKind.SYMBOL and t.text in "+-")]
    if (
        len(head) != 3
        or head[0].kind != TokenKind.IDENT
        or head[1].kind != TokenKind.ARROW
        or head[1].value not in _MESSAGE_ARROWS
        or head[2].kind != TokenKind.IDENT
    ):
        skip(line)
        return
    from_id, arrow, to_id = head[0].value, head[1].value, head[2].value
    model.ensure_participant(from_id)
    model.ensure_participant(to_id)
    model.messages.append(Message(from_id=from_id, to_id=to_id, text=text, dashed=arrow.startswith("--")))


class SequenceParser:
    """Sequence diagram parser: participants in first-appearance order, then messages."""

    def parse(self, src: str) -> SequenceModel:
        model = SequenceModel()
        for line in body_lines(src):
            keyword = line.text.split(maxsplit=1)[0]
            if keyword in _DECLARATIONS:
                _parse_declaration(model, keyword, line)
            elif keyword.lower() in _IGNORED_KEYWORDS:
                skip(line, keyword)
            else:
                _parse_message(model, line)
        return model
