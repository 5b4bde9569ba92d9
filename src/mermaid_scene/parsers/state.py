"""State diagram parser."""

from __future__ import annotations

from mermaid_scene.ir.model import END_STATE, START_STATE, StateModel, Transition
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import Token, TokenKind, split_at_colon, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines

SENTINEL = "[*]"


def _state_name(tokens: list[Token], sentinel: str) -> str | None:
    """A state reference is a single identifier or the ``[*]`` sentinel."""
    if len(tokens) != 1:
        return None
    tok = tokens[0]
    if tok.kind == TokenKind.BRACKET and tok.text == SENTINEL:
        return sentinel
    if tok.kind == TokenKind.IDENT:
        return tok.value
    return None


def _parse_declaration(model: StateModel, line: SourceLine) -> None:
    # state "Description" as Id  |  state Id
    tokens = [t for t in tokenize(line.text)[1:] if t.kind != TokenKind.BLOCK_OPEN]
    if len(tokens) == 3 and tokens[0].kind == TokenKind.STRING and tokens[1].value == "as":
        model.ensure_state(tokens[2].value, tokens[0].value)
    elif len(tokens) == 1 and tokens[0].kind == TokenKind.IDENT:
        model.ensure_state(tokens[0].value)
    else:
        skip(line, "state declaration")


def _parse_transition(model: StateModel, line: SourceLine) -> None:
    head, label = split_at_colon(tokenize(line.text))
    arrow_at = next((i for i, t in enumerate(head) if t.kind == TokenKind.ARROW and t.value == "-->"), None)
    if arrow_at is None:
        skip(line)
        return
    from_state = _state_name(head[:arrow_at], START_STATE)
    to_state = _state_name(head[arrow_at + 1 :], END_STATE)
    if from_state is None or to_state is None:
        skip(line, "transition endpoints")
        return
    model.ensure_state(from_state)
    model.ensure_state(to_state)
    model.transitions.append(Transition(from_id=from_state, to_id=to_state, label=label))


class StateParser:
    """State diagram parser; ``[*]`` becomes Start on the left of an arrow and End on the right."""

    def parse(self, src: str) -> StateModel:
        model = StateModel()
        for line in body_lines(src):
            keyword = line.text.split(maxsplit=1)[0]
            if keyword == "state":
                _parse_declaration(model, line)
            elif keyword == "direction" or line.text in ("}", "--"):
                skip(line, keyword)
            else:
                _parse_transition(model, line)
        return model
