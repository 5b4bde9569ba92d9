"""Flowchart parser: token-driven, one statement per line.

Parses Mermaid flowchart/graph text into a FlowchartModel.
"""

from __future__ import annotations

from mermaid_scene.ir.model import Edge, FlowchartModel, Node, Subgraph
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lexer import Token, TokenKind, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines, split_header
from mermaid_scene.types import ArrowStyle, Direction

_DIRECTIONS: dict[str, Direction] = {
    "LR": Direction.LR,
    "RL": Direction.RL,
    "TB": Direction.TB,
    "TD": Direction.TB,
    "BT": Direction.BT,
}

_ARROW_STYLES: dict[str, ArrowStyle] = {
    "-->": ArrowStyle.Arrow,
    "->": ArrowStyle.Arrow,
    "--x": ArrowStyle.Arrow,
    "--o": ArrowStyle.Arrow,
    "<-->": ArrowStyle.Arrow,
    "---": ArrowStyle.Open,
    "--": ArrowStyle.Open,
    "-.->": ArrowStyle.Dotted,
    "-.-": ArrowStyle.Dotted,
    "<-.->": ArrowStyle.Dotted,
    "==>": ArrowStyle.Thick,
    "===": ArrowStyle.Thick,
    "<==>": ArrowStyle.Thick,
}

# Statements that style or annotate nodes rather than declare them.
_IGNORED_KEYWORDS = frozenset({"direction", "classDef", "class", "style", "linkStyle", "click"})


def parse_direction(header: str) -> Direction:
    """Direction token on the header line; top-to-bottom when absent."""
    for tok in tokenize(header)[1:]:
        if tok.kind == TokenKind.IDENT and tok.value.upper() in _DIRECTIONS:
            return _DIRECTIONS[tok.value.upper()]
    return Direction.default()


def _node_ref(tokens: list[Token], i: int) -> tuple[Node | None, int]:
    """Parse ``id`` or ``id<bracket>`` starting at token ``i``."""
    if i >= len(tokens) or tokens[i].kind != TokenKind.IDENT:
        return None, i
    ident = tokens[i]
    i += 1
    if i < len(tokens) and tokens[i].kind == TokenKind.BRACKET and tokens[i].start == ident.end:
        bracket = tokens[i]
        return Node(id=ident.value, label=bracket.value or ident.value, shape=bracket.shape), i + 1
    return Node.bare(ident.value), i


class _FlowchartBuilder:
    """Accumulates nodes, edges and subgraph membership line by line."""

    def __init__(self, direction: Direction) -> None:
        self.model = FlowchartModel(direction=direction)
        self.open_subgraphs: list[Subgraph] = []

    def register(self, node: Node) -> Node:
        if node.id not in self.model.nodes and self.open_subgraphs:
            self.open_subgraphs[-1].members.append(node.id)
        return self.model.add_node(node)

    def open_subgraph(self, line: SourceLine) -> None:
        tokens = tokenize(line.text)[1:]
        name = line.text[len("subgraph") :].strip()
        if len(tokens) >= 2 and tokens[0].kind == TokenKind.IDENT and tokens[1].kind == TokenKind.BRACKET:
            name = tokens[1].value
        elif tokens and tokens[0].kind == TokenKind.STRING:
            name = tokens[0].value
        sg = Subgraph(name=name)
        self.model.subgraphs.append(sg)
        self.open_subgraphs.append(sg)

    def close_subgraph(self, line: SourceLine) -> None:
        if not self.open_subgraphs:
            skip(line, "end without subgraph")
            return
        self.open_subgraphs.pop()

    def statement(self, line: SourceLine) -> None:
        tokens = tokenize(line.text)
        source, i = _node_ref(tokens, 0)
        if source is None:
            skip(line)
            return
        prev = self.register(source)
        while i < len(tokens) and tokens[i].kind == TokenKind.ARROW:
            arrow = tokens[i]
            i += 1
            label: str | None = None
            if i < len(tokens) and tokens[i].kind == TokenKind.PIPE_LABEL:
                label = tokens[i].value or None
                i += 1
            elif arrow.value == "--":
                # A -- text --> B
                j = next((k for k in range(i, len(tokens)) if tokens[k].kind == TokenKind.ARROW), None)
                if j is not None and j > i:
                    label = line.text[tokens[i].start : tokens[j - 1].end].strip() or None
                    arrow = tokens[j]
                    i = j + 1
            style = _ARROW_STYLES.get(arrow.value)
            if style is None:
                skip(line, f"arrow {arrow.value!r}")
                return
            target, i = _node_ref(tokens, i)
            if target is None:
                skip(line, "edge without target")
                return
            target = self.register(target)
            self.model.edges.append(Edge(from_id=prev.id, to_id=target.id, arrow_style=style, label=label))
            prev = target


class FlowchartParser:
    """Flowchart/graph diagram parser."""

    def parse(self, src: str) -> FlowchartModel:
        header, _ = split_header(src)
        builder = _FlowchartBuilder(parse_direction(header.text) if header else Direction.default())
        for line in body_lines(src):
            keyword = line.text.split(maxsplit=1)[0]
            if keyword == "subgraph":
                builder.open_subgraph(line)
            elif line.text == "end":
                builder.close_subgraph(line)
            elif keyword in _IGNORED_KEYWORDS:
                skip(line, keyword)
            else:
                builder.statement(line)
        return builder.model
