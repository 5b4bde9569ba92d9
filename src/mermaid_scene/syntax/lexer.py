"""Line tokenizer shared by every diagram parser.

One scanning pass over a single source line. Parsers pattern-match the
resulting token list instead of searching the raw text for arrows and
brackets. The lexer never raises: anything it does not recognise becomes a
SYMBOL token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from mermaid_scene.types import NodeShape


class TokenKind(Enum):
    IDENT = auto()
    BRACKET = auto()  # A shape bracket group such as [text] or ((text))
    ARROW = auto()
    PIPE_LABEL = auto()  # |text|
    COLON = auto()
    TEXT = auto()  # Free text following a colon
    STRING = auto()  # "quoted"
    BLOCK_OPEN = auto()  # Unterminated {
    BLOCK_CLOSE = auto()  # Lone }
    COMMENT = auto()
    SYMBOL = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int
    end: int
    value: str = ""
    shape: NodeShape | None = None


# ─── Token tables ────────────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"\s+")
_IDENT_RE = re.compile(r"\w+")

# ER crow's-foot operator: left cardinality, line, right cardinality.
_ER_ARROW_RE = re.compile(r"(?:\|o|\|\||\}o|\}\|)(?:--|\.\.)(?:o\||\|\||o\{|\|\{)")

# Every arrow operator any diagram kind understands, longest first.
ARROW_OPERATORS: tuple[str, ...] = (
    "<-.->",
    "<-->",
    "<==>",
    "-->>",
    "-.->",
    "<|--",
    "--|>",
    "..|>",
    "<|..",
    "-->",
    "---",
    "-.-",
    "==>",
    "===",
    "->>",
    "--x",
    "--o",
    "--)",
    "*--",
    "--*",
    "o--",
    "..>",
    "<..",
    "<--",
    "->",
    "-x",
    "-)",
    "--",
    "..",
)

# Opening bracket, closing bracket, shape. Doubled forms come first.
_BRACKETS: tuple[tuple[str, str, NodeShape], ...] = (
    ("((", "))", NodeShape.Circle),
    ("([", "])", NodeShape.Stadium),
    ("{{", "}}", NodeShape.Hexagon),
    ("[", "]", NodeShape.Rectangle),
    ("(", ")", NodeShape.RoundedRect),
    ("{", "}", NodeShape.Diamond),
)


@dataclass
class _Cursor:
    """Stateful cursor over one line."""

    src: str
    pos: int = 0

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip_ws(self) -> None:
        self.match_re(_WHITESPACE_RE)

    def take(self, kind: TokenKind, text: str, **extra) -> Token:
        start = self.pos
        self.pos += len(text)
        return Token(kind=kind, text=text, start=start, end=self.pos, **extra)

    def parse_arrow(self) -> Token | None:
        start = self.pos
        er = self.match_re(_ER_ARROW_RE)
        if er is not None:
            return Token(kind=TokenKind.ARROW, text=er, start=start, end=self.pos, value=er)
        for op in ARROW_OPERATORS:
            if self.peek(op):
                return self.take(TokenKind.ARROW, op, value=op)
        return None

    def parse_quoted(self) -> Token:
        start = self.pos
        close = self.src.find('"', start + 1)
        if close == -1:
            close = len(self.src)
            self.pos = close
        else:
            self.pos = close + 1
        return Token(
            kind=TokenKind.STRING,
            text=self.src[start : self.pos],
            start=start,
            end=self.pos,
            value=self.src[start + 1 : close],
        )

    def parse_bracket(self) -> Token | None:
        start = self.pos
        for opener, closer, shape in _BRACKETS:
            if not self.peek(opener):
                continue
            inner_start = start + len(opener)
            close = self.src.find(closer, inner_start)
            if close == -1:
                continue
            self.pos = close + len(closer)
            return Token(
                kind=TokenKind.BRACKET,
                text=self.src[start : self.pos],
                start=start,
                end=self.pos,
                value=_unquote(self.src[inner_start:close].strip()),
                shape=shape,
            )
        return None

    def parse_pipe_label(self) -> Token | None:
        close = self.src.find("|", self.pos + 1)
        if close == -1:
            return None
        start = self.pos
        self.pos = close + 1
        return Token(
            kind=TokenKind.PIPE_LABEL,
            text=self.src[start : self.pos],
            start=start,
            end=self.pos,
            value=_unquote(self.src[start + 1 : close].strip()),
        )

    def arrow_ahead(self) -> bool:
        return _ER_ARROW_RE.match(self.src, self.pos) is not None or any(self.peek(op) for op in ARROW_OPERATORS)

    def parse_ident(self) -> Token | None:
        """A word, carried on through each ``-`` that does not start an arrow.

        ``my-node-->x`` gives ``my-node``; ``Alice->>Bob`` stops at ``->>``.
        """
        start = self.pos
        if self.match_re(_IDENT_RE) is None:
            return None
        while self.peek("-") and not self.arrow_ahead() and _IDENT_RE.match(self.src, self.pos + 1):
            self.pos += 1
            self.match_re(_IDENT_RE)
        text = self.src[start : self.pos]
        return Token(kind=TokenKind.IDENT, text=text, start=start, end=self.pos, value=text)

    def next_token(self) -> Token | None:
        self.skip_ws()
        if self.eof():
            return None
        if self.peek("%%"):
            return self.take(TokenKind.COMMENT, self.src[self.pos :])
        if self.peek(":::"):
            return self.take(TokenKind.SYMBOL, ":::")
        if self.peek(":"):
            return self.take(TokenKind.COLON, ":")
        arrow = self.parse_arrow()
        if arrow is not None:
            return arrow
        if self.peek('"'):
            return self.parse_quoted()
        if self.peek("|"):
            label = self.parse_pipe_label()
            if label is not None:
                return label
        if self.peek("{") or self.peek("[") or self.peek("("):
            bracket = self.parse_bracket()
            if bracket is not None:
                return bracket
            if self.peek("{"):
                return self.take(TokenKind.BLOCK_OPEN, "{")
        if self.peek("}"):
            return self.take(TokenKind.BLOCK_CLOSE, "}")
        ident = self.parse_ident()
        if ident is not None:
            return ident
        return self.take(TokenKind.SYMBOL, self.src[self.pos])


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text


def tokenize(line: str) -> list[Token]:
    """Split one source line into tokens.

    A COLON token ends structured scanning: everything after it is returned
    as a single stripped TEXT token (omitted when empty).
    """
    cursor = _Cursor(src=line)
    tokens: list[Token] = []
    while True:
        tok = cursor.next_token()
        if tok is None:
            break
        tokens.append(tok)
        if tok.kind == TokenKind.COMMENT:
            break
        if tok.kind == TokenKind.COLON:
            rest = line[cursor.pos :]
            text = rest.strip()
            if text:
                start = cursor.pos + (len(rest) - len(rest.lstrip()))
                tokens.append(Token(kind=TokenKind.TEXT, text=text, start=start, end=start + len(text), value=text))
            break
    return tokens


def split_at_colon(tokens: list[Token]) -> tuple[list[Token], str]:
    """Return the tokens before the first colon and the text after it."""
    for i, tok in enumerate(tokens):
        if tok.kind == TokenKind.COLON:
            tail = tokens[i + 1 :]
            return tokens[:i], (tail[0].value if tail else "")
    return tokens, ""
