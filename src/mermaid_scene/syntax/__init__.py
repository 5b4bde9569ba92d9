"""Source-text scanning shared by the diagram parsers."""

from mermaid_scene.syntax.lexer import ARROW_OPERATORS, Token, TokenKind, split_at_colon, tokenize
from mermaid_scene.syntax.lines import SourceLine, body_lines, split_header

__all__ = [
    "ARROW_OPERATORS",
    "SourceLine",
    "Token",
    "TokenKind",
    "body_lines",
    "split_at_colon",
    "split_header",
    "tokenize",
]
