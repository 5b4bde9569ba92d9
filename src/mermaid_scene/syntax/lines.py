"""Line-level scanning: header location and body iteration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

COMMENT_MARKER = "%%"
FRONT_MATTER_FENCE = "---"


@dataclass(frozen=True)
class SourceLine:
    number: int  # 1-based line number in the source text
    raw: str
    text: str  # stripped

    @property
    def indent(self) -> int:
        expanded = self.raw.expandtabs(4)
        return len(expanded) - len(expanded.lstrip(" "))


def _is_skippable(text: str) -> bool:
    return not text or text.startswith(COMMENT_MARKER)


def split_header(src: str) -> tuple[SourceLine | None, list[SourceLine]]:
    """Locate the header line and return it with the lines that follow it.

    Blank lines, ``%%`` comments and a leading ``---`` front-matter block are
    skipped before the header. Returns ``(None, [])`` for text with no header.
    """
    lines = [SourceLine(number=i + 1, raw=raw, text=raw.strip()) for i, raw in enumerate(src.splitlines())]
    i = 0
    while i < len(lines) and _is_skippable(lines[i].text):
        i += 1
    if i < len(lines) and lines[i].text == FRONT_MATTER_FENCE:
        close = next((j for j in range(i + 1, len(lines)) if lines[j].text == FRONT_MATTER_FENCE), None)
        if close is not None:
            i = close + 1
            while i < len(lines) and _is_skippable(lines[i].text):
                i += 1
    if i >= len(lines):
        return None, []
    return lines[i], lines[i + 1 :]


def body_lines(src: str) -> Iterator[SourceLine]:
    """Yield the non-blank, non-comment lines after the header."""
    _, rest = split_header(src)
    for line in rest:
        if _is_skippable(line.text):
            continue
        yield line
