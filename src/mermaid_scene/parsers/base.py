"""Base parser protocol."""

from __future__ import annotations

import logging
from typing import Protocol

from mermaid_scene.ir.model import DiagramModel
from mermaid_scene.syntax.lines import SourceLine

log = logging.getLogger(__name__)


class Parser(Protocol):
    """Protocol that all diagram parsers must implement."""

    def parse(self, src: str) -> DiagramModel:
        """Parse diagram source text into its structured model."""
        ...


def skip(line: SourceLine, reason: str = "unrecognized") -> None:
    """Record a line the forgiving parsers chose to ignore."""
    log.debug("line %d skipped (%s): %r", line.number, reason, line.text)
