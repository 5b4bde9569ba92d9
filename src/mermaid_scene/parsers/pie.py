"""Pie chart parser."""

from __future__ import annotations

import math

from mermaid_scene.ir.model import PieModel, Slice
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lines import body_lines, split_header


def _header_title(header: str) -> str:
    # pie [showData] title Some Title
    _, found, title = header.partition("title")
    return title.strip() if found else ""


class PieParser:
    """Pie chart parser: ``"label" : value`` slices plus an optional title."""

    def parse(self, src: str) -> PieModel:
        header, _ = split_header(src)
        model = PieModel(title=_header_title(header.text) if header else "")
        for line in body_lines(src):
            if line.text.startswith("title"):
                model.title = line.text[len("title") :].strip()
                continue
            if line.text == "showData":
                continue
            label, found, raw_value = line.text.rpartition(":")
            if not found:
                skip(line)
                continue
            try:
                value = float(raw_value.strip())
            except ValueError:
                skip(line, "non-numeric slice value")
                continue
            if not math.isfinite(value):
                skip(line, "non-finite slice value")
                continue
            model.slices.append(Slice(label=label.strip().strip("\"'"), value=value))
        return model
