"""Gantt chart parser.

Durations are not computed from dates: every task gets the same fixed
length and only its status tags are kept.
"""

from __future__ import annotations

from mermaid_scene.ir.model import GanttModel, Section, Task
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lines import body_lines

DEFAULT_DURATION = 3
STATUS_TAGS = frozenset({"done", "active", "crit", "milestone"})
_IGNORED_KEYWORDS = frozenset(
    {"dateFormat", "axisFormat", "excludes", "includes", "todayMarker", "tickInterval", "weekday"}
)


class GanttParser:
    """Gantt parser: ``title``, ``section Name`` and ``Task : tags,...`` lines."""

    def __init__(self, default_duration: int = DEFAULT_DURATION) -> None:
        self.default_duration = default_duration

    def parse(self, src: str) -> GanttModel:
        model = GanttModel()
        for line in body_lines(src):
            keyword = line.text.split(maxsplit=1)[0]
            if keyword == "title":
                model.title = line.text[len("title") :].strip()
            elif keyword == "section":
                model.sections.append(Section(name=line.text[len("section") :].strip()))
            elif keyword in _IGNORED_KEYWORDS:
                skip(line, keyword)
            elif ":" in line.text:
                name, _, rest = line.text.partition(":")
                if not name.strip():
                    skip(line, "task without name")
                    continue
                if not model.sections:
                    model.sections.append(Section(name=""))
                tags = [tag.strip() for tag in rest.split(",")]
                model.sections[-1].tasks.append(
                    Task(
                        name=name.strip(),
                        duration=self.default_duration,
                        status=[tag for tag in tags if tag in STATUS_TAGS],
                    )
                )
            else:
                skip(line)
        return model
