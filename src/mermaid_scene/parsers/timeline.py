"""Timeline parser."""

from __future__ import annotations

from mermaid_scene.ir.model import TimelineEvent, TimelineModel
from mermaid_scene.parsers.base import skip
from mermaid_scene.syntax.lines import body_lines


def _items(text: str) -> list[str]:
    return [item.strip() for item in text.split(":") if item.strip()]


class TimelineParser:
    """Timeline parser.

    ``Date : a : b`` starts a new event group with two items. A line that
    starts with ``:`` or has no colon at all adds items to the current group.
    """

    def parse(self, src: str) -> TimelineModel:
        model = TimelineModel()
        for line in body_lines(src):
            keyword = line.text.split(maxsplit=1)[0]
            if keyword == "title":
                model.title = line.text[len("title") :].strip()
            elif keyword == "section":
                skip(line, keyword)
            elif line.text.startswith(":") or ":" not in line.text:
                if not model.events:
                    skip(line, "item before first date")
                    continue
                model.events[-1].items.extend(_items(line.text))
            else:
                date, _, rest = line.text.partition(":")
                model.events.append(TimelineEvent(date=date.strip(), items=_items(rest)))
        return model
