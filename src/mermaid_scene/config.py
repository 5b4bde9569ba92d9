"""Centralized layout configuration for mermaid-scene.

All distances are EMU (914400 per inch); line widths are EMU too
(12700 per point). Sections are frozen so one value can be shared by
any number of concurrent pipeline calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

EMU_PER_POINT = 12700


@dataclass(frozen=True)
class FlowchartConfig:
    node_width: int = 1_400_000
    node_height: int = 500_000
    h_spacing: int = 1_800_000
    v_spacing: int = 900_000
    origin_x: int = 1_000_000
    origin_y: int = 1_800_000
    max_columns: int = 5
    subgraph_origin_x: int = 500_000
    subgraph_origin_y: int = 1_600_000
    subgraph_pad_x: int = 200_000
    subgraph_pad_top: int = 300_000
    subgraph_extra_width: int = 400_000
    subgraph_extra_height: int = 400_000
    subgraph_gap: int = 600_000
    subgraph_fills: tuple[str, ...] = ("E3F2FD", "F3E5F5", "E8F5E9", "FFF3E0", "E0F7FA", "FCE4EC")
    subgraph_line: str = "757575"
    node_fill: str = "FFFFFF"
    diamond_fill: str = "FFF3E0"
    circle_fill: str = "E3F2FD"
    node_line: str = "1565C0"
    arrow_color: str = "1565C0"
    dotted_color: str = "757575"
    thick_color: str = "E65100"
    label_width: int = 900_000
    label_height: int = 250_000
    label_fill: str = "FFFFFF"


@dataclass(frozen=True)
class SequenceConfig:
    origin_x: int = 500_000
    origin_y: int = 1_600_000
    participant_width: int = 1_400_000
    participant_height: int = 400_000
    h_spacing: int = 1_800_000
    min_lifeline_height: int = 3_000_000
    lifeline_width: int = 20_000
    message_offset: int = 200_000
    message_spacing: int = 450_000
    arrow_height: int = 120_000
    text_height: int = 160_000
    text_offset: int = 180_000
    self_message_width: int = 600_000
    box_fill: str = "E3F2FD"
    box_line: str = "1565C0"
    lifeline_fill: str = "757575"
    message_fill: str = "1565C0"
    reply_fill: str = "64B5F6"


@dataclass(frozen=True)
class StateConfig:
    origin_x: int = 1_000_000
    origin_y: int = 1_800_000
    width: int = 1_500_000
    height: int = 500_000
    h_spacing: int = 2_200_000
    v_spacing: int = 1_200_000
    columns: int = 3
    fill: str = "E0F7FA"
    sentinel_fill: str = "000000"
    line: str = "00838F"
    label_width: int = 800_000
    label_height: int = 250_000
    label_fill: str = "FFFDE7"


@dataclass(frozen=True)
class ErConfig:
    origin_x: int = 500_000
    origin_y: int = 1_600_000
    width: int = 2_200_000
    header_height: int = 400_000
    attribute_height: int = 280_000
    h_spacing: int = 2_800_000
    v_spacing: int = 2_500_000
    columns: int = 3
    header_fill: str = "C2185B"
    body_fill: str = "FCE4EC"
    line: str = "880E4F"
    label_width: int = 1_000_000
    label_height: int = 250_000
    label_fill: str = "FFFFFF"


@dataclass(frozen=True)
class ClassConfig:
    origin_x: int = 500_000
    origin_y: int = 1_600_000
    width: int = 2_000_000
    header_height: int = 350_000
    member_height: int = 250_000
    h_spacing: int = 2_500_000
    v_spacing: int = 2_000_000
    columns: int = 3
    header_fill: str = "4472C4"
    attribute_fill: str = "D6DCE5"
    method_fill: str = "FFFFFF"
    line: str = "2F5496"
    label_width: int = 900_000
    label_height: int = 250_000
    label_fill: str = "FFFFFF"


@dataclass(frozen=True)
class PieConfig:
    center_x: int = 2_500_000
    center_y: int = 3_000_000
    radius: int = 1_500_000
    outline: str = "FFFFFF"
    legend_x: int = 5_000_000
    legend_y: int = 2_000_000
    legend_row_height: int = 350_000
    legend_box_size: int = 200_000
    legend_text_offset: int = 300_000
    legend_text_width: int = 2_500_000
    title_x: int = 500_000
    title_y: int = 1_100_000
    title_width: int = 7_000_000
    title_height: int = 400_000
    palette: tuple[str, ...] = ("4472C4", "ED7D31", "A5A5A5", "FFC000", "5B9BD5", "70AD47", "9E480E", "997300")


@dataclass(frozen=True)
class GanttConfig:
    origin_x: int = 500_000
    origin_y: int = 1_600_000
    width: int = 7_000_000
    title_height: int = 400_000
    title_gap: int = 500_000
    section_height: int = 300_000
    section_gap: int = 50_000
    task_height: int = 250_000
    task_spacing: int = 280_000
    label_width: int = 2_000_000
    bar_gap: int = 100_000
    bar_stagger: int = 200_000
    unit_width: int = 600_000
    section_fill: str = "E0E0E0"
    crit_line: str = "C62828"
    palette: tuple[str, ...] = ("4472C4", "ED7D31", "70AD47", "FFC000", "5B9BD5")


@dataclass(frozen=True)
class MindmapConfig:
    center_x: int = 4_000_000
    center_y: int = 3_000_000
    root_width: int = 2_000_000
    root_height: int = 600_000
    node_width: int = 1_500_000
    node_height: int = 400_000
    radius1: int = 2_000_000
    radius2: int = 3_200_000
    fan_step: float = 0.35
    root_fill: str = "3949AB"
    root_line: str = "1A237E"
    level1_palette: tuple[str, ...] = ("4472C4", "ED7D31", "70AD47", "FFC000", "5B9BD5", "9E480E")
    level2_fill: str = "E8EAF6"
    level2_line: str = "3949AB"
    link_color: str = "3949AB"


@dataclass(frozen=True)
class TimelineConfig:
    origin_x: int = 500_000
    origin_y: int = 1_600_000
    axis_y: int = 2_500_000
    axis_thickness: int = 30_000
    axis_tail: int = 500_000
    title_width: int = 7_500_000
    title_height: int = 400_000
    event_width: int = 1_400_000
    event_spacing: int = 1_600_000
    marker_size: int = 150_000
    marker_rise: int = 60_000
    date_height: int = 300_000
    date_gap: int = 100_000
    items_gap: int = 150_000
    item_height: int = 250_000
    accent: str = "5D4037"
    palette: tuple[str, ...] = ("EFEBE9", "D7CCC8", "BCAAA4", "A1887F")


@dataclass(frozen=True)
class RouterConfig:
    straight_tolerance: int = 100_000
    line_width: int = 19_050
    thick_line_width: int = 38_100
    label_line_width: int = EMU_PER_POINT


@dataclass(frozen=True)
class FallbackConfig:
    x: int = 1_000_000
    y: int = 2_000_000
    width: int = 7_000_000
    height: int = 3_000_000
    fill: str = "F5F5F5"
    line: str = "757575"


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for the layout, routing and assembly stages."""

    flowchart: FlowchartConfig = field(default_factory=FlowchartConfig)
    sequence: SequenceConfig = field(default_factory=SequenceConfig)
    state: StateConfig = field(default_factory=StateConfig)
    er: ErConfig = field(default_factory=ErConfig)
    class_diagram: ClassConfig = field(default_factory=ClassConfig)
    pie: PieConfig = field(default_factory=PieConfig)
    gantt: GanttConfig = field(default_factory=GanttConfig)
    mindmap: MindmapConfig = field(default_factory=MindmapConfig)
    timeline: TimelineConfig = field(default_factory=TimelineConfig)
    router: RouterConfig = field(default_factory=RouterConfig)
    fallback: FallbackConfig = field(default_factory=FallbackConfig)
    outline_width: int = 2 * EMU_PER_POINT
    thin_outline_width: int = EMU_PER_POINT
    label_shapes: bool = True

    def __post_init__(self) -> None:
        for name, columns in (
            ("flowchart.max_columns", self.flowchart.max_columns),
            ("state.columns", self.state.columns),
            ("er.columns", self.er.columns),
            ("class_diagram.columns", self.class_diagram.columns),
        ):
            if columns < 1:
                raise ValueError(f"{name} must be at least 1, got {columns}")
        if self.flowchart.node_width <= 0 or self.flowchart.node_height <= 0:
            raise ValueError("flowchart node size must be positive")
        for name, palette in (
            ("flowchart.subgraph_fills", self.flowchart.subgraph_fills),
            ("pie.palette", self.pie.palette),
            ("gantt.palette", self.gantt.palette),
            ("mindmap.level1_palette", self.mindmap.level1_palette),
            ("timeline.palette", self.timeline.palette),
        ):
            if not palette:
                raise ValueError(f"{name} must not be empty")


DEFAULT_CONFIG = LayoutConfig()
