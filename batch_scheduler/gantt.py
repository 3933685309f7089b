from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import TimeSlice

CELL_WIDTH = 8


def render_gantt(slices: List[TimeSlice]) -> str:
    """
    Plain-text Gantt chart: one cell per slice, then the start marks.

    The last cell's stop time is appended after its start mark.
    """
    cells = "|"
    for sl in slices:
        pid = str(sl.pid)
        padding = " " * max(0, (CELL_WIDTH - len(pid)) // 2)
        cells += f"{padding}{pid}{padding}|"

    marks = "".join(f"{sl.start}\t" for sl in slices)
    if slices:
        marks += str(slices[-1].stop)

    return "\n".join(["Gantt schedule", cells, marks])


def build_rich_gantt(slices: List[TimeSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    slices = sorted(slices, key=lambda s: (s.start, s.stop))

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[int, str] = {}

    def pid_color(pid: int) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = colors[len(pid_to_color) % len(colors)]
        return pid_to_color[pid]

    bars = Text()
    labels = Text()
    time_marks = str(slices[0].start)
    last_time = slices[0].start

    for sl in slices:
        idle_gap = sl.start - last_time
        if idle_gap > 0:
            bars.append(" " * idle_gap)
            labels.append(" " * idle_gap)
            time_marks += f"{sl.start:>3}"

        width = max(len(str(sl.pid)), sl.stop - sl.start)
        bars.append(" " * width, style=f"on {pid_color(sl.pid)}")
        labels.append(str(sl.pid).ljust(width), style="bold")

        last_time = sl.stop
        time_marks += f"{last_time:>3}"

    grid = Table.grid(padding=(0, 0))
    grid.add_row(bars)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), time_marks
