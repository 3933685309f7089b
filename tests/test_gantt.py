from batch_scheduler.gantt import build_rich_gantt, render_gantt
from batch_scheduler.models import TimeSlice


def test_render_plain():
    text = render_gantt([TimeSlice(1, 0, 2), TimeSlice(12, 2, 7)])
    assert text.splitlines() == [
        "Gantt schedule",
        "|   1   |   12   |",
        "0\t2\t7",
    ]


def test_render_plain_empty():
    assert render_gantt([]) == "Gantt schedule\n|\n"


def test_rich_gantt_time_marks():
    panel, marks = build_rich_gantt([TimeSlice(1, 0, 2), TimeSlice(2, 4, 7)])
    assert panel.title == "Gantt Chart"
    assert marks == "0  2  4  7"


def test_rich_gantt_empty():
    _, marks = build_rich_gantt([])
    assert marks == ""
