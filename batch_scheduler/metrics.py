from __future__ import annotations

from typing import Iterable, List

from .models import RunAggregates, ScheduleRow


def total(values: Iterable[int]) -> int:
    return sum(values)


def average(values: Iterable[int]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return total(values) / len(values)


def compute_aggregates(rows: List[ScheduleRow]) -> RunAggregates:
    """
    Average wait, average turnaround and throughput for a finished schedule.

    Throughput is measured against the latest completion time in the batch.
    """
    if not rows:
        return RunAggregates(avg_waiting=0.0, avg_turnaround=0.0, throughput=0.0)

    last_completion = max(r.completion_time for r in rows)
    throughput = len(rows) / last_completion if last_completion > 0 else 0.0

    return RunAggregates(
        avg_waiting=average(r.waiting_time for r in rows),
        avg_turnaround=average(r.turnaround_time for r in rows),
        throughput=throughput,
    )
