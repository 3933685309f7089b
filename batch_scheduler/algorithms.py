from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

from .heap import MinHeap
from .metrics import compute_aggregates
from .models import Policy, Process, ScheduleResult, ScheduleRow
from .timeline import TimelineBuilder

logger = logging.getLogger(__name__)


def _row(p: Process, waiting_time: int) -> ScheduleRow:
    turnaround_time = p.burst_time + waiting_time
    return ScheduleRow(
        pid=p.pid,
        priority=p.priority,
        burst_time=p.burst_time,
        arrival_time=p.arrival_time,
        waiting_time=waiting_time,
        turnaround_time=turnaround_time,
        completion_time=p.arrival_time + turnaround_time,
    )


def _by_arrival(processes: Iterable[Process]) -> List[Process]:
    # Stable, so ties keep their input order. The caller's list is left alone.
    return sorted(processes, key=lambda p: p.arrival_time)


def _finish(policy: Policy, rows: List[ScheduleRow], builder: TimelineBuilder) -> ScheduleResult:
    result = ScheduleResult(policy=policy, rows=rows, timeline=builder.slices())
    result.aggregates = compute_aggregates(rows)
    logger.debug(
        f"{policy.name}: {len(rows)} processes, {len(result.timeline)} slices, "
        f"avg wait {result.aggregates.avg_waiting:.2f}"
    )
    return result


def schedule_fcfs(processes: List[Process], *, legacy_wait: bool = False) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive).

    Processes are serviced in the order given, which is taken to be arrival
    order. Each one runs to completion before the next starts.

    With ``legacy_wait`` the service clock only counts CPU time consumed (idle
    gaps are ignored) and the wait is recomputed only for processes arriving
    after time 0; otherwise the previous process's wait carries over. Only
    the wait column follows earlier releases of this tool: waits are still
    clamped at zero and every slice spans start to start + burst.
    """
    clock = 0
    waiting_time = 0
    builder = TimelineBuilder()
    rows: List[ScheduleRow] = []

    for p in processes:
        if not legacy_wait or p.arrival_time > 0:
            waiting_time = max(0, clock - p.arrival_time)

        start_time = p.arrival_time + waiting_time
        completion_time = start_time + p.burst_time

        rows.append(_row(p, waiting_time))
        builder.run(p.pid, start_time, completion_time)

        if legacy_wait:
            clock += p.burst_time
        else:
            clock = completion_time

    return _finish(Policy.FCFS, rows, builder)


def schedule_sjf(processes: List[Process]) -> ScheduleResult:
    """
    Shortest Job First, stepped one time unit at a time.

    On every tick the arrived, unfinished process with the least remaining
    time gets the CPU; ties go to the process that sorts first by arrival.
    When nothing is ready the clock jumps to the next arrival. Rows are
    reported in arrival order.
    """
    ordered = _by_arrival(processes)
    n = len(ordered)

    remaining = [p.burst_time for p in ordered]
    rows: List[Optional[ScheduleRow]] = [None] * n
    builder = TimelineBuilder()

    time = 0
    completed = 0

    while completed < n:
        current: Optional[int] = None
        for i, p in enumerate(ordered):
            if p.arrival_time > time or remaining[i] == 0:
                continue
            if current is None or remaining[i] < remaining[current]:
                current = i

        if current is None:
            time = min(p.arrival_time for i, p in enumerate(ordered) if remaining[i] > 0)
            continue

        p = ordered[current]
        builder.run(p.pid, time, time + 1)
        remaining[current] -= 1
        time += 1

        if remaining[current] == 0:
            completed += 1
            waiting_time = max(0, time - p.burst_time - p.arrival_time)
            rows[current] = _row(p, waiting_time)

    return _finish(Policy.SJF, [r for r in rows if r is not None], builder)


def schedule_priority(processes: List[Process]) -> ScheduleResult:
    """
    Preemptive static-priority scheduling.

    Lower numeric priority value means higher priority. Every tick the
    highest-priority ready process runs for one unit and is then put back,
    so a more urgent arrival takes over immediately. Among equal priorities
    the process that sorts first by arrival wins. Remaining burst never
    affects the choice.
    """
    ordered = _by_arrival(processes)
    n = len(ordered)

    remaining = [p.burst_time for p in ordered]
    rows: List[Optional[ScheduleRow]] = [None] * n
    builder = TimelineBuilder()
    ready: MinHeap[int] = MinHeap()

    time = ordered[0].arrival_time if ordered else 0
    inserted = 0
    completed = 0

    while completed < n:
        while inserted < n and ordered[inserted].arrival_time <= time:
            ready.push((ordered[inserted].priority, inserted), inserted)
            inserted += 1

        if not ready:
            time = ordered[inserted].arrival_time
            continue

        i = ready.pop()
        p = ordered[i]
        builder.run(p.pid, time, time + 1)
        remaining[i] -= 1
        time += 1

        if remaining[i] == 0:
            completed += 1
            turnaround_time = time - p.arrival_time
            rows[i] = _row(p, max(0, turnaround_time - p.burst_time))
        else:
            ready.push((p.priority, i), i)

    return _finish(Policy.PRIORITY, [r for r in rows if r is not None], builder)


def schedule_round_robin(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin placeholder. Not implemented: yields no rows and no timeline.
    """
    logger.debug(f"ROUND_ROBIN: not implemented, skipping {len(processes)} processes")
    return ScheduleResult(policy=Policy.ROUND_ROBIN, implemented=False)


ALGORITHMS: Dict[Policy, Callable[..., ScheduleResult]] = {
    Policy.FCFS: schedule_fcfs,
    Policy.SJF: schedule_sjf,
    Policy.PRIORITY: schedule_priority,
    Policy.ROUND_ROBIN: schedule_round_robin,
}

POLICY_NAMES: Dict[str, Policy] = {
    "fcfs": Policy.FCFS,
    "sjf": Policy.SJF,
    "priority": Policy.PRIORITY,
    "rr": Policy.ROUND_ROBIN,
}


def resolve_policy(name: Union[str, Policy]) -> Policy:
    if isinstance(name, Policy):
        return name
    key = name.lower()
    if key not in POLICY_NAMES:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(POLICY_NAMES)})")
    return POLICY_NAMES[key]


def run_algorithm(
    name: Union[str, Policy],
    processes: List[Process],
    quantum: Optional[int] = None,
    legacy_fcfs_wait: bool = False,
) -> ScheduleResult:
    """
    Dispatch to the requested algorithm on a private copy of the batch.
    """
    policy = resolve_policy(name)
    func = ALGORITHMS[policy]
    if policy is Policy.FCFS:
        return func(list(processes), legacy_wait=legacy_fcfs_wait)
    if policy is Policy.ROUND_ROBIN:
        return func(list(processes), quantum=quantum)
    return func(list(processes))


def run_all(
    processes: List[Process],
    policies: Optional[Iterable[Union[str, Policy]]] = None,
    legacy_fcfs_wait: bool = False,
) -> List[ScheduleResult]:
    """
    Run the selected policies (all four by default) in their fixed report order.

    Every run sees the batch exactly as loaded, whatever ran before it.
    """
    wanted = set(Policy) if policies is None else {resolve_policy(p) for p in policies}
    return [
        run_algorithm(policy, processes, legacy_fcfs_wait=legacy_fcfs_wait)
        for policy in Policy.ordered()
        if policy in wanted
    ]
