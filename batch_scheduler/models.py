from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class Policy(Enum):
    """
    The scheduling policies, always reported in declaration order.
    """

    FCFS = "First-come, first-serve"
    SJF = "Shortest-job-first"
    PRIORITY = "Priority"
    ROUND_ROBIN = "Round-robin"

    @property
    def title(self) -> str:
        return self.value

    @classmethod
    def ordered(cls) -> Iterator["Policy"]:
        return iter(cls)


@dataclass(frozen=True)
class Process:
    pid: int
    burst_time: int
    arrival_time: int
    priority: int = 0


@dataclass
class TimeSlice:
    """
    One contiguous interval during which a single process holds the CPU.
    """

    pid: int
    start: int
    stop: int


@dataclass
class ScheduleRow:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass
class RunAggregates:
    avg_waiting: float
    avg_turnaround: float
    throughput: float


@dataclass
class ScheduleResult:
    policy: Policy
    rows: List[ScheduleRow] = field(default_factory=list)
    timeline: List[TimeSlice] = field(default_factory=list)
    aggregates: Optional[RunAggregates] = None
    implemented: bool = True

    @property
    def title(self) -> str:
        return self.policy.title
