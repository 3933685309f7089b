from __future__ import annotations

from typing import List

from .models import TimeSlice


class TimelineBuilder:
    """
    Accumulates the Gantt timeline as an algorithm advances simulated time.

    Consecutive runs of the same process with no gap between them are merged
    into a single slice.
    """

    def __init__(self) -> None:
        self._slices: List[TimeSlice] = []

    def run(self, pid: int, start: int, stop: int) -> None:
        if stop <= start:
            return
        if self._slices:
            last = self._slices[-1]
            if last.pid == pid and last.stop == start:
                last.stop = stop
                return
        self._slices.append(TimeSlice(pid=pid, start=start, stop=stop))

    def slices(self) -> List[TimeSlice]:
        return [TimeSlice(pid=s.pid, start=s.start, stop=s.stop) for s in self._slices]

    def __len__(self) -> int:
        return len(self._slices)
