"""
Batch CPU scheduling simulator.

Runs a fixed batch of processes through FCFS, SJF and priority scheduling
and reports per-process wait, turnaround and completion times together with
a Gantt timeline.
"""

__all__ = ["cli"]
