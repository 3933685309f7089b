from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .algorithms import POLICY_NAMES, run_all
from .gantt import build_rich_gantt, render_gantt
from .models import ScheduleResult
from .workload_io import WorkloadError, load_processes

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="batch-scheduler",
        description="Simulate FCFS, SJF, Priority and Round-robin scheduling over a batch of processes.",
    )
    parser.add_argument(
        "workload",
        help="Header-less CSV file with rows of pid,burst,arrival[,priority].",
    )
    parser.add_argument(
        "--policy",
        "-p",
        action="append",
        choices=sorted(POLICY_NAMES),
        default=None,
        help="Only report this policy (repeatable; default: all, in fixed order).",
    )
    parser.add_argument(
        "--legacy-fcfs-wait",
        action="store_true",
        help="Reproduce the legacy FCFS wait computation (wait only updated for arrivals after 0).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the Gantt chart as plain text instead of a colored panel.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING).",
    )
    return parser


def _print_title(console: Console, title: str) -> None:
    rule = "-" * (len(title) * 2)
    console.print(rule)
    console.print(" " * (len(title) // 2), title)
    console.print(rule)


def _print_result(console: Console, result: ScheduleResult, plain: bool = False) -> None:
    _print_title(console, result.title)
    if not result.implemented:
        return

    if plain:
        # Written raw: the tab-separated marks and long cell rows must not be wrapped.
        console.file.write(render_gantt(result.timeline) + "\n")
    else:
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)
    console.print()

    agg = result.aggregates
    footers = {
        "Wait": f"Average\n{agg.avg_waiting:.2f}",
        "Turnaround": f"Average\n{agg.avg_turnaround:.2f}",
        "Exit": f"Throughput\n{agg.throughput:.2f}/t",
    }

    table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for header in ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]:
        justify = "center" if header in {"ID", "Priority"} else "right"
        table.add_column(header, justify=justify, footer=footers.get(header, ""))

    for row in result.rows:
        table.add_row(
            str(row.pid),
            str(row.priority),
            str(row.burst_time),
            str(row.arrival_time),
            str(row.waiting_time),
            str(row.turnaround_time),
            str(row.completion_time),
        )

    console.print(table)
    console.print()


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    try:
        processes = load_processes(args.workload)
    except WorkloadError as exc:
        logger.debug("Workload rejected", exc_info=True)
        err_console.print(f"[red]error:[/red] {escape(str(exc))}", soft_wrap=True)
        return 1

    results = run_all(processes, policies=args.policy, legacy_fcfs_wait=args.legacy_fcfs_wait)
    for result in results:
        _print_result(console, result, plain=args.plain)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
