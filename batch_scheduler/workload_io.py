from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Set

from .models import Process

logger = logging.getLogger(__name__)


class WorkloadError(ValueError):
    """Base class for problems with the process batch input."""


class WorkloadOpenError(WorkloadError):
    """The workload source could not be opened or read."""


class WorkloadParseError(WorkloadError):
    """A record in the workload is malformed."""


def load_processes(path: str | Path) -> List[Process]:
    """
    Load a header-less CSV workload into a list of Process objects.

    Each row is ``pid,burst,arrival[,priority]`` with base-10 integer fields;
    priority defaults to 0. Any malformed row aborts the whole load.
    """
    path = Path(path)
    try:
        f = path.open("r", encoding="utf-8", newline="")
    except OSError as exc:
        raise WorkloadOpenError(f"{path}: error opening scheduling file ({exc.strerror or exc})") from exc

    try:
        try:
            processes = parse_rows(csv.reader(f), source=str(path))
        except (UnicodeDecodeError, csv.Error) as exc:
            raise WorkloadParseError(f"{path}: malformed scheduling file ({exc})") from exc
        except OSError as exc:
            raise WorkloadOpenError(f"{path}: error reading scheduling file ({exc})") from exc
    finally:
        try:
            f.close()
        except OSError as exc:
            logger.warning(f"{path}: error closing scheduling file: {exc}")

    logger.info(f"Loaded {len(processes)} processes from {path}")
    return processes


def parse_rows(rows: Iterable[List[str]], source: str = "<input>") -> List[Process]:
    processes: List[Process] = []
    seen: Set[int] = set()

    for line_no, row in enumerate(rows, start=1):
        if not row or all(not field.strip() for field in row):
            continue
        process = _process_from_row(row, f"{source}:{line_no}")
        if process.pid in seen:
            raise WorkloadParseError(f"{source}:{line_no}: duplicate process id {process.pid}")
        seen.add(process.pid)
        processes.append(process)

    if not processes:
        raise WorkloadParseError(f"{source}: no processes found")

    return processes


def _process_from_row(row: List[str], where: str) -> Process:
    if len(row) not in (3, 4):
        raise WorkloadParseError(f"{where}: expected 3 or 4 fields, got {len(row)}: {row!r}")

    pid = _to_int(row[0], "process id", where)
    burst_time = _to_int(row[1], "burst duration", where)
    arrival_time = _to_int(row[2], "arrival time", where)
    priority = _to_int(row[3], "priority", where) if len(row) == 4 else 0

    if burst_time <= 0:
        raise WorkloadParseError(f"{where}: burst duration must be positive, got {burst_time}")
    if arrival_time < 0:
        raise WorkloadParseError(f"{where}: arrival time must not be negative, got {arrival_time}")

    return Process(pid=pid, burst_time=burst_time, arrival_time=arrival_time, priority=priority)


def _to_int(value: str, name: str, where: str) -> int:
    text = value.strip()
    try:
        if not text.lstrip("+-").isdigit():
            raise ValueError(text)
        return int(text, 10)
    except ValueError as exc:
        raise WorkloadParseError(f"{where}: invalid {name} {value!r}") from exc
